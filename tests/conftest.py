"""Shared fixtures: a test app, its client, and a throwaway icon directory."""

import pytest

from app import create_app
from catalog import Catalog, Entry, Map, Picture
from services.icons import clear_icon_cache

SVG = ('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
       '<path d="M0 0h24v24H0z"/></svg>')


@pytest.fixture(autouse=True)
def _fresh_icon_cache():
    clear_icon_cache()
    yield
    clear_icon_cache()


@pytest.fixture
def icon_root(tmp_path):
    icons = tmp_path / 'images' / 'icons'
    icons.mkdir(parents=True)
    for name in ('distance', 'elevation', 'map'):
        (icons / f'{name}.svg').write_text(SVG, encoding='utf-8')
    return str(tmp_path)


def make_entry(entry_id, distance=5, elevation_gain=500, pictures=('p1', 'p2')):
    return Entry(
        id=entry_id,
        name=entry_id.replace('-', ' ').title(),
        location='Somewhere, USA',
        distance=distance,
        elevation_gain=elevation_gain,
        pictures=[Picture(id=p) for p in pictures],
        map=Map(latitude=47.5, longitude=-121.5, href='https://maps.example.com/?q=x'),
    )


@pytest.fixture
def small_catalog():
    return Catalog([make_entry('alpha'), make_entry('bravo'), make_entry('charlie')])


@pytest.fixture
def app(icon_root):
    app = create_app({
        'TESTING': True,
        'ENTRY_IMG_DIR': '/hike-images',
        'ICON_ROOT': icon_root,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def entry_factory():
    return make_entry
