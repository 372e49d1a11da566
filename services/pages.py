"""
View-model builders for the two HTML pages.

These turn catalog entries into plain dicts for the templates: converted
unit strings, photo URLs and resolved icon markup. One dict per request,
nothing here touches Flask.
"""

import logging

from services.units import distance_display, elevation_display

logger = logging.getLogger(__name__)

HOME_TITLE = 'hike.io - Beautiful Hikes'

# Icon name -> resource path under the icon root
ICONS = {
    'distance': 'images/icons/distance.svg',
    'elevation': 'images/icons/elevation.svg',
    'map': 'images/icons/map.svg',
}


def picture_url(picture, entry_img_dir):
    return f'{entry_img_dir.rstrip("/")}/{picture.id}.jpg'


def resolve_icons(icons, names=None):
    """Render each named icon with its own class, e.g. 'icon icon-map'."""
    names = names or ICONS.keys()
    return {name: icons(ICONS[name], {'class': f'icon icon-{name}'}) for name in names}


def entry_summary(entry, entry_img_dir):
    pictures = [{'id': p.id, 'url': picture_url(p, entry_img_dir)} for p in entry.pictures]
    return {
        'id': entry.id,
        'name': entry.name,
        'location': entry.location,
        'url': f'/{entry.id}',
        'distance': distance_display(entry.distance),
        'elevation_gain': elevation_display(entry.elevation_gain),
        'cover': pictures[0] if pictures else None,
        'pictures': pictures,
    }


def home_view(catalog, icons, entry_img_dir):
    featured = catalog.featured()
    return {
        'title': HOME_TITLE,
        'featured': entry_summary(featured, entry_img_dir),
        'entries': [entry_summary(e, entry_img_dir) for e in catalog.popular()],
        'icons': resolve_icons(icons, ('distance', 'elevation')),
    }


def entry_view(catalog, entry_id, icons, entry_img_dir):
    """Detail page data, or None when the id isn't in the catalog."""
    entry = catalog.find(entry_id)
    if entry is None:
        logger.info('No entry for id %r', entry_id)
        return None

    view = entry_summary(entry, entry_img_dir)
    if entry.map is not None:
        view['map'] = {
            'latitude': entry.map.latitude,
            'longitude': entry.map.longitude,
            'href': entry.map.href,
        }
    else:
        view['map'] = None
    return {
        'title': entry.name,
        'entry': view,
        'icons': resolve_icons(icons),
    }
