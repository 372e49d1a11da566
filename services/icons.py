"""
Icon rendering: inline SVG for capable browsers, PNG fallback otherwise.

SVG sources are expected to have been normalized already (safe to inline).
Every SVG needs a PNG sibling with the same base name for the fallback path.
"""

import os
import re
import logging
from functools import lru_cache

from bs4 import BeautifulSoup
from markupsafe import Markup

logger = logging.getLogger(__name__)

RASTER_EXT = '.png'

# XML Name production, minus the non-ASCII ranges
_ATTR_NAME_RE = re.compile(r'^[A-Za-z_:][\w:.-]*$')


class IconNotFoundError(FileNotFoundError):
    """An icon resource referenced by a template doesn't exist."""


@lru_cache(maxsize=256)
def _load(full_path):
    """Read an icon file. Icons only change on redeploy, so memoize."""
    try:
        with open(full_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError as e:
        logger.warning('Icon resource missing: %s', full_path)
        raise IconNotFoundError(full_path) from e


def clear_icon_cache():
    _load.cache_clear()


def inject_attributes(markup, attributes):
    """Merge attributes into the root element of an SVG fragment.

    Caller attributes are placed first and win on key collisions; the root's
    own attributes follow in their original order.
    """
    if not attributes:
        return markup
    for key in attributes:
        if not _ATTR_NAME_RE.match(str(key)):
            raise ValueError(f'invalid attribute name: {key!r}')

    # XML parser keeps attribute case (viewBox) and skips comments
    soup = BeautifulSoup(markup, 'xml')
    root = soup.find(True, recursive=False)
    if root is None:
        raise ValueError('markup has no root element')

    merged = {str(k): str(v) for k, v in attributes.items()}
    # The parser appends xmlns declarations after plain attributes; put them back in front
    own = sorted(root.attrs.items(), key=lambda kv: getattr(kv[0], 'prefix', None) != 'xmlns')
    for key, value in own:
        if key not in merged:
            merged[key] = value
    root.attrs = merged
    return soup.decode_contents()


def raster_path(resource_path):
    """'images/icons/map.svg' -> 'images/icons/map.png'"""
    base, _ext = os.path.splitext(resource_path)
    return base + RASTER_EXT


class IconRenderer:
    """Resolves icon references for one client capability."""

    def __init__(self, root, url_prefix='/static', vector=True):
        self.root = root
        self.url_prefix = url_prefix.rstrip('/')
        self.vector = vector

    def render(self, resource_path, attributes=None):
        if self.vector:
            markup = _load(os.path.join(self.root, resource_path.lstrip('/')))
            return Markup(inject_attributes(markup, attributes))
        src = f'{self.url_prefix}/{raster_path(resource_path).lstrip("/")}'
        return Markup('<img src="{}">').format(src)

    __call__ = render


def render_icon(resource_path, attributes=None, *, root, vector=True, url_prefix='/static'):
    """One-shot form of IconRenderer.render."""
    return IconRenderer(root, url_prefix=url_prefix, vector=vector).render(resource_path, attributes)
