"""
Trail catalog: the fixed set of hike entries the site renders.

Built once at startup from the seed list and never mutated afterwards, so
request handlers can share one instance without locking.
"""

import re
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


class CatalogError(Exception):
    """The catalog is unusable (empty, duplicate ids). A build/deploy error."""


@dataclass(frozen=True)
class Picture:
    id: str


@dataclass(frozen=True)
class Map:
    latitude: float
    longitude: float
    href: str

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f'latitude out of range: {self.latitude}')
        if not -180 <= self.longitude <= 180:
            raise ValueError(f'longitude out of range: {self.longitude}')


@dataclass(frozen=True)
class Entry:
    id: str
    name: str
    location: str
    distance: float  # km
    elevation_gain: float  # m
    pictures: tuple = field(default_factory=tuple)
    map: Map = None

    def __post_init__(self):
        if not _SLUG_RE.match(self.id or ''):
            raise ValueError(f'entry id is not URL-safe: {self.id!r}')
        if self.distance < 0:
            raise ValueError(f'{self.id}: distance must be non-negative')
        if self.elevation_gain < 0:
            raise ValueError(f'{self.id}: elevation gain must be non-negative')
        # Accept any iterable of pictures but store it immutably
        object.__setattr__(self, 'pictures', tuple(self.pictures))


class Catalog:
    """Read-only, ordered collection of entries."""

    def __init__(self, entries):
        self._entries = tuple(entries)
        seen = set()
        for entry in self._entries:
            if entry.id in seen:
                raise CatalogError(f'duplicate entry id: {entry.id}')
            seen.add(entry.id)

    def __len__(self):
        return len(self._entries)

    def all(self):
        """Entries in seed order."""
        return self._entries

    def featured(self):
        if not self._entries:
            raise CatalogError('catalog is empty; no featured entry')
        return self._entries[0]

    def popular(self):
        """Everything but the featured entry, order preserved."""
        featured = self.featured()
        return tuple(e for e in self._entries if e.id != featured.id)

    def find(self, entry_id):
        """Return the entry with this id, or None."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None


def build_catalog(seed_entries):
    """Construct the process-wide catalog, failing fast when it's empty."""
    catalog = Catalog(seed_entries)
    if not len(catalog):
        raise CatalogError('no seed entries; refusing to start')
    logger.info('Catalog loaded with %d entries', len(catalog))
    return catalog
