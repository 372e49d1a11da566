"""Seed data for the trail catalog."""

from catalog import Entry, Map, Picture

PICTURE_IDS = [
    'scotchmans-peak-trees',
    'scotchmans-peak-mountain-goat',
    'scotchmans-peak-wildflower',
    'scotchmans-peak-meadow',
    'scotchmans-peak-pend-orielle',
    'scotchmans-peak-zak',
    'scotchmans-peak-mountain-goat-cliff',
    'scotchmans-peak-hikers',
    'scotchmans-peak-dead-tree',
]

SCOTCHMANS_MAP_URL = (
    "https://maps.google.com/maps?q=Scotchman's+Peak,+ID+83811&hl=en"
    "&sll=48.177534,-116.089783&sspn=0.489924,0.495071&t=h&hq=Scotchman's+Peak,"
    "&hnear=Clark+Fork,+Bonner,+Idaho&ie=UTF8&ll=48.166314,-116.06987"
    "&spn=0.245015,0.247536&z=12&vpsrc=6&cid=1851277074294752467&iwloc=A"
)

# Every entry shares the Scotchman's Peak photos and map until real
# per-trail assets are shot.
_pictures = tuple(Picture(id=pid) for pid in PICTURE_IDS)
_map = Map(latitude=48.177534, longitude=-116.089783, href=SCOTCHMANS_MAP_URL)

# (id, name, location, distance km, elevation gain m)
_TRAILS = [
    ('scotchmans-peak', "Scotchman's Peak", 'North Idaho, USA', 10, 1000),
    ('king-arthurs-seat', "King Arthur's Seat", 'Edinburgh, Scotland', 3, 1000),
    ('north-kaibab-trail', 'North Kaibab Trail', 'Grand Canyon, USA', 15, 1000),
    ('lake-22', 'Lake 22', 'Washington, USA', 18, 2500),
    ('pikes-peak', "Pike's Peak", 'Colorado, USA', 30, 3000),
    ('snoqualmie-middle-fork', 'Snoqualmie Middle Fork', 'Washington, USA', 11, 4352),
    ('mt-kilamanjaro', 'Mt. Kilamanjaro', 'Tanzania', 50, 1000),
]


def seed_entries():
    return [
        Entry(id=tid, name=name, location=location, distance=km,
              elevation_gain=gain, pictures=_pictures, map=_map)
        for tid, name, location, km, gain in _TRAILS
    ]
