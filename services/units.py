"""Metric -> imperial display strings for trail stats."""

from decimal import Decimal, ROUND_HALF_UP

KM_TO_MILES = 0.621371
METERS_TO_FEET = 3.28084


def _round_half_up(value, places):
    exp = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(exp, rounding=ROUND_HALF_UP)


def distance_display(km):
    """10 -> '6.2 mi.'"""
    miles = _round_half_up(km * KM_TO_MILES, 1)
    return f'{miles} mi.'


def elevation_display(meters):
    """1000 -> '+3281 ft.' (zero gets the '+' too)"""
    feet = int(_round_half_up(meters * METERS_TO_FEET, 0))
    sign = '+' if feet >= 0 else ''
    return f'{sign}{feet} ft.'
