import copy
import random
from datetime import timedelta, datetime
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from crop_adviser_backend.models import Region, WeatherSnapshot, WeatherCondition
from crop_adviser_backend.reference_data import FORECAST
from crop_adviser_backend.utils import get_logger
from .region_services import get_region_by_id

logger = get_logger()

TEMPERATURE_RANGE = (20, 35)
HUMIDITY_RANGE = (40, 79)
WIND_SPEED_RANGE = (5, 15)
VISIBILITY_RANGE = (5, 10)


def _one_decimal(value: float) -> Decimal:
    return Decimal(f'{value:.1f}')


def get_weather_max_age() -> timedelta:
    return timedelta(minutes=settings.WEATHER_MAX_AGE_MINUTES)


def is_snapshot_fresh(snapshot: WeatherSnapshot, now: datetime = None) -> bool:
    now = now or timezone.now()
    return now - snapshot.lastUpdated < get_weather_max_age()


def synthesize_weather(rng=random) -> dict:
    """
    Stand-in for a weather provider, draws every reading from a fixed range.
    """
    return {
        'temperature': _one_decimal(rng.uniform(*TEMPERATURE_RANGE)),
        'humidity': rng.randint(*HUMIDITY_RANGE),
        'windSpeed': _one_decimal(rng.uniform(*WIND_SPEED_RANGE)),
        'visibility': _one_decimal(rng.uniform(*VISIBILITY_RANGE)),
        'conditions': rng.choice(WeatherCondition.list()),
        'forecast': copy.deepcopy(FORECAST),
    }


def refresh_weather_snapshot(region: Region, now: datetime = None, rng=None) -> WeatherSnapshot:
    values = synthesize_weather(rng or random)
    values['lastUpdated'] = now or timezone.now()

    snapshot, created = WeatherSnapshot.objects.update_or_create(region=region, defaults=values)
    logger.debug(f"{'Created' if created else 'Refreshed'} weather snapshot for state '{region.name}'.", extra={'resource_id': region.id})
    return snapshot


def get_weather_snapshot(region_id, now: datetime = None, rng=None) -> WeatherSnapshot:
    """
    Returns the stored snapshot of the state while it is younger than WEATHER_MAX_AGE_MINUTES,
    otherwise a newly synthesized one that replaces it.
    """
    region = get_region_by_id(region_id)
    now = now or timezone.now()

    snapshot = WeatherSnapshot.objects.filter(region=region).first()
    if snapshot is not None and is_snapshot_fresh(snapshot, now):
        return snapshot

    return refresh_weather_snapshot(region, now, rng)
