import random
import uuid
from datetime import timedelta

import pytest
from django.utils import timezone

from crop_adviser_backend.exceptions import NotFoundException
from crop_adviser_backend.models import WeatherSnapshot, WeatherCondition
from crop_adviser_backend.serializers import WeatherSnapshotSerializer
from crop_adviser_backend.services import get_weather_snapshot, is_snapshot_fresh


def test_first_request_creates_snapshot(punjab, rng):
    snapshot = get_weather_snapshot(punjab.id, rng=rng)

    assert WeatherSnapshot.objects.filter(region=punjab).count() == 1
    assert len(snapshot.forecast) == 5
    assert snapshot.forecast[0] == {"day": "Today", "temp": "28°", "condition": "Sunny", "icon": "sun"}


def test_snapshot_within_the_hour_is_returned_unchanged(punjab, rng):
    created_at = timezone.now()
    first = get_weather_snapshot(punjab.id, now=created_at, rng=rng)
    stored = WeatherSnapshotSerializer(WeatherSnapshot.objects.get(region=punjab)).data

    second = get_weather_snapshot(punjab.id, now=created_at + timedelta(minutes=59), rng=rng)

    assert second.lastUpdated == created_at
    assert WeatherSnapshotSerializer(second).data == stored
    assert WeatherSnapshotSerializer(first).data == stored


def test_stale_snapshot_is_refreshed_in_place(punjab, rng):
    created_at = timezone.now()
    first = get_weather_snapshot(punjab.id, now=created_at, rng=rng)

    later = created_at + timedelta(minutes=61)
    second = get_weather_snapshot(punjab.id, now=later, rng=rng)

    assert second.lastUpdated == later
    assert second.id == first.id
    assert WeatherSnapshot.objects.filter(region=punjab).count() == 1


def test_snapshot_exactly_one_hour_old_is_stale(punjab, rng):
    created_at = timezone.now()
    snapshot = get_weather_snapshot(punjab.id, now=created_at, rng=rng)

    assert is_snapshot_fresh(snapshot, created_at + timedelta(minutes=59, seconds=59))
    assert not is_snapshot_fresh(snapshot, created_at + timedelta(hours=1))


def test_max_age_is_configurable(punjab, rng, settings):
    settings.WEATHER_MAX_AGE_MINUTES = 5
    created_at = timezone.now()
    get_weather_snapshot(punjab.id, now=created_at, rng=rng)

    refreshed = get_weather_snapshot(punjab.id, now=created_at + timedelta(minutes=6), rng=rng)

    assert refreshed.lastUpdated == created_at + timedelta(minutes=6)


def test_synthesized_values_stay_in_their_ranges(punjab):
    now = timezone.now()
    for seed in range(30):
        now += timedelta(hours=2)
        snapshot = get_weather_snapshot(punjab.id, now=now, rng=random.Random(seed))

        assert 20 <= snapshot.temperature <= 35
        assert 40 <= snapshot.humidity <= 79
        assert 5 <= snapshot.windSpeed <= 15
        assert 5 <= snapshot.visibility <= 10
        assert snapshot.conditions in WeatherCondition.list()


@pytest.mark.parametrize('state_id', [str(uuid.uuid4()), 'PB'])
def test_unknown_state_is_not_found(seeded, state_id):
    with pytest.raises(NotFoundException):
        get_weather_snapshot(state_id)
