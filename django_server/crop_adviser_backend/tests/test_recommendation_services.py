import random
from unittest import mock

import pytest
from django.db import IntegrityError, transaction, connection
from django.db.models.query import QuerySet

from crop_adviser_backend.exceptions import InvalidSelectionException, NotFoundException
from crop_adviser_backend.models import Crop, CropRecommendation, Region, SoilType, Userprofile
from crop_adviser_backend.services import generate_crop_recommendations, get_user_crop_recommendations, \
    compute_compatibility_score, get_crop_advice


class RecordingRandom:
    def __init__(self):
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return a


def test_one_recommendation_per_crop_with_score_in_range(user, punjab, alluvial_soil, rng):
    recommendations = generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    assert len(recommendations) == Crop.objects.count() == 4
    assert {r.crop.name for r in recommendations} == {'Rice', 'Wheat', 'Cotton', 'Sugarcane'}
    assert all(50 <= r.compatibilityScore <= 99 for r in recommendations)


def test_compatible_crops_score_high_and_incompatible_low(user, punjab, alluvial_soil):
    for seed in range(25):
        recommendations = generate_crop_recommendations(user, punjab.id, alluvial_soil.id, random.Random(seed))
        scores = {r.crop.name: r.compatibilityScore for r in recommendations}

        assert 80 <= scores['Rice'] <= 99
        assert 80 <= scores['Wheat'] <= 99
        assert 80 <= scores['Sugarcane'] <= 99
        assert 50 <= scores['Cotton'] <= 79


def test_score_ranges_are_inclusive():
    crop = Crop(name='Rice', soilCompatibility=['Alluvial Soil'])
    recorder = RecordingRandom()

    compute_compatibility_score(crop, 'Alluvial Soil', recorder)
    compute_compatibility_score(crop, 'Desert Soil', recorder)

    assert recorder.calls == [(80, 99), (50, 79)]


def test_regenerating_replaces_previous_recommendations(user, punjab, alluvial_soil, rng):
    first = generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)
    second = generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    stored_ids = set(CropRecommendation.objects.filter(user=user).values_list('id', flat=True))
    assert len(stored_ids) == Crop.objects.count()
    assert stored_ids == {r.id for r in second}
    assert stored_ids.isdisjoint({r.id for r in first})


def test_regenerating_leaves_other_users_alone(user, punjab, alluvial_soil, rng):
    other = Userprofile.objects.create(username='oidc|2002')
    generate_crop_recommendations(other, punjab.id, alluvial_soil.id, rng)

    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    assert CropRecommendation.objects.filter(user=other).count() == 4
    assert CropRecommendation.objects.count() == 8


def test_soil_type_of_other_state_is_rejected(user, punjab, alluvial_soil, rng):
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)
    rajasthan_soil = SoilType.objects.get(region__code='RJ', name='Desert Soil')

    with pytest.raises(InvalidSelectionException):
        generate_crop_recommendations(user, punjab.id, rajasthan_soil.id, rng)

    assert CropRecommendation.objects.filter(user=user, soilType=alluvial_soil).count() == 4


def test_unknown_state_is_not_found(user, alluvial_soil, rng):
    with pytest.raises(NotFoundException):
        generate_crop_recommendations(user, 'unknown', alluvial_soil.id, rng)


def test_recommendation_carries_crop_advice(user, punjab, alluvial_soil, rng):
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    rice = CropRecommendation.objects.get(user=user, crop__name='Rice')
    assert rice.advice == {
        'irrigation': 'Maintain 2-3 inches of standing water throughout growing season',
        'fertilizer': 'Apply nitrogen in splits: 50% at transplanting, 25% at tillering, 25% at panicle initiation',
        'pestControl': 'Monitor for brown plant hopper, stem borer, and blast disease',
    }
    assert rice.region == punjab


def test_unknown_crop_gets_generic_advice():
    assert get_crop_advice('Millet') == {
        'irrigation': 'Follow standard irrigation practices for your region',
        'fertilizer': 'Apply balanced NPK fertilizers as per soil test',
        'pestControl': 'Regular monitoring for pests and diseases',
    }


def test_user_recommendations_are_ordered_by_score(user, punjab, alluvial_soil, rng):
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    scores = [r.compatibilityScore for r in get_user_crop_recommendations(user)]
    assert scores == sorted(scores, reverse=True)


def test_only_one_recommendation_per_user_and_crop(user, punjab, alluvial_soil, rng):
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)
    rice = Crop.objects.get(name='Rice')

    with pytest.raises(IntegrityError), transaction.atomic():
        CropRecommendation.objects.create(user=user, crop=rice, region=punjab, soilType=alluvial_soil,
                                          compatibilityScore=90)


def test_regeneration_locks_user_row_inside_its_transaction(user, punjab, alluvial_soil, rng):
    generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)
    outer_depth = len(connection.atomic_blocks)
    locks = []
    original_select_for_update = QuerySet.select_for_update

    def recording_select_for_update(queryset, *args, **kwargs):
        locks.append({
            'model': queryset.model,
            'depth': len(connection.atomic_blocks),
            'stored': CropRecommendation.objects.filter(user=user).count(),
        })
        return original_select_for_update(queryset, *args, **kwargs)

    with mock.patch.object(QuerySet, 'select_for_update', autospec=True, side_effect=recording_select_for_update):
        generate_crop_recommendations(user, punjab.id, alluvial_soil.id, rng)

    assert len(locks) == 1
    assert locks[0]['model'] is Userprofile
    assert locks[0]['depth'] > outer_depth
    assert locks[0]['stored'] == Crop.objects.count()
