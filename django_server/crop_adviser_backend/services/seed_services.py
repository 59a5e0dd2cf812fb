from django.db import transaction

from crop_adviser_backend.models import Region, SoilType, Crop
from crop_adviser_backend.reference_data import REGIONS, CROPS, get_soil_types_for_region_code
from crop_adviser_backend.utils import get_logger

logger = get_logger()


def seed_regions() -> int:
    """
    Inserts every state of the reference table that is not stored yet.
    :return: amount of newly created states
    """
    created_count = 0
    for region_data in REGIONS:
        _, created = Region.objects.get_or_create(code=region_data['code'], defaults={'name': region_data['name']})
        created_count += int(created)
    return created_count


def seed_soil_types() -> int:
    """
    Inserts the soil profiles of every stored state, states without an own profile get the default pair.
    :return: amount of newly created soil types
    """
    created_count = 0
    for region in Region.objects.all():
        for soil_data in get_soil_types_for_region_code(region.code):
            defaults = {key: value for key, value in soil_data.items() if key != 'name'}
            _, created = SoilType.objects.get_or_create(region=region, name=soil_data['name'], defaults=defaults)
            created_count += int(created)
    return created_count


def seed_crops() -> int:
    created_count = 0
    for crop_data in CROPS:
        defaults = {key: value for key, value in crop_data.items() if key != 'name'}
        _, created = Crop.objects.get_or_create(name=crop_data['name'], defaults=defaults)
        created_count += int(created)
    return created_count


def seed_reference_data() -> dict:
    """
    Seeds states, soil types and crops. Running it again once everything is stored changes nothing.
    """
    with transaction.atomic():
        counts = {
            'states': seed_regions(),
            'soilTypes': seed_soil_types(),
            'crops': seed_crops(),
        }

    if any(counts.values()):
        logger.info(f"Seeded reference data: {counts['states']} states, {counts['soilTypes']} soil types, {counts['crops']} crops.")
    else:
        logger.debug("Reference data already seeded, nothing to do.")
    return counts
