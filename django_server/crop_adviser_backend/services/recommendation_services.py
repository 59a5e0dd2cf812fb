import random

from django.db import transaction
from django.db.models import QuerySet

from crop_adviser_backend.exceptions import InvalidSelectionException
from crop_adviser_backend.models import Crop, CropRecommendation, SoilType, Userprofile
from crop_adviser_backend.reference_data import IRRIGATION_ADVICE, DEFAULT_IRRIGATION_ADVICE, FERTILIZER_ADVICE, \
    DEFAULT_FERTILIZER_ADVICE, PEST_CONTROL_ADVICE, DEFAULT_PEST_CONTROL_ADVICE
from crop_adviser_backend.utils import get_logger, is_valid_uuid
from .region_services import get_region_by_id

logger = get_logger()

COMPATIBLE_SCORE_RANGE = (80, 99)
INCOMPATIBLE_SCORE_RANGE = (50, 79)


def get_crop_advice(crop_name: str) -> dict:
    return {
        'irrigation': IRRIGATION_ADVICE.get(crop_name, DEFAULT_IRRIGATION_ADVICE),
        'fertilizer': FERTILIZER_ADVICE.get(crop_name, DEFAULT_FERTILIZER_ADVICE),
        'pestControl': PEST_CONTROL_ADVICE.get(crop_name, DEFAULT_PEST_CONTROL_ADVICE),
    }


def compute_compatibility_score(crop: Crop, soil_name: str, rng=random) -> int:
    """
    Draws a score from the upper range when the crop lists the soil as compatible, from the lower range otherwise.
    Both bounds are inclusive.
    """
    lower, upper = COMPATIBLE_SCORE_RANGE if crop.is_compatible_with(soil_name) else INCOMPATIBLE_SCORE_RANGE
    return rng.randint(lower, upper)


def generate_crop_recommendations(user: Userprofile, region_id, soil_type_id, rng=None) -> list[CropRecommendation]:
    """
    Replaces all recommendations of the user with one fresh recommendation per known crop.
    Deleting the old and inserting the new set happens in one transaction while the user row is locked,
    so concurrent regenerations for the same user never interleave.
    :param user: user to generate recommendations for
    :param region_id: id of the selected state
    :param soil_type_id: id of the selected soil type, has to belong to the state
    :param rng: source of randomness, defaults to the random module
    :return: the newly stored recommendations
    """
    rng = rng or random
    region = get_region_by_id(region_id)
    soil_type = SoilType.objects.filter(id=soil_type_id, region=region).first() if is_valid_uuid(soil_type_id) else None
    if soil_type is None:
        logger.warning(f"Soil type {soil_type_id} does not belong to state '{region.name}'.", extra={'resource_id': region.id})
        raise InvalidSelectionException()

    with transaction.atomic():
        Userprofile.objects.select_for_update().get(pk=user.pk)
        deleted_count, _ = CropRecommendation.objects.filter(user=user).delete()

        recommendations = [
            CropRecommendation(
                user=user,
                crop=crop,
                region=region,
                soilType=soil_type,
                compatibilityScore=compute_compatibility_score(crop, soil_type.name, rng),
                advice=get_crop_advice(crop.name),
            )
            for crop in Crop.objects.all()
        ]
        CropRecommendation.objects.bulk_create(recommendations)

    logger.info(f"Generated {len(recommendations)} crop recommendations for user '{user.username}' "
                f"({region.name}, {soil_type.name}), replaced {deleted_count}.")
    return recommendations


def get_user_crop_recommendations(user: Userprofile) -> QuerySet[CropRecommendation]:
    return CropRecommendation.objects.filter(user=user).select_related('crop', 'region', 'soilType')
