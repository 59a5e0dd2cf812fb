from django.db import transaction

from crop_adviser_backend.exceptions import NotFoundException
from crop_adviser_backend.models import Userprofile, Region, SoilType
from crop_adviser_backend.utils import get_logger
from .recommendation_services import generate_crop_recommendations

logger = get_logger()

CLAIM_FIELDS = {
    'email': 'email',
    'given_name': 'first_name',
    'family_name': 'last_name',
    'picture': 'profileImageUrl',
}


def get_userprofile_by_subject(subject: str) -> Userprofile:
    user_profile = Userprofile.objects.filter(username=subject).first()
    if user_profile is None:
        raise NotFoundException('Userprofile not found.')
    return user_profile


def upsert_userprofile(claims: dict) -> Userprofile:
    """
    Creates or updates the user identified by the subject claim of the identity provider.
    Claims missing from the payload leave the stored value untouched.
    :param claims: OpenID userinfo claims, 'sub' is required
    :return: the stored user
    """
    subject = claims.get('sub')
    if not subject:
        raise ValueError("Userinfo does not contain a subject claim.")

    defaults = {field: claims[claim] for claim, field in CLAIM_FIELDS.items() if claims.get(claim) is not None}
    user_profile, created = Userprofile.objects.update_or_create(username=str(subject), defaults=defaults)

    if created:
        user_profile.set_unusable_password()
        user_profile.save(update_fields=['password'])
        logger.info(f"Created user profile for subject '{subject}'.")
    else:
        logger.debug(f"Updated user profile for subject '{subject}'.")
    return user_profile


def update_user_location(user_profile: Userprofile, region: Region, soil_type: SoilType, rng=None) -> Userprofile:
    """
    Stores the selected state and soil type and regenerates the crop recommendations in the same transaction.
    """
    with transaction.atomic():
        user_profile.selectedRegion = region
        user_profile.selectedSoilType = soil_type
        user_profile.save(update_fields=['selectedRegion', 'selectedSoilType', 'updatedAt'])
        generate_crop_recommendations(user_profile, region.id, soil_type.id, rng)

    logger.info(f"User '{user_profile.username}' selected '{region.name}' / '{soil_type.name}'.", extra={'resource_id': region.id})
    return user_profile
