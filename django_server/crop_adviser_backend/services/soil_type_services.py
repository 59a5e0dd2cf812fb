from crop_adviser_backend.exceptions import NotFoundException
from crop_adviser_backend.models import SoilType
from crop_adviser_backend.serializers import SoilTypeSerializer
from crop_adviser_backend.utils import is_valid_uuid


def get_soil_types_by_region_id(region_id) -> SoilTypeSerializer:
    """
    All soil types stored for the state, an unknown or malformed state id yields an empty list.
    """
    soil_types = SoilType.objects.filter(region_id=region_id) if is_valid_uuid(region_id) else SoilType.objects.none()
    return SoilTypeSerializer(soil_types, many=True)


def get_soil_type_by_id(soil_type_id) -> SoilType:
    soil_type = SoilType.objects.select_related('region').filter(id=soil_type_id).first() \
        if is_valid_uuid(soil_type_id) else None
    if soil_type is None:
        raise NotFoundException(f'Soil type with id: {soil_type_id} was not found.')
    return soil_type
