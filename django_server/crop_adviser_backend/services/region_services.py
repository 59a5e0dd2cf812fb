from crop_adviser_backend.exceptions import NotFoundException
from crop_adviser_backend.models import Region
from crop_adviser_backend.serializers import RegionSerializer
from crop_adviser_backend.utils import is_valid_uuid


def get_all_regions() -> RegionSerializer:
    return RegionSerializer(Region.objects.all(), many=True)


def get_region_by_id(region_id) -> Region:
    region = Region.objects.filter(id=region_id).first() if is_valid_uuid(region_id) else None
    if region is None:
        raise NotFoundException(f'State with id: {region_id} was not found.')
    return region
