from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes
from rest_framework.response import Response

from crop_adviser_backend.services import get_soil_types_by_region_id


@api_view(['GET'])
@authentication_classes([])
def get_soil_types(request, state_id):
    """
    All soil types of the given state
    :param request:
    :param state_id:
    :return:
    """
    return Response(get_soil_types_by_region_id(state_id).data, status=status.HTTP_200_OK)
