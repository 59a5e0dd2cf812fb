from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes
from rest_framework.response import Response

from crop_adviser_backend.services import get_all_regions


@api_view(['GET'])
@authentication_classes([])
def get_states(request):
    return Response(get_all_regions().data, status=status.HTTP_200_OK)
