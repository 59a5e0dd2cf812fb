from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes
from rest_framework.response import Response

from crop_adviser_backend.exceptions import NotFoundException
from crop_adviser_backend.services import seed_reference_data


@api_view(['GET'])
@authentication_classes([])
def get_init(request):
    if not settings.SEED_ENDPOINT_ENABLED:
        raise NotFoundException()

    created = seed_reference_data()
    return Response({"message": "Database initialized successfully", "created": created}, status=status.HTTP_200_OK)
