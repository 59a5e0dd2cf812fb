from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes
from rest_framework.response import Response

from crop_adviser_backend.serializers import WeatherSnapshotSerializer
from crop_adviser_backend.services import get_weather_snapshot


@api_view(['GET'])
@authentication_classes([])
def get_weather(request, state_id):
    snapshot = get_weather_snapshot(state_id)
    return Response(WeatherSnapshotSerializer(snapshot).data, status=status.HTTP_200_OK)
