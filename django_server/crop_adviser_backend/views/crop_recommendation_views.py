from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from crop_adviser_backend.exceptions import LocationNotSelectedException
from crop_adviser_backend.serializers import CropRecommendationSerializer
from crop_adviser_backend.services import get_user_crop_recommendations, generate_crop_recommendations


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_crop_recommendations(request):
    recommendations = get_user_crop_recommendations(request.user)
    return Response(CropRecommendationSerializer(recommendations, many=True).data, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def post_generate_crop_recommendations(request):
    """
    Regenerate the recommendations for the state and soil type currently stored for the user
    :param request:
    :return:
    """
    user = request.user
    if not user.has_location():
        raise LocationNotSelectedException()

    generate_crop_recommendations(user, user.selectedRegion_id, user.selectedSoilType_id)
    recommendations = get_user_crop_recommendations(user)
    return Response(CropRecommendationSerializer(recommendations, many=True).data, status=status.HTTP_200_OK)
