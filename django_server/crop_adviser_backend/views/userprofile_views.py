from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from crop_adviser_backend.serializers import UserprofileSerializer, UserLocationSerializer
from crop_adviser_backend.services import update_user_location
from crop_adviser_backend.utils import get_logger

logger = get_logger()


@ensure_csrf_cookie
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_auth_user(request):
    """
    Current user, also sets the csrftoken cookie that session clients echo in the X-CSRFToken header on writes
    """
    return Response(UserprofileSerializer(request.user).data, status=status.HTTP_200_OK)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def patch_user_location(request):
    """
    Store the selected state and soil type of the user and regenerate their crop recommendations
    :param request:
    :return:
    """
    serializer = UserLocationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user_profile = update_user_location(
        request.user,
        serializer.validated_data['selectedState'],
        serializer.validated_data['selectedSoilType'],
    )
    return Response(UserprofileSerializer(user_profile).data, status=status.HTTP_200_OK)
