from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from crop_adviser_backend.services import get_log_messages_by_amount


@api_view(['GET'])
@permission_classes([IsAdminUser])
def get_log_messages(request):
    try:
        amount = int(request.GET.get('amount', 50))
    except ValueError:
        amount = 50

    serializer = get_log_messages_by_amount(max(amount, 1), request.GET.get('level'))
    return Response(serializer.data, status=status.HTTP_200_OK)
