from urllib.parse import urlencode

from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, AuthenticationFailed, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from crop_adviser_backend.utils import get_logger

logger = get_logger()


def _get_resource_id(context):
    kwargs = context.get('kwargs') or {}
    for key in ('state_id', 'resource_id'):
        if key in kwargs:
            return kwargs[key]
    return None


def build_login_url(request) -> str:
    login_url = reverse('login')
    if request is None:
        return login_url
    return f'{login_url}?{urlencode({"next": request.get_full_path()})}'


def custom_exception_handler(exc, context):
    resource_id = _get_resource_id(context)
    request = context.get('request')

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        logger.info(f'Unauthenticated request, redirecting to login. {exc}', extra={'resource_id': resource_id})
        return Response(status=status.HTTP_302_FOUND, headers={'Location': build_login_url(request)})

    if isinstance(exc, ValidationError):
        logger.warning(f'Invalid input data: {exc.detail}', extra={'resource_id': resource_id})
        return Response(
            {"message": "Invalid input data", "errors": exc.detail},
            status=status.HTTP_400_BAD_REQUEST
        )

    response = exception_handler(exc, context)
    if response is not None:
        logger.warning(f'{exc.__class__.__name__}: {exc}', extra={'resource_id': resource_id})
        message = response.data.get('detail', response.data) if isinstance(response.data, dict) else response.data
        return Response({"message": message}, status=response.status_code)

    logger.error(f'An unexpected error occurred. {exc}', exc_info=exc, extra={'resource_id': resource_id})
    set_rollback()
    return Response(
        {"message": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
