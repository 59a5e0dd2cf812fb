from rest_framework import status
from rest_framework.exceptions import APIException


class NotFoundException(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class InvalidSelectionException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The selected soil type does not belong to the selected state.'
    default_code = 'invalid_selection'


class LocationNotSelectedException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Please select state and soil type first'
    default_code = 'location_not_selected'


class OpenIdProviderException(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'The identity provider could not be reached.'
    default_code = 'identity_provider_error'
