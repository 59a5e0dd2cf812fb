from .custom_exceptions import NotFoundException, InvalidSelectionException, LocationNotSelectedException, \
    OpenIdProviderException
