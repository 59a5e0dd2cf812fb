from urllib.parse import urlencode

import requests
from django.conf import settings
from django.urls import reverse
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from crop_adviser_backend.exceptions import OpenIdProviderException
from crop_adviser_backend.utils import get_logger
from .userprofile_services import upsert_userprofile

logger = get_logger()


def get_callback_url(request) -> str:
    return request.build_absolute_uri(reverse('callback'))


def build_authorization_url(request, state: str) -> str:
    params = {
        "response_type": "code",
        "client_id": settings.OIDC_CLIENT_ID,
        "redirect_uri": get_callback_url(request),
        "scope": settings.OIDC_SCOPE,
        "state": state,
    }
    return f"{settings.OIDC_AUTHORIZATION_ENDPOINT}?{urlencode(params)}"


def build_end_session_url(post_logout_redirect_uri: str, id_token: str = None) -> str | None:
    if not settings.OIDC_END_SESSION_ENDPOINT:
        return None

    params = {
        "client_id": settings.OIDC_CLIENT_ID,
        "post_logout_redirect_uri": post_logout_redirect_uri,
    }
    if id_token:
        params["id_token_hint"] = id_token
    return f"{settings.OIDC_END_SESSION_ENDPOINT}?{urlencode(params)}"


def exchange_code_for_tokens(code: str, redirect_uri: str) -> dict:
    """
    Exchange an authorization code for tokens at the token endpoint of the identity provider.
    """
    data = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": redirect_uri,
        "client_id": settings.OIDC_CLIENT_ID,
        "client_secret": settings.OIDC_CLIENT_SECRET,
    }
    headers = {
        "Content-Type": "application/x-www-form-urlencoded"
    }
    logger.info("Exchanging authorization code at the identity provider.")
    try:
        response = requests.post(settings.OIDC_TOKEN_ENDPOINT, data=data, headers=headers,
                                 timeout=settings.OIDC_REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Token endpoint of the identity provider not reachable: {e}")
        raise OpenIdProviderException()

    if response.status_code == 200:
        return response.json()

    logger.error(f"Failed to exchange authorization code. Status: {response.status_code}, Response: {response.text}")
    raise AuthenticationFailed("The identity provider rejected the authorization code.")


def fetch_userinfo(access_token: str) -> dict:
    try:
        response = requests.get(settings.OIDC_USERINFO_ENDPOINT, headers={"Authorization": f"Bearer {access_token}"},
                                timeout=settings.OIDC_REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Userinfo endpoint of the identity provider not reachable: {e}")
        raise OpenIdProviderException()

    if response.status_code == 200:
        return response.json()

    if response.status_code in (401, 403):
        logger.warning(f"Identity provider rejected access token. Status: {response.status_code}")
        raise AuthenticationFailed("Invalid or expired access token.")

    logger.error(f"Failed to fetch userinfo. Status: {response.status_code}, Response: {response.text}")
    raise OpenIdProviderException()


class OpenIdBearerAuthentication(BaseAuthentication):
    """
    Authenticates 'Authorization: Bearer <token>' requests by resolving the access token
    at the userinfo endpoint of the identity provider and upserting the user it belongs to.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise AuthenticationFailed("Invalid bearer token header.")

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise AuthenticationFailed("Invalid bearer token header.")

        claims = fetch_userinfo(token)
        try:
            user_profile = upsert_userprofile(claims)
        except ValueError as e:
            raise AuthenticationFailed(str(e))

        if not user_profile.is_active:
            raise AuthenticationFailed("User inactive or deleted.")

        return user_profile, token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
