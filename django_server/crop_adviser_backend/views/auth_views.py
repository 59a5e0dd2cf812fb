from django.conf import settings
from django.contrib.auth import login, logout
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET
from rest_framework.exceptions import APIException

from crop_adviser_backend.services import build_authorization_url, get_callback_url, exchange_code_for_tokens, \
    fetch_userinfo, upsert_userprofile, build_end_session_url
from crop_adviser_backend.utils import get_logger, generate_random_token

logger = get_logger()

OIDC_STATE_SESSION_KEY = 'oidc_state'
OIDC_ID_TOKEN_SESSION_KEY = 'oidc_id_token'
NEXT_URL_SESSION_KEY = 'login_next_url'


@require_GET
def login_view(request):
    """
    Sends the browser to the identity provider, the random state is checked again in the callback.
    """
    state = generate_random_token(length=48)
    request.session[OIDC_STATE_SESSION_KEY] = state

    next_url = request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        request.session[NEXT_URL_SESSION_KEY] = next_url

    return redirect(build_authorization_url(request, state))


@require_GET
def callback_view(request):
    expected_state = request.session.pop(OIDC_STATE_SESSION_KEY, None)

    if 'error' in request.GET:
        logger.warning(f"Identity provider returned an error: {request.GET.get('error')}")
        return JsonResponse({"message": "Login was not completed"}, status=401)

    code = request.GET.get('code')
    if not code or expected_state is None or request.GET.get('state') != expected_state:
        logger.warning("Login callback with missing code or mismatching state.")
        return JsonResponse({"message": "Invalid login callback"}, status=400)

    try:
        tokens = exchange_code_for_tokens(code, get_callback_url(request))
        claims = fetch_userinfo(tokens['access_token'])
        user_profile = upsert_userprofile(claims)
    except (APIException, KeyError, ValueError) as e:
        logger.error(f"Login through the identity provider failed: {e}")
        return JsonResponse({"message": "Login failed"}, status=401)

    next_url = request.session.pop(NEXT_URL_SESSION_KEY, None) or settings.FRONTEND_URL
    login(request, user_profile, backend='django.contrib.auth.backends.ModelBackend')
    if tokens.get('id_token'):
        request.session[OIDC_ID_TOKEN_SESSION_KEY] = tokens['id_token']

    logger.info(f"User '{user_profile.username}' logged in.")
    return redirect(next_url)


@require_GET
def logout_view(request):
    id_token = request.session.get(OIDC_ID_TOKEN_SESSION_KEY)
    logout(request)

    end_session_url = build_end_session_url(request.build_absolute_uri(settings.FRONTEND_URL), id_token)
    return redirect(end_session_url or settings.FRONTEND_URL)
