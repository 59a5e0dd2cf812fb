from django.urls import path

from crop_adviser_backend.views import (
    get_states,
    get_soil_types,
    get_weather,
    get_auth_user,
    patch_user_location,
    get_crop_recommendations,
    post_generate_crop_recommendations,
    get_init,
    login_view,
    callback_view,
    logout_view,
    get_log_messages,
)

urlpatterns = [
    path('init', get_init, name='get_init'),

    path('login', login_view, name='login'),
    path('callback', callback_view, name='callback'),
    path('logout', logout_view, name='logout'),
    path('auth/user', get_auth_user, name='get_auth_user'),

    path('states', get_states, name='get_states'),
    path('soil-types/<str:state_id>', get_soil_types, name='get_soil_types'),
    path('weather/<str:state_id>', get_weather, name='get_weather'),

    path('user/location', patch_user_location, name='patch_user_location'),

    path('crop-recommendations', get_crop_recommendations, name='get_crop_recommendations'),
    path('crop-recommendations/generate', post_generate_crop_recommendations, name='post_generate_crop_recommendations'),

    path('log-messages', get_log_messages, name='get_log_messages'),
]
