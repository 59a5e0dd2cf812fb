from .region_views import get_states
from .soil_type_views import get_soil_types
from .weather_views import get_weather
from .userprofile_views import get_auth_user, patch_user_location
from .crop_recommendation_views import get_crop_recommendations, post_generate_crop_recommendations
from .seed_views import get_init
from .auth_views import login_view, callback_view, logout_view
from .log_views import get_log_messages
