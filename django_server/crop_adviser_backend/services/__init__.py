from .log_message_services import write_log_message, get_log_messages_by_amount
from .region_services import get_all_regions, get_region_by_id
from .soil_type_services import get_soil_types_by_region_id, get_soil_type_by_id
from .crop_services import get_all_crops
from .seed_services import seed_regions, seed_soil_types, seed_crops, seed_reference_data
from .recommendation_services import generate_crop_recommendations, get_user_crop_recommendations, \
    compute_compatibility_score, get_crop_advice
from .weather_services import get_weather_snapshot, refresh_weather_snapshot, is_snapshot_fresh
from .userprofile_services import get_userprofile_by_subject, upsert_userprofile, update_user_location
from .auth_services import build_authorization_url, get_callback_url, exchange_code_for_tokens, fetch_userinfo, \
    build_end_session_url, OpenIdBearerAuthentication
