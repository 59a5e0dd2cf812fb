from .region import Region
from .soil_type import SoilType
from .crop import Crop, Season
from .userprofile import Userprofile
from .crop_recommendation import CropRecommendation
from .weather_snapshot import WeatherSnapshot, WeatherCondition
from .log_message import LogMessage
