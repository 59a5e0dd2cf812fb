from .region_serializer import RegionSerializer
from .soil_type_serializer import SoilTypeSerializer
from .crop_serializer import CropSerializer
from .crop_recommendation_serializer import CropRecommendationSerializer
from .weather_snapshot_serializer import WeatherSnapshotSerializer
from .userprofile_serializer import UserprofileSerializer, UserLocationSerializer
from .log_message_serializer import LogMessageSerializer
