from rest_framework import serializers
from crop_adviser_backend.models import CropRecommendation
from .crop_serializer import CropSerializer
from .region_serializer import RegionSerializer
from .soil_type_serializer import SoilTypeSerializer


class CropRecommendationSerializer(serializers.ModelSerializer):
    """
    A recommendation joined with its crop, state and soil type.
    Querysets passed in should use select_related for those three relations.
    """
    userId = serializers.PrimaryKeyRelatedField(source='user', read_only=True)
    cropId = serializers.PrimaryKeyRelatedField(source='crop', read_only=True)
    stateId = serializers.PrimaryKeyRelatedField(source='region', read_only=True)
    soilTypeId = serializers.PrimaryKeyRelatedField(source='soilType', read_only=True)
    recommendations = serializers.JSONField(source='advice', read_only=True)
    crop = CropSerializer(read_only=True)
    state = RegionSerializer(source='region', read_only=True)
    soilType = SoilTypeSerializer(read_only=True)

    class Meta:
        model = CropRecommendation
        fields = [
            'id',
            'userId',
            'cropId',
            'stateId',
            'soilTypeId',
            'compatibilityScore',
            'recommendations',
            'createdAt',
            'crop',
            'state',
            'soilType',
        ]
