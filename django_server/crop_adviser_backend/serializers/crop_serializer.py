from rest_framework import serializers
from crop_adviser_backend.models import Crop


class CropSerializer(serializers.ModelSerializer):
    soilCompatibility = serializers.ListField(child=serializers.CharField())

    class Meta:
        model = Crop
        read_only_fields = ('id',)
        fields = [
            'id',
            'name',
            'season',
            'description',
            'expectedYield',
            'growthDuration',
            'waterRequirement',
            'soilCompatibility',
            'image',
        ]
