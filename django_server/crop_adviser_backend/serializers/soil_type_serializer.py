from rest_framework import serializers
from crop_adviser_backend.models import SoilType, Region


class SoilTypeSerializer(serializers.ModelSerializer):
    stateId = serializers.PrimaryKeyRelatedField(
        source='region',
        queryset=Region.objects.all()
    )

    class Meta:
        model = SoilType
        read_only_fields = ('id',)
        fields = ['id', 'stateId', 'name', 'description', 'phRange', 'characteristics']
