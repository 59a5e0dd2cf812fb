from rest_framework import serializers
from crop_adviser_backend.models import Region


class RegionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Region
        read_only_fields = ('id',)
        fields = ['id', 'name', 'code']
