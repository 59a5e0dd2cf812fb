from rest_framework import serializers
from crop_adviser_backend.models import WeatherSnapshot


class WeatherSnapshotSerializer(serializers.ModelSerializer):
    stateId = serializers.PrimaryKeyRelatedField(source='region', read_only=True)

    class Meta:
        model = WeatherSnapshot
        read_only_fields = ('id', 'lastUpdated')
        fields = [
            'id',
            'stateId',
            'temperature',
            'humidity',
            'windSpeed',
            'visibility',
            'conditions',
            'forecast',
            'lastUpdated',
        ]
