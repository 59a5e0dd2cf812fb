import uuid
from django.db import models
from django.utils import timezone

from crop_adviser_backend.utils import ListableEnum
from .region import Region


class WeatherCondition(ListableEnum):
    Sunny = 'Sunny'
    PartlyCloudy = 'Partly Cloudy'
    Cloudy = 'Cloudy'
    LightRain = 'Light Rain'


class WeatherSnapshot(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    region = models.OneToOneField(Region, related_name='weather', on_delete=models.CASCADE)
    temperature = models.DecimalField(max_digits=4, decimal_places=1)
    humidity = models.IntegerField()
    windSpeed = models.DecimalField(max_digits=4, decimal_places=1)
    visibility = models.DecimalField(max_digits=4, decimal_places=1)
    conditions = models.CharField(max_length=32, choices=WeatherCondition.choices())
    forecast = models.JSONField(default=list)
    lastUpdated = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.region.name}: {self.temperature}°C {self.conditions} ({self.lastUpdated})"
