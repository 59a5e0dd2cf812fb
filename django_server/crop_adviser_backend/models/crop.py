import uuid
from django.db import models

from crop_adviser_backend.utils import ListableEnum


class Season(ListableEnum):
    Kharif = 'Kharif'
    Rabi = 'Rabi'
    Perennial = 'Perennial'


class Crop(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=128, unique=True)
    season = models.CharField(max_length=16, choices=Season.choices())
    description = models.TextField(blank=True)
    expectedYield = models.CharField(max_length=64, blank=True)
    growthDuration = models.PositiveIntegerField(help_text="Growth duration in days")
    waterRequirement = models.CharField(max_length=32, blank=True)
    soilCompatibility = models.JSONField(default=list, help_text="Names of the soil types this crop grows well in")
    image = models.CharField(max_length=256, blank=True)

    class Meta:
        ordering = ['name']

    def is_compatible_with(self, soil_name: str) -> bool:
        return soil_name in (self.soilCompatibility or [])

    def __str__(self):
        return f"{self.name} ({self.season})"
