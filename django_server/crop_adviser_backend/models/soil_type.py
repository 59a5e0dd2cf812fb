import uuid
from django.db import models
from .region import Region


class SoilType(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    region = models.ForeignKey(Region, related_name='soilTypes', on_delete=models.CASCADE)
    name = models.CharField(max_length=128)
    description = models.TextField(blank=True)
    phRange = models.CharField(max_length=32, blank=True)
    characteristics = models.TextField(blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['region', 'name'], name='unique_soil_type_name_per_region')
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.region.name}: {self.name}"
