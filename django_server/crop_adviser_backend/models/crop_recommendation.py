import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q

from .crop import Crop
from .region import Region
from .soil_type import SoilType

MIN_COMPATIBILITY_SCORE = 50
MAX_COMPATIBILITY_SCORE = 99


class CropRecommendation(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='cropRecommendations', on_delete=models.CASCADE)
    crop = models.ForeignKey(Crop, related_name='recommendations', on_delete=models.CASCADE)
    region = models.ForeignKey(Region, related_name='recommendations', on_delete=models.CASCADE)
    soilType = models.ForeignKey(SoilType, related_name='recommendations', on_delete=models.CASCADE)
    compatibilityScore = models.IntegerField()
    advice = models.JSONField(default=dict, help_text="irrigation, fertilizer and pestControl advice")
    createdAt = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'crop'], name='unique_recommendation_per_user_and_crop'),
            models.CheckConstraint(
                condition=Q(compatibilityScore__gte=MIN_COMPATIBILITY_SCORE) & Q(compatibilityScore__lte=MAX_COMPATIBILITY_SCORE),
                name='compatibility_score_range',
            ),
        ]
        ordering = ['-compatibilityScore', 'crop__name']

    def __str__(self):
        return f"{self.user}: {self.crop.name} {self.compatibilityScore}"
