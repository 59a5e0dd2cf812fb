from django.contrib.auth.models import AbstractUser
from django.db import models

from .region import Region
from .soil_type import SoilType


class Userprofile(AbstractUser):
    """
    A user signed in through the external OpenID provider.
    ``username`` holds the provider's subject claim and is the key users are upserted by.
    """
    profileImageUrl = models.CharField(max_length=512, blank=True)
    selectedRegion = models.ForeignKey(Region, blank=True, null=True, related_name='+', on_delete=models.SET_NULL)
    selectedSoilType = models.ForeignKey(SoilType, blank=True, null=True, related_name='+', on_delete=models.SET_NULL)
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    @property
    def subject(self) -> str:
        return self.username

    def has_location(self) -> bool:
        return self.selectedRegion_id is not None and self.selectedSoilType_id is not None

    def __str__(self):
        return f"{self.email or self.username} {self.get_full_name()}".strip()
