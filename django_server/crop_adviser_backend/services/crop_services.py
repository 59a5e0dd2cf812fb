from django.db.models import QuerySet

from crop_adviser_backend.models import Crop


def get_all_crops() -> QuerySet[Crop]:
    return Crop.objects.all()
