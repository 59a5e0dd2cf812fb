from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from crop_adviser_backend.models import Userprofile, Region, SoilType, Crop, CropRecommendation, WeatherSnapshot, \
    LogMessage


@admin.register(Userprofile)
class UserprofileAdmin(UserAdmin):
    fieldsets = UserAdmin.fieldsets + (
        ('Crop adviser', {'fields': ('profileImageUrl', 'selectedRegion', 'selectedSoilType')}),
    )
    list_display = ('username', 'email', 'first_name', 'last_name', 'selectedRegion', 'selectedSoilType', 'is_staff')


@admin.register(SoilType)
class SoilTypeAdmin(admin.ModelAdmin):
    list_display = ('name', 'region', 'phRange')
    list_filter = ('region',)


@admin.register(CropRecommendation)
class CropRecommendationAdmin(admin.ModelAdmin):
    list_display = ('user', 'crop', 'region', 'soilType', 'compatibilityScore', 'createdAt')
    list_select_related = ('user', 'crop', 'region', 'soilType')


admin.site.register(Region)
admin.site.register(Crop)
admin.site.register(WeatherSnapshot)
admin.site.register(LogMessage)
