from rest_framework import serializers
from crop_adviser_backend.models import Userprofile, Region, SoilType
from crop_adviser_backend.utils import is_valid_uuid


class UserprofileSerializer(serializers.ModelSerializer):
    subject = serializers.CharField(source='username', read_only=True)
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    selectedState = serializers.PrimaryKeyRelatedField(source='selectedRegion', read_only=True)
    selectedSoilType = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Userprofile
        read_only_fields = ('id', 'email', 'profileImageUrl', 'createdAt', 'updatedAt')
        fields = (
            'id',
            'subject',
            'email',
            'firstName',
            'lastName',
            'profileImageUrl',
            'selectedState',
            'selectedSoilType',
            'createdAt',
            'updatedAt',
        )


class UserLocationSerializer(serializers.Serializer):
    """
    Body of PATCH /api/user/location. Both ids must be non-empty, must exist and
    the soil type must belong to the selected state.
    """
    selectedState = serializers.CharField(allow_blank=False, trim_whitespace=True)
    selectedSoilType = serializers.CharField(allow_blank=False, trim_whitespace=True)

    def validate_selectedState(self, value):
        region = Region.objects.filter(id=value).first() if is_valid_uuid(value) else None
        if region is None:
            raise serializers.ValidationError('State does not exist.')
        return region

    def validate(self, data):
        region = data['selectedState']
        soil_type_id = data['selectedSoilType']
        soil_type = SoilType.objects.filter(id=soil_type_id).first() if is_valid_uuid(soil_type_id) else None
        if soil_type is None:
            raise serializers.ValidationError({"selectedSoilType": "Soil type does not exist."})
        if soil_type.region_id != region.id:
            raise serializers.ValidationError({"selectedSoilType": "Soil type does not belong to the selected state."})

        data['selectedSoilType'] = soil_type
        return data
