import random

import pytest
from rest_framework.test import APIClient

from crop_adviser_backend.models import Region, SoilType, Userprofile
from crop_adviser_backend.services import seed_reference_data


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def seeded(db):
    seed_reference_data()


@pytest.fixture
def punjab(seeded):
    return Region.objects.get(code='PB')


@pytest.fixture
def alluvial_soil(punjab):
    return SoilType.objects.get(region=punjab, name='Alluvial Soil')


@pytest.fixture
def user(db):
    return Userprofile.objects.create(
        username='oidc|1001',
        email='farmer@example.com',
        first_name='Asha',
        last_name='Singh',
    )


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def rng():
    return random.Random(1234)
