from unittest import mock

import pytest
from django.apps import apps

from crop_adviser_backend.models import Region, Crop


@pytest.fixture
def app_config():
    return apps.get_app_config('crop_adviser_backend')


@pytest.mark.django_db
def test_initialize_app_seeds_once_migrated(app_config):
    with mock.patch.object(app_config, 'has_pending_migrations', return_value=False):
        app_config.initialize_app(retry_interval=0)

    assert Region.objects.count() == 14
    assert Crop.objects.count() == 4


@pytest.mark.django_db
def test_initialize_app_gives_up_while_migrations_are_pending(app_config):
    with mock.patch.object(app_config, 'has_pending_migrations', return_value=True) as pending:
        app_config.initialize_app(max_retries=2, retry_interval=0)

    assert pending.call_count == 2
    assert not Region.objects.exists()


@pytest.mark.django_db
def test_migrated_test_database_has_no_pending_migrations(app_config):
    assert app_config.has_pending_migrations() is False
