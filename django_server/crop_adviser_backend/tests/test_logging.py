import logging
from datetime import timedelta
from unittest import mock

import pytest
from django.utils import timezone

from crop_adviser_backend.models import LogMessage, Userprofile
from crop_adviser_backend.services import write_log_message
from crop_adviser_backend.utils import get_logger
from django_server.custom_logger import DatabaseLogHandler


def make_record(name='crop_adviser', level=logging.WARNING, msg='Soil data incomplete', **extra):
    record = logging.LogRecord(name, level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.django_db
def test_handler_stores_record_with_resource_id():
    DatabaseLogHandler().emit(make_record(resource_id='state-42'))

    message = LogMessage.objects.get()
    assert message.logLevel == 'WARNING'
    assert message.message == 'Soil data incomplete'
    assert message.relatedResourceId == 'state-42'


@pytest.mark.django_db
def test_handler_skips_database_loggers():
    DatabaseLogHandler().emit(make_record(name='django.db.backends'))

    assert not LogMessage.objects.exists()


@pytest.mark.django_db
def test_app_logger_persists_warnings_but_not_info():
    logger = get_logger()

    logger.info('Weather refreshed.')
    logger.warning('Weather provider slow.', extra={'resource_id': 'PB'})

    messages = list(LogMessage.objects.all())
    assert [m.message for m in messages] == ['Weather provider slow.']
    assert messages[0].relatedResourceId == 'PB'


@pytest.mark.django_db
def test_unexpected_error_returns_generic_message_and_is_logged(api_client):
    with mock.patch('crop_adviser_backend.views.region_views.get_all_regions', side_effect=RuntimeError('boom')):
        response = api_client.get('/api/states')

    assert response.status_code == 500
    assert response.data == {'message': 'Internal server error'}
    assert LogMessage.objects.filter(logLevel='ERROR', message__contains='boom').exists()


@pytest.mark.django_db
def test_not_found_is_logged_with_state_id(api_client, seeded):
    api_client.get('/api/weather/00000000-0000-0000-0000-000000000000')

    assert LogMessage.objects.filter(relatedResourceId='00000000-0000-0000-0000-000000000000').exists()


@pytest.fixture
def admin_client(api_client):
    admin = Userprofile.objects.create(username='oidc|admin', is_staff=True)
    api_client.force_authenticate(user=admin)
    return api_client


@pytest.mark.django_db
def test_log_messages_are_returned_newest_first(admin_client):
    now = timezone.now()
    write_log_message('WARNING', 'older', created_at=now - timedelta(minutes=5))
    write_log_message('ERROR', 'newer', related_resource_id='PB', created_at=now)

    response = admin_client.get('/api/log-messages')

    assert response.status_code == 200
    assert [entry['message'] for entry in response.data] == ['newer', 'older']
    assert response.data[0]['relatedResourceId'] == 'PB'


@pytest.mark.django_db
def test_log_messages_can_be_limited_and_filtered(admin_client):
    now = timezone.now()
    for minutes in range(3):
        write_log_message('WARNING', f'warning {minutes}', created_at=now - timedelta(minutes=minutes))
    write_log_message('ERROR', 'error', created_at=now - timedelta(minutes=10))

    limited = admin_client.get('/api/log-messages?amount=2')
    errors_only = admin_client.get('/api/log-messages?level=error')

    assert [entry['message'] for entry in limited.data] == ['warning 0', 'warning 1']
    assert [entry['message'] for entry in errors_only.data] == ['error']


@pytest.mark.django_db
def test_log_messages_are_admin_only(auth_client):
    response = auth_client.get('/api/log-messages')

    assert response.status_code == 403
