import uuid

import pytest

from crop_adviser_backend.models import Region, SoilType


def test_get_states_lists_all_seeded_states(api_client, seeded):
    response = api_client.get('/api/states')

    assert response.status_code == 200
    assert len(response.data) == 14
    assert {'id', 'name', 'code'} == set(response.data[0].keys())
    assert 'PB' in [state['code'] for state in response.data]


def test_soil_types_only_contain_soils_of_the_state(api_client, seeded):
    for region in Region.objects.all():
        response = api_client.get(f'/api/soil-types/{region.id}')

        assert response.status_code == 200
        assert len(response.data) == SoilType.objects.filter(region=region).count()
        assert all(soil['stateId'] == region.id for soil in response.data)


def test_soil_types_of_punjab(api_client, punjab):
    response = api_client.get(f'/api/soil-types/{punjab.id}')

    names = sorted(soil['name'] for soil in response.data)
    assert names == ['Alluvial Soil', 'Sandy Loam']
    assert response.data[0]['phRange']


@pytest.mark.parametrize('state_id', [str(uuid.uuid4()), 'not-a-uuid'])
def test_soil_types_of_unknown_state_are_empty(api_client, seeded, state_id):
    response = api_client.get(f'/api/soil-types/{state_id}')

    assert response.status_code == 200
    assert response.data == []


@pytest.mark.django_db
def test_init_endpoint_is_idempotent(api_client):
    first = api_client.get('/api/init')
    second = api_client.get('/api/init')

    assert first.status_code == 200
    assert first.data['message'] == 'Database initialized successfully'
    assert first.data['created']['states'] == 14
    assert second.data['created'] == {'states': 0, 'soilTypes': 0, 'crops': 0}
    assert Region.objects.count() == 14


@pytest.mark.django_db
def test_init_endpoint_can_be_disabled(api_client, settings):
    settings.SEED_ENDPOINT_ENABLED = False

    response = api_client.get('/api/init')

    assert response.status_code == 404
    assert Region.objects.count() == 0
