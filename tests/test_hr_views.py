import pytest

from apps.hr.models import Employee

pytestmark = pytest.mark.django_db


def hire(client, **payload):
    data = {'name': 'Иван Петров', 'position': 'Разработчик', 'hire_date': '2024-01-15'}
    data.update(payload)
    return client.post('/hr/employees/', data, content_type='application/json')


def test_create_employee_defaults(auth_client):
    response = hire(auth_client)

    assert response.status_code == 201
    employee = response.json()['employee']
    assert employee['status'] == 'ACTIVE'
    assert employee['military_status'] == 'NOT_APPLICABLE'
    assert employee['initials'] == 'ИП'
    assert employee['birth_date'] is None


def test_create_requires_hire_date(auth_client):
    response = auth_client.post('/hr/employees/', {'name': 'A', 'position': 'B'}, content_type='application/json')

    assert response.status_code == 400
    assert 'hire_date' in response.json()['fields']


def test_list_filters_by_status(auth_client, user):
    Employee.objects.create(user=user, name='A', position='x', hire_date='2024-01-01')
    Employee.objects.create(user=user, name='B', position='x', hire_date='2024-01-01', status='DISMISSED')

    body = auth_client.get('/hr/employees/', {'status': 'DISMISSED'}).json()

    assert [e['name'] for e in body['employees']] == ['B']


def test_partial_update_keeps_missing_fields(auth_client):
    employee_id = hire(auth_client, birth_date='1990-05-17', military_status='UPDATED').json()['employee']['id']

    response = auth_client.put(f'/hr/employees/{employee_id}/', {'status': 'DISMISSED'},
                               content_type='application/json')

    employee = response.json()['employee']
    assert employee['status'] == 'DISMISSED'
    assert employee['military_status'] == 'UPDATED'
    assert employee['birth_date'] == '1990-05-17'


def test_update_can_clear_birth_date(auth_client):
    employee_id = hire(auth_client, birth_date='1990-05-17').json()['employee']['id']

    response = auth_client.put(f'/hr/employees/{employee_id}/', {'birth_date': None},
                               content_type='application/json')

    assert response.json()['employee']['birth_date'] is None


def test_foreign_employee(auth_client, other_user):
    foreign = Employee.objects.create(user=other_user, name='X', position='x', hire_date='2024-01-01')

    assert auth_client.delete(f'/hr/employees/{foreign.id}/').status_code == 404
    assert Employee.objects.filter(pk=foreign.pk).exists()
