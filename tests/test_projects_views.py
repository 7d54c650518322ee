from decimal import Decimal

import pytest

from apps.projects.models import Project, ReportDate

pytestmark = pytest.mark.django_db


def test_onboarding_creates_default_project(user):
    project = Project.objects.get(user=user)
    assert project.name == 'Мой проект'
    assert project.grant_amount == Decimal('500000')


def test_get_project(auth_client):
    project = auth_client.get('/projects/').json()['project']

    assert project['grant_amount'] == 500000.0
    assert project['report_dates'] == []


def test_post_rejected_when_project_exists(auth_client):
    response = auth_client.post('/projects/', {'name': 'Второй'}, content_type='application/json')
    assert response.status_code == 400


def test_create_project_when_missing(auth_client, user):
    Project.objects.filter(user=user).delete()

    response = auth_client.post('/projects/', {'name': 'Стартап'}, content_type='application/json')

    assert response.status_code == 201
    assert response.json()['project']['grant_amount'] == 500000.0


@pytest.mark.parametrize('amount', ['0', '-100'])
def test_grant_must_be_positive(auth_client, amount):
    response = auth_client.put('/projects/', {'grant_amount': amount}, content_type='application/json')

    assert response.status_code == 400
    assert 'grant_amount' in response.json()['fields']


def test_partial_update(auth_client):
    response = auth_client.put('/projects/', {'grant_amount': '750000'}, content_type='application/json')

    project = response.json()['project']
    assert project['name'] == 'Мой проект'
    assert project['grant_amount'] == 750000.0


def test_report_dates_add_replace_delete(auth_client, user):
    added = auth_client.post('/projects/report-dates/', {'title': 'Отчёт 1', 'date': '2024-06-10'},
                             content_type='application/json')
    assert added.status_code == 201

    replaced = auth_client.put('/projects/report-dates/', {'report_dates': [
        {'title': 'Промежуточный', 'date': '2024-07-01'},
        {'title': 'Итоговый', 'date': '2024-12-20'},
    ]}, content_type='application/json')
    titles = [rd['title'] for rd in replaced.json()['project']['report_dates']]
    assert titles == ['Промежуточный', 'Итоговый']

    report_date = ReportDate.objects.get(title='Итоговый')
    assert auth_client.delete(f'/projects/report-dates/{report_date.id}/').status_code == 200
    assert ReportDate.objects.filter(project__user=user).count() == 1


def test_replace_report_dates_validates_every_item(auth_client, user):
    response = auth_client.put('/projects/report-dates/', {'report_dates': [
        {'title': 'ok', 'date': '2024-07-01'},
        {'title': 'bad', 'date': 'not-a-date'},
    ]}, content_type='application/json')

    assert response.status_code == 400
    assert '1' in response.json()['fields']
    assert not ReportDate.objects.filter(project__user=user).exists()


def test_invalid_json_body(auth_client):
    response = auth_client.put('/projects/', 'not json', content_type='application/json')

    assert response.status_code == 400
    assert response.json() == {'error': 'Invalid JSON body'}


def test_report_date_too_early_for_countdown_is_rejected(auth_client, user):
    response = auth_client.post('/projects/report-dates/', {'title': 'Старый', 'date': '0001-01-03'},
                                content_type='application/json')

    assert response.status_code == 400
    assert 'date' in response.json()['fields']
    assert not ReportDate.objects.filter(project__user=user).exists()


def test_calendar_works_with_stored_early_report_date(auth_client, user):
    from datetime import date

    ReportDate.objects.create(project=user.project, title='Старый', date=date(1, 1, 3))

    assert auth_client.get('/calendar/upcoming/').status_code == 200
    assert auth_client.get('/calendar/', {'year': 1, 'month': 1}).status_code == 200
