from datetime import date

import pytest
from django.utils import timezone

from apps.calendar_app.models import CalendarEvent
from apps.checklists.models import Checklist, Task
from apps.hr.models import Employee
from apps.projects.models import ReportDate

pytestmark = pytest.mark.django_db


@pytest.fixture
def year():
    return timezone.localdate().year


def create_event(client, **payload):
    return client.post('/calendar/events/', payload, content_type='application/json')


def test_create_event_defaults_to_normal_priority(auth_client, year):
    response = create_event(auth_client, title='Встреча с фондом', date=f'{year}-04-03', time='10:00')

    assert response.status_code == 201
    event = response.json()['event']
    assert event['priority'] == 'NORMAL'
    assert event['type'] == 'custom'
    assert event['time'] == '10:00'


@pytest.mark.parametrize('payload', [
    {'date': '2024-04-03'},
    {'title': 'Без даты'},
    {'title': 'X', 'date': '2024-04-03', 'time': '25:00'},
    {'title': 'X', 'date': '2024-04-03', 'priority': 'LOW'},
])
def test_create_event_validation(auth_client, payload):
    assert create_event(auth_client, **payload).status_code == 400


def test_month_view_merges_all_sources(auth_client, user, year):
    create_event(auth_client, title='Встреча', date=f'{year}-04-03', priority='IMPORTANT')
    Employee.objects.create(user=user, name='Анна', position='HR', hire_date=date(2020, 1, 1),
                            birth_date=date(1990, 4, 10))
    checklist = Checklist.objects.create(user=user, title='Квартал')
    Task.objects.create(checklist=checklist, text='Сверка', deadline=date(year, 4, 20))
    Task.objects.create(checklist=checklist, text='Готово', deadline=date(year, 4, 21), completed=True)
    ReportDate.objects.create(project=user.project, title='Отчёт 1', date=date(year, 4, 28))

    body = auth_client.get('/calendar/', {'year': year, 'month': 4}).json()

    titles = [e['title'] for e in body['events']]
    assert 'Встреча' in titles
    assert 'День рождения: Анна' in titles
    assert 'Квартал: Сверка' in titles
    assert 'Квартал: Готово' not in titles
    assert 'Отчёт за 1 квартал' in titles
    assert 'Уплата налогов' in titles
    assert 'Сдача отчёта: Отчёт 1' in titles
    assert 'Отчёт 1: осталось 5 дней' in titles

    assert body['days']['25']['highest_priority'] == 'URGENT'
    assert body['days']['10']['types'] == ['birthday']
    assert body['weeks'][0][0] in range(0, 8)
    assert all(len(week) == 7 for week in body['weeks'])


def test_month_view_filter(auth_client, year):
    create_event(auth_client, title='Встреча', date=f'{year}-04-03')

    body = auth_client.get('/calendar/', {'year': year, 'month': 4, 'filter': 'user'}).json()

    assert [e['title'] for e in body['events']] == ['Встреча']
    assert list(body['days']) == ['3']


def test_month_navigation_rolls_over_year(auth_client):
    body = auth_client.get('/calendar/', {'year': 2024, 'month': 1}).json()

    assert body['prev'] == {'year': 2023, 'month': 12}
    assert body['next'] == {'year': 2024, 'month': 2}


@pytest.mark.parametrize('params', [{'month': 13}, {'month': 0}, {'filter': 'holidays'}, {'year': 'abc'}])
def test_month_view_rejects_bad_params(auth_client, params):
    assert auth_client.get('/calendar/', params).status_code == 400


def test_day_view(auth_client, year):
    body = auth_client.get('/calendar/day/', {'date': f'{year}-07-15'}).json()

    assert [e['title'] for e in body['events']] == ['Отчёт за 2 квартал']


def test_day_view_requires_date(auth_client):
    assert auth_client.get('/calendar/day/').status_code == 400


def test_upcoming_is_limited(auth_client):
    events = auth_client.get('/calendar/upcoming/').json()['events']

    today = timezone.localdate().isoformat()
    assert len(events) <= 10
    assert all(e['date'] >= today for e in events)
    assert [e['date'] for e in events] == sorted(e['date'] for e in events)


def test_toggle_and_delete_event(auth_client, year):
    event_id = create_event(auth_client, title='Встреча', date=f'{year}-04-03').json()['event']['id']
    pk = int(event_id.split('-')[1])

    toggled = auth_client.post(f'/calendar/events/{pk}/toggle/').json()['event']
    assert toggled['completed'] is True

    assert auth_client.delete(f'/calendar/events/{pk}/').status_code == 200
    assert not CalendarEvent.objects.exists()


def test_foreign_event_is_not_found(auth_client, other_user):
    foreign = CalendarEvent.objects.create(user=other_user, title='Чужое', date=date(2024, 1, 1))

    assert auth_client.post(f'/calendar/events/{foreign.id}/toggle/').status_code == 404
    assert auth_client.delete(f'/calendar/events/{foreign.id}/').status_code == 404
