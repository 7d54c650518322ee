from datetime import date, timedelta

import pytest
from django.utils import timezone

from apps.calendar_app.models import CalendarEvent
from apps.checklists.models import Checklist, Task
from apps.core.models import UserProfile
from apps.core.services import DashboardService
from apps.finance.models import Transaction
from apps.hr.models import Employee
from apps.projects.models import ReportDate

pytestmark = pytest.mark.django_db


def test_profile_created_on_signup(user):
    assert UserProfile.objects.filter(user=user, is_premium=False).exists()


def test_get_profile(auth_client):
    body = auth_client.get('/core/profile/').json()['user']

    assert body['username'] == 'founder'
    assert body['project']['name'] == 'Мой проект'


def test_update_profile(auth_client, user):
    response = auth_client.put('/core/profile/', {'name': 'Мария', 'inn': '7707083893'},
                               content_type='application/json')

    body = response.json()['user']
    assert body['name'] == 'Мария'
    assert body['inn'] == '7707083893'
    assert body['phone'] == ''


def test_update_profile_rejects_bad_inn(auth_client):
    response = auth_client.put('/core/profile/', {'inn': '123'}, content_type='application/json')

    assert response.status_code == 400
    assert 'inn' in response.json()['fields']


def test_premium_subscribe_and_cancel(auth_client, user):
    response = auth_client.post('/core/premium/subscribe/', {'tier_id': 'pro', 'is_annual': True},
                                content_type='application/json')

    assert response.status_code == 200
    subscription = response.json()['subscription']
    assert subscription['is_annual'] is True
    assert UserProfile.objects.get(user=user).is_premium

    assert auth_client.post('/core/premium/cancel/').json()['is_premium'] is False
    assert not UserProfile.objects.get(user=user).is_premium


def test_premium_unknown_tier(auth_client):
    response = auth_client.post('/core/premium/subscribe/', {'tier_id': 'gold'}, content_type='application/json')
    assert response.status_code == 400


def test_dashboard_requires_login(client):
    assert client.get('/').status_code == 401


def test_dashboard(auth_client, user):
    today = timezone.localdate()
    Transaction.objects.create(user=user, description='a', amount=100000, category='SALARY', date=today)
    Employee.objects.create(user=user, name='A', position='x', hire_date=today)
    Employee.objects.create(user=user, name='B', position='x', hire_date=today, status='DISMISSED')
    CalendarEvent.objects.create(user=user, title='Прошлое', date=today - timedelta(days=1))
    CalendarEvent.objects.create(user=user, title='Завтра', date=today + timedelta(days=1))
    CalendarEvent.objects.create(user=user, title='Сделано', date=today, completed=True)

    body = auth_client.get('/').json()

    assert body['active_employees'] == 1
    assert body['finance']['total_spent'] == 100000.0
    assert body['finance']['remaining'] == 400000.0
    assert [e['title'] for e in body['calendar_events']] == ['Завтра']
    assert body['tasks']['total'] > 0
    assert body['expenses_by_category'][0]['category'] == 'SALARY'


def test_dashboard_upcoming_tasks_sorted_by_deadline(user):
    checklist = Checklist.objects.create(user=user, title='L')
    for day in (20, 5, 12, 1, 30, 9):
        Task.objects.create(checklist=checklist, text=f't{day}', deadline=date(2024, 1, day))

    data = DashboardService().build(user.id, today=date(2024, 1, 1))

    assert [t['text'] for t in data['upcoming_tasks']] == ['t1', 't5', 't9', 't12', 't20']


def test_days_until_report(user):
    service = DashboardService()

    # Bez terminów: koniec kwartału
    assert service.build(user.id, today=date(2024, 2, 10))['days_until_report'] == 50

    ReportDate.objects.create(project=user.project, title='R', date=date(2024, 2, 15))
    assert service.build(user.id, today=date(2024, 2, 10))['days_until_report'] == 5


def test_dashboard_service_defaults_to_local_today(user, monkeypatch):
    monkeypatch.setattr('django.utils.timezone.localdate', lambda *args, **kwargs: date(2024, 2, 10))

    assert DashboardService().build(user.id)['days_until_report'] == 50
