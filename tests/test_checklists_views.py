import pytest

from apps.checklists.defaults import DEFAULT_CHECKLISTS
from apps.checklists.models import Checklist, Task

pytestmark = pytest.mark.django_db


def test_new_user_gets_default_checklists(user):
    assert Checklist.objects.filter(user=user).count() == len(DEFAULT_CHECKLISTS)
    assert Task.objects.filter(checklist__user=user, deadline__isnull=False).count() == 0


def test_list_filters_by_category(auth_client):
    body = auth_client.get('/checklists/', {'category': 'HR'}).json()
    assert {c['category'] for c in body['checklists']} == {'HR'}

    general = auth_client.get('/checklists/', {'category': 'general'}).json()
    assert {c['category'] for c in general['checklists']} == {None}


def test_create_checklist_with_tasks(auth_client):
    response = auth_client.post(
        '/checklists/', {'title': 'Запуск сайта', 'category': 'FINANCE', 'tasks': ['Домен', ' ', 'Хостинг']},
        content_type='application/json',
    )

    assert response.status_code == 201
    checklist = response.json()['checklist']
    assert [t['text'] for t in checklist['tasks']] == ['Домен', 'Хостинг']
    assert checklist['progress'] == 0


def test_create_checklist_requires_title(auth_client):
    response = auth_client.post('/checklists/', {'tasks': []}, content_type='application/json')
    assert response.status_code == 400


def test_toggle_task_updates_progress(auth_client, user):
    checklist = Checklist.objects.create(user=user, title='Мини')
    first = Task.objects.create(checklist=checklist, text='a')
    Task.objects.create(checklist=checklist, text='b')

    response = auth_client.post(f'/checklists/tasks/{first.id}/toggle/')

    assert response.status_code == 200
    assert response.json()['task']['completed'] is True
    assert response.json()['progress'] == 50


def test_add_task_with_deadline(auth_client, user):
    checklist = Checklist.objects.create(user=user, title='Мини')

    response = auth_client.post(
        f'/checklists/{checklist.id}/tasks/', {'text': 'Сдать отчёт', 'deadline': '2024-05-01'},
        content_type='application/json',
    )

    assert response.status_code == 201
    assert response.json()['task']['deadline'] == '2024-05-01'


def test_foreign_checklist_is_not_found(auth_client, other_user):
    foreign = Checklist.objects.filter(user=other_user).first()

    assert auth_client.delete(f'/checklists/{foreign.id}/').status_code == 404
    task = foreign.tasks.first()
    assert auth_client.post(f'/checklists/tasks/{task.id}/toggle/').status_code == 404


def test_delete_task(auth_client, user):
    checklist = Checklist.objects.create(user=user, title='Мини')
    task = Task.objects.create(checklist=checklist, text='a', completed=True)
    Task.objects.create(checklist=checklist, text='b')

    response = auth_client.delete(f'/checklists/tasks/{task.id}/')

    assert response.json() == {'success': True, 'progress': 0}
