import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    # Liczniki limitera żyją w cache - każdy test zaczyna od zera
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='founder', email='founder@example.com', password='secret')


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username='intruder', password='secret')


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
