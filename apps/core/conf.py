# apps/core/conf.py
from django.conf import settings

DEFAULTS = {
    'DEFAULT_GRANT_AMOUNT': 500000,
    'UPCOMING_EVENTS_LIMIT': 10,
    'DASHBOARD_UPCOMING_TASKS': 5,
    'DASHBOARD_CALENDAR_EVENTS': 5,
    'ANALYTICS_MONTHS': 6,
    'SUPPORT_RATE_LIMIT': {'limit': 20, 'window_seconds': 60},
    'SUPPORT_MESSAGE_MAX_LENGTH': 2000,
}


def app_setting(name):
    """Zwraca ustawienie z settings.STARTUP_HELPER (lub wartość domyślną)."""
    overrides = getattr(settings, 'STARTUP_HELPER', {}) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
