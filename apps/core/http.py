# apps/core/http.py
import json
from functools import wraps

from django.http import JsonResponse


def json_error(message, status=400, **extra):
    payload = {'error': message}
    payload.update(extra)
    return JsonResponse(payload, status=status)


def form_errors(form):
    """Odpowiedź 400 z błędami walidacji formularza (pole -> lista komunikatów)."""
    fields = {name: [str(e) for e in errors] for name, errors in form.errors.items()}
    return json_error('Validation error', status=400, fields=fields)


def api_login_required(view_func):
    """Jak login_required, ale dla API: 401 zamiast przekierowania na stronę logowania."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error('Unauthorized', status=401)
        return view_func(request, *args, **kwargs)
    return _wrapped


def json_body(view_func):
    """
    Parsuje ciało żądania (JSON obiekt) do request.json.
    Puste ciało -> {}. Zły JSON albo nie-obiekt -> 400.
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        request.json = {}
        if request.method in ('POST', 'PUT', 'PATCH') and request.body:
            try:
                payload = json.loads(request.body)
            except (ValueError, UnicodeDecodeError):
                return json_error('Invalid JSON body')
            if not isinstance(payload, dict):
                return json_error('Invalid JSON body')
            request.json = payload
        return view_func(request, *args, **kwargs)
    return _wrapped
