# apps/calendar_app/views.py
import calendar
import logging

from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_http_methods

from apps.core.conf import app_setting
from apps.core.http import api_login_required, form_errors, json_body, json_error
from .adapters.orm_sources import DjangoEventSourceRepository
from .domain.services import (
    EventAggregator, custom_events, events_in_month, events_on, filter_events,
    month_grid, parse_filter, upcoming,
)
from .forms import CalendarEventForm, DayQueryForm, MonthQueryForm
from .models import CalendarEvent

logger = logging.getLogger(__name__)

MONTH_NAMES_RU = [
    'Январь', 'Февраль', 'Март', 'Апрель', 'Май', 'Июнь',
    'Июль', 'Август', 'Сентябрь', 'Октябрь', 'Ноябрь', 'Декабрь',
]


def _aggregate(request, view_year, today):
    aggregator = EventAggregator(DjangoEventSourceRepository())
    return aggregator.aggregate(request.user.id, view_year, today=today)


def _event_filter(request):
    """Zwraca (wartość filtra, odpowiedź błędu albo None)."""
    value = request.GET.get('filter') or 'all'
    try:
        parse_filter(value)
    except ValueError:
        return value, json_error('Unknown filter', filter=value)
    return value, None


def _serialize(events):
    return [e.to_dict() for e in events]


def _shift_month(year, month, delta):
    # Nawigacja z przejściem przez rok (grudzień -> styczeń)
    index = year * 12 + (month - 1) + delta
    return {'year': index // 12, 'month': index % 12 + 1}


@require_http_methods(["GET"])
@api_login_required
def month_view(request):
    """
    Widok miesiąca: zdarzenia, podsumowanie dni (siatka), tygodnie od poniedziałku,
    nawigacja i lista najbliższych zdarzeń.
    """
    today = timezone.localdate()

    # 1. Parametry
    query = MonthQueryForm(request.GET)
    if not query.is_valid():
        return form_errors(query)
    year = query.cleaned_data.get('year') or today.year
    month = query.cleaned_data.get('month') or today.month

    filter_value, error = _event_filter(request)
    if error:
        return error

    # 2. Agregacja (urodziny liczone dla oglądanego roku)
    events = filter_events(_aggregate(request, year, today), filter_value)
    in_month = events_in_month(events, year, month)
    grid = month_grid(in_month, year, month)

    # 3. Najbliższe zdarzenia zawsze względem dzisiaj
    if year == today.year:
        upcoming_source = events
    else:
        upcoming_source = filter_events(_aggregate(request, today.year, today), filter_value)

    return JsonResponse({
        'year': year,
        'month': month,
        'month_name': MONTH_NAMES_RU[month - 1],
        'filter': filter_value,
        'today': today.isoformat(),
        'events': _serialize(in_month),
        'days': {str(day): summary.to_dict() for day, summary in grid.items()},
        'weeks': calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(year, month),
        'prev': _shift_month(year, month, -1),
        'next': _shift_month(year, month, 1),
        'upcoming': _serialize(upcoming(upcoming_source, today, app_setting('UPCOMING_EVENTS_LIMIT'))),
    })


@require_http_methods(["GET"])
@api_login_required
def day_view(request):
    query = DayQueryForm(request.GET)
    if not query.is_valid():
        return form_errors(query)
    day = query.cleaned_data['date']

    filter_value, error = _event_filter(request)
    if error:
        return error

    events = filter_events(_aggregate(request, day.year, timezone.localdate()), filter_value)
    return JsonResponse({
        'date': day.isoformat(),
        'filter': filter_value,
        'events': _serialize(events_on(events, day)),
    })


@require_http_methods(["GET"])
@api_login_required
def upcoming_view(request):
    filter_value, error = _event_filter(request)
    if error:
        return error

    today = timezone.localdate()
    events = filter_events(_aggregate(request, today.year, today), filter_value)
    return JsonResponse({
        'events': _serialize(upcoming(events, today, app_setting('UPCOMING_EVENTS_LIMIT'))),
    })


def _event_to_dict(event):
    entity = DjangoEventSourceRepository().to_entity(event)
    return custom_events([entity])[0].to_dict()


@require_http_methods(["POST"])
@api_login_required
@json_body
def event_create_view(request):
    form = CalendarEventForm(data=request.json)
    if not form.is_valid():
        return form_errors(form)

    event = form.save(commit=False)
    event.user = request.user
    event.save()
    logger.info("Calendar event %s created for user %s on %s", event.id, request.user.id, event.date)

    return JsonResponse({'event': _event_to_dict(event)}, status=201)


@require_http_methods(["DELETE"])
@api_login_required
def event_delete_view(request, pk):
    event = get_object_or_404(CalendarEvent, pk=pk, user=request.user)
    event.delete()
    return JsonResponse({'success': True})


@require_http_methods(["POST"])
@api_login_required
def event_toggle_view(request, pk):
    event = get_object_or_404(CalendarEvent, pk=pk, user=request.user)
    event.completed = not event.completed
    event.save(update_fields=['completed'])
    return JsonResponse({'event': _event_to_dict(event)})
