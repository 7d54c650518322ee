# apps/calendar_app/domain/services.py
import logging
from collections import OrderedDict
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from apps.calendar_app.domain.entities import (
    AggregatedEvent, CalendarEventEntity, DaySummary, EventType, Priority,
)
from apps.calendar_app.ports.event_sources import IEventSourceRepository

logger = logging.getLogger(__name__)

# Przypomnienia przed terminem raportu: 5, 4, 3, 2, 1 dni wcześniej
REPORT_REMINDER_DAYS = (5, 4, 3, 2, 1)
URGENT_REMINDER_DAYS = 2

QUARTER_REPORT_TITLES = {
    1: 'Отчёт за 1 квартал',
    2: 'Отчёт за 2 квартал',
    3: 'Отчёт за 3 квартал',
    4: 'Годовой отчёт',
}
TAX_PAYMENT_DAY = 25
QUARTER_REPORT_DAY = 15

# Alias z frontendu: "user" == zdarzenia własne
FILTER_ALIASES = {'user': EventType.CUSTOM}


def days_word(n: int) -> str:
    """Rosyjska odmiana słowa "день": 1 день, 2 дня, 5 дней, 11 дней, 21 день."""
    n = abs(n)
    if 11 <= n % 100 <= 14:
        return 'дней'
    last = n % 10
    if last == 1:
        return 'день'
    if 2 <= last <= 4:
        return 'дня'
    return 'дней'


def _anniversary(born: date, year: int) -> date:
    try:
        return born.replace(year=year)
    except ValueError:
        # 29 lutego w roku nieprzestępnym -> 1 marca
        return date(year, 3, 1)


# --- Generatory (czyste funkcje) ---

def birthday_events(employees: Iterable, year: int) -> List[AggregatedEvent]:
    """Jedno zdarzenie na pracownika w oglądanym roku (powtarzalność bez harmonogramu)."""
    events = []
    for employee in employees:
        if not employee.has_birthday_event():
            continue
        events.append(AggregatedEvent(
            id=f"birthday-{employee.id}",
            title=f"День рождения: {employee.name}",
            date=_anniversary(employee.birth_date, year),
            priority=Priority.NORMAL,
            type=EventType.BIRTHDAY,
        ))
    return events


def deadline_events(tasks: Iterable) -> List[AggregatedEvent]:
    events = []
    for task in tasks:
        # Wykonane zadania znikają z kalendarza, nawet przeterminowane
        if task.completed or task.deadline is None:
            continue
        events.append(AggregatedEvent(
            id=f"deadline-{task.id}",
            title=f"{task.checklist_title}: {task.text}",
            date=task.deadline,
            priority=Priority.IMPORTANT,
            type=EventType.DEADLINE,
        ))
    return events


def finance_reminders(year: int) -> List[AggregatedEvent]:
    """
    Stałe przypomnienia finansowe dla roku:
    - raporty kwartalne 15. dnia miesiąca po końcu kwartału (IV kwartał -> styczeń następnego roku),
    - podatki 25. dnia każdego miesiąca.
    """
    events = []

    for quarter, title in QUARTER_REPORT_TITLES.items():
        quarter_end = date(year, quarter * 3, QUARTER_REPORT_DAY)
        due = quarter_end + relativedelta(months=1)
        events.append(AggregatedEvent(
            id=f"finance-q{quarter}-{year}",
            title=title,
            date=due,
            priority=Priority.IMPORTANT,
            type=EventType.FINANCE,
        ))

    for month in range(1, 13):
        events.append(AggregatedEvent(
            id=f"tax-{month}-{year}",
            title='Уплата налогов',
            date=date(year, month, TAX_PAYMENT_DAY),
            priority=Priority.URGENT,
            type=EventType.FINANCE,
        ))

    return events


def report_deadline_events(report_dates: Iterable) -> List[AggregatedEvent]:
    """Termin raportu (URGENT) + odliczanie 5..1 dni przed nim."""
    events = []
    for report in report_dates:
        events.append(AggregatedEvent(
            id=f"report-{report.id}",
            title=f"Сдача отчёта: {report.title}",
            date=report.date,
            priority=Priority.URGENT,
            type=EventType.REPORT,
        ))
        for days_before in REPORT_REMINDER_DAYS:
            # Przypomnienie wypadłoby przed date.min - pomijamy
            if (report.date - date.min).days < days_before:
                continue
            priority = Priority.URGENT if days_before <= URGENT_REMINDER_DAYS else Priority.IMPORTANT
            events.append(AggregatedEvent(
                id=f"report-{report.id}-{days_before}d",
                title=f"{report.title}: осталось {days_before} {days_word(days_before)}",
                date=report.date - timedelta(days=days_before),
                priority=priority,
                type=EventType.REPORT,
            ))
    return events


def custom_events(calendar_events: Iterable[CalendarEventEntity]) -> List[AggregatedEvent]:
    return [
        AggregatedEvent(
            id=f"custom-{e.id}",
            title=e.title,
            date=e.date,
            priority=Priority(e.priority),
            type=EventType.CUSTOM,
            time=e.time,
            location=e.location,
            description=e.description,
            completed=e.completed,
        )
        for e in calendar_events
    ]


# --- Operacje na strumieniu ---

def sort_key(event: AggregatedEvent):
    return (event.date, event.time or '', -event.priority.rank)


def parse_filter(value: Optional[str]) -> Optional[EventType]:
    """None/'all' -> brak filtra. Nieznana wartość -> ValueError."""
    if not value or value == 'all':
        return None
    if value in FILTER_ALIASES:
        return FILTER_ALIASES[value]
    return EventType(value)


def filter_events(events: Iterable[AggregatedEvent], value: Optional[str]) -> List[AggregatedEvent]:
    event_type = parse_filter(value)
    if event_type is None:
        return list(events)
    return [e for e in events if e.type == event_type]


def events_on(events: Iterable[AggregatedEvent], day: date) -> List[AggregatedEvent]:
    return [e for e in events if e.date == day]


def events_in_month(events: Iterable[AggregatedEvent], year: int, month: int) -> List[AggregatedEvent]:
    return [e for e in events if e.date.year == year and e.date.month == month]


def month_grid(events: Iterable[AggregatedEvent], year: int, month: int) -> Dict[int, DaySummary]:
    """Podsumowanie dni miesiąca: liczba zdarzeń, najwyższy priorytet, typy."""
    grid: Dict[int, DaySummary] = OrderedDict()
    for event in sorted(events_in_month(events, year, month), key=sort_key):
        summary = grid.get(event.date.day)
        if summary is None:
            summary = grid[event.date.day] = DaySummary(date=event.date)
        summary.add(event)
    return grid


def upcoming(events: Iterable[AggregatedEvent], today: date, limit: int = 10) -> List[AggregatedEvent]:
    future = [e for e in events if e.date >= today]
    return sorted(future, key=sort_key)[:limit]


def days_until_next_report(report_dates: Iterable, today: date) -> int:
    """
    Dni do najbliższego terminu raportu (dziś lub później).
    Bez terminów w projekcie: do końca bieżącego kwartału kalendarzowego.
    """
    upcoming_dates = [rd.date for rd in report_dates if rd.date >= today]
    if upcoming_dates:
        target = min(upcoming_dates)
    else:
        quarter_end_month = ((today.month - 1) // 3 + 1) * 3
        target = date(today.year, quarter_end_month, 1) + relativedelta(day=31)
    return (target - today).days


class EventAggregator:
    """
    Łączy wszystkie źródła zdarzeń w jeden posortowany strumień.
    Błąd pojedynczego źródła nie przerywa agregacji - źródło daje pustą listę.
    """

    def __init__(self, sources: IEventSourceRepository):
        self.sources = sources

    def _fetch(self, name: str, fetch: Callable[[int], list], user_id: int) -> list:
        try:
            return list(fetch(user_id))
        except Exception:
            logger.exception("Calendar source '%s' failed for user %s, skipping", name, user_id)
            return []

    def aggregate(self, user_id: int, view_year: int, today: Optional[date] = None) -> List[AggregatedEvent]:
        today = today or timezone.localdate()

        # 1. Pobierz surowe dane (każde źródło osobno)
        employees = self._fetch('birthdays', self.sources.list_birthdays, user_id)
        tasks = self._fetch('deadlines', self.sources.list_open_deadlines, user_id)
        report_dates = self._fetch('report_dates', self.sources.list_report_dates, user_id)
        user_events = self._fetch('user_events', self.sources.list_user_events, user_id)

        # 2. Normalizacja
        events: List[AggregatedEvent] = []
        events += custom_events(user_events)
        events += birthday_events(employees, view_year)
        events += deadline_events(tasks)
        events += finance_reminders(today.year)
        events += report_deadline_events(report_dates)

        # 3. Scal i posortuj chronologicznie
        events.sort(key=sort_key)
        return events
