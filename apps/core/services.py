# apps/core/services.py
from datetime import date
from typing import Optional

from django.utils import timezone

from apps.calendar_app.adapters.orm_sources import DjangoEventSourceRepository
from apps.calendar_app.domain.services import custom_events, days_until_next_report
from apps.checklists.services import ChecklistService
from apps.core.conf import app_setting
from apps.finance.adapters.orm_repositories import DjangoTransactionRepository
from apps.finance.services.ledger_service import LedgerService
from apps.hr.services import EmployeeService
from apps.projects.services.project_service import ProjectService


class DashboardService:
    """Zbiera dane strony głównej z kilku modułów (tylko odczyt)."""

    def __init__(self, project_service=None, checklist_service=None, employee_service=None,
                 ledger_service=None, event_sources=None):
        self.project_service = project_service or ProjectService()
        self.checklist_service = checklist_service or ChecklistService()
        self.employee_service = employee_service or EmployeeService()
        self.ledger_service = ledger_service or LedgerService(
            DjangoTransactionRepository(), project_service=self.project_service,
        )
        self.event_sources = event_sources or DjangoEventSourceRepository()

    def build(self, user_id: int, today: Optional[date] = None) -> dict:
        today = today or timezone.localdate()

        # 1. Check-listy i kadry
        task_stats = self.checklist_service.task_stats(user_id)
        deadlines = self.checklist_service.list_incomplete_tasks_with_deadline(user_id)

        # 2. Finanse
        ledger = self.ledger_service.ledger_for(user_id)

        # 3. Kalendarz: niewykonane własne zdarzenia od dzisiaj
        own_events = [
            e for e in self.event_sources.list_user_events(user_id)
            if not e.completed and e.date >= today
        ]
        own_events.sort(key=lambda e: (e.date, e.time or ''))

        # 4. Najbliższy raport
        project = self.project_service.get_snapshot(user_id)
        report_dates = project.report_dates if project else []

        return {
            'tasks': task_stats,
            'active_employees': self.employee_service.active_count(user_id),
            'finance': {
                'grant_amount': float(ledger.grant_amount),
                'total_spent': float(ledger.total_spent()),
                'remaining': float(ledger.remaining()),
                'spent_percentage': ledger.spent_percentage(),
            },
            'expenses_by_category': [
                {'category': row['category'], 'name': row['label'], 'value': row['amount'], 'color': row['color']}
                for row in ledger.category_breakdown()
            ],
            'monthly_expenses': ledger.monthly_breakdown(last=app_setting('ANALYTICS_MONTHS')),
            'upcoming_tasks': [t.to_dict() for t in deadlines[:app_setting('DASHBOARD_UPCOMING_TASKS')]],
            'calendar_events': [
                e.to_dict() for e in custom_events(own_events[:app_setting('DASHBOARD_CALENDAR_EVENTS')])
            ],
            'project': project.to_dict() if project else None,
            'days_until_report': days_until_next_report(report_dates, today),
        }
