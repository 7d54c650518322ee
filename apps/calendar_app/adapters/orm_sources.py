# apps/calendar_app/adapters/orm_sources.py
from typing import List

from apps.calendar_app.domain.entities import CalendarEventEntity, Priority
from apps.calendar_app.models import CalendarEvent
from apps.calendar_app.ports.event_sources import IEventSourceRepository
from apps.checklists.domain.entities import ChecklistTaskEntity
from apps.checklists.services import ChecklistService
from apps.hr.domain.entities import EmployeeEntity
from apps.hr.services import EmployeeService
from apps.projects.domain.entities import ReportDateEntity
from apps.projects.services.project_service import ProjectService


class DjangoEventSourceRepository(IEventSourceRepository):
    def __init__(self, employee_service=None, checklist_service=None, project_service=None):
        self.employee_service = employee_service or EmployeeService()
        self.checklist_service = checklist_service or ChecklistService()
        self.project_service = project_service or ProjectService()

    def to_entity(self, model: CalendarEvent) -> CalendarEventEntity:
        return CalendarEventEntity(
            id=model.id,
            title=model.title,
            date=model.date,
            priority=Priority(model.priority),
            time=model.time or None,
            location=model.location or None,
            description=model.description or None,
            completed=model.completed,
        )

    def list_birthdays(self, user_id: int) -> List[EmployeeEntity]:
        return self.employee_service.list_active_with_birthdays(user_id)

    def list_open_deadlines(self, user_id: int) -> List[ChecklistTaskEntity]:
        return self.checklist_service.list_incomplete_tasks_with_deadline(user_id)

    def list_report_dates(self, user_id: int) -> List[ReportDateEntity]:
        return self.project_service.list_report_dates(user_id)

    def list_user_events(self, user_id: int) -> List[CalendarEventEntity]:
        qs = CalendarEvent.objects.filter(user_id=user_id).order_by('date', 'time', 'id')
        return [self.to_entity(e) for e in qs]
