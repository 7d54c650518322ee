# apps/calendar_app/ports/event_sources.py
from abc import ABC, abstractmethod
from typing import List

from apps.calendar_app.domain.entities import CalendarEventEntity
from apps.checklists.domain.entities import ChecklistTaskEntity
from apps.hr.domain.entities import EmployeeEntity
from apps.projects.domain.entities import ReportDateEntity


class IEventSourceRepository(ABC):
    """Źródła surowych danych dla agregatora kalendarza (tylko odczyt)."""

    @abstractmethod
    def list_birthdays(self, user_id: int) -> List[EmployeeEntity]:
        """Aktywni pracownicy z datą urodzenia."""
        pass

    @abstractmethod
    def list_open_deadlines(self, user_id: int) -> List[ChecklistTaskEntity]:
        """Niewykonane zadania z check-list, które mają termin."""
        pass

    @abstractmethod
    def list_report_dates(self, user_id: int) -> List[ReportDateEntity]:
        pass

    @abstractmethod
    def list_user_events(self, user_id: int) -> List[CalendarEventEntity]:
        pass
