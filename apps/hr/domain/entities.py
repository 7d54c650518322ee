# apps/hr/domain/entities.py
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class EmployeeStatus(str, Enum):
    ACTIVE = 'ACTIVE'
    DISMISSED = 'DISMISSED'


@dataclass
class EmployeeEntity:
    id: Optional[int]
    name: str
    position: str = ""
    hire_date: Optional[date] = None
    birth_date: Optional[date] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    def has_birthday_event(self) -> bool:
        """Tylko aktywni pracownicy z datą urodzenia trafiają do kalendarza."""
        return self.status == EmployeeStatus.ACTIVE and self.birth_date is not None
