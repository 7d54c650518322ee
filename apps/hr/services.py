# apps/hr/services.py
from typing import List

from .domain.entities import EmployeeEntity, EmployeeStatus
from .models import Employee


class EmployeeService:
    def to_entity(self, model: Employee) -> EmployeeEntity:
        return EmployeeEntity(
            id=model.id,
            name=model.name,
            position=model.position,
            hire_date=model.hire_date,
            birth_date=model.birth_date,
            status=EmployeeStatus(model.status),
        )

    def list_active_with_birthdays(self, user_id: int) -> List[EmployeeEntity]:
        qs = Employee.objects.filter(
            user_id=user_id,
            status=Employee.StatusChoices.ACTIVE,
            birth_date__isnull=False,
        )
        return [self.to_entity(e) for e in qs]

    def active_count(self, user_id: int) -> int:
        return Employee.objects.filter(user_id=user_id, status=Employee.StatusChoices.ACTIVE).count()


def employee_to_dict(employee: Employee) -> dict:
    return {
        'id': employee.id,
        'name': employee.name,
        'initials': employee.initials,
        'position': employee.position,
        'hire_date': employee.hire_date.isoformat(),
        'birth_date': employee.birth_date.isoformat() if employee.birth_date else None,
        'status': employee.status,
        'military_status': employee.military_status,
        'created_at': employee.created_at.isoformat(),
    }
