import django_filters
from .models import Employee


class EmployeeFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Имя содержит",
    )
    status = django_filters.ChoiceFilter(
        choices=Employee.StatusChoices.choices,
        label="Статус",
    )
    military_status = django_filters.ChoiceFilter(
        choices=Employee.MilitaryStatusChoices.choices,
        label="Воинский учёт",
    )

    class Meta:
        model = Employee
        fields = ['status', 'military_status']
