from django import forms

from apps.core.forms import ISODateField
from .models import Employee


class EmployeeForm(forms.ModelForm):
    hire_date = ISODateField()
    birth_date = ISODateField(required=False)

    class Meta:
        model = Employee
        fields = ['name', 'position', 'hire_date', 'birth_date', 'military_status']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['military_status'].required = False

    def clean_military_status(self):
        return self.cleaned_data.get('military_status') or Employee.MilitaryStatusChoices.NOT_APPLICABLE


class EmployeeUpdateForm(forms.ModelForm):
    """Edycja ograniczona do statusu, statusu wojskowego i daty urodzenia."""
    birth_date = ISODateField(required=False)

    class Meta:
        model = Employee
        fields = ['status', 'military_status', 'birth_date']
