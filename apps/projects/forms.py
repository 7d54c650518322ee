from datetime import date, timedelta
from decimal import Decimal

from django import forms

from apps.calendar_app.domain.services import REPORT_REMINDER_DAYS
from apps.core.forms import ISODateField
from .models import Project, ReportDate


class ProjectForm(forms.ModelForm):
    class Meta:
        model = Project
        fields = ['name', 'grant_amount']

    def clean_grant_amount(self):
        amount = self.cleaned_data.get('grant_amount')
        if amount is not None and amount <= Decimal('0'):
            raise forms.ValidationError("Сумма гранта должна быть больше нуля")
        return amount


class ReportDateForm(forms.ModelForm):
    date = ISODateField()

    class Meta:
        model = ReportDate
        fields = ['title', 'date']

    def clean_date(self):
        # Przed terminem musi zmieścić się 5 dni przypomnień
        value = self.cleaned_data.get('date')
        if value is not None and value < date.min + timedelta(days=max(REPORT_REMINDER_DAYS)):
            raise forms.ValidationError("Некорректная дата отчёта")
        return value
