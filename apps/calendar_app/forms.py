from django import forms

from apps.core.forms import ISODateField
from .models import CalendarEvent


class CalendarEventForm(forms.ModelForm):
    date = ISODateField()
    time = forms.RegexField(regex=r'^([01]\d|2[0-3]):[0-5]\d$', required=False)

    class Meta:
        model = CalendarEvent
        fields = ['title', 'date', 'time', 'location', 'priority', 'description']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['priority'].required = False

    def clean_priority(self):
        return self.cleaned_data.get('priority') or CalendarEvent.PriorityChoices.NORMAL


class MonthQueryForm(forms.Form):
    """Parametry widoku miesiąca (?year=&month=&filter=)."""
    year = forms.IntegerField(min_value=1, max_value=9998, required=False)
    month = forms.IntegerField(min_value=1, max_value=12, required=False)


class DayQueryForm(forms.Form):
    date = ISODateField()
