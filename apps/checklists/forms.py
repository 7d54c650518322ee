from django import forms

from apps.core.forms import ISODateField
from .models import Checklist, Task


class ChecklistForm(forms.ModelForm):
    class Meta:
        model = Checklist
        fields = ['title', 'category']


class TaskForm(forms.ModelForm):
    deadline = ISODateField(required=False)

    class Meta:
        model = Task
        fields = ['text', 'deadline']
