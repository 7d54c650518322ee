from datetime import date, datetime

from dateutil.parser import isoparse
from django import forms
from django.core.exceptions import ValidationError


class ISODateField(forms.DateField):
    """DateField akceptujący pełne ISO-8601 (np. '2024-04-15T00:00:00Z' z przeglądarki)."""

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return isoparse(str(value).strip()).date()
        except (ValueError, OverflowError):
            raise ValidationError(self.error_messages['invalid'], code='invalid')


class ProfileForm(forms.Form):
    name = forms.CharField(max_length=150, required=False)
    phone = forms.CharField(max_length=32, required=False)
    inn = forms.RegexField(regex=r'^(\d{10}|\d{12})?$', required=False)
    ogrn = forms.RegexField(regex=r'^(\d{13}|\d{15})?$', required=False)


class SubscribeForm(forms.Form):
    TIERS = [('pro', 'Pro'), ('business', 'Business')]

    tier_id = forms.ChoiceField(choices=TIERS)
    is_annual = forms.BooleanField(required=False)
