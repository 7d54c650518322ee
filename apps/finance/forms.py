from decimal import Decimal

from django import forms
from django.utils import timezone

from apps.core.forms import ISODateField
from .models import Transaction


class TransactionForm(forms.ModelForm):
    """Walidacja na wejściu: kwota > 0, kategoria z zamkniętej listy, poprawna data."""
    date = ISODateField(required=False)

    class Meta:
        model = Transaction
        fields = ['description', 'amount', 'category', 'date']

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if amount is not None and amount <= Decimal('0'):
            raise forms.ValidationError("Сумма должна быть больше нуля")
        return amount

    def clean_date(self):
        # Brak daty = dzisiaj
        return self.cleaned_data.get('date') or timezone.localdate()
