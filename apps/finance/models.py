# apps/finance/models.py
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Transaction(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='transactions')
    description = models.CharField(max_length=255)

    # Zawsze dodatnia kwota (wydatek), znak wynika z kontekstu
    amount = models.DecimalField(
        max_digits=14, decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )

    # Używamy TextChoices dla wygody w Adminie, ale mapujemy to na Enum domenowy
    class CategoryChoices(models.TextChoices):
        SALARY = 'SALARY', 'Заработная плата'
        TAXES = 'TAXES', 'Налоги'
        EQUIPMENT = 'EQUIPMENT', 'Оборудование'
        SERVICES = 'SERVICES', 'Услуги сторонних лиц'
        OTHER = 'OTHER', 'Прочие расходы'

    category = models.CharField(max_length=20, choices=CategoryChoices.choices)

    # Data wydatku (do wykresów miesięcznych), nie data utworzenia rekordu
    date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['user', 'date'], name='finance_tx_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.description} ({self.amount})"
