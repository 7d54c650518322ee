# apps/projects/models.py
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Project(models.Model):
    # Każdy użytkownik ma dokładnie jeden projekt grantowy
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='project')
    name = models.CharField(max_length=200)

    grant_amount = models.DecimalField(
        max_digits=14, decimal_places=2,
        default=Decimal('500000'),
        validators=[MinValueValidator(Decimal('0.01'))],
    )

    # Cache sumy wydatków (przeliczany przy każdej zmianie transakcji, best-effort)
    spent_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name


class ReportDate(models.Model):
    """Termin oddania raportu z grantu (kamień milowy)."""
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='report_dates')
    title = models.CharField(max_length=200)
    date = models.DateField()

    class Meta:
        ordering = ['date', 'id']

    def __str__(self):
        return f"{self.title} ({self.date})"
