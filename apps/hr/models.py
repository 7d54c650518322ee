# apps/hr/models.py
from django.db import models
from django.conf import settings


class Employee(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='employees')
    name = models.CharField(max_length=200)
    position = models.CharField(max_length=200)

    hire_date = models.DateField()
    # Urodziny aktywnych pracowników trafiają do kalendarza (co roku)
    birth_date = models.DateField(null=True, blank=True)

    class StatusChoices(models.TextChoices):
        ACTIVE = 'ACTIVE', 'Работает'
        DISMISSED = 'DISMISSED', 'Уволен'

    status = models.CharField(max_length=20, choices=StatusChoices.choices, default=StatusChoices.ACTIVE)

    class MilitaryStatusChoices(models.TextChoices):
        UPDATED = 'UPDATED', 'Данные актуальны'
        NEEDS_UPDATE = 'NEEDS_UPDATE', 'Требует обновления'
        NOT_APPLICABLE = 'NOT_APPLICABLE', 'Не подлежит'

    military_status = models.CharField(
        max_length=20,
        choices=MilitaryStatusChoices.choices,
        default=MilitaryStatusChoices.NOT_APPLICABLE
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} ({self.position})"

    @property
    def initials(self):
        return ''.join(part[0] for part in self.name.split()[:2]).upper()
