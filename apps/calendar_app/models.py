# apps/calendar_app/models.py
from django.db import models
from django.conf import settings


class CalendarEvent(models.Model):
    """Zdarzenie dodane ręcznie przez użytkownika (jedyny typ z pełnym CRUD)."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='calendar_events')
    title = models.CharField(max_length=200)
    date = models.DateField()
    time = models.CharField(max_length=5, blank=True, default='')  # "HH:MM"
    location = models.CharField(max_length=200, blank=True, default='')

    class PriorityChoices(models.TextChoices):
        NORMAL = 'NORMAL', 'Обычное'
        IMPORTANT = 'IMPORTANT', 'Важное'
        URGENT = 'URGENT', 'Срочное'

    priority = models.CharField(max_length=10, choices=PriorityChoices.choices, default=PriorityChoices.NORMAL)
    description = models.TextField(blank=True, default='')
    completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['date', 'time', 'id']
        indexes = [models.Index(fields=['user', 'date'], name='calendar_event_user_date_idx')]

    def __str__(self):
        return f"{self.date} {self.title}"
