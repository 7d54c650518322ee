# apps/support/models.py
from django.db import models
from django.conf import settings


class SupportMessage(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='support_messages')
    text = models.TextField()

    class SenderChoices(models.TextChoices):
        USER = 'USER', 'Пользователь'
        SUPPORT = 'SUPPORT', 'Поддержка'

    sender = models.CharField(max_length=10, choices=SenderChoices.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"[{self.sender}] {self.text[:50]}"
