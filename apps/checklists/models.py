# apps/checklists/models.py
from django.db import models
from django.conf import settings


class Checklist(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='checklists')
    title = models.CharField(max_length=200)

    class CategoryChoices(models.TextChoices):
        HR = 'HR', 'Кадры'
        FINANCE = 'FINANCE', 'Финансы'

    # Brak kategorii = lista ogólna
    category = models.CharField(max_length=20, choices=CategoryChoices.choices, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    @property
    def progress(self):
        tasks = list(self.tasks.all())
        if not tasks: return 0
        done = sum(1 for t in tasks if t.completed)
        return int((done / len(tasks)) * 100)


class Task(models.Model):
    checklist = models.ForeignKey(Checklist, on_delete=models.CASCADE, related_name='tasks')

    text = models.CharField(max_length=255)
    completed = models.BooleanField(default=False)

    # Zadanie z terminem trafia do kalendarza (dopóki nie jest wykonane)
    deadline = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.text
