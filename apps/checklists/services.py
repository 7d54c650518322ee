# apps/checklists/services.py
from typing import Iterable, List, Optional

from django.db import transaction
from django.db.models import Count, Q

from .defaults import DEFAULT_CHECKLISTS
from .domain.entities import ChecklistTaskEntity
from .models import Checklist, Task


class ChecklistService:
    @transaction.atomic
    def create_checklist(self, user, title: str, category: Optional[str] = None,
                         task_texts: Iterable[str] = ()) -> Checklist:
        checklist = Checklist.objects.create(user=user, title=title, category=category or None)
        Task.objects.bulk_create([
            Task(checklist=checklist, text=text) for text in task_texts if text and text.strip()
        ])
        return checklist

    def create_default_checklists(self, user) -> List[Checklist]:
        # Nie dublujemy przy ponownym wywołaniu
        if Checklist.objects.filter(user=user).exists():
            return []
        return [
            self.create_checklist(user, title, category, tasks)
            for title, category, tasks in DEFAULT_CHECKLISTS
        ]

    def toggle_task(self, task: Task) -> Task:
        task.completed = not task.completed
        task.save(update_fields=['completed'])
        return task

    def list_incomplete_tasks_with_deadline(self, user_id: int) -> List[ChecklistTaskEntity]:
        """Niewykonane zadania z terminem (źródło dla kalendarza i dashboardu), wg terminu."""
        qs = Task.objects.filter(
            checklist__user_id=user_id,
            completed=False,
            deadline__isnull=False,
        ).select_related('checklist').order_by('deadline', 'id')

        return [
            ChecklistTaskEntity(
                id=t.id,
                text=t.text,
                checklist_title=t.checklist.title,
                deadline=t.deadline,
                completed=t.completed,
            )
            for t in qs
        ]

    def task_stats(self, user_id: int) -> dict:
        stats = Task.objects.filter(checklist__user_id=user_id).aggregate(
            total=Count('id'),
            completed=Count('id', filter=Q(completed=True))
        )
        return {'total': stats['total'], 'completed': stats['completed']}


def checklist_to_dict(checklist: Checklist) -> dict:
    tasks = list(checklist.tasks.all())
    return {
        'id': checklist.id,
        'title': checklist.title,
        'category': checklist.category,
        'progress': checklist.progress,
        'created_at': checklist.created_at.isoformat(),
        'tasks': [task_to_dict(t) for t in tasks],
    }


def task_to_dict(task: Task) -> dict:
    return {
        'id': task.id,
        'text': task.text,
        'completed': task.completed,
        'deadline': task.deadline.isoformat() if task.deadline else None,
    }
