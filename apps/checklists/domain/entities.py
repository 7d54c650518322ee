# apps/checklists/domain/entities.py
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class ChecklistTaskEntity:
    id: Optional[int]
    text: str
    checklist_title: str
    deadline: Optional[date] = None
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'text': self.text,
            'checklist_title': self.checklist_title,
            'deadline': self.deadline.isoformat() if self.deadline else None,
            'completed': self.completed,
        }
