# apps/calendar_app/domain/entities.py
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Set


class Priority(str, Enum):
    NORMAL = 'NORMAL'
    IMPORTANT = 'IMPORTANT'
    URGENT = 'URGENT'

    @property
    def rank(self) -> int:
        # URGENT > IMPORTANT > NORMAL
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.NORMAL: 0,
    Priority.IMPORTANT: 1,
    Priority.URGENT: 2,
}


class EventType(str, Enum):
    CUSTOM = 'custom'
    BIRTHDAY = 'birthday'
    DEADLINE = 'deadline'
    FINANCE = 'finance'
    REPORT = 'report'


@dataclass
class AggregatedEvent:
    """Znormalizowane zdarzenie kalendarza (wyliczane przy każdym widoku, nie zapisywane)."""
    id: str
    title: str
    date: date
    priority: Priority
    type: EventType
    time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date.isoformat(),
            'time': self.time,
            'location': self.location,
            'priority': self.priority.value,
            'type': self.type.value,
            'description': self.description,
            'completed': self.completed,
        }


@dataclass
class CalendarEventEntity:
    """Zdarzenie utworzone ręcznie przez użytkownika."""
    id: Optional[int]
    title: str
    date: date
    priority: Priority = Priority.NORMAL
    time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False


@dataclass
class DaySummary:
    date: date
    count: int = 0
    highest_priority: Optional[Priority] = None
    types: Set[EventType] = field(default_factory=set)

    def add(self, event: AggregatedEvent):
        self.count += 1
        self.types.add(event.type)
        if self.highest_priority is None or event.priority.rank > self.highest_priority.rank:
            self.highest_priority = event.priority

    def to_dict(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'count': self.count,
            'highest_priority': self.highest_priority.value if self.highest_priority else None,
            # Stała kolejność typów (kolorowe kropki w siatce)
            'types': [t.value for t in EventType if t in self.types],
        }
