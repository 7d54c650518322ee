# apps/projects/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List


@dataclass
class ReportDateEntity:
    id: Optional[int]
    title: str
    date: date

    def to_dict(self) -> dict:
        return {'id': self.id, 'title': self.title, 'date': self.date.isoformat()}


@dataclass
class ProjectEntity:
    id: Optional[int]
    name: str
    grant_amount: Decimal = Decimal('500000')
    spent_amount: Decimal = Decimal('0')  # cache, może być chwilowo nieaktualny
    created_at: Optional[datetime] = None

    # Terminy raportów
    report_dates: List[ReportDateEntity] = field(default_factory=list)

    def next_report_date(self, today: date) -> Optional[ReportDateEntity]:
        """Najbliższy termin raportu w dniu dzisiejszym lub później."""
        upcoming = [rd for rd in self.report_dates if rd.date >= today]
        if not upcoming:
            return None
        return min(upcoming, key=lambda rd: rd.date)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'grant_amount': float(self.grant_amount),
            'spent_amount': float(self.spent_amount),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'report_dates': [rd.to_dict() for rd in self.report_dates],
        }
