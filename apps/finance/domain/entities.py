# apps/finance/domain/entities.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Category(str, Enum):
    SALARY = 'SALARY'
    TAXES = 'TAXES'
    EQUIPMENT = 'EQUIPMENT'
    SERVICES = 'SERVICES'
    OTHER = 'OTHER'


@dataclass(frozen=True)
class CategoryMeta:
    label: str
    color: str
    limit_percent: Optional[Decimal] = None  # limit względem całego grantu (None = brak limitu)


# Metadane kategorii w jednym miejscu (etykieta, kolor wykresu, limit)
CATEGORY_META = {
    Category.SALARY: CategoryMeta('Заработная плата', '#3B82F6'),
    Category.TAXES: CategoryMeta('Налоги', '#EF4444'),
    Category.EQUIPMENT: CategoryMeta('Оборудование', '#10B981'),
    Category.SERVICES: CategoryMeta('Услуги сторонних лиц', '#8B5CF6', limit_percent=Decimal('25')),
    Category.OTHER: CategoryMeta('Прочие расходы', '#F59E0B'),
}


@dataclass
class TransactionEntity:
    id: Optional[int]  # ID może być None przed zapisem
    description: str
    amount: Decimal
    category: Category
    date: date
    user_id: Optional[int] = None

    def __post_init__(self):
        # Kwota zawsze jako dodatnia wartość (znak wynika z kontekstu)
        self.amount = abs(Decimal(str(self.amount)))
        self.category = Category(self.category)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'description': self.description,
            'amount': float(self.amount),
            'category': self.category.value,
            'category_label': CATEGORY_META[self.category].label,
            'date': self.date.isoformat(),
        }
