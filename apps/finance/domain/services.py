# apps/finance/domain/services.py
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from apps.finance.domain.entities import CATEGORY_META, Category, TransactionEntity

# Krótkie nazwy miesięcy (ru-RU, jak w wykresach frontendu)
MONTH_SHORT_RU = [
    'янв.', 'февр.', 'мар.', 'апр.', 'мая', 'июн.',
    'июл.', 'авг.', 'сент.', 'окт.', 'нояб.', 'дек.',
]

ZERO = Decimal('0')
HUNDRED = Decimal('100')


def month_label(year: int, month: int) -> str:
    """Np. (2024, 1) -> 'янв. 24'."""
    return f"{MONTH_SHORT_RU[month - 1]} {year % 100:02d}"


class BudgetLedger:
    """
    Rozliczenie grantu: suma wydatków, pozostała kwota, podział na kategorie
    i kontrola limitów kategorii (procent liczony od CAŁEGO grantu).
    Obiekt jest niemutowalnym widokiem na snapshot transakcji.
    """

    def __init__(self, grant_amount, transactions: Iterable[TransactionEntity]):
        grant = Decimal(str(grant_amount))
        if grant <= ZERO:
            raise ValueError("grant_amount must be positive")
        self.grant_amount = grant
        self.transactions = list(transactions)

    # --- Sumy ogólne ---

    def total_spent(self) -> Decimal:
        return sum((t.amount for t in self.transactions), ZERO)

    def remaining(self) -> Decimal:
        # Bez obcinania do zera: przekroczenie budżetu ma być widoczne
        return self.grant_amount - self.total_spent()

    def spent_percentage(self) -> float:
        return float(self.total_spent() / self.grant_amount * HUNDRED)

    # --- Kategorie ---

    def totals_by_category(self) -> Dict[Category, Decimal]:
        """Sumy per kategoria; kategorie bez transakcji nie występują w wyniku."""
        totals: Dict[Category, Decimal] = {}
        for t in self.transactions:
            totals[t.category] = totals.get(t.category, ZERO) + t.amount
        return totals

    def category_total(self, category) -> Decimal:
        return self.totals_by_category().get(Category(category), ZERO)

    def _category_ratio(self, category) -> Decimal:
        return self.category_total(category) / self.grant_amount * HUNDRED

    def category_percentage(self, category) -> float:
        return float(self._category_ratio(category))

    def is_over_limit(self, category) -> bool:
        limit = CATEGORY_META[Category(category)].limit_percent
        if limit is None:
            return False
        return self._category_ratio(category) > limit

    def over_limit_categories(self) -> List[Category]:
        return [c for c in CATEGORY_META if self.is_over_limit(c)]

    def category_breakdown(self) -> List[dict]:
        """Dane do wykresów i pasków postępu, w kolejności enuma."""
        totals = self.totals_by_category()
        spent = self.total_spent()
        rows = []
        for category, meta in CATEGORY_META.items():
            if category not in totals:
                continue
            amount = totals[category]
            rows.append({
                'category': category.value,
                'label': meta.label,
                'color': meta.color,
                'amount': float(amount),
                'percentage': float(amount / self.grant_amount * HUNDRED),
                'share_of_spent': float(amount / spent * HUNDRED) if spent > ZERO else 0.0,
                'limit_percent': float(meta.limit_percent) if meta.limit_percent is not None else None,
                'over_limit': self.is_over_limit(category),
            })
        return rows

    # --- Miesiące ---

    def monthly_breakdown(self, last: Optional[int] = None) -> List[dict]:
        """
        Wydatki pogrupowane po miesiącu daty transakcji (nie daty utworzenia),
        chronologicznie. `last` obcina do N ostatnich miesięcy.
        """
        buckets: Dict[tuple, Decimal] = {}
        for t in sorted(self.transactions, key=lambda t: t.date):
            key = (t.date.year, t.date.month)
            buckets[key] = buckets.get(key, ZERO) + t.amount

        rows = [
            {'month': month_label(year, month), 'year': year, 'month_number': month, 'amount': float(amount)}
            for (year, month), amount in buckets.items()
        ]
        if last is not None:
            rows = rows[-last:] if last > 0 else []
        return rows

    def summary(self) -> dict:
        return {
            'grant_amount': float(self.grant_amount),
            'total_spent': float(self.total_spent()),
            'remaining': float(self.remaining()),
            'spent_percentage': self.spent_percentage(),
            'categories': self.category_breakdown(),
            'over_limit': [c.value for c in self.over_limit_categories()],
        }
