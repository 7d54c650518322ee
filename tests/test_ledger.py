from datetime import date
from decimal import Decimal

import pytest

from apps.finance.domain.entities import Category, TransactionEntity
from apps.finance.domain.services import BudgetLedger, month_label
from apps.finance.ports.repositories import ITransactionRepository
from apps.finance.services.ledger_service import LedgerService


def tx(category, amount, day=date(2024, 3, 10), description='x'):
    return TransactionEntity(id=None, description=description, amount=amount, category=category, date=day)


def test_example_grant_usage():
    ledger = BudgetLedger(500000, [tx(Category.SALARY, 100000), tx(Category.SERVICES, 150000)])

    assert ledger.total_spent() == Decimal('250000')
    assert ledger.remaining() == Decimal('250000')
    assert ledger.spent_percentage() == 50.0
    assert ledger.category_percentage(Category.SERVICES) == 30.0
    assert ledger.is_over_limit(Category.SERVICES) is True
    assert ledger.category_percentage(Category.SALARY) == 20.0
    assert ledger.is_over_limit(Category.SALARY) is False
    assert ledger.over_limit_categories() == [Category.SERVICES]


def test_category_totals_sum_to_total_and_skip_empty_categories():
    ledger = BudgetLedger(100000, [
        tx(Category.TAXES, '1200.50'),
        tx(Category.TAXES, 800),
        tx(Category.OTHER, 99),
    ])

    totals = ledger.totals_by_category()
    assert set(totals) == {Category.TAXES, Category.OTHER}
    assert totals[Category.TAXES] == Decimal('2000.50')
    assert sum(totals.values()) == ledger.total_spent()


def test_remaining_goes_negative_when_overspent():
    ledger = BudgetLedger(1000, [tx(Category.EQUIPMENT, 1500)])

    assert ledger.remaining() == Decimal('-500')
    assert ledger.spent_percentage() == 150.0


def test_services_limit_is_strictly_greater_than_25_percent():
    assert BudgetLedger(1000, [tx(Category.SERVICES, 250)]).is_over_limit('SERVICES') is False
    assert BudgetLedger(1000, [tx(Category.SERVICES, '250.01')]).is_over_limit('SERVICES') is True


def test_other_categories_never_over_limit():
    ledger = BudgetLedger(1000, [tx(Category.SALARY, 999), tx(Category.OTHER, 900)])

    assert not ledger.is_over_limit(Category.SALARY)
    assert not ledger.is_over_limit(Category.OTHER)


def test_negative_amount_is_stored_as_magnitude():
    assert tx(Category.OTHER, -300).amount == Decimal('300')


def test_removing_transaction_reduces_every_aggregate():
    keep = tx(Category.SERVICES, 100)
    drop = tx(Category.SERVICES, 200)
    before = BudgetLedger(1000, [keep, drop])
    after = BudgetLedger(1000, [keep])

    assert before.total_spent() - after.total_spent() == Decimal('200')
    assert before.category_total(Category.SERVICES) - after.category_total(Category.SERVICES) == Decimal('200')


def test_monthly_breakdown_uses_transaction_date_in_chronological_order():
    ledger = BudgetLedger(100000, [
        tx(Category.OTHER, 10, day=date(2024, 2, 5)),
        tx(Category.OTHER, 5, day=date(2023, 12, 31)),
        tx(Category.OTHER, 7, day=date(2024, 2, 20)),
    ])

    rows = ledger.monthly_breakdown()
    assert [(r['year'], r['month_number'], r['amount']) for r in rows] == [(2023, 12, 5.0), (2024, 2, 17.0)]
    assert rows[0]['month'] == month_label(2023, 12) == 'дек. 23'
    assert [r['month_number'] for r in ledger.monthly_breakdown(last=1)] == [2]


def test_category_breakdown_only_lists_spent_categories():
    ledger = BudgetLedger(1000, [tx(Category.SERVICES, 300)])

    [row] = ledger.category_breakdown()
    assert row['category'] == 'SERVICES'
    assert row['over_limit'] is True
    assert row['share_of_spent'] == 100.0


def test_grant_must_be_positive():
    with pytest.raises(ValueError):
        BudgetLedger(0, [])


class InMemoryTransactionRepository(ITransactionRepository):
    def __init__(self):
        self.items = {}
        self.next_id = 1

    def list_for_user(self, user_id):
        return [t for t in self.items.values() if t.user_id == user_id]

    def create(self, user_id, transaction):
        transaction.id, transaction.user_id = self.next_id, user_id
        self.items[self.next_id] = transaction
        self.next_id += 1
        return transaction

    def delete(self, user_id, transaction_id):
        t = self.items.get(transaction_id)
        if t is None or t.user_id != user_id:
            return False
        del self.items[transaction_id]
        return True


class StubProjectService:
    def __init__(self):
        self.refreshed = []

    def get_snapshot(self, user_id):
        return None

    def refresh_spent_amount(self, user_id):
        self.refreshed.append(user_id)


def test_ledger_service_over_custom_repository():
    projects = StubProjectService()
    service = LedgerService(InMemoryTransactionRepository(), project_service=projects)

    kept = service.record(7, tx(Category.SALARY, 100000))
    dropped = service.record(7, tx(Category.SERVICES, 150000))
    assert service.ledger_for(7).total_spent() == Decimal('250000')

    assert service.remove(7, dropped.id) is True
    assert service.remove(8, kept.id) is False
    ledger = service.ledger_for(7)
    assert ledger.total_spent() == Decimal('100000')
    assert ledger.grant_amount == Decimal('500000')
    assert projects.refreshed == [7, 7, 7]
