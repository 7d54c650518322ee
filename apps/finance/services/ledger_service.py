# apps/finance/services/ledger_service.py
import logging
from decimal import Decimal
from typing import Iterable, Optional

from apps.core.conf import app_setting
from apps.finance.domain.entities import TransactionEntity
from apps.finance.domain.services import BudgetLedger
from apps.finance.ports.repositories import ITransactionRepository
from apps.projects.services.project_service import ProjectService

logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(self, repository: ITransactionRepository, project_service: Optional[ProjectService] = None):
        self.repository = repository
        self.project_service = project_service or ProjectService()

    def grant_amount_for(self, user_id: int) -> Decimal:
        project = self.project_service.get_snapshot(user_id)
        if project is None:
            return Decimal(str(app_setting('DEFAULT_GRANT_AMOUNT')))
        return project.grant_amount

    def ledger_for(self, user_id: int, transactions: Optional[Iterable[TransactionEntity]] = None) -> BudgetLedger:
        """Buduje ledger ze świeżego snapshotu transakcji (lub podanej listy)."""
        if transactions is None:
            transactions = self.repository.list_for_user(user_id)
        return BudgetLedger(self.grant_amount_for(user_id), transactions)

    def record(self, user_id: int, transaction: TransactionEntity) -> TransactionEntity:
        created = self.repository.create(user_id, transaction)
        logger.info("Transaction %s created for user %s (%s %s)",
                    created.id, user_id, created.category.value, created.amount)

        # Cache projektu - best-effort, transakcja już zapisana
        self.project_service.refresh_spent_amount(user_id)
        return created

    def remove(self, user_id: int, transaction_id: int) -> bool:
        if not self.repository.delete(user_id, transaction_id):
            return False
        logger.info("Transaction %s deleted for user %s", transaction_id, user_id)

        self.project_service.refresh_spent_amount(user_id)
        return True
