# apps/finance/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List
from apps.finance.domain.entities import TransactionEntity


class ITransactionRepository(ABC):
    @abstractmethod
    def list_for_user(self, user_id: int) -> List[TransactionEntity]:
        pass

    @abstractmethod
    def create(self, user_id: int, transaction: TransactionEntity) -> TransactionEntity:
        """Zapisuje nową transakcję i zwraca encję z nadanym ID."""
        pass

    @abstractmethod
    def delete(self, user_id: int, transaction_id: int) -> bool:
        """Usuwa transakcję użytkownika. False, jeśli nie istnieje lub należy do kogoś innego."""
        pass
