# apps/finance/adapters/orm_repositories.py
from typing import List
from apps.finance.domain.entities import Category, TransactionEntity
from apps.finance.ports.repositories import ITransactionRepository
from apps.finance.models import Transaction as TransactionModel


class DjangoTransactionRepository(ITransactionRepository):
    def to_entity(self, model: TransactionModel) -> TransactionEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return TransactionEntity(
            id=model.id,
            description=model.description,
            amount=model.amount,
            category=Category(model.category),
            date=model.date,
            user_id=model.user_id,
        )

    def list_for_user(self, user_id: int) -> List[TransactionEntity]:
        qs = TransactionModel.objects.filter(user_id=user_id).order_by('-date', '-id')
        return [self.to_entity(t) for t in qs]

    def create(self, user_id: int, transaction: TransactionEntity) -> TransactionEntity:
        obj = TransactionModel.objects.create(
            user_id=user_id,
            description=transaction.description,
            amount=transaction.amount,
            category=transaction.category.value,
            date=transaction.date,
        )
        return self.to_entity(obj)

    def delete(self, user_id: int, transaction_id: int) -> bool:
        deleted, _ = TransactionModel.objects.filter(id=transaction_id, user_id=user_id).delete()
        return deleted > 0
