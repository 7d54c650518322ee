# apps/projects/services/project_service.py
import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from django.db import DatabaseError, transaction
from django.db.models import Sum

from apps.core.conf import app_setting
from apps.finance.models import Transaction
from apps.projects.domain.entities import ProjectEntity, ReportDateEntity
from apps.projects.models import Project, ReportDate

logger = logging.getLogger(__name__)


class ProjectService:
    def to_entity(self, model: Project) -> ProjectEntity:
        """Konwertuje Model Django -> Czystą Encję (razem z terminami raportów)."""
        return ProjectEntity(
            id=model.id,
            name=model.name,
            grant_amount=model.grant_amount,
            spent_amount=model.spent_amount,
            created_at=model.created_at,
            report_dates=[
                ReportDateEntity(id=rd.id, title=rd.title, date=rd.date)
                for rd in model.report_dates.all()
            ],
        )

    def create_default_project(self, user, name: str = 'Мой проект', grant_amount=None) -> Project:
        project, _ = Project.objects.get_or_create(
            user=user,
            defaults={
                'name': name,
                'grant_amount': Decimal(str(grant_amount or app_setting('DEFAULT_GRANT_AMOUNT'))),
            },
        )
        return project

    def get_snapshot(self, user_id: int) -> Optional[ProjectEntity]:
        try:
            project = Project.objects.prefetch_related('report_dates').get(user_id=user_id)
        except Project.DoesNotExist:
            return None
        return self.to_entity(project)

    def list_report_dates(self, user_id: int) -> List[ReportDateEntity]:
        qs = ReportDate.objects.filter(project__user_id=user_id)
        return [ReportDateEntity(id=rd.id, title=rd.title, date=rd.date) for rd in qs]

    @transaction.atomic
    def replace_report_dates(self, project: Project, items: Iterable[dict]) -> List[ReportDate]:
        """Zastępuje całą listę terminów raportów (semantyka okna profilu)."""
        project.report_dates.all().delete()
        return [
            ReportDate.objects.create(project=project, title=item['title'], date=item['date'])
            for item in items
        ]

    def refresh_spent_amount(self, user_id: int) -> Optional[Decimal]:
        """
        Przelicza i zapisuje cache spent_amount projektu.
        Best-effort: błąd zapisu jest logowany, nie cofamy operacji na transakcji.
        """
        try:
            # Savepoint: błąd nie psuje zewnętrznej transakcji (np. ATOMIC_REQUESTS)
            with transaction.atomic():
                total = Transaction.objects.filter(user_id=user_id).aggregate(total=Sum('amount'))['total']
                total = total or Decimal('0')
                updated = Project.objects.filter(user_id=user_id).update(spent_amount=total)
        except DatabaseError:
            logger.exception("Could not refresh spent_amount for user %s", user_id)
            return None

        if not updated:
            # Brak projektu - nie ma czego aktualizować
            return None
        return total
