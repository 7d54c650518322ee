# apps/core/signals.py
import logging

from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.checklists.services import ChecklistService
from apps.projects.services.project_service import ProjectService

logger = logging.getLogger(__name__)


@receiver(post_save, sender=User)
def onboard_new_user(sender, instance, created, **kwargs):
    """
    Onboarding: każdy nowy użytkownik dostaje projekt z domyślnym grantem
    oraz zestaw startowych check-list.
    """
    if not created:
        return

    ProjectService().create_default_project(instance)
    created_lists = ChecklistService().create_default_checklists(instance)
    logger.info("Onboarded user %s (%d default checklists)", instance.pk, len(created_lists))
