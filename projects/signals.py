from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver
from .models import Project
from audit.models import AuditLog
import logging

logger = logging.getLogger(__name__)

TRACKED_FIELDS = [
    'pid', 'project_name', 'ministry_dept', 'lead_programme_manager', 'programme_manager',
    'type', 'fund_available', 'contract_value', 'description', 'status',
    'start_date', 'completion_date', 'is_draft',
]


def _display(value):
    if value is None:
        return 'N/A'
    return str(value)[:100]


@receiver(pre_save, sender=Project)
def project_pre_save(sender, instance, **kwargs):
    # Attach a snapshot of the stored row (if any) so post_save can diff it
    instance._pre_save_snapshot = None
    if instance.pk:
        prev = Project.objects.filter(pk=instance.pk).values(*TRACKED_FIELDS).first()
        instance._pre_save_snapshot = prev


@receiver(post_save, sender=Project)
def project_post_save(sender, instance, created, **kwargs):
    if created:
        AuditLog.objects.create(
            action='Project created',
            object_repr=str(instance),
            project_id=instance.id,
            change_description='Saved as draft' if instance.is_draft else 'Published',
        )
        return

    prev = getattr(instance, '_pre_save_snapshot', None)
    if not prev:
        return
    changes = [
        f'{field}: {_display(prev[field])} -> {_display(getattr(instance, field))}'
        for field in TRACKED_FIELDS
        if prev[field] != getattr(instance, field)
    ]
    if not changes:
        return
    action = 'Project updated'
    if prev['is_draft'] and not instance.is_draft:
        action = 'Project published'
    AuditLog.objects.create(
        action=action,
        object_repr=str(instance),
        project_id=instance.id,
        change_description='; '.join(changes),
    )
    logger.debug("Audit: %s %s (%d fields)", action, instance, len(changes))


@receiver(post_delete, sender=Project)
def project_post_delete(sender, instance, **kwargs):
    AuditLog.objects.create(
        action='Project deleted',
        object_repr=str(instance),
        project_id=instance.id,
        change_description='Project removed',
    )
