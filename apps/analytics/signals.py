import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from students.models import Student
from .services import MetricsService, student_values

logger = logging.getLogger("apps.analytics")


@receiver(post_save, sender=Student)
def update_metrics_on_save(sender, instance, created, raw=False, **kwargs):
    if raw:
        return
    try:
        if created:
            MetricsService.apply_create(student_values(instance))
        else:
            previous = getattr(instance, '_previous', None)
            if previous is not None:
                MetricsService.apply_update(previous, student_values(instance))
    except Exception:
        # A failed counter update must not fail the student write.
        logger.exception("Dashboard metrics update failed for student %s", instance.pk)


@receiver(post_delete, sender=Student)
def update_metrics_on_delete(sender, instance, **kwargs):
    try:
        MetricsService.apply_delete(student_values(instance))
    except Exception:
        logger.exception("Dashboard metrics update failed for deleted student %s", instance.pk)
