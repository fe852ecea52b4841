from django.db.models.signals import pre_save
from django.dispatch import receiver
from django.utils import timezone

from .models import Student


@receiver(pre_save, sender=Student)
def snapshot_and_stamp_dates(sender, instance, raw=False, **kwargs):
    """
    Keep the row as it was before this save on `instance._previous` (None for
    a create) so post_save listeners can diff old and new values, and stamp
    the visa / fee dates when a status changes without one being supplied.
    """
    if raw:
        return

    previous = None
    if instance.pk:
        previous = Student.objects.filter(pk=instance.pk).values().first()
    instance._previous = previous

    today = timezone.localdate()
    if previous is None:
        if instance.visa_status != Student.VisaStatus.NOT_APPLIED and not instance.visa_status_update_date:
            instance.visa_status_update_date = today
        if instance.service_fee_status == Student.FeeStatus.PAID and not instance.service_fee_paid_date:
            instance.service_fee_paid_date = today
        return

    if (
        instance.visa_status != previous['visa_status']
        and instance.visa_status_update_date == previous['visa_status_update_date']
    ):
        instance.visa_status_update_date = today

    if (
        instance.service_fee_status == Student.FeeStatus.PAID
        and previous['service_fee_status'] != Student.FeeStatus.PAID
        and instance.service_fee_paid_date == previous['service_fee_paid_date']
    ):
        instance.service_fee_paid_date = today
