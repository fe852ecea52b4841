from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from config.constants import NOTES_MAX_LENGTH, UNASSIGNED


class Student(models.Model):
    class VisaStatus(models.TextChoices):
        PENDING = 'Pending', _('Pending')
        APPROVED = 'Approved', _('Approved')
        REJECTED = 'Rejected', _('Rejected')
        NOT_APPLIED = 'Not Applied', _('Not Applied')

    class FeeStatus(models.TextChoices):
        PAID = 'Paid', _('Paid')
        UNPAID = 'Unpaid', _('Unpaid')
        PARTIAL = 'Partial', _('Partial')

    class InquiryType(models.TextChoices):
        OFFICE_WALK_IN = 'office_walk_in', _('Office Walk-in')
        VISIT = 'visit', _('Office Visit')
        PHONE = 'phone', _('Phone Call')

    full_name = models.CharField(max_length=100)
    email = models.EmailField()
    mobile_number = models.CharField(max_length=30, blank=True)

    visa_status = models.CharField(max_length=20, choices=VisaStatus.choices, default=VisaStatus.NOT_APPLIED)
    service_fee_status = models.CharField(max_length=20, choices=FeeStatus.choices, default=FeeStatus.UNPAID)
    assigned_to = models.CharField(max_length=100, default=UNASSIGNED)

    last_completed_education = models.CharField(max_length=100, blank=True)
    english_proficiency_test = models.CharField(max_length=50, blank=True)
    preferred_study_destination = models.CharField(max_length=100, blank=True)
    additional_notes = models.TextField(max_length=NOTES_MAX_LENGTH, blank=True)

    service_fee_paid_date = models.DateField(null=True, blank=True)
    visa_status_update_date = models.DateField(null=True, blank=True)

    emergency_contact = models.CharField(max_length=100, blank=True)
    college_university_name = models.CharField(max_length=200, blank=True)
    appointment_date = models.DateTimeField(null=True, blank=True)
    inquiry_type = models.CharField(max_length=20, choices=InquiryType.choices, default=InquiryType.OFFICE_WALK_IN)

    # Lowercased full_name for prefix search; kept in sync on save.
    searchable_name = models.CharField(max_length=100, blank=True, db_index=True, editable=False)
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['-timestamp', '-id'], name='student_keyset_idx'),
            models.Index(fields=['assigned_to', '-timestamp'], name='student_counselor_idx'),
        ]

    def __str__(self):
        return self.full_name

    def save(self, *args, **kwargs):
        self.searchable_name = (self.full_name or '').strip().lower()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'full_name' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'searchable_name'}
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse('student-update', kwargs={'pk': self.pk})

    @property
    def is_unassigned(self):
        return not self.assigned_to or self.assigned_to == UNASSIGNED
