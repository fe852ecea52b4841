from django.db import models
from django.utils import timezone

from config.constants import NOTES_MAX_LENGTH, TEST_PREP_OPTIONS


class ClassBooking(models.Model):
    """A prep-class enquiry from the public site, followed up by the front desk."""

    name = models.CharField(max_length=50)
    email = models.EmailField()
    phone = models.CharField(max_length=15)
    preferred_test = models.CharField(max_length=30, choices=TEST_PREP_OPTIONS)
    preferred_start_date = models.DateField(null=True, blank=True)
    notes = models.TextField(max_length=NOTES_MAX_LENGTH, blank=True)
    contacted = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} - {self.get_preferred_test_display()}"
