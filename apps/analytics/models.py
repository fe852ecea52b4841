from django.db import models


class DashboardMetrics(models.Model):
    """
    Singleton row of pre-computed dashboard counters, kept current by the
    student signals so the dashboard never scans the student table.
    """
    total_students = models.PositiveIntegerField(default=0)
    students_by_destination = models.JSONField(default=dict, blank=True)
    visa_status_counts = models.JSONField(default=dict, blank=True)
    monthly_admissions = models.JSONField(default=dict, blank=True)
    students_by_counselor = models.JSONField(default=dict, blank=True)
    service_fee_status_counts = models.JSONField(default=dict, blank=True)
    students_by_education = models.JSONField(default=dict, blank=True)
    students_by_english_test = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Dashboard metrics"
        verbose_name_plural = "Dashboard metrics"

    def __str__(self):
        return f"Dashboard metrics ({self.total_students} students)"

    def save(self, *args, **kwargs):
        self.pk = 1  # Singleton: always ID 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """The singleton row, or None when it has not been built yet."""
        return cls.objects.filter(pk=1).first()
