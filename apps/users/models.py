from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from config.constants import COUNSELOR_NAMES, UNASSIGNED, as_choices


class User(AbstractUser):
    class Role(models.TextChoices):
        ADMIN = 'ADMIN', _('Admin')
        COUNSELOR = 'COUNSELOR', _('Counselor')

    role = models.CharField(
        max_length=50,
        choices=Role.choices,
        default=Role.COUNSELOR
    )

    # Matches Student.assigned_to for the students this user looks after.
    counselor_name = models.CharField(
        max_length=100,
        blank=True,
        choices=as_choices([n for n in COUNSELOR_NAMES if n != UNASSIGNED]),
    )

    def save(self, *args, **kwargs):
        if not self.pk and self.is_superuser:
            self.role = self.Role.ADMIN
        return super().save(*args, **kwargs)

    @property
    def is_admin(self):
        return self.is_superuser or self.role == self.Role.ADMIN

    @property
    def is_counselor(self):
        return self.role == self.Role.COUNSELOR
