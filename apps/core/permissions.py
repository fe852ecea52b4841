from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.shortcuts import redirect

from config.constants import MSG_PERMISSION_DENIED


class AdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    def test_func(self):
        return self.request.user.is_admin


class StaffRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """Admins and counselors: anyone allowed into the back office."""

    def test_func(self):
        user = self.request.user
        return user.is_active and (user.is_admin or user.is_counselor)

    def handle_no_permission(self):
        if self.request.user.is_authenticated:
            messages.error(self.request, MSG_PERMISSION_DENIED)
            return redirect('home')
        return super().handle_no_permission()


class CounselorScopedMixin(StaffRequiredMixin):
    """
    Restrict a queryset to the signed-in counselor's own students.
    - Admins: see everything.
    - Counselors: only rows whose `counselor` matches their counselor_name.
    """
    counselor_field = 'assigned_to'

    def scope_queryset(self, qs):
        user = self.request.user
        if user.is_admin:
            return qs
        if not user.counselor_name:
            return qs.none()
        return qs.filter(**{self.counselor_field: user.counselor_name})

    def get_queryset(self):
        return self.scope_queryset(super().get_queryset())
