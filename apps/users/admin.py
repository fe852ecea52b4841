from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    fieldsets = UserAdmin.fieldsets + (
        (None, {'fields': ('role', 'counselor_name')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        (None, {'fields': ('role', 'counselor_name')}),
    )
    list_display = ('username', 'email', 'role', 'counselor_name', 'is_staff')
    list_filter = ('role', 'counselor_name', 'is_staff', 'is_active')
