from django.contrib import admin

from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'email', 'assigned_to', 'visa_status', 'service_fee_status', 'timestamp')
    list_filter = ('visa_status', 'service_fee_status', 'assigned_to', 'inquiry_type')
    search_fields = ('full_name', 'email', 'mobile_number')
    date_hierarchy = 'timestamp'
    readonly_fields = ('searchable_name',)
