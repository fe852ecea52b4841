from django.contrib import admin

from .models import DashboardMetrics


@admin.register(DashboardMetrics)
class DashboardMetricsAdmin(admin.ModelAdmin):
    list_display = ('total_students', 'updated_at')
    readonly_fields = ('updated_at',)
