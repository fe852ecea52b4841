from django.contrib import admin

from .models import ClassBooking


@admin.register(ClassBooking)
class ClassBookingAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'phone', 'preferred_test', 'preferred_start_date', 'contacted', 'created_at')
    list_filter = ('preferred_test', 'contacted')
    search_fields = ('name', 'email', 'phone')
    list_editable = ('contacted',)
