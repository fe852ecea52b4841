from django.contrib import admin
from .models import PlatformConfig, LLMConfig, LLMUsageLog, AuditLog


@admin.register(PlatformConfig)
class PlatformConfigAdmin(admin.ModelAdmin):
    list_display = ('site_name', 'contact_email', 'session_timeout_minutes')


@admin.register(LLMConfig)
class LLMConfigAdmin(admin.ModelAdmin):
    list_display = ('active_model', 'generation_enabled', 'monthly_token_cap', 'updated_at')
    exclude = ('encrypted_api_key',)


@admin.register(LLMUsageLog)
class LLMUsageLogAdmin(admin.ModelAdmin):
    list_display = ('request_type', 'model_name', 'total_tokens', 'cost_total', 'latency_ms', 'success', 'created_at')
    list_filter = ('request_type', 'model_name', 'success', 'created_at')


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ('actor', 'action', 'target_model', 'target_id', 'timestamp')
    list_filter = ('target_model',)
    search_fields = ('action', 'target_id')
