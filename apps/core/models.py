from django.conf import settings
from django.core.cache import cache
from django.db import models

from config.constants import (
    COMPANY_ADDRESS, COMPANY_EMAIL, COMPANY_PHONE, IDLE_TIMEOUT_MINUTES,
    SITE_NAME, SITE_TAGLINE,
)


class PlatformConfig(models.Model):
    """
    Singleton model to store site-wide settings editable by admins.
    """
    # Branding
    site_name = models.CharField(max_length=100, default=SITE_NAME)
    site_tagline = models.CharField(max_length=200, default=SITE_TAGLINE, blank=True)
    announcement = models.CharField(max_length=255, blank=True, help_text="Banner shown on top of public pages")

    # Contact
    contact_email = models.EmailField(default=COMPANY_EMAIL)
    support_phone = models.CharField(max_length=30, default=COMPANY_PHONE, blank=True)
    address = models.TextField(default=COMPANY_ADDRESS, blank=True)

    # Maintenance
    maintenance_mode = models.BooleanField(default=False, help_text="Show the maintenance page to public visitors")
    maintenance_message = models.TextField(blank=True, default="We are updating the site. Please check back shortly.")

    # Back office
    session_timeout_minutes = models.PositiveIntegerField(
        default=IDLE_TIMEOUT_MINUTES, help_text="Staff are signed out after this many idle minutes"
    )
    welcome_screen_refresh_seconds = models.PositiveIntegerField(
        default=30, help_text="How often the office TV welcome screen reloads"
    )

    def __str__(self):
        return "Platform Configuration"

    def save(self, *args, **kwargs):
        self.pk = 1  # Singleton: always ID 1
        super().save(*args, **kwargs)
        cache.delete('platform_config')

    def delete(self, *args, **kwargs):
        pass  # Prevent deletion

    @classmethod
    def load(cls):
        """
        Load the singleton instance. Create if not exists.
        """
        if cache.get('platform_config') is None:
            obj, _ = cls.objects.get_or_create(pk=1)
            cache.set('platform_config', obj)
        return cache.get('platform_config')


class AuditLog(models.Model):
    """
    Records mutating requests made by signed-in staff.
    """
    actor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='audit_logs')
    action = models.CharField(max_length=255)
    target_model = models.CharField(max_length=100, blank=True)
    target_id = models.CharField(max_length=100, blank=True)
    details = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.actor} - {self.action} at {self.timestamp}"


class LLMConfig(models.Model):
    """
    Singleton model to store the OpenAI credentials and generation settings
    used by the chatbot, test advisor and pathway planner.
    """
    encrypted_api_key = models.TextField(blank=True, help_text="Encrypted OpenAI API key")
    active_model = models.CharField(max_length=100, default="gpt-4o-mini")
    system_prompt = models.TextField(blank=True, help_text="Extra instructions appended to every assistant prompt")
    temperature = models.DecimalField(max_digits=3, decimal_places=2, default=0.70)
    max_output_tokens = models.PositiveIntegerField(default=1200)

    monthly_token_cap = models.PositiveIntegerField(default=0, help_text="0 means no cap")
    generation_enabled = models.BooleanField(default=True)
    auto_disable_on_cap = models.BooleanField(default=True)

    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return "LLM Configuration"

    def save(self, *args, **kwargs):
        self.pk = 1  # Singleton: always ID 1
        super().save(*args, **kwargs)
        cache.delete('llm_config')

    def delete(self, *args, **kwargs):
        pass

    @classmethod
    def load(cls):
        if cache.get('llm_config') is None:
            obj, _ = cls.objects.get_or_create(pk=1)
            cache.set('llm_config', obj)
        return cache.get('llm_config')


class LLMUsageLog(models.Model):
    class RequestType(models.TextChoices):
        CHATBOT = 'chatbot', 'Chatbot'
        TEST_ADVISOR = 'test_advisor', 'English Test Advisor'
        PATHWAY_PLANNER = 'pathway_planner', 'Pathway Planner'

    request_type = models.CharField(max_length=50, choices=RequestType.choices)
    model_name = models.CharField(max_length=100)
    system_prompt = models.TextField(blank=True)
    user_prompt = models.TextField(blank=True)
    response_text = models.TextField(blank=True)
    prompt_tokens = models.PositiveIntegerField(default=0)
    completion_tokens = models.PositiveIntegerField(default=0)
    total_tokens = models.PositiveIntegerField(default=0)
    cost_input = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    cost_output = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    cost_total = models.DecimalField(max_digits=10, decimal_places=6, default=0)
    latency_ms = models.PositiveIntegerField(default=0)
    success = models.BooleanField(default=True)
    error_message = models.TextField(blank=True)

    actor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.request_type} via {self.model_name} ({self.total_tokens} tokens)"
