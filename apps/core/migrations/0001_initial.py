import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PlatformConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('site_name', models.CharField(default='Pixar Edu', max_length=100)),
                ('site_tagline', models.CharField(blank=True, default='Your trusted partner for studying abroad.', max_length=200)),
                ('announcement', models.CharField(blank=True, help_text='Banner shown on top of public pages', max_length=255)),
                ('contact_email', models.EmailField(default='info@pixaredu.com', max_length=254)),
                ('support_phone', models.CharField(blank=True, default='+977 9761859757', max_length=30)),
                ('address', models.TextField(blank=True, default='New Baneshwor, Kathmandu, Nepal, 44600')),
                ('maintenance_mode', models.BooleanField(default=False, help_text='Show the maintenance page to public visitors')),
                ('maintenance_message', models.TextField(blank=True, default='We are updating the site. Please check back shortly.')),
                ('session_timeout_minutes', models.PositiveIntegerField(default=30, help_text='Staff are signed out after this many idle minutes')),
                ('welcome_screen_refresh_seconds', models.PositiveIntegerField(default=30, help_text='How often the office TV welcome screen reloads')),
            ],
        ),
        migrations.CreateModel(
            name='LLMConfig',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('encrypted_api_key', models.TextField(blank=True, help_text='Encrypted OpenAI API key')),
                ('active_model', models.CharField(default='gpt-4o-mini', max_length=100)),
                ('system_prompt', models.TextField(blank=True, help_text='Extra instructions appended to every assistant prompt')),
                ('temperature', models.DecimalField(decimal_places=2, default=0.7, max_digits=3)),
                ('max_output_tokens', models.PositiveIntegerField(default=1200)),
                ('monthly_token_cap', models.PositiveIntegerField(default=0, help_text='0 means no cap')),
                ('generation_enabled', models.BooleanField(default=True)),
                ('auto_disable_on_cap', models.BooleanField(default=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(max_length=255)),
                ('target_model', models.CharField(blank=True, max_length=100)),
                ('target_id', models.CharField(blank=True, max_length=100)),
                ('details', models.JSONField(blank=True, default=dict)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('timestamp', models.DateTimeField(auto_now_add=True)),
                ('actor', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-timestamp'],
            },
        ),
        migrations.CreateModel(
            name='LLMUsageLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('request_type', models.CharField(choices=[('chatbot', 'Chatbot'), ('test_advisor', 'English Test Advisor'), ('pathway_planner', 'Pathway Planner')], max_length=50)),
                ('model_name', models.CharField(max_length=100)),
                ('system_prompt', models.TextField(blank=True)),
                ('user_prompt', models.TextField(blank=True)),
                ('response_text', models.TextField(blank=True)),
                ('prompt_tokens', models.PositiveIntegerField(default=0)),
                ('completion_tokens', models.PositiveIntegerField(default=0)),
                ('total_tokens', models.PositiveIntegerField(default=0)),
                ('cost_input', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('cost_output', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('cost_total', models.DecimalField(decimal_places=6, default=0, max_digits=10)),
                ('latency_ms', models.PositiveIntegerField(default=0)),
                ('success', models.BooleanField(default=True)),
                ('error_message', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('actor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
