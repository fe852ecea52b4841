from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='DashboardMetrics',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('total_students', models.PositiveIntegerField(default=0)),
                ('students_by_destination', models.JSONField(blank=True, default=dict)),
                ('visa_status_counts', models.JSONField(blank=True, default=dict)),
                ('monthly_admissions', models.JSONField(blank=True, default=dict)),
                ('students_by_counselor', models.JSONField(blank=True, default=dict)),
                ('service_fee_status_counts', models.JSONField(blank=True, default=dict)),
                ('students_by_education', models.JSONField(blank=True, default=dict)),
                ('students_by_english_test', models.JSONField(blank=True, default=dict)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Dashboard metrics',
                'verbose_name_plural': 'Dashboard metrics',
            },
        ),
    ]
