import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=254)),
                ('mobile_number', models.CharField(blank=True, max_length=30)),
                ('visa_status', models.CharField(choices=[('Pending', 'Pending'), ('Approved', 'Approved'), ('Rejected', 'Rejected'), ('Not Applied', 'Not Applied')], default='Not Applied', max_length=20)),
                ('service_fee_status', models.CharField(choices=[('Paid', 'Paid'), ('Unpaid', 'Unpaid'), ('Partial', 'Partial')], default='Unpaid', max_length=20)),
                ('assigned_to', models.CharField(default='Unassigned', max_length=100)),
                ('last_completed_education', models.CharField(blank=True, max_length=100)),
                ('english_proficiency_test', models.CharField(blank=True, max_length=50)),
                ('preferred_study_destination', models.CharField(blank=True, max_length=100)),
                ('additional_notes', models.TextField(blank=True, max_length=500)),
                ('service_fee_paid_date', models.DateField(blank=True, null=True)),
                ('visa_status_update_date', models.DateField(blank=True, null=True)),
                ('emergency_contact', models.CharField(blank=True, max_length=100)),
                ('college_university_name', models.CharField(blank=True, max_length=200)),
                ('appointment_date', models.DateTimeField(blank=True, null=True)),
                ('inquiry_type', models.CharField(choices=[('office_walk_in', 'Office Walk-in'), ('visit', 'Office Visit'), ('phone', 'Phone Call')], default='office_walk_in', max_length=20)),
                ('searchable_name', models.CharField(blank=True, db_index=True, editable=False, max_length=100)),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'ordering': ['-timestamp', '-id'],
                'indexes': [
                    models.Index(fields=['-timestamp', '-id'], name='student_keyset_idx'),
                    models.Index(fields=['assigned_to', '-timestamp'], name='student_counselor_idx'),
                ],
            },
        ),
    ]
