from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ClassBooking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=50)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=15)),
                ('preferred_test', models.CharField(choices=[('IELTS Prep', 'IELTS'), ('PTE Prep', 'PTE'), ('TOEFL Prep', 'TOEFL'), ('Duolingo Prep', 'Duolingo'), ('USA Visa Prep', 'Unlimited USA Visa Prep'), ('General English', 'General English')], max_length=30)),
                ('preferred_start_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, max_length=500)),
                ('contacted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
