import random
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.utils import timezone

from config.constants import COUNSELOR_NAMES, EDUCATION_LEVELS, ENGLISH_TESTS, STUDY_DESTINATIONS
from students.models import Student

User = get_user_model()

FIRST_NAMES = ['Aarav', 'Sita', 'Bikash', 'Anisha', 'Roshan', 'Pooja', 'Sagar', 'Nisha', 'Kiran', 'Manisha']
LAST_NAMES = ['Shrestha', 'Gurung', 'Tamang', 'Adhikari', 'Karki', 'Rai', 'Magar', 'Poudel', 'Bhandari']


class Command(BaseCommand):
    help = 'Seeds database with demo users and students for testing'

    def add_arguments(self, parser):
        parser.add_argument('--students', type=int, default=40, help='Number of demo students to create.')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable data.')

    def handle(self, *args, **options):
        self.stdout.write('Seeding data...')
        rng = random.Random(options['seed'])

        if not User.objects.filter(username='admin').exists():
            User.objects.create_superuser('admin', 'admin@example.com', 'admin123')
            self.stdout.write(self.style.SUCCESS('Created superuser: admin'))

        call_command('seed_counselors', stdout=self.stdout)

        now = timezone.now()
        for _ in range(options['students']):
            first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
            visa_status = rng.choice(Student.VisaStatus.values)
            fee_status = rng.choice(Student.FeeStatus.values)
            Student.objects.create(
                full_name=f"{first} {last}",
                email=f"{first}.{last}{rng.randint(1, 999)}@example.com".lower(),
                mobile_number=f"98{rng.randint(10000000, 99999999)}",
                visa_status=visa_status,
                service_fee_status=fee_status,
                assigned_to=rng.choice(COUNSELOR_NAMES),
                last_completed_education=rng.choice(EDUCATION_LEVELS),
                english_proficiency_test=rng.choice(ENGLISH_TESTS),
                preferred_study_destination=rng.choice(STUDY_DESTINATIONS),
                service_fee_paid_date=now.date() if fee_status == Student.FeeStatus.PAID else None,
                visa_status_update_date=None if visa_status == Student.VisaStatus.NOT_APPLIED else now.date(),
                timestamp=now - timedelta(days=rng.randint(0, 365), minutes=rng.randint(0, 1440)),
            )
        self.stdout.write(self.style.SUCCESS(f"Created {options['students']} demo students"))

        self.stdout.write(self.style.SUCCESS('Data seeding complete!'))
