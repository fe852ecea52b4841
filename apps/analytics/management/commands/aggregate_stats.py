from django.core.management.base import BaseCommand

from analytics.services import MetricsService


class Command(BaseCommand):
    help = 'Rebuild the dashboard metrics from every student record'

    def handle(self, *args, **kwargs):
        self.stdout.write('Aggregating student records...')
        metrics = MetricsService.recalculate()

        self.stdout.write(f"  Total students: {metrics.total_students}")
        self.stdout.write(f"  Destinations: {len(metrics.students_by_destination)}")
        self.stdout.write(f"  Counselors: {len(metrics.students_by_counselor)}")
        self.stdout.write(f"  Months with admissions: {len(metrics.monthly_admissions)}")
        self.stdout.write(self.style.SUCCESS('Dashboard metrics are up to date.'))
