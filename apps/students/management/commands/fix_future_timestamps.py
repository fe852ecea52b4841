from django.core.management.base import BaseCommand
from django.utils import timezone

from analytics.services import MetricsService
from students.models import Student


class Command(BaseCommand):
    help = 'Reset student timestamps that lie in the future to now'

    def handle(self, *args, **kwargs):
        now = timezone.now()
        future = Student.objects.filter(timestamp__gt=now)
        for name, timestamp in future.values_list('full_name', 'timestamp'):
            self.stdout.write(f"  {name}: {timestamp:%Y-%m-%d %H:%M}")

        fixed = future.update(timestamp=now)
        if not fixed:
            self.stdout.write(self.style.SUCCESS("No student records with future timestamps were found."))
            return

        MetricsService.recalculate()
        self.stdout.write(self.style.SUCCESS(f"Reset {fixed} future timestamp(s) to now."))
