from django.core.management.base import BaseCommand
from django.db import transaction

from analytics.services import MetricsService
from config.constants import COUNSELOR_RENAMES
from students.models import Student


class Command(BaseCommand):
    help = 'Replace old short counselor names ("Pawan Sir") with full names'

    def add_arguments(self, parser):
        parser.add_argument('--dry-run', action='store_true', help='Only report what would change')

    def handle(self, *args, **options):
        total = 0
        with transaction.atomic():
            for old_name, new_name in COUNSELOR_RENAMES.items():
                qs = Student.objects.filter(assigned_to=old_name)
                count = qs.count()
                if not count:
                    continue
                if not options['dry_run']:
                    qs.update(assigned_to=new_name)
                total += count
                self.stdout.write(f"  {old_name} -> {new_name}: {count} student(s)")

        if options['dry_run']:
            self.stdout.write(self.style.WARNING(f"Dry run: {total} student(s) would be renamed."))
            return

        if total:
            MetricsService.recalculate()
        self.stdout.write(self.style.SUCCESS(f"Renamed counselor on {total} student(s)."))
