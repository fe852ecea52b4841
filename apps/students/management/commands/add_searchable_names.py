from django.core.management.base import BaseCommand
from django.db.models import Q

from students.models import Student


class Command(BaseCommand):
    help = 'Backfill searchable_name on students that are missing it'

    def handle(self, *args, **kwargs):
        missing = Student.objects.filter(Q(searchable_name='') & ~Q(full_name=''))
        updated = 0
        for student in missing.iterator():
            student.searchable_name = student.full_name.strip().lower()
            Student.objects.filter(pk=student.pk).update(searchable_name=student.searchable_name)
            updated += 1

        if updated:
            self.stdout.write(self.style.SUCCESS(f"Added searchable names to {updated} student(s)."))
        else:
            self.stdout.write(self.style.SUCCESS("All students already have searchable names."))
