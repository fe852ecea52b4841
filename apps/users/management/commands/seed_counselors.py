from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils.text import slugify

from config.constants import COUNSELOR_NAMES, UNASSIGNED

User = get_user_model()


class Command(BaseCommand):
    help = "Create a counselor login for every counselor name that does not have one yet."

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            default='changeme123',
            help='Initial password for newly created counselor accounts.',
        )

    def handle(self, *args, **options):
        created_count = 0
        for name in COUNSELOR_NAMES:
            if name == UNASSIGNED:
                continue
            if User.objects.filter(counselor_name=name).exists():
                self.stdout.write(f"  Already exists: {name}")
                continue

            first_name, _, last_name = name.partition(' ')
            user = User.objects.create_user(
                username=slugify(name).replace('-', '.'),
                password=options['password'],
                first_name=first_name,
                last_name=last_name,
            )
            user.role = User.Role.COUNSELOR
            user.counselor_name = name
            user.save()
            created_count += 1
            self.stdout.write(self.style.SUCCESS(f"  Created: {name} ({user.username})"))

        self.stdout.write(self.style.SUCCESS(f"\nDone! {created_count} new counselor accounts created."))
