from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from config.constants import CSV_IMPORT_BATCH_SIZE, CSV_REQUIRED_HEADERS
from students.importer import CSVImportError, import_csv_text


class Command(BaseCommand):
    help = 'Import students from a Google Forms CSV export'

    def add_arguments(self, parser):
        parser.add_argument('csv_path', type=str)
        parser.add_argument('--batch-size', type=int, default=CSV_IMPORT_BATCH_SIZE)

    def handle(self, *args, **options):
        path = Path(options['csv_path'])
        if not path.exists():
            raise CommandError(f"CSV file not found: {path}")

        try:
            text = path.read_text(encoding='utf-8')
        except UnicodeDecodeError:
            raise CommandError("File encoding error. Please ensure the file is UTF-8 encoded.")

        try:
            result = import_csv_text(text, batch_size=options['batch_size'])
        except CSVImportError as e:
            raise CommandError(f"Missing required columns. Found: {e.args[0]}. Required: {CSV_REQUIRED_HEADERS}")

        for error in result.errors:
            self.stdout.write(self.style.WARNING(f"  Skipped {error}"))
        self.stdout.write(self.style.SUCCESS(f"Imported {result.created} students ({len(result.errors)} skipped)."))
