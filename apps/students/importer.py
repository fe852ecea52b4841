"""
Bulk import of the Google Forms inquiry export.

Used by the admin CSV upload page and the `import_students_csv` command.
Rows go in with bulk_create, which skips model signals, so the dashboard
counters are rebuilt once after the import.
"""
import csv
import io
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from analytics.services import MetricsService
from config.constants import CSV_IMPORT_BATCH_SIZE, CSV_REQUIRED_HEADERS, UNASSIGNED
from .models import Student

logger = logging.getLogger("apps.students")

COLUMN_MAP = {
    'Email Address': 'email',
    'Full Name': 'full_name',
    'Mobile Number': 'mobile_number',
    'Last Completed Education': 'last_completed_education',
    'English Proficiency Test': 'english_proficiency_test',
    'Preferred Study Destination': 'preferred_study_destination',
    'Additional Notes / Specific Questions': 'additional_notes',
}

TIMESTAMP_FORMATS = (
    '%m/%d/%Y %H:%M:%S',
    '%m/%d/%Y %H:%M',
    '%m/%d/%Y',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
)


class CSVImportError(ValueError):
    pass


@dataclass
class ImportResult:
    created: int = 0
    errors: List[str] = field(default_factory=list)


def parse_timestamp(value):
    """Google Forms writes "8/14/2024 10:32:05"; fall back to now when unreadable."""
    value = (value or '').strip()
    if not value:
        return timezone.now()
    parsed = parse_datetime(value)
    if parsed is None:
        for fmt in TIMESTAMP_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return timezone.now()
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def read_rows(text):
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    headers = [h.strip() for h in (reader.fieldnames or [])]
    missing = [h for h in CSV_REQUIRED_HEADERS if h not in headers]
    if missing:
        raise CSVImportError(headers)
    reader.fieldnames = headers
    return list(reader)


def build_student(row):
    values = {attr: (row.get(column) or '').strip() for column, attr in COLUMN_MAP.items()}
    student = Student(
        **values,
        visa_status=Student.VisaStatus.NOT_APPLIED,
        service_fee_status=Student.FeeStatus.UNPAID,
        assigned_to=UNASSIGNED,
        inquiry_type=Student.InquiryType.OFFICE_WALK_IN,
        timestamp=parse_timestamp(row.get('Timestamp')),
    )
    # bulk_create does not call save()
    student.searchable_name = student.full_name.lower()
    return student


def import_rows(rows, batch_size=CSV_IMPORT_BATCH_SIZE):
    """Insert valid rows in batches inside one transaction; report skipped rows."""
    result = ImportResult()
    pending = []
    with transaction.atomic():
        for line, row in enumerate(rows, start=2):
            if not (row.get('Full Name') or '').strip() or not (row.get('Email Address') or '').strip():
                result.errors.append(f"Row {line}: Missing full name or email.")
                continue
            pending.append(build_student(row))
            if len(pending) >= batch_size:
                Student.objects.bulk_create(pending)
                result.created += len(pending)
                logger.info("Imported batch of %s students", len(pending))
                pending = []
        if pending:
            Student.objects.bulk_create(pending)
            result.created += len(pending)

    if result.created:
        MetricsService.recalculate()
    logger.info("CSV import finished: %s created, %s skipped", result.created, len(result.errors))
    return result


def import_csv_text(text, batch_size=CSV_IMPORT_BATCH_SIZE):
    return import_rows(read_rows(text), batch_size=batch_size)
