import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.core import signing
from django.db.models import CharField, F, Q, TextField, Value
from django.db.models.functions import NullIf
from django.utils.dateparse import parse_datetime

from config.constants import PAGINATION_STUDENTS_ALL, STUDENT_TABLE_RECENT, UNASSIGNED, WELCOME_SCREEN_LIMIT
from .models import Student

logger = logging.getLogger("apps.students")

CURSOR_SALT = 'students.cursor'
FILTER_FIELDS = ('visa_status', 'service_fee_status', 'assigned_to')
ALL = 'all'

# Columns offered by the full data table, in display order.
SORTABLE_COLUMNS = [
    'timestamp', 'full_name', 'email', 'mobile_number', 'visa_status', 'service_fee_status',
    'assigned_to', 'last_completed_education', 'english_proficiency_test',
    'preferred_study_destination', 'service_fee_paid_date', 'visa_status_update_date',
    'emergency_contact', 'college_university_name', 'appointment_date', 'inquiry_type',
]


class InvalidCursor(ValueError):
    pass


def encode_cursor(student):
    return signing.dumps({'t': student.timestamp.isoformat(), 'id': student.pk}, salt=CURSOR_SALT)


def decode_cursor(token):
    try:
        data = signing.loads(token, salt=CURSOR_SALT)
        timestamp = parse_datetime(data['t'])
        pk = int(data['id'])
    except (signing.BadSignature, KeyError, TypeError, ValueError) as exc:
        logger.warning("Rejected pagination cursor: %s", exc)
        raise InvalidCursor(str(exc)) from exc
    if timestamp is None:
        raise InvalidCursor("bad timestamp")
    return timestamp, pk


@dataclass
class StudentPage:
    students: List[Student] = field(default_factory=list)
    has_next: bool = False
    has_prev: bool = False

    @property
    def is_empty(self):
        return not self.students

    @property
    def next_cursor(self) -> Optional[str]:
        return encode_cursor(self.students[-1]) if self.students and self.has_next else None

    @property
    def prev_cursor(self) -> Optional[str]:
        return encode_cursor(self.students[0]) if self.students and self.has_prev else None


class StudentService:

    @staticmethod
    def apply_filters(qs, filters):
        """Equality filters; a missing value or 'all' means no filter."""
        filters = filters or {}
        for name in FILTER_FIELDS:
            value = filters.get(name)
            if value and value != ALL:
                qs = qs.filter(**{name: value})
        return qs

    @staticmethod
    def search(prefix, queryset=None, limit=STUDENT_TABLE_RECENT):
        """Newest students whose lowercased name starts with `prefix`."""
        qs = queryset if queryset is not None else Student.objects.all()
        prefix = (prefix or '').strip().lower()
        if prefix:
            qs = qs.filter(searchable_name__startswith=prefix)
        return list(qs.order_by('-timestamp', '-id')[:limit])

    @staticmethod
    def paginate(filters=None, cursor=None, direction='next', queryset=None, page_size=PAGINATION_STUDENTS_ALL):
        """
        Keyset pagination over (timestamp desc, id desc).

        `cursor` is the token of the boundary row: the last row of the
        current page for 'next', the first row for 'prev'. Raises
        InvalidCursor for a tampered or malformed token.
        """
        qs = queryset if queryset is not None else Student.objects.all()
        qs = StudentService.apply_filters(qs, filters)

        if not cursor:
            rows = list(qs.order_by('-timestamp', '-id')[:page_size + 1])
            return StudentPage(rows[:page_size], has_next=len(rows) > page_size, has_prev=False)

        timestamp, pk = decode_cursor(cursor)

        if direction == 'prev':
            newer = Q(timestamp__gt=timestamp) | Q(timestamp=timestamp, id__gt=pk)
            rows = list(qs.filter(newer).order_by('timestamp', 'id')[:page_size + 1])
            has_prev = len(rows) > page_size
            rows = rows[:page_size]
            rows.reverse()
            return StudentPage(rows, has_next=bool(rows), has_prev=has_prev)

        older = Q(timestamp__lt=timestamp) | Q(timestamp=timestamp, id__lt=pk)
        rows = list(qs.filter(older).order_by('-timestamp', '-id')[:page_size + 1])
        return StudentPage(rows[:page_size], has_next=len(rows) > page_size, has_prev=bool(rows))

    @staticmethod
    def full_table(sort='timestamp', direction='desc', queryset=None):
        """Every record sorted by one column; empty and null values always sort last."""
        if sort not in SORTABLE_COLUMNS:
            sort = 'timestamp'
        qs = queryset if queryset is not None else Student.objects.all()

        model_field = Student._meta.get_field(sort)
        if isinstance(model_field, (CharField, TextField)):
            expression = NullIf(F(sort), Value(''))
        else:
            expression = F(sort)

        if direction == 'asc':
            ordering = [expression.asc(nulls_last=True), 'id']
        else:
            ordering = [expression.desc(nulls_last=True), '-id']
        return qs.order_by(*ordering)

    @staticmethod
    def for_counselor(name):
        return Student.objects.filter(assigned_to=name).order_by('-timestamp', '-id')

    @staticmethod
    def unassigned_recent_names(limit=WELCOME_SCREEN_LIMIT):
        """Names shown on the office welcome screen."""
        return list(
            Student.objects.filter(assigned_to=UNASSIGNED)
            .order_by('-timestamp', '-id')
            .values_list('full_name', flat=True)[:limit]
        )
