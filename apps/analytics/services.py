"""
Incremental maintenance of the DashboardMetrics counters.

Each student create / update / delete moves the affected counters by one
under a row lock on the singleton. When the singleton is missing it is
rebuilt from the student table instead (lazy recalculation), which also
repairs any drift left by bulk writes that bypass signals.
"""
import calendar
import logging

from django.db import transaction
from django.utils import timezone

from config.constants import MONTHLY_ADMISSIONS_WINDOW_MONTHS, UNASSIGNED
from students.models import Student
from students.normalize import month_key, normalize_counselor, title_case
from .models import DashboardMetrics

logger = logging.getLogger("apps.analytics")

# counter map -> (student field, key normalizer)
COUNTER_MAPS = {
    'students_by_destination': ('preferred_study_destination', title_case),
    'visa_status_counts': ('visa_status', title_case),
    'students_by_counselor': ('assigned_to', normalize_counselor),
    'service_fee_status_counts': ('service_fee_status', title_case),
    'students_by_education': ('last_completed_education', title_case),
    'students_by_english_test': ('english_proficiency_test', title_case),
}
TRACKED_FIELDS = tuple(field for field, _ in COUNTER_MAPS.values())


def months_ago(dt, months):
    """Same day-of-month `months` earlier, clamped to the month's length."""
    month_index = dt.year * 12 + dt.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def student_values(student):
    """The tracked fields plus timestamp, from a Student instance."""
    values = {name: getattr(student, name) for name in TRACKED_FIELDS}
    values['timestamp'] = student.timestamp
    return values


def _increment(counts, key):
    counts[key] = counts.get(key, 0) + 1


def _decrement(counts, key):
    # Never below zero; a missing key stays missing.
    if counts.get(key, 0) > 0:
        counts[key] -= 1


class MetricsService:

    @staticmethod
    def compute(rows, now=None):
        """Build every counter from an iterable of student value dicts."""
        now = now or timezone.now()
        window_start = months_ago(now, MONTHLY_ADMISSIONS_WINDOW_MONTHS)
        stats = {name: {} for name in COUNTER_MAPS}
        stats['monthly_admissions'] = {}
        stats['total_students'] = 0

        for row in rows:
            stats['total_students'] += 1
            for name, (field, normalize) in COUNTER_MAPS.items():
                _increment(stats[name], normalize(row.get(field)))
            timestamp = row.get('timestamp')
            if timestamp and timestamp > window_start:
                _increment(stats['monthly_admissions'], month_key(timestamp))
        return stats

    @staticmethod
    def recalculate():
        """Rebuild the singleton from scratch and return it."""
        rows = Student.objects.values(*TRACKED_FIELDS, 'timestamp').iterator()
        stats = MetricsService.compute(rows)
        metrics, _ = DashboardMetrics.objects.update_or_create(pk=1, defaults=stats)
        logger.info("Dashboard metrics recalculated: %s students", stats['total_students'])
        return metrics

    @staticmethod
    def get_or_rebuild():
        metrics = DashboardMetrics.load()
        if metrics is None:
            logger.info("Dashboard metrics missing; rebuilding from student records")
            metrics = MetricsService.recalculate()
        return metrics

    @staticmethod
    def _mutate(apply):
        with transaction.atomic():
            metrics = DashboardMetrics.objects.select_for_update().filter(pk=1).first()
            if metrics is None:
                # The student write has already happened, so a rebuild includes it.
                MetricsService.recalculate()
                return
            apply(metrics)
            metrics.save()

    @staticmethod
    def apply_create(values):
        def apply(metrics):
            metrics.total_students += 1
            for name, (field, normalize) in COUNTER_MAPS.items():
                _increment(getattr(metrics, name), normalize(values.get(field)))
            if values.get('timestamp'):
                _increment(metrics.monthly_admissions, month_key(values['timestamp']))

        MetricsService._mutate(apply)

    @staticmethod
    def apply_delete(values):
        def apply(metrics):
            metrics.total_students = max(metrics.total_students - 1, 0)
            for name, (field, normalize) in COUNTER_MAPS.items():
                _decrement(getattr(metrics, name), normalize(values.get(field)))
            if values.get('timestamp'):
                _decrement(metrics.monthly_admissions, month_key(values['timestamp']))

        MetricsService._mutate(apply)

    @staticmethod
    def apply_update(old, new):
        """Move only the counters whose raw field value changed."""
        changed = [
            (name, field, normalize)
            for name, (field, normalize) in COUNTER_MAPS.items()
            if old.get(field) != new.get(field)
        ]
        if not changed:
            return

        def apply(metrics):
            for name, field, normalize in changed:
                counts = getattr(metrics, name)
                _decrement(counts, normalize(old.get(field)))
                _increment(counts, normalize(new.get(field)))

        MetricsService._mutate(apply)


def merge_case_insensitive(counts):
    """
    Collapse keys that differ only by case ("USA", "usa") into one display
    key: first letter upper-cased, the rest lower-cased.
    """
    merged = {}
    for key, value in (counts or {}).items():
        display = key[:1].upper() + key[1:].lower() if key else key
        merged[display] = merged.get(display, 0) + value
    return merged


def sorted_by_count(counts):
    return sorted((counts or {}).items(), key=lambda item: item[1], reverse=True)


def dashboard_data(metrics):
    """Chart series and stat cards for the analytics dashboard."""
    visa = metrics.visa_status_counts or {}
    fees = metrics.service_fee_status_counts or {}
    counselors = metrics.students_by_counselor or {}
    return {
        'stat_cards': [
            ('Total Students', metrics.total_students),
            ('Visas Approved', visa.get('Approved', 0)),
            ('Visas Rejected', visa.get('Rejected', 0)),
            ('Visas Pending', visa.get('Pending', 0)),
            ('Fees Paid', fees.get('Paid', 0)),
            ('Fees Partial', fees.get('Partial', 0)),
            ('Fees Unpaid', fees.get('Unpaid', 0)),
            ('Unassigned', counselors.get(UNASSIGNED, 0)),
        ],
        'destinations': sorted_by_count(merge_case_insensitive(metrics.students_by_destination)),
        'english_tests': sorted_by_count(merge_case_insensitive(metrics.students_by_english_test)),
        'visa_statuses': sorted_by_count(visa),
        'fee_statuses': sorted_by_count(fees),
        'counselors': sorted_by_count(counselors),
        'education': sorted_by_count(metrics.students_by_education),
        'monthly': sorted((metrics.monthly_admissions or {}).items()),
    }
