from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone

from analytics.models import DashboardMetrics
from analytics.services import MetricsService, dashboard_data, merge_case_insensitive, months_ago
from students.models import Student
from students.normalize import month_key


pytestmark = pytest.mark.django_db


def test_first_student_builds_the_singleton(student_factory):
    assert DashboardMetrics.load() is None

    student_factory(preferred_study_destination='Australia')

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 1
    assert metrics.students_by_destination == {'Australia': 1}
    assert metrics.students_by_counselor == {'Unassigned': 1}


def test_create_increments_counters(student_factory):
    student_factory(preferred_study_destination='USA')
    student = student_factory(preferred_study_destination='usa', assigned_to='Pawan Sir')

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 2
    assert metrics.students_by_destination == {'Usa': 2}
    assert metrics.students_by_counselor == {'Unassigned': 1, 'Pawan Acharya': 1}
    assert metrics.visa_status_counts == {'Not Applied': 2}
    assert metrics.monthly_admissions[month_key(student.timestamp)] >= 1


def test_update_moves_only_changed_counters(student_factory):
    student_factory()
    student = student_factory()

    student.preferred_study_destination = 'Canada'
    student.visa_status = Student.VisaStatus.APPROVED
    student.save()

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 2
    assert metrics.students_by_destination == {'Usa': 1, 'Canada': 1}
    assert metrics.visa_status_counts == {'Not Applied': 1, 'Approved': 1}
    assert metrics.students_by_english_test == {'Ielts': 2}


def test_update_without_tracked_changes_leaves_counters(student_factory):
    student = student_factory()
    before = DashboardMetrics.load().updated_at

    student.mobile_number = '9800000000'
    student.save()

    assert DashboardMetrics.load().updated_at == before


def test_delete_decrements_counters(student_factory):
    student_factory(preferred_study_destination='UK')
    gone = student_factory(preferred_study_destination='USA')

    gone.delete()

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 1
    assert metrics.students_by_destination == {'Uk': 1, 'Usa': 0}
    assert sum(metrics.monthly_admissions.values()) == 1


def test_missing_singleton_is_rebuilt_with_the_new_row(student_factory):
    student_factory()
    student_factory()
    DashboardMetrics.objects.all().delete()

    student_factory()

    assert DashboardMetrics.load().total_students == 3


def test_decrement_never_goes_below_zero(student_factory):
    student_factory(preferred_study_destination='USA')

    MetricsService.apply_delete({'preferred_study_destination': 'Canada', 'timestamp': None})
    MetricsService.apply_delete({'preferred_study_destination': 'Canada', 'timestamp': None})

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 0
    assert 'Canada' not in metrics.students_by_destination
    assert metrics.students_by_destination['Usa'] == 1


def test_recalculate_repairs_drift_from_bulk_writes(student_factory):
    student_factory()
    Student.objects.update(preferred_study_destination='Australia')

    metrics = MetricsService.recalculate()

    assert metrics.students_by_destination == {'Australia': 1}


def test_get_or_rebuild_builds_missing_row(student_factory):
    student_factory()
    DashboardMetrics.objects.all().delete()

    metrics = MetricsService.get_or_rebuild()

    assert metrics.pk == 1
    assert metrics.total_students == 1


def test_compute_limits_monthly_admissions_to_window():
    now = datetime(2026, 10, 18, 12, 0, tzinfo=dt_timezone.utc)
    rows = [
        {'preferred_study_destination': 'USA', 'timestamp': now - timedelta(days=3)},
        {'preferred_study_destination': 'USA', 'timestamp': now - timedelta(days=400)},
    ]

    stats = MetricsService.compute(rows, now=now)

    assert stats['total_students'] == 2
    assert sum(stats['monthly_admissions'].values()) == 1
    assert stats['students_by_education'] == {'N/A': 2}


def test_months_ago_clamps_day_of_month():
    dt = timezone.make_aware(datetime(2026, 3, 31, 10, 0))
    assert months_ago(dt, 1).date().isoformat() == '2026-02-28'
    assert months_ago(dt, 12).date().isoformat() == '2025-03-31'


def test_merge_case_insensitive():
    assert merge_case_insensitive({'USA': 2, 'usa': 1, 'Canada': 1}) == {'Usa': 3, 'Canada': 1}


def test_dashboard_data_orders_by_count():
    metrics = DashboardMetrics(
        total_students=4,
        students_by_destination={'Canada': 1, 'USA': 2, 'usa': 1},
        visa_status_counts={'Approved': 3, 'Pending': 1},
        students_by_counselor={'Unassigned': 2, 'Pawan Acharya': 2},
        service_fee_status_counts={'Paid': 1},
        monthly_admissions={'2026-10': 1, '2026-09': 3},
    )

    data = dashboard_data(metrics)

    assert data['destinations'] == [('Usa', 3), ('Canada', 1)]
    assert data['monthly'] == [('2026-09', 3), ('2026-10', 1)]
    cards = dict(data['stat_cards'])
    assert cards['Total Students'] == 4
    assert cards['Visas Approved'] == 3
    assert cards['Unassigned'] == 2
    assert cards['Fees Unpaid'] == 0
