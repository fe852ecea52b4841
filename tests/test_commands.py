from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from analytics.models import DashboardMetrics
from students.models import Student
from users.models import User


pytestmark = pytest.mark.django_db


def run(*args, **kwargs):
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


def test_seed_counselors_is_idempotent():
    run('seed_counselors')
    output = run('seed_counselors')

    counselors = User.objects.filter(role=User.Role.COUNSELOR)
    assert counselors.count() == 6
    assert counselors.filter(username='pawan.acharya', counselor_name='Pawan Acharya').exists()
    assert "0 new counselor accounts created" in output


def test_seed_data_creates_admin_counselors_and_students():
    run('seed_data', students=12, seed=7)

    assert User.objects.get(username='admin').is_admin
    assert Student.objects.count() == 12
    assert DashboardMetrics.load().total_students == 12


def test_aggregate_stats_rebuilds_metrics(student_factory):
    student_factory()
    student_factory()
    DashboardMetrics.objects.all().delete()

    output = run('aggregate_stats')

    assert DashboardMetrics.load().total_students == 2
    assert "Total students: 2" in output


def test_update_counselor_names(student_factory):
    student_factory(assigned_to='Pawan Sir')
    student_factory(assigned_to='Ram Sir')
    student_factory(assigned_to='Sabina Thapa')

    dry = run('update_counselor_names', dry_run=True)
    assert "2 student(s) would be renamed" in dry
    assert Student.objects.filter(assigned_to='Pawan Sir').exists()

    run('update_counselor_names')
    assert set(Student.objects.values_list('assigned_to', flat=True)) == {
        'Pawan Acharya', 'Ram Babu Ojha', 'Sabina Thapa',
    }
    assert DashboardMetrics.load().students_by_counselor['Pawan Acharya'] == 1


@pytest.mark.parametrize('old, new', [
    ('Sonima Mam', 'Sonima Rijal'),
    ('Sujata Mam', 'Sujata Nepal'),
    ('Anisha Mam', 'Anisha Thapa'),
    ('Saubhana Mam', 'Saubhana Bhandari'),
    ('Sunita Mam', 'Sunita Khadka'),
])
def test_update_counselor_names_covers_former_staff(student_factory, old, new):
    student = student_factory(assigned_to=old)

    run('update_counselor_names')

    student.refresh_from_db()
    assert student.assigned_to == new


def test_fix_future_timestamps(student_factory):
    student = student_factory(timestamp=timezone.now() + timedelta(days=10))

    output = run('fix_future_timestamps')

    student.refresh_from_db()
    assert student.timestamp <= timezone.now()
    assert "Reset 1 future timestamp(s)" in output


def test_add_searchable_names(student_factory):
    student = student_factory(full_name='Laxmi Bhatta')
    Student.objects.filter(pk=student.pk).update(searchable_name='')

    run('add_searchable_names')

    student.refresh_from_db()
    assert student.searchable_name == 'laxmi bhatta'


def test_healthcheck_reports_metric_drift(student_factory):
    student_factory()
    Student.objects.all().delete()
    Student.objects.bulk_create([Student(full_name='Bulk', email='bulk@example.com')])

    output = run('healthcheck')

    assert 'PLATFORM HEALTH CHECK' in output
    assert 'Drift: stored' in output
