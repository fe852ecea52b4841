import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import CommandError, call_command
from django.urls import reverse

from analytics.models import DashboardMetrics
from students.importer import CSVImportError, import_csv_text, parse_timestamp
from students.models import Student


CSV_TEXT = (
    "\ufeffTimestamp,Email Address,Full Name,Mobile Number,Last Completed Education,"
    "English Proficiency Test,Preferred Study Destination,Additional Notes / Specific Questions\n"
    "8/14/2024 10:32:05,hari@example.com,Hari Bahadur,9800000001,10+2,IELTS,Australia,Scholarships?\n"
    ",,Missing Email,9800000002,,,,\n"
    "2024-09-01 09:00:00,gita@example.com, Gita Sharma ,9800000003,Bachelor's Degree,PTE,UK,\n"
)


@pytest.mark.django_db
def test_import_creates_valid_rows_and_reports_skipped():
    result = import_csv_text(CSV_TEXT)

    assert result.created == 2
    assert result.errors == ["Row 3: Missing full name or email."]

    hari = Student.objects.get(email='hari@example.com')
    assert hari.assigned_to == 'Unassigned'
    assert hari.searchable_name == 'hari bahadur'
    assert hari.timestamp.year == 2024 and hari.timestamp.month == 8
    assert Student.objects.get(email='gita@example.com').full_name == 'Gita Sharma'


@pytest.mark.django_db
def test_import_rebuilds_dashboard_metrics():
    import_csv_text(CSV_TEXT)

    metrics = DashboardMetrics.load()
    assert metrics.total_students == 2
    assert metrics.students_by_destination == {'Australia': 1, 'Uk': 1}


@pytest.mark.django_db
def test_small_batches_insert_everything():
    assert import_csv_text(CSV_TEXT, batch_size=1).created == 2


def test_missing_headers_raise():
    with pytest.raises(CSVImportError):
        import_csv_text("Name,Email\nHari,hari@example.com\n")


def test_unreadable_timestamp_falls_back_to_now():
    assert parse_timestamp('sometime last week').tzinfo is not None
    assert parse_timestamp('') is not None


@pytest.mark.django_db
def test_bulk_upload_view(staff_client):
    upload = SimpleUploadedFile('export.csv', CSV_TEXT.encode('utf-8'), content_type='text/csv')

    response = staff_client.post(reverse('student-bulk-upload'), {'csv_file': upload})

    assert response.status_code == 302
    assert response.url == reverse('students-all')
    assert Student.objects.count() == 2


@pytest.mark.django_db
def test_bulk_upload_rejects_other_file_types(staff_client):
    upload = SimpleUploadedFile('export.xlsx', b'not a csv')

    response = staff_client.post(reverse('student-bulk-upload'), {'csv_file': upload})

    assert response.status_code == 200
    assert 'csv_file' in response.context['form'].errors


@pytest.mark.django_db
def test_bulk_upload_is_admin_only(counselor_client):
    response = counselor_client.get(reverse('student-bulk-upload'))

    assert response.status_code == 403


@pytest.mark.django_db
def test_import_command(tmp_path):
    path = tmp_path / 'students.csv'
    path.write_text(CSV_TEXT, encoding='utf-8')

    call_command('import_students_csv', str(path))

    assert Student.objects.count() == 2


@pytest.mark.django_db
def test_import_command_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command('import_students_csv', str(tmp_path / 'nope.csv'))
