from datetime import date, datetime

import pytest
from django.urls import reverse
from django.utils import timezone

from reports.services import ReportError, ReportService, format_rate
from students.models import Student


pytestmark = pytest.mark.django_db

START = date(2026, 9, 1)
END = date(2026, 9, 30)


def at(day, hour=12):
    return timezone.make_aware(datetime(2026, 9, day, hour, 0))


@pytest.fixture
def caseload(student_factory):
    counselor = 'Pawan Acharya'
    return {
        'new_paid': student_factory(
            assigned_to=counselor, timestamp=at(2), service_fee_status='Paid', service_fee_paid_date=date(2026, 9, 5),
        ),
        'new_unpaid': student_factory(assigned_to=counselor, timestamp=at(30, 23)),
        'approved': student_factory(
            assigned_to=counselor, timestamp=timezone.make_aware(datetime(2026, 5, 1)),
            visa_status='Approved', visa_status_update_date=date(2026, 9, 10),
        ),
        'rejected': student_factory(
            assigned_to=counselor, timestamp=timezone.make_aware(datetime(2026, 5, 2)),
            visa_status='Rejected', visa_status_update_date=date(2026, 9, 30),
        ),
        'paid_earlier': student_factory(
            assigned_to=counselor, timestamp=timezone.make_aware(datetime(2026, 1, 2)),
            service_fee_status='Paid', service_fee_paid_date=date(2026, 2, 1),
        ),
        'someone_else': student_factory(assigned_to='Sabina Thapa', timestamp=at(3)),
    }


def test_build_counts_each_section(caseload):
    report = ReportService.build('Pawan Acharya', START, END)

    assert report.newly_assigned == [caseload['new_unpaid'], caseload['new_paid']]
    assert report.visas_approved == [caseload['approved']]
    assert report.visas_rejected == [caseload['rejected']]
    assert report.fees_paid_in_period == [caseload['new_paid']]
    assert report.total_fees_paid_count == 2


def test_sections_are_ordered_by_their_own_dates(student_factory):
    counselor = 'Pawan Acharya'
    # Registered earlier but decided later: must come first.
    old_late = student_factory(
        assigned_to=counselor, timestamp=at(1), visa_status='Approved', visa_status_update_date=date(2026, 9, 20),
        service_fee_status='Paid', service_fee_paid_date=date(2026, 9, 25),
    )
    new_early = student_factory(
        assigned_to=counselor, timestamp=at(15), visa_status='Approved', visa_status_update_date=date(2026, 9, 16),
        service_fee_status='Paid', service_fee_paid_date=date(2026, 9, 16),
    )

    report = ReportService.build(counselor, START, END)

    assert report.visas_approved == [old_late, new_early]
    assert report.fees_paid_in_period == [old_late, new_early]
    assert report.newly_assigned == [new_early, old_late]


def test_rates(caseload):
    report = ReportService.build('Pawan Acharya', START, END)

    assert report.visa_approval_rate == "50.0"
    assert report.fee_conversion_rate == "50.0"
    assert ("Visa Approval Rate", "50.0%") in report.summary_rows()


def test_format_rate_with_no_denominator():
    assert format_rate(0, 0) == "0.0"
    assert format_rate(1, 3) == "33.3"


@pytest.mark.parametrize('counselor, start, end', [
    ('', START, END),
    ('Unassigned', START, END),
    ('Pawan Acharya', None, END),
    ('Pawan Acharya', END, START),
])
def test_validate_rejects_bad_input(counselor, start, end):
    with pytest.raises(ReportError):
        ReportService.validate(counselor, start, end)


def test_single_day_range_is_inclusive(student_factory):
    student_factory(assigned_to='Pawan Acharya', timestamp=at(15, 23))

    report = ReportService.build('Pawan Acharya', date(2026, 9, 15), date(2026, 9, 15))

    assert len(report.newly_assigned) == 1


def test_report_page(staff_client, caseload):
    response = staff_client.get(reverse('report'), {
        'counselor': 'Pawan Acharya', 'start_date': '2026-09-01', 'end_date': '2026-09-30',
    })

    assert response.status_code == 200
    assert len(response.context['report'].newly_assigned) == 2


def test_report_page_shows_validation_errors(staff_client):
    response = staff_client.get(reverse('report'), {
        'counselor': 'Unassigned', 'start_date': '2026-09-01', 'end_date': '2026-09-30',
    })

    assert response.context['report'] is None
    messages = [str(m) for m in response.context['messages']]
    assert "Reports cannot be generated for unassigned students." in messages


def test_counselor_cannot_report_on_colleagues(counselor_client, caseload):
    response = counselor_client.get(reverse('report'), {
        'counselor': 'Sabina Thapa', 'start_date': '2026-09-01', 'end_date': '2026-09-30',
    })

    assert response.context['report'] is None
    assert 'counselor' in response.context['form'].errors


def test_report_pdf(staff_client, caseload):
    response = staff_client.get(reverse('report-pdf'), {
        'counselor': 'Pawan Acharya', 'start_date': '2026-09-01', 'end_date': '2026-09-30',
    })

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/pdf'
    assert 'report-pawan-acharya-2026-09-01-2026-09-30.pdf' in response['Content-Disposition']
    assert response.content.startswith(b'%PDF')


def test_report_pdf_without_parameters_redirects(staff_client):
    response = staff_client.get(reverse('report-pdf'))

    assert response.status_code == 302
    assert response.url == reverse('report')


def test_visa_dates_are_not_restamped(student_factory):
    student = student_factory(visa_status='Approved', visa_status_update_date=date(2026, 9, 10))

    assert Student.objects.get(pk=student.pk).visa_status_update_date == date(2026, 9, 10)
