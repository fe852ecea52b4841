from datetime import date, timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from config.context_processors import site_config
from core.models import PlatformConfig
from public.models import ClassBooking
from public.services import LeadService, long_date, slot_start
from students.models import Student


pytestmark = pytest.mark.django_db


def contact_data(**overrides):
    data = {
        'name': 'Prakash Adhikari',
        'email': 'prakash@example.com',
        'phone': '9812345678',
        'last_completed_education': '10+2',
        'english_proficiency_test': 'IELTS',
        'preferred_study_destination': 'Canada',
        'additional_notes': '',
        'connection_type': 'office',
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize('url_name', [
    'home', 'about', 'services', 'country-guides', 'faq', 'interview-qa', 'english-test-guide',
    'pre-departure-toolkit', 'success-stories', 'connect', 'contact', 'prep-classes', 'book-appointment',
])
def test_public_pages_render(client, url_name):
    response = client.get(reverse(url_name))

    assert response.status_code == 200


def test_footer_falls_back_to_branding_contact(client):
    config = PlatformConfig.load()
    config.address = ''
    config.contact_email = ''
    config.support_phone = ''
    config.save()

    response = client.get(reverse('contact'))

    assert response.status_code == 200
    content = response.content.decode()
    assert "New Baneshwor, Kathmandu, Nepal, 44600" in content
    assert "info@pixaredu.com" in content


def test_context_covers_branding_used_by_templates(rf):
    context = site_config(rf.get('/'))

    for key in ('SITE_NAME', 'SITE_TAGLINE', 'COMPANY_EMAIL', 'COMPANY_PHONE', 'COMPANY_ADDRESS'):
        assert context[key]


def test_country_detail(client):
    response = client.get(reverse('country-detail', args=['australia']))

    assert response.status_code == 200
    assert response.context['country']['name'] == 'Australia'


def test_unknown_country_is_404(client):
    response = client.get(reverse('country-detail', args=['atlantis']))

    assert response.status_code == 404


def test_office_inquiry_creates_walk_in_student(client):
    response = client.post(reverse('contact'), contact_data(additional_notes='Scholarship options?'))

    assert response.status_code == 302
    student = Student.objects.get()
    assert student.inquiry_type == Student.InquiryType.OFFICE_WALK_IN
    assert student.assigned_to == 'Unassigned'
    assert student.visa_status == 'Not Applied'
    assert student.additional_notes == 'Scholarship options?'
    assert student.appointment_date is None


def test_remote_visit_inquiry_records_the_date(client):
    visit = timezone.localdate() + timedelta(days=3)

    client.post(reverse('contact'), contact_data(
        connection_type='remote', follow_up_type='visit', appointment_date=visit.isoformat(),
        additional_notes='Morning please',
    ))

    student = Student.objects.get()
    assert student.inquiry_type == Student.InquiryType.VISIT
    assert timezone.localtime(student.appointment_date).date() == visit
    assert student.additional_notes == (
        f"Remote Inquiry: Scheduled for an office visit on {long_date(visit)}.\n\n"
        "Student's original notes: Morning please"
    )


def test_remote_phone_inquiry(client):
    client.post(reverse('contact'), contact_data(connection_type='remote', follow_up_type='phone'))

    student = Student.objects.get()
    assert student.inquiry_type == Student.InquiryType.PHONE
    assert student.additional_notes == "Remote Inquiry: Requested phone counselling."


@pytest.mark.parametrize('overrides, field', [
    ({'connection_type': 'remote'}, 'follow_up_type'),
    ({'connection_type': 'remote', 'follow_up_type': 'visit'}, 'appointment_date'),
    ({'phone': '12ab'}, 'phone'),
    ({'name': 'A'}, 'name'),
    ({'email': 'not-an-email'}, 'email'),
])
def test_contact_form_validation(client, overrides, field):
    response = client.post(reverse('contact'), contact_data(**overrides))

    assert response.status_code == 200
    assert field in response.context['form'].errors
    assert not Student.objects.exists()


def test_office_inquiry_ignores_follow_up_fields():
    student = LeadService.create_inquiry({
        'name': 'Office Visitor', 'email': 'o@example.com', 'phone': '9800000000',
        'last_completed_education': 'Diploma', 'english_proficiency_test': 'PTE',
        'preferred_study_destination': 'UK', 'connection_type': 'office',
        'follow_up_type': '', 'appointment_date': None, 'additional_notes': '  ',
    })

    assert student.inquiry_type == Student.InquiryType.OFFICE_WALK_IN
    assert student.additional_notes == ''


def test_prep_class_booking(client):
    response = client.post(reverse('prep-classes'), {
        'name': 'Nisha Lama', 'email': 'nisha@example.com', 'phone': '9801111111',
        'preferred_test': 'PTE Prep', 'notes': 'Evening batch',
    })

    assert response.status_code == 302
    booking = ClassBooking.objects.get()
    assert booking.preferred_test == 'PTE Prep'
    assert not booking.contacted
    assert not Student.objects.exists()


def test_book_appointment_creates_visit_student(client):
    day = timezone.localdate() + timedelta(days=2)

    response = client.post(reverse('book-appointment'), {
        'service': 'general_consultation', 'staff': 'any_available', 'date': day.isoformat(),
        'time_slot': '09:30 AM - 10:00 AM', 'name': 'Kiran Tamang', 'email': 'kiran@example.com',
        'phone': '9802222222', 'notes': '',
    })

    assert response.status_code == 302
    student = Student.objects.get()
    assert student.inquiry_type == Student.InquiryType.VISIT
    local = timezone.localtime(student.appointment_date)
    assert (local.date(), local.hour, local.minute) == (day, 9, 30)
    assert student.additional_notes.startswith(
        "Appointment request: General Education Consultation with Any Available Advisor"
    )


def test_appointment_in_the_past_is_rejected(client):
    yesterday = timezone.localdate() - timedelta(days=1)

    response = client.post(reverse('book-appointment'), {
        'service': 'other', 'staff': 'any_available', 'date': yesterday.isoformat(),
        'time_slot': '09:00 AM - 09:30 AM', 'name': 'Kiran Tamang', 'email': 'kiran@example.com',
        'phone': '9802222222',
    })

    assert response.status_code == 200
    assert 'date' in response.context['form'].errors


def test_slot_start_handles_afternoon_slots():
    start = slot_start(date(2026, 10, 20), '01:30 PM - 02:00 PM')

    assert (start.hour, start.minute) == (13, 30)


def test_maintenance_mode_blocks_public_pages(client, admin_user):
    config = PlatformConfig.load()
    config.maintenance_mode = True
    config.save()

    assert client.get(reverse('home')).status_code == 503
    assert client.get(reverse('login')).status_code == 200

    client.force_login(admin_user)
    assert client.get(reverse('home')).status_code == 200


@pytest.mark.parametrize('day, expected', [
    (date(2026, 10, 5), "October 5th, 2026"),
    (date(2026, 10, 1), "October 1st, 2026"),
    (date(2026, 10, 22), "October 22nd, 2026"),
    (date(2026, 10, 13), "October 13th, 2026"),
    (date(2026, 11, 3), "November 3rd, 2026"),
])
def test_long_date(day, expected):
    assert long_date(day) == expected


def test_visit_note_date_has_no_zero_padding(client):
    client.post(reverse('contact'), contact_data(
        connection_type='remote', follow_up_type='visit', appointment_date='2099-01-05',
    ))

    assert Student.objects.get().additional_notes == (
        "Remote Inquiry: Scheduled for an office visit on January 5th, 2099."
    )
