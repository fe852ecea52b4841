import pytest
from django.urls import reverse

from students.models import Student
from students.services import encode_cursor


pytestmark = pytest.mark.django_db


def student_post_data(**overrides):
    data = {
        'full_name': 'Sujan Shrestha',
        'email': 'sujan@example.com',
        'mobile_number': '+977 9800000000',
        'visa_status': 'Not Applied',
        'service_fee_status': 'Unpaid',
        'assigned_to': 'Unassigned',
        'inquiry_type': 'office_walk_in',
        'last_completed_education': '10+2',
        'english_proficiency_test': 'PTE',
        'preferred_study_destination': 'Australia',
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize('url_name', ['student-table', 'students-all', 'students-full', 'counselor-dashboard'])
def test_anonymous_is_sent_to_login(client, url_name):
    response = client.get(reverse(url_name))

    assert response.status_code == 302
    assert reverse('login') in response.url


def test_non_staff_user_is_turned_away(client, django_user_model):
    user = django_user_model.objects.create_user('visitor', password='secret123', role='')
    client.force_login(user)

    response = client.get(reverse('student-table'))

    assert response.status_code == 302
    assert response.url == reverse('home')


def test_admin_sees_every_student(staff_client, student_factory):
    student_factory(full_name='Mine', assigned_to='Pawan Acharya')
    student_factory(full_name='Theirs', assigned_to='Sabina Thapa')

    response = staff_client.get(reverse('student-table'))

    assert response.status_code == 200
    assert {s.full_name for s in response.context['students']} == {'Mine', 'Theirs'}


def test_counselor_sees_only_their_students(counselor_client, student_factory):
    student_factory(full_name='Mine', assigned_to='Pawan Acharya')
    student_factory(full_name='Theirs', assigned_to='Sabina Thapa')

    response = counselor_client.get(reverse('student-table'))

    assert [s.full_name for s in response.context['students']] == ['Mine']


def test_counselor_cannot_edit_other_students(counselor_client, student_factory):
    other = student_factory(assigned_to='Sabina Thapa')

    response = counselor_client.get(reverse('student-update', args=[other.pk]))

    assert response.status_code == 404


def test_search_returns_rows_partial_for_htmx(staff_client, student_factory):
    student_factory(full_name='Ramesh Gurung')
    student_factory(full_name='Sita Gurung')

    response = staff_client.get(reverse('student-table'), {'q': 'ram'}, HTTP_HX_REQUEST='true')

    assert response.status_code == 200
    assert [t.name for t in response.templates][0] == 'students/_student_rows.html'
    content = response.content.decode()
    assert 'Ramesh Gurung' in content
    assert 'Sita Gurung' not in content


def test_admin_creates_student(staff_client):
    response = staff_client.post(reverse('student-create'), student_post_data(assigned_to='Mujal Amatya'))

    assert response.status_code == 302
    student = Student.objects.get()
    assert student.assigned_to == 'Mujal Amatya'
    assert student.searchable_name == 'sujan shrestha'


def test_counselor_creates_student_for_themselves(counselor_client):
    response = counselor_client.post(reverse('student-create'), student_post_data(assigned_to='Sabina Thapa'))

    assert response.status_code == 302
    assert Student.objects.get().assigned_to == 'Pawan Acharya'


def test_invalid_phone_is_rejected(staff_client):
    response = staff_client.post(reverse('student-create'), student_post_data(mobile_number='call me'))

    assert response.status_code == 200
    assert 'mobile_number' in response.context['form'].errors
    assert not Student.objects.exists()


def test_visa_change_stamps_update_date(staff_client, student_factory):
    student = student_factory()

    staff_client.post(
        reverse('student-update', args=[student.pk]),
        student_post_data(full_name=student.full_name, email=student.email, visa_status='Approved'),
    )

    student.refresh_from_db()
    assert student.visa_status == 'Approved'
    assert student.visa_status_update_date is not None


def test_delete_student(staff_client, student_factory):
    student = student_factory()

    response = staff_client.post(reverse('student-delete', args=[student.pk]))

    assert response.status_code == 302
    assert not Student.objects.filter(pk=student.pk).exists()


def test_students_all_bad_cursor_goes_back_to_first_page(staff_client, student_factory):
    student_factory()

    response = staff_client.get(reverse('students-all'), {'cursor': 'garbage', 'visa_status': 'Pending'})

    assert response.status_code == 302
    assert response.url == reverse('students-all') + '?visa_status=Pending'


def test_students_all_past_the_end_redirects(staff_client, student_factory):
    oldest = student_factory()

    response = staff_client.get(reverse('students-all'), {'cursor': encode_cursor(oldest)})

    assert response.status_code == 302
    assert response.url == reverse('students-all')


def test_students_all_renders_page(staff_client, student_factory):
    student_factory(full_name='Listed Student')

    response = staff_client.get(reverse('students-all'))

    assert response.status_code == 200
    assert 'Listed Student' in response.content.decode()


def test_full_table_is_admin_only(counselor_client):
    response = counselor_client.get(reverse('students-full'))

    assert response.status_code == 403


def test_full_table_sorts(staff_client, student_factory):
    student_factory(full_name='Bimala')
    student_factory(full_name='Anil')

    response = staff_client.get(reverse('students-full'), {'sort': 'full_name', 'dir': 'asc'})

    assert [s.full_name for s in response.context['students']] == ['Anil', 'Bimala']
    assert response.context['sort'] == 'full_name'


def test_counselor_dashboard_summary(counselor_client, student_factory):
    student_factory(assigned_to='Pawan Acharya', visa_status='Approved', service_fee_status='Paid')
    student_factory(assigned_to='Pawan Acharya')
    student_factory(assigned_to='Sabina Thapa', visa_status='Approved')

    response = counselor_client.get(reverse('counselor-dashboard'))

    summary = response.context['summary']
    assert summary['total'] == 2
    assert summary['visas_approved'] == 1
    assert summary['fees_paid'] == 1


def test_admin_can_view_any_counselor_dashboard(staff_client, student_factory):
    student_factory(assigned_to='Sabina Thapa')

    response = staff_client.get(reverse('counselor-dashboard'), {'counselor': 'Sabina Thapa'})

    assert response.context['counselor'] == 'Sabina Thapa'
    assert response.context['summary']['total'] == 1
