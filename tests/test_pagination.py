import pytest

from students.models import Student
from students.services import InvalidCursor, StudentService, decode_cursor, encode_cursor


pytestmark = pytest.mark.django_db


@pytest.fixture
def seven_students(student_factory):
    """Oldest first; the pages walk them newest first."""
    return [student_factory(full_name=f'Student {i}') for i in range(7)]


def names(page):
    return [s.full_name for s in page.students]


def test_first_page_is_newest_first(seven_students):
    page = StudentService.paginate(page_size=3)

    assert names(page) == ['Student 6', 'Student 5', 'Student 4']
    assert page.has_next
    assert not page.has_prev
    assert page.prev_cursor is None


def test_walk_forward_and_back(seven_students):
    first = StudentService.paginate(page_size=3)
    second = StudentService.paginate(cursor=first.next_cursor, page_size=3)
    third = StudentService.paginate(cursor=second.next_cursor, page_size=3)

    assert names(second) == ['Student 3', 'Student 2', 'Student 1']
    assert second.has_prev and second.has_next
    assert names(third) == ['Student 0']
    assert not third.has_next
    assert third.next_cursor is None

    back = StudentService.paginate(cursor=third.prev_cursor, direction='prev', page_size=3)
    assert names(back) == names(second)
    assert back.has_prev
    assert back.has_next

    start = StudentService.paginate(cursor=back.prev_cursor, direction='prev', page_size=3)
    assert names(start) == names(first)
    assert not start.has_prev


def test_equal_timestamps_are_ordered_by_id(student_factory):
    first = student_factory(full_name='A')
    second = student_factory(full_name='B', timestamp=first.timestamp)
    third = student_factory(full_name='C', timestamp=first.timestamp)

    page_one = StudentService.paginate(page_size=2)
    page_two = StudentService.paginate(cursor=page_one.next_cursor, page_size=2)

    assert [s.pk for s in page_one.students] == [third.pk, second.pk]
    assert [s.pk for s in page_two.students] == [first.pk]


def test_past_the_end_is_empty(seven_students):
    oldest = seven_students[0]
    page = StudentService.paginate(cursor=encode_cursor(oldest), page_size=3)

    assert page.is_empty
    assert not page.has_next


def test_filters_apply_to_every_page(student_factory):
    for i in range(4):
        student_factory(full_name=f'Approved {i}', visa_status=Student.VisaStatus.APPROVED)
    student_factory(full_name='Pending', visa_status=Student.VisaStatus.PENDING)

    filters = {'visa_status': 'Approved', 'assigned_to': 'all'}
    first = StudentService.paginate(filters, page_size=3)
    second = StudentService.paginate(filters, cursor=first.next_cursor, page_size=3)

    assert len(first.students) == 3
    assert names(second) == ['Approved 0']
    assert 'Pending' not in names(first) + names(second)


def test_tampered_cursor_is_rejected(seven_students):
    token = encode_cursor(seven_students[3])

    with pytest.raises(InvalidCursor):
        StudentService.paginate(cursor=token[:-2] + 'xx')
    with pytest.raises(InvalidCursor):
        decode_cursor('not-a-cursor')


def test_cursor_round_trips_timestamp_and_id(student_factory):
    student = student_factory()

    timestamp, pk = decode_cursor(encode_cursor(student))

    assert timestamp == student.timestamp
    assert pk == student.pk


def test_search_is_a_case_insensitive_prefix(student_factory):
    student_factory(full_name='Aashish Karki')
    student_factory(full_name='Anita Rai')
    student_factory(full_name='Bikash Aashish')

    found = StudentService.search('  AAS')

    assert [s.full_name for s in found] == ['Aashish Karki']
    assert len(StudentService.search('')) == 3


def test_full_table_puts_blank_values_last(student_factory):
    student_factory(full_name='No college', college_university_name='')
    student_factory(full_name='Zeta', college_university_name='Zeta University')
    student_factory(full_name='Alpha', college_university_name='Alpha College')

    ascending = [s.full_name for s in StudentService.full_table('college_university_name', 'asc')]
    descending = [s.full_name for s in StudentService.full_table('college_university_name', 'desc')]

    assert ascending == ['Alpha', 'Zeta', 'No college']
    assert descending == ['Zeta', 'Alpha', 'No college']


def test_full_table_ignores_unknown_columns(student_factory):
    older = student_factory()
    newer = student_factory()

    rows = list(StudentService.full_table('password', 'desc'))

    assert rows == [newer, older]


def test_unassigned_recent_names(student_factory):
    student_factory(full_name='Waiting')
    student_factory(full_name='Taken', assigned_to='Sabina Thapa')

    assert StudentService.unassigned_recent_names() == ['Waiting']
