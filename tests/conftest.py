import itertools
from datetime import timedelta

import pytest
from django.core.cache import cache
from django.utils import timezone

from students.models import Student
from users.models import User

_sequence = itertools.count(1)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser('boss', 'boss@example.com', 'secret123')


@pytest.fixture
def counselor_user(db):
    user = User.objects.create_user('pawan', 'pawan@example.com', 'secret123')
    user.role = User.Role.COUNSELOR
    user.counselor_name = 'Pawan Acharya'
    user.save()
    return user


@pytest.fixture
def staff_client(client, admin_user):
    client.force_login(admin_user)
    return client


@pytest.fixture
def counselor_client(client, counselor_user):
    client.force_login(counselor_user)
    return client


@pytest.fixture
def student_factory(db):
    """Create students with distinct, increasing timestamps unless one is given."""
    base = timezone.now() - timedelta(days=30)

    def create(**kwargs):
        n = next(_sequence)
        defaults = {
            'full_name': f'Student {n}',
            'email': f'student{n}@example.com',
            'preferred_study_destination': 'USA',
            'last_completed_education': '10+2',
            'english_proficiency_test': 'IELTS',
            'timestamp': base + timedelta(minutes=n),
        }
        defaults.update(kwargs)
        return Student.objects.create(**defaults)

    return create
