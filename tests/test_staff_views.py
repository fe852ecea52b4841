import json

import pytest
from django.urls import reverse

from core.models import LLMConfig, LLMUsageLog, PlatformConfig
from core.security import decrypt_value, mask_secret


pytestmark = pytest.mark.django_db


@pytest.fixture(autouse=True)
def offline_model_list(monkeypatch):
    monkeypatch.setattr('core.views.list_openai_models', lambda api_key: ['gpt-4o-mini', 'gpt-4o'])


def test_staff_home_sends_admins_to_student_table(staff_client):
    response = staff_client.get(reverse('staff-home'))

    assert response.url == reverse('student-table')


def test_staff_home_sends_counselors_to_their_dashboard(counselor_client):
    response = counselor_client.get(reverse('staff-home'))

    assert response.url == reverse('counselor-dashboard')


def test_login_page(client):
    response = client.get(reverse('login'))

    assert response.status_code == 200


def test_analytics_dashboard(staff_client, student_factory):
    student_factory(preferred_study_destination='USA')
    student_factory(preferred_study_destination='usa')
    student_factory(preferred_study_destination='Canada')

    response = staff_client.get(reverse('analytics-dashboard'))

    assert response.status_code == 200
    assert response.context['destinations'] == [('Usa', 2), ('Canada', 1)]
    assert json.loads(response.context['destination_chart']['labels']) == ['Usa', 'Canada']


def test_analytics_dashboard_is_staff_only(client):
    response = client.get(reverse('analytics-dashboard'))

    assert response.status_code == 302


def test_welcome_screen_lists_unassigned_names(client, student_factory):
    student_factory(full_name='Waiting Walk-in')
    student_factory(full_name='Already Helped', assigned_to='Mujal Amatya')

    response = client.get(reverse('welcome-screen'))
    partial = client.get(reverse('welcome-screen'), HTTP_HX_REQUEST='true')

    assert response.context['names'] == ['Waiting Walk-in']
    assert response.context['refresh_seconds'] == 30
    assert partial.templates[0].name == 'analytics/_welcome_names.html'
    assert 'Already Helped' not in partial.content.decode()


def test_platform_config_update(staff_client):
    response = staff_client.post(reverse('platform-config'), {
        'site_name': 'Pixar Edu',
        'site_tagline': 'Study abroad',
        'announcement': 'Fall intake open',
        'contact_email': 'info@pixaredu.com',
        'support_phone': '+977 9761859757',
        'address': 'New Baneshwor',
        'maintenance_message': 'Back soon',
        'session_timeout_minutes': 20,
        'welcome_screen_refresh_seconds': 15,
    })

    assert response.status_code == 302
    config = PlatformConfig.load()
    assert config.announcement == 'Fall intake open'
    assert config.session_timeout_minutes == 20


def test_platform_config_rejects_short_timeout(staff_client):
    response = staff_client.post(reverse('platform-config'), {
        'site_name': 'Pixar Edu', 'contact_email': 'info@pixaredu.com',
        'session_timeout_minutes': 2, 'welcome_screen_refresh_seconds': 15,
    })

    assert 'session_timeout_minutes' in response.context['form'].errors


def test_platform_config_is_admin_only(counselor_client):
    assert counselor_client.get(reverse('platform-config')).status_code == 403


def test_llm_config_stores_encrypted_key(staff_client):
    response = staff_client.post(reverse('llm-config'), {
        'active_model': 'gpt-4o-mini',
        'api_key': 'sk-secret-value-1234',
        'temperature': '0.5',
        'max_output_tokens': 800,
        'monthly_token_cap': 0,
        'generation_enabled': 'on',
    })

    assert response.status_code == 302
    config = LLMConfig.load()
    assert config.encrypted_api_key != 'sk-secret-value-1234'
    assert decrypt_value(config.encrypted_api_key) == 'sk-secret-value-1234'
    assert config.max_output_tokens == 800


def test_llm_config_page_masks_key(staff_client):
    staff_client.post(reverse('llm-config'), {
        'active_model': 'gpt-4o-mini', 'api_key': 'sk-secret-value-1234', 'temperature': '0.5',
        'max_output_tokens': 800, 'monthly_token_cap': 0,
    })

    response = staff_client.get(reverse('llm-config'))

    assert response.context['api_key_masked'] == 'sk-s...1234'
    assert 'sk-secret-value-1234' not in response.content.decode()


def test_mask_secret():
    assert mask_secret('') == ''
    assert mask_secret('short') == '*****'


def test_llm_logs_filter_by_type(staff_client):
    LLMUsageLog.objects.create(request_type='chatbot', model_name='gpt-4o-mini')
    failed = LLMUsageLog.objects.create(request_type='pathway_planner', model_name='gpt-4o-mini', success=False)

    response = staff_client.get(reverse('llm-logs'), {'type': 'pathway_planner'})
    detail = staff_client.get(reverse('llm-log-detail', args=[failed.pk]))

    assert list(response.context['logs']) == [failed]
    assert detail.status_code == 200
