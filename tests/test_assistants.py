import json
from types import SimpleNamespace
from unittest import mock

import openai
import pytest
from django.urls import reverse

from assistants import services
from assistants.services import AssistantService, chatbot_fallback, pathway_fallback
from core.models import LLMConfig, LLMUsageLog
from core.security import encrypt_value


def completion(content, prompt_tokens=120, completion_tokens=80):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens, completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
    )


@pytest.fixture
def fake_openai(db, monkeypatch):
    """Store an API key and replace the OpenAI client with a mock."""
    config = LLMConfig.load()
    config.encrypted_api_key = encrypt_value('sk-test-key')
    config.save()

    client = mock.Mock()
    monkeypatch.setattr('core.llm.openai.OpenAI', mock.Mock(return_value=client))
    return client


# --- Rule-based answers -------------------------------------------------------

def test_chatbot_answers_country_questions():
    reply = chatbot_fallback("Can I study in Australia with a 2.8 GPA?")

    assert reply['form'] is None
    assert '/countries/australia/' in reply['response']


def test_chatbot_offers_prep_class_form():
    reply = chatbot_fallback("When does the next PTE class start?")

    assert reply['form'] == 'prep-class'
    assert '/prep-classes/' in reply['response']


def test_chatbot_does_not_match_inside_words():
    # "coffee" must not trigger the fees route, "suk" must not match "uk".
    reply = chatbot_fallback("Is there coffee near the office? Ask suk.")

    assert reply['form'] == 'general'
    assert 'service charges' not in reply['response']


def test_chatbot_default_offers_general_form():
    reply = chatbot_fallback("hello")

    assert reply['form'] == 'general'
    assert '/faq/' in reply['response']


@pytest.mark.parametrize('data, expected', [
    ({'budget': '< $100', 'timeline': '1 month', 'purpose': 'Masters in USA'}, 'Duolingo English Test'),
    ({'budget': '> $300', 'timeline': '3 months', 'purpose': "Master's in the USA"}, 'TOEFL iBT'),
    ({'budget': '> $300', 'timeline': '1 month', 'purpose': 'Bachelor in UK'}, 'PTE Academic'),
    ({'budget': '> $300', 'timeline': 'flexible', 'purpose': 'PR in Australia'}, 'PTE Academic'),
    ({'budget': '$100 - $200', 'timeline': 'flexible', 'purpose': 'Study in the UK'}, 'IELTS Academic'),
])
def test_test_advisor_rules(data, expected):
    advice = services.test_advisor_fallback(data)

    assert advice['recommendation'] == expected
    assert advice['badges']
    assert 'Pixar Educational Consultancy' in advice['reasoning']


def test_pathway_lists_country_universities():
    plan = pathway_fallback({'country': 'Canada', 'field_of_study': 'Nursing', 'gpa': '3.0-3.2',
                             'target_education_level': 'Diploma'})

    assert plan['suggestions']
    assert all(s['category'] == 'Nursing' for s in plan['suggestions'])
    assert 'Canada' in plan['summary']


def test_pathway_unknown_country():
    assert pathway_fallback({'country': 'Japan'})['suggestions'] == []


# --- Views --------------------------------------------------------------------

@pytest.mark.django_db
def test_chatbot_endpoint_replies(client):
    response = client.post(
        reverse('chatbot'), json.dumps({'query': 'How much are your fees?', 'history': 'nonsense'}),
        content_type='application/json',
    )

    assert response.status_code == 200
    assert response.json()['form'] == 'general'


@pytest.mark.django_db
@pytest.mark.parametrize('body', ['{not json', '[1, 2]', json.dumps({'query': ''})])
def test_chatbot_endpoint_rejects_bad_requests(client, body):
    response = client.post(reverse('chatbot'), body, content_type='application/json')

    assert response.status_code == 400
    assert 'error' in response.json()


@pytest.mark.django_db
def test_chatbot_endpoint_reports_unavailable(client):
    with mock.patch('assistants.views.AssistantService') as service:
        service.return_value.chat.return_value = (None, 'timeout')
        response = client.post(reverse('chatbot'), json.dumps({'query': 'hi'}), content_type='application/json')

    assert response.status_code == 503
    assert response.json()['form'] is None


@pytest.mark.django_db
def test_test_advisor_partial(client):
    response = client.post(reverse('test-advisor'), {
        'current_level': 'intermediate', 'timeline': '3 months', 'budget': '< $100', 'purpose': 'Study in Canada',
    }, HTTP_HX_REQUEST='true')

    assert response.status_code == 200
    assert response.templates[0].name == 'assistants/_advice.html'
    assert response.context['advice']['recommendation'] == 'Duolingo English Test'


@pytest.mark.django_db
def test_pathway_planner_page(client):
    response = client.post(reverse('pathway-planner'), {
        'country': 'Australia', 'field_of_study': 'Nursing', 'gpa': '3.3-3.6',
        'target_education_level': "Bachelor's Degree",
    })

    assert response.status_code == 200
    assert response.context['plan']['suggestions']


@pytest.mark.django_db
def test_tool_error_shows_generic_message(client):
    with mock.patch('assistants.views.AssistantService') as service:
        service.return_value.advise_test.return_value = (None, 'boom')
        response = client.post(reverse('test-advisor'), {
            'current_level': 'beginner', 'timeline': 'flexible', 'budget': '> $300', 'purpose': 'UK',
        })

    assert response.context['advice'] is None
    assert "Something went wrong. Please try again." in [str(m) for m in response.context['messages']]


@pytest.mark.django_db
def test_assistants_home(client):
    assert client.get(reverse('assistants-home')).status_code == 200


# --- With a configured model --------------------------------------------------

def test_chat_uses_model_and_logs_usage(fake_openai):
    fake_openai.chat.completions.create.return_value = completion(
        json.dumps({'response': 'Visit [Country Guides](/country-guides/).', 'form': 'unknown'})
    )

    reply, error = AssistantService().chat('Which country?', [{'role': 'model', 'content': 'Hi!'}])

    assert error is None
    assert reply == {'response': 'Visit [Country Guides](/country-guides/).', 'form': None}
    kwargs = fake_openai.chat.completions.create.call_args.kwargs
    assert kwargs['messages'][1] == {'role': 'assistant', 'content': 'Hi!'}
    assert kwargs['response_format'] == {'type': 'json_object'}

    log = LLMUsageLog.objects.get()
    assert log.request_type == LLMUsageLog.RequestType.CHATBOT
    assert log.total_tokens == 200
    assert log.success


def test_non_json_reply_is_an_error(fake_openai):
    fake_openai.chat.completions.create.return_value = completion("Sure! IELTS.")

    advice, error = AssistantService().advise_test({
        'current_level': 'beginner', 'timeline': 'flexible', 'budget': '> $300', 'purpose': 'UK',
    })

    assert advice is None
    assert error == "Invalid response from model"


def test_api_failure_is_logged(fake_openai):
    fake_openai.chat.completions.create.side_effect = openai.OpenAIError("rate limited")

    plan, error = AssistantService().plan_pathway({
        'country': 'UK', 'field_of_study': 'Law', 'gpa': '4.0', 'target_education_level': "Master's Degree",
    })

    assert plan is None
    assert 'rate limited' in error
    log = LLMUsageLog.objects.get()
    assert not log.success
    assert log.error_message == 'rate limited'


def test_monthly_cap_disables_generation(fake_openai):
    config = LLMConfig.load()
    config.monthly_token_cap = 100
    config.save()
    LLMUsageLog.objects.create(request_type='chatbot', model_name='gpt-4o-mini', total_tokens=150)

    reply, error = AssistantService().chat('hi')

    assert reply is None
    assert error == "Monthly token cap reached. Generation disabled."
    assert not LLMConfig.load().generation_enabled
    fake_openai.chat.completions.create.assert_not_called()


ADVISOR_DATA = {'current_level': 'beginner', 'timeline': 'flexible', 'budget': '> $300', 'purpose': 'UK'}
PATHWAY_DATA = {'country': 'UK', 'field_of_study': 'Law', 'gpa': '4.0', 'target_education_level': "Master's Degree"}


@pytest.mark.parametrize('content', ['', None, '   '])
@pytest.mark.parametrize('call', [
    lambda service: service.chat('hello'),
    lambda service: service.advise_test(ADVISOR_DATA),
    lambda service: service.plan_pathway(PATHWAY_DATA),
], ids=['chat', 'advise_test', 'plan_pathway'])
def test_empty_model_reply_is_an_error(fake_openai, call, content):
    fake_openai.chat.completions.create.return_value = completion(content)

    result, error = call(AssistantService())

    assert result is None
    assert error == "Empty response from model"


def test_chatbot_endpoint_empty_reply_is_unavailable(client, fake_openai):
    fake_openai.chat.completions.create.return_value = completion('')

    response = client.post(reverse('chatbot'), json.dumps({'query': 'hello'}), content_type='application/json')

    assert response.status_code == 503
    assert response.json() == {
        'response': "I'm sorry, I'm having trouble generating a response at the moment. Please try again.",
        'form': None,
    }
