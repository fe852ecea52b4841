import json
import logging
import re

from django.urls import reverse

from config.constants import MSG_EMPTY_MODEL_RESPONSE
from core.llm import LLMService
from core.models import LLMUsageLog
from public.content import COUNTRIES, DESTINATION_SLUGS, get_country

logger = logging.getLogger("apps.assistants")

SITE_CONTEXT = (
    "Pixar Educational Consultancy helps Nepalese students study in the USA, UK, Australia, Canada and "
    "New Zealand. Services include counseling, test preparation (IELTS/PTE/TOEFL/Duolingo), visa support "
    "and documentation assistance."
)

CHAT_SYSTEM_PROMPT = """You are the assistant for Pixar Educational Consultancy.
Give brief, direct answers about studying abroad and the consultancy's services, and link to relevant pages
with Markdown links: About /about/, Services /services/, Country Guides /country-guides/,
Smart Tools /tools/, Contact /contact/, FAQ /faq/, Prep classes /prep-classes/.
If the user wants to book a preparation class, offer the class booking form.
If the user wants to contact the office, asks a general question or asks about fees, offer the inquiry form.
Stay on topic. If you do not know the answer, say so and suggest the contact form.

Context: {context}

Reply as JSON: {{"response": "<markdown answer>", "form": "prep-class" | "general" | null}}"""

TEST_ADVISOR_SYSTEM_PROMPT = """You are an English proficiency test advisor for Nepali students at
Pixar Educational Consultancy. Recommend one test (IELTS Academic, TOEFL iBT, PTE Academic or
Duolingo English Test) for the student's level, timeline, budget and purpose. Explain the reasoning in a mix
of English and simple Nepali, and mention that the consultancy runs preparation classes.
Reply as JSON: {"recommendation": "...", "reasoning": "...", "badges": ["...", "..."]}"""

PATHWAY_SYSTEM_PROMPT = """You are an educational consultant suggesting universities.
Given a country, field of study, GPA and target education level, suggest a diverse list of suitable
universities where a student with this profile would be competitive.
Reply as JSON: {"summary": "...", "suggestions": [{"name": "...", "location": "...", "website": "https://...",
"category": "...", "type": "Public|Private|Unknown", "program_duration": "...",
"tuition_category": "Affordable|Mid-Range|Premium|Varies|Unknown", "english_requirements": "..."}]}"""

# keyword groups -> (reply, [(link text, url name, kwargs)], form)
CHAT_ROUTES = [
    (('class', 'ielts', 'pte', 'toefl', 'duolingo', 'prep', 'coaching'),
     "We run preparation classes for IELTS, PTE, TOEFL and Duolingo with mock tests and personal feedback.",
     [('Book a prep class', 'prep-classes', None), ('English Test Guide', 'english-test-guide', None)],
     'prep-class'),
    (('appointment', 'book', 'meeting', 'visit'),
     "You can book a counseling session with one of our advisors online.",
     [('Book an appointment', 'book-appointment', None)],
     None),
    (('interview', 'visa'),
     "We help with visa forms, financial documents and unlimited mock interviews for U.S. applicants.",
     [('Visa Interview Q&A', 'interview-qa', None), ('Our Services', 'services', None)],
     'general'),
    (('sop', 'statement of purpose'),
     "Our SOP generator drafts a statement of purpose you can download as a Word document.",
     [('SOP Generator', 'sop-generator', None)],
     None),
    (('document', 'checklist', 'paper'),
     "The document checklist lists what you need for your level and destination.",
     [('Document Checklist', 'document-checklist', None)],
     None),
    (('fee', 'cost', 'price', 'charge', 'contact', 'phone', 'email', 'address'),
     "Our service charges depend on the package you choose. Our team can give you a detailed breakdown.",
     [('Contact Us', 'contact', None)],
     'general'),
]

TEST_PROFILES = {
    'IELTS Academic': ['Widely Accepted', 'Academic Focus'],
    'TOEFL iBT': ['Widely Accepted in USA', 'Academic Focus'],
    'PTE Academic': ['Fast Results', 'Computer Scored'],
    'Duolingo English Test': ['Affordable', 'Take It From Home'],
}


def _link(text, url_name, kwargs=None):
    return f"[{text}]({reverse(url_name, kwargs=kwargs)})"


def _parse_json(content):
    try:
        data = json.loads(content)
    except (TypeError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _mentions(text, word):
    return re.search(rf"\b{re.escape(word)}", text) is not None


def chatbot_fallback(query):
    """Keyword-routed answer used when no LLM is configured."""
    text = query.lower()

    for country in COUNTRIES:
        if _mentions(text, country['name'].lower()):
            reply = f"{country['flag']} {country['description']}"
            links = [_link(f"{country['name']} guide", 'country-detail', {'slug': country['slug']}),
                     _link('Book an appointment', 'book-appointment')]
            return {'response': f"{reply}\n\n" + " · ".join(links), 'form': None}

    for keywords, reply, links, form in CHAT_ROUTES:
        if any(_mentions(text, keyword) for keyword in keywords):
            rendered = " · ".join(_link(label, name, kwargs) for label, name, kwargs in links)
            return {'response': f"{reply}\n\n{rendered}", 'form': form}

    reply = ("I can help with study destinations, test preparation, visas and documents. "
             f"Have a look at our {_link('FAQ', 'faq')} or {_link('contact us', 'contact')}.")
    return {'response': reply, 'form': 'general'}


def test_advisor_fallback(data):
    budget = data.get('budget', '')
    timeline = data.get('timeline', '')
    words = set(re.findall(r'[a-z]+', (data.get('purpose') or '').lower()))

    if budget == '< $100':
        test = 'Duolingo English Test'
        reason = ("It fits your budget and can be taken online from home "
                  "(कम खर्चमा घरबाटै दिन सकिन्छ). Check that your universities accept it.")
    elif words & {'usa', 'us', 'america', 'american'}:
        test = 'TOEFL iBT'
        reason = "It is the most widely accepted test at U.S. universities (अमेरिकी विश्वविद्यालयमा धेरै मान्य)."
    elif timeline == '1 month':
        test = 'PTE Academic'
        reason = "Results usually arrive within two days, which suits a short timeline (छिटो नतिजा)."
    elif words & {'australia', 'zealand', 'immigration', 'pr'}:
        test = 'PTE Academic'
        reason = "It is accepted for study and immigration in Australia and New Zealand (अष्ट्रेलिया र न्युजिल्यान्डमा मान्य)."
    else:
        test = 'IELTS Academic'
        reason = "It is accepted by universities and immigration authorities worldwide (विश्वभर मान्य)."

    reason += (" For dedicated preparation (राम्रो तयारीको लागि), Pixar Educational Consultancy runs classes, "
               "and our advisors can give you more personal guidance.")
    return {'recommendation': test, 'reasoning': reason, 'badges': TEST_PROFILES[test]}


def pathway_fallback(data):
    country = get_country(DESTINATION_SLUGS.get(data.get('country', ''), ''))
    if country is None:
        return {'summary': "We do not have a guide for that country yet. Please contact an advisor.",
                'suggestions': []}

    field = data.get('field_of_study', '')
    suggestions = [
        {
            'name': uni['name'],
            'location': uni['city'],
            'website': uni['website'],
            'category': field,
            'type': 'Unknown',
            'program_duration': '',
            'tuition_category': 'Varies',
            'english_requirements': '',
        }
        for uni in country['top_universities']
    ]
    summary = (f"Leading universities in {country['name']} for {field or 'your field'}. "
               f"An advisor can shortlist options that match a {data.get('gpa') or 'given'} GPA "
               f"for a {data.get('target_education_level') or 'chosen'} program.")
    return {'summary': summary, 'suggestions': suggestions}


class AssistantService:
    """
    Chatbot, English test advisor and pathway planner.

    Each helper returns ``(result, error)``. Without a configured API key the
    deterministic fallback answers and error is None; when the API call fails
    result is None and error carries the reason.
    """

    def __init__(self, actor=None):
        self.llm = LLMService()
        self.actor = actor if actor is not None and actor.is_authenticated else None

    @property
    def uses_llm(self):
        return self.llm.available

    def _complete_json(self, request_type, system_prompt, messages):
        result = self.llm.complete(request_type, system_prompt, messages, actor=self.actor, json_mode=True)
        if not result.ok:
            return None, result.error or MSG_EMPTY_MODEL_RESPONSE
        data = _parse_json(result.content)
        if data is None:
            logger.warning(f"{request_type}: model returned non-JSON content")
            return None, "Invalid response from model"
        return data, None

    def chat(self, query, history=()):
        if not self.uses_llm:
            return chatbot_fallback(query), None

        messages = [
            {'role': 'assistant' if turn.get('role') in ('model', 'assistant') else 'user',
             'content': str(turn.get('content', ''))}
            for turn in history
        ]
        messages.append({'role': 'user', 'content': query})
        data, error = self._complete_json(
            LLMUsageLog.RequestType.CHATBOT, CHAT_SYSTEM_PROMPT.format(context=SITE_CONTEXT), messages,
        )
        if error:
            return None, error
        form = data.get('form') if data.get('form') in ('prep-class', 'general') else None
        return {'response': str(data.get('response', '')), 'form': form}, None

    def advise_test(self, data):
        if not self.uses_llm:
            return test_advisor_fallback(data), None

        prompt = (f"Student level: {data['current_level']}\nTimeline: {data['timeline']}\n"
                  f"Budget: {data['budget']}\nPurpose: {data['purpose']}")
        advice, error = self._complete_json(
            LLMUsageLog.RequestType.TEST_ADVISOR, TEST_ADVISOR_SYSTEM_PROMPT, [{'role': 'user', 'content': prompt}],
        )
        if error:
            return None, error
        advice.setdefault('badges', [])
        return advice, None

    def plan_pathway(self, data):
        if not self.uses_llm:
            return pathway_fallback(data), None

        prompt = (f"Country: {data['country']}\nField of study: {data['field_of_study']}\n"
                  f"GPA: {data['gpa']}\nTarget education level: {data['target_education_level']}")
        plan, error = self._complete_json(
            LLMUsageLog.RequestType.PATHWAY_PLANNER, PATHWAY_SYSTEM_PROMPT, [{'role': 'user', 'content': prompt}],
        )
        if error:
            return None, error
        plan.setdefault('suggestions', [])
        return plan, None
