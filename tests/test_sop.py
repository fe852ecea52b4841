from datetime import date

import pytest
from django.urls import reverse

from assistants.docx_export import SopDocxService
from assistants.sop import format_current_date, generate_sop, render_sections, select_template

TODAY = date(2026, 10, 18)

NARRATIVE = "I want to build reliable software systems that serve people across Nepal and beyond. " * 2


def sop_data(**overrides):
    data = {
        'full_name': 'Anjali Poudel',
        'target_country': 'Canada',
        'target_education_level': 'Diploma',
        'field_of_study': 'Social Services',
        'academic_background': '',
        'why_this_program': '',
        'why_this_country': '',
        'future_goals': '',
        'institution_name': 'Georgian College',
        'see_school_name': 'Shree Janata School',
        'see_gpa': '3.6',
        'see_year': '2019',
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize('country, level, expected', [
    ('Canada', 'Diploma', 'canada-diploma-social-services'),
    ('USA', "Master's Degree", 'usa-masters'),
    ('USA', "Bachelor's Degree", 'generic'),
    ('UK', 'Diploma', 'generic'),
])
def test_select_template(country, level, expected):
    assert select_template(country, level).id == expected


def test_current_date_has_no_leading_zero():
    assert format_current_date(TODAY) == "18 October 2026"
    assert format_current_date(date(2026, 3, 5)) == "5 March 2026"


def test_canada_sop_fills_tokens_and_defaults():
    sop = generate_sop(sop_data(), today=TODAY)

    assert sop.startswith("Date: 18 October 2026")
    assert "**Anjali Poudel**" in sop
    assert "**Georgian College**" in sop
    assert "Passport Number: **N/A**" in sop
    # Template wording stands in for blank answers and may reference other tokens.
    assert "professional progress in the social services industry" in sop
    assert "{{" not in sop


def test_optional_sections_need_their_data():
    names = [name for name, _ in render_sections(select_template('Canada', 'Diploma'), sop_data(), TODAY)]

    assert 'english_proficiency' not in names
    assert 'sponsorship' not in names
    assert 'reasons_for_institution' in names
    assert names[0] == 'salutation'
    assert names[-1] == 'closing'


def test_english_and_sponsor_sections_appear_with_data():
    sop = generate_sop(sop_data(
        pte_overall_score='65', pte_test_date='2 August 2026', father_name='Ram Poudel',
        father_annual_income_npr='1,200,000',
    ), today=TODAY)

    assert "overall band of **65**" in sop
    assert "**SPONSOR DETAILS**" in sop
    assert "**Ram Poudel** (Father), NPR **1,200,000**" in sop


def test_generic_sop_uses_neutral_defaults():
    sop = generate_sop({'target_country': 'UK', 'target_education_level': 'Diploma'}, today=TODAY)

    assert "My name is **the applicant**" in sop
    assert "**the chosen field of study**" in sop
    assert "Date:" not in sop


def test_user_answers_replace_template_wording():
    sop = generate_sop(sop_data(
        target_country='USA', target_education_level="Master's Degree", future_goals='leading a data team',
    ), today=TODAY)

    assert "involve **leading a data team**" in sop


def test_docx_export_marks_headings_and_bullets():
    assert SopDocxService.is_heading("**CONCLUSION**")
    assert not SopDocxService.is_heading("**Bold** start only")

    buffer = SopDocxService().create_docx("**TITLE**\n\nSome **bold** text\n- first item\n")

    assert buffer.read(2) == b'PK'


def sop_post_data(**overrides):
    data = {
        'full_name': 'Anjali Poudel',
        'target_country': 'USA',
        'target_education_level': "Master's Degree",
        'field_of_study': 'Computer Science',
        'academic_background': NARRATIVE,
        'why_this_program': NARRATIVE,
        'why_this_country': NARRATIVE,
        'future_goals': NARRATIVE,
        'tone': 'Formal',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_sop_generator_page(client):
    response = client.post(reverse('sop-generator'), sop_post_data())

    assert response.status_code == 200
    assert "Anjali Poudel" in response.context['sop']


@pytest.mark.django_db
def test_sop_generator_validates_lengths(client):
    response = client.post(reverse('sop-generator'), sop_post_data(academic_background='Too short'))

    assert 'academic_background' in response.context['form'].errors
    assert response.context.get('sop') is None


@pytest.mark.django_db
def test_download_without_sop_redirects(client):
    response = client.get(reverse('sop-download'))

    assert response.status_code == 302
    assert response.url == reverse('sop-generator')


@pytest.mark.django_db
def test_download_after_generating(client):
    client.post(reverse('sop-generator'), sop_post_data())

    response = client.get(reverse('sop-download'))

    assert response.status_code == 200
    assert response['Content-Type'].startswith('application/vnd.openxmlformats-officedocument')
    assert 'sop-anjali-poudel.docx' in response['Content-Disposition']
