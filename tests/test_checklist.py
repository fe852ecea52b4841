import pytest
from django.urls import reverse

from assistants.checklist import BASE_DOCUMENTS, GENERAL_NOTE, get_checklist


def english_names(checklist):
    return [doc.english_name for doc in checklist.items]


def test_base_documents_come_first():
    checklist = get_checklist('10+2', 'USA')

    names = english_names(checklist)
    assert names[:len(BASE_DOCUMENTS)] == [doc.english_name for doc in BASE_DOCUMENTS]
    assert 'Form I-20' in names
    assert 'Letters of Recommendation (LOR)' not in names


def test_level_documents_are_added_once():
    names = english_names(get_checklist("Master's Degree", 'UK'))

    assert names.count('Letters of Recommendation (LOR)') == 1
    assert 'Work Experience Letters' in names
    assert 'TB Test Certificate' in names
    assert len(names) == len(set(names))


def test_notes_combine_country_and_general_advice():
    checklist = get_checklist('Diploma', 'Australia')

    assert checklist.notes.startswith("Funds must usually be held for at least three months.")
    assert checklist.notes.endswith(GENERAL_NOTE)


def test_unknown_destination_gets_base_list_and_general_note():
    checklist = get_checklist('10+2', 'Japan')

    assert len(checklist.items) == len(BASE_DOCUMENTS)
    assert checklist.notes == GENERAL_NOTE


@pytest.mark.django_db
def test_checklist_partial_for_htmx(client):
    response = client.post(
        reverse('document-checklist'), {'education_level': 'Diploma', 'destination': 'Canada'},
        HTTP_HX_REQUEST='true',
    )

    assert response.status_code == 200
    assert response.templates[0].name == 'assistants/_checklist.html'
    assert 'Provincial Attestation Letter (PAL)' in response.content.decode()


@pytest.mark.django_db
def test_checklist_full_page(client):
    response = client.post(reverse('document-checklist'), {'education_level': 'Diploma', 'destination': 'Canada'})

    assert response.templates[0].name == 'assistants/document_checklist.html'
    assert response.context['checklist'].destination == 'Canada'
