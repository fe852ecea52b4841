from django import forms

from config.constants import (
    CHAT_QUERY_MAX_LENGTH, EDUCATION_LEVELS, FIELDS_OF_STUDY, GPA_SCALE_OPTIONS, PROFICIENCY_LEVELS,
    SOP_ACADEMIC_BACKGROUND_RANGE, SOP_ADDITIONAL_POINTS_MAX, SOP_EXTRACURRICULARS_RANGE,
    SOP_FULL_NAME_RANGE, SOP_NARRATIVE_RANGE, SOP_TONES, STUDY_DESTINATIONS, TARGET_EDUCATION_LEVELS,
    TEST_BUDGETS, TEST_TIMELINES, as_choices,
)
from core.forms import style_fields

BLANK = [('', 'Select...')]


def text_field(label, length_range=None, max_length=None, required=True, rows=4):
    min_length, max_length = length_range if length_range else (None, max_length)
    return forms.CharField(
        label=label,
        min_length=min_length,
        max_length=max_length,
        required=required,
        widget=forms.Textarea(attrs={'rows': rows}),
    )


def optional(label, max_length=200):
    return forms.CharField(label=label, max_length=max_length, required=False)


class SopGeneratorForm(forms.Form):
    full_name = forms.CharField(min_length=SOP_FULL_NAME_RANGE[0], max_length=SOP_FULL_NAME_RANGE[1])
    target_country = forms.ChoiceField(choices=BLANK + as_choices(STUDY_DESTINATIONS))
    target_education_level = forms.ChoiceField(choices=BLANK + TARGET_EDUCATION_LEVELS)
    field_of_study = forms.CharField(max_length=100, help_text="e.g. Computer Science")
    academic_background = text_field("Academic background", SOP_ACADEMIC_BACKGROUND_RANGE)
    why_this_program = text_field("Why this program?", SOP_NARRATIVE_RANGE)
    why_this_country = text_field("Why this country?", SOP_NARRATIVE_RANGE)
    future_goals = text_field("Future goals", SOP_NARRATIVE_RANGE)
    extracurriculars_work_experience = text_field(
        "Extracurriculars & work experience", SOP_EXTRACURRICULARS_RANGE, required=False,
    )
    additional_points = text_field(
        "Anything else to include", max_length=SOP_ADDITIONAL_POINTS_MAX, required=False, rows=3,
    )
    tone = forms.ChoiceField(choices=as_choices(SOP_TONES), initial=SOP_TONES[0])

    # Details used by the Canada diploma template
    permanent_address = optional("Permanent address")
    passport_number = optional("Passport number", 20)
    institution_name = optional("Institution name")
    see_school_name = optional("SEE school")
    see_gpa = optional("SEE GPA", 10)
    see_year = optional("SEE year", 10)
    plus_two_school_name = optional("+2 school")
    plus_two_gpa = optional("+2 GPA", 10)
    plus_two_year = optional("+2 year", 10)
    pte_test_date = optional("PTE test date", 30)
    pte_overall_score = optional("PTE overall", 10)
    pte_listening_score = optional("PTE listening", 10)
    pte_reading_score = optional("PTE reading", 10)
    pte_writing_score = optional("PTE writing", 10)
    pte_speaking_score = optional("PTE speaking", 10)
    ielts_overall_score = optional("IELTS overall", 10)
    toefl_overall_score = optional("TOEFL overall", 10)
    duolingo_overall_score = optional("Duolingo overall", 10)
    father_name = optional("Father's name")
    father_income_details = optional("Father's income source")
    father_annual_income_npr = optional("Father's annual income (NPR)", 30)
    mother_name = optional("Mother's name")
    mother_income_details = optional("Mother's income source")
    mother_annual_income_npr = optional("Mother's annual income (NPR)", 30)
    brother_name = optional("Brother's name")
    brother_income_details = optional("Brother's income source")
    brother_annual_income_npr = optional("Brother's annual income (NPR)", 30)
    uncle_name = optional("Uncle's name")
    uncle_income_details = optional("Uncle's income source")
    uncle_annual_income_npr = optional("Uncle's annual income (NPR)", 30)
    total_annual_income_npr = optional("Total annual income (NPR)", 30)
    total_annual_income_foreign_equivalent = optional("Total income, foreign equivalent", 50)
    education_loan_bank = optional("Education loan bank")
    education_loan_bank_description = optional("Loan bank description")
    education_loan_amount_npr = optional("Loan amount (NPR)", 30)
    education_loan_foreign_equivalent = optional("Loan amount, foreign equivalent", 50)
    why_not_home_country = text_field("Why not study in Nepal?", max_length=1500, required=False, rows=3)
    why_this_institution = text_field("Why this institution?", max_length=1500, required=False, rows=3)
    expected_initial_salary_npr = optional("Expected starting salary in Nepal (NPR)", 50)
    incentives_to_return_home = text_field("Reasons to return home", max_length=1500, required=False, rows=3)

    MAIN_FIELDS = (
        'full_name', 'target_country', 'target_education_level', 'field_of_study', 'academic_background',
        'why_this_program', 'why_this_country', 'future_goals', 'extracurriculars_work_experience',
        'additional_points', 'tone',
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)

    def main_fields(self):
        return [self[name] for name in self.MAIN_FIELDS]

    def detail_fields(self):
        return [self[name] for name in self.fields if name not in self.MAIN_FIELDS]


class DocumentChecklistForm(forms.Form):
    education_level = forms.ChoiceField(
        label="Your last completed education", choices=BLANK + as_choices(EDUCATION_LEVELS),
    )
    destination = forms.ChoiceField(choices=BLANK + as_choices(STUDY_DESTINATIONS))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)


class TestAdvisorForm(forms.Form):
    current_level = forms.ChoiceField(label="Current English level", choices=BLANK + PROFICIENCY_LEVELS)
    timeline = forms.ChoiceField(label="When do you need your score?", choices=BLANK + TEST_TIMELINES)
    budget = forms.ChoiceField(label="Budget for the test", choices=BLANK + TEST_BUDGETS)
    purpose = forms.CharField(
        max_length=200, help_text="e.g. Master's in the USA, PR in Australia",
        widget=forms.Textarea(attrs={'rows': 2}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)


class PathwayPlannerForm(forms.Form):
    country = forms.ChoiceField(choices=BLANK + as_choices(STUDY_DESTINATIONS))
    field_of_study = forms.ChoiceField(choices=BLANK + as_choices(FIELDS_OF_STUDY))
    gpa = forms.ChoiceField(label="GPA", choices=BLANK + GPA_SCALE_OPTIONS)
    target_education_level = forms.ChoiceField(choices=BLANK + TARGET_EDUCATION_LEVELS)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)


class ChatForm(forms.Form):
    query = forms.CharField(max_length=CHAT_QUERY_MAX_LENGTH, strip=True)
