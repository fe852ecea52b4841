"""
Template-based Statement of Purpose generator.

A template is a set of named sections. Sections are plain text with
``{{TOKEN}}`` placeholders that are filled from the submitted form data,
falling back to neutral defaults when a field was left blank. Optional
sections are only rendered when the data that makes them meaningful exists.
"""
import re
from dataclasses import dataclass, field

from django.utils import timezone

PLACEHOLDER_RE = re.compile(r'\{\{([A-Z_]+)\}\}')

GENERIC = 'generic'

# token -> (form field, default when blank)
TOKENS = {
    'FULL_NAME': ('full_name', 'the applicant'),
    'TARGET_COUNTRY': ('target_country', 'the target country'),
    'TARGET_EDUCATION_LEVEL': ('target_education_level', 'the desired education level'),
    'FIELD_OF_STUDY': ('field_of_study', 'the chosen field of study'),
    'INSTITUTION_NAME': ('institution_name', 'the chosen institution'),
    'PERMANENT_ADDRESS': ('permanent_address', 'their permanent address'),
    'SEE_SCHOOL_NAME': ('see_school_name', 'their SEE school'),
    'SEE_GPA': ('see_gpa', 'N/A'),
    'SEE_YEAR': ('see_year', 'N/A'),
    'PLUS_TWO_SCHOOL_NAME': ('plus_two_school_name', 'their +2 school'),
    'PLUS_TWO_GPA': ('plus_two_gpa', 'N/A'),
    'PLUS_TWO_YEAR': ('plus_two_year', 'N/A'),
    'PTE_TEST_DATE': ('pte_test_date', 'a recent date'),
    'PTE_OVERALL_SCORE': ('pte_overall_score', 'N/A'),
    'PTE_LISTENING_SCORE': ('pte_listening_score', 'N/A'),
    'PTE_READING_SCORE': ('pte_reading_score', 'N/A'),
    'PTE_WRITING_SCORE': ('pte_writing_score', 'N/A'),
    'PTE_SPEAKING_SCORE': ('pte_speaking_score', 'N/A'),
    'FATHER_NAME': ('father_name', ''),
    'FATHER_INCOME_DETAILS': ('father_income_details', ''),
    'FATHER_ANNUAL_INCOME_NPR': ('father_annual_income_npr', 'N/A'),
    'MOTHER_NAME': ('mother_name', ''),
    'MOTHER_INCOME_DETAILS': ('mother_income_details', ''),
    'MOTHER_ANNUAL_INCOME_NPR': ('mother_annual_income_npr', 'N/A'),
    'BROTHER_NAME': ('brother_name', ''),
    'BROTHER_INCOME_DETAILS': ('brother_income_details', ''),
    'BROTHER_ANNUAL_INCOME_NPR': ('brother_annual_income_npr', 'N/A'),
    'UNCLE_NAME': ('uncle_name', ''),
    'UNCLE_INCOME_DETAILS': ('uncle_income_details', ''),
    'UNCLE_ANNUAL_INCOME_NPR': ('uncle_annual_income_npr', 'N/A'),
    'TOTAL_ANNUAL_INCOME_NPR': ('total_annual_income_npr', 'N/A'),
    'TOTAL_ANNUAL_INCOME_FOREIGN_EQUIVALENT': ('total_annual_income_foreign_equivalent', 'N/A'),
    'EDUCATION_LOAN_BANK': ('education_loan_bank', ''),
    'EDUCATION_LOAN_BANK_DESCRIPTION': ('education_loan_bank_description', ''),
    'EDUCATION_LOAN_AMOUNT_NPR': ('education_loan_amount_npr', 'N/A'),
    'EDUCATION_LOAN_FOREIGN_EQUIVALENT': ('education_loan_foreign_equivalent', 'N/A'),
    'WHY_THIS_COUNTRY': ('why_this_country', 'their reasons for choosing this country'),
    'WHY_NOT_HOME_COUNTRY': ('why_not_home_country', 'their reasons for not studying in their home country'),
    'WHY_THIS_PROGRAM': ('why_this_program', 'their reasons for choosing this program'),
    'WHY_THIS_INSTITUTION': ('why_this_institution', 'their reasons for choosing this institution'),
    'FUTURE_GOALS': ('future_goals', 'their future goals'),
    'EXPECTED_INITIAL_SALARY_NPR': ('expected_initial_salary_npr', 'N/A'),
    'INCENTIVES_TO_RETURN_HOME': ('incentives_to_return_home', 'their incentives to return home'),
    'PASSPORT_NUMBER': ('passport_number', 'N/A'),
    'ACADEMIC_BACKGROUND': ('academic_background', 'their academic background'),
    'EXTRACURRICULARS': ('extracurriculars_work_experience',
                         'their extracurricular activities and work experience'),
    'ADDITIONAL_POINTS': ('additional_points', ''),
}

SPONSOR_FIELDS = ('father_name', 'mother_name', 'brother_name', 'uncle_name', 'education_loan_bank')
TEST_SCORE_FIELDS = ('pte_overall_score', 'ielts_overall_score', 'toefl_overall_score', 'duolingo_overall_score')


def _any(data, names):
    return any((data.get(name) or '').strip() for name in names)


# (section, condition on the raw data; None means always rendered when the template has it)
SECTION_ORDER = [
    ('salutation', None),
    ('subject_line', None),
    ('introduction', None),
    ('academic_background', None),
    ('english_proficiency', lambda data: _any(data, TEST_SCORE_FIELDS)),
    ('sponsorship', lambda data: _any(data, SPONSOR_FIELDS)),
    ('reasons_for_country', None),
    ('reasons_against_home_country', lambda data: _any(data, ['why_not_home_country'])),
    ('reasons_for_program', None),
    ('reasons_for_institution', lambda data: _any(data, ['institution_name'])),
    ('future_career_plans', None),
    ('incentives_to_return_home', lambda data: _any(data, ['incentives_to_return_home'])),
    ('conclusion', None),
    ('closing', None),
]


@dataclass(frozen=True)
class SopTemplate:
    id: str
    sections: dict
    country: str = ''
    education_level: str = ''
    # Per-template wording used instead of the TOKENS default when a field is blank.
    defaults: dict = field(default_factory=dict)

    def matches(self, country, education_level):
        return self.country == country and self.education_level == education_level


TEMPLATES = [
    SopTemplate(
        id=GENERIC,
        defaults={
            'ACADEMIC_BACKGROUND': "My previous studies have provided me with a solid foundation in subjects "
                                   "relevant to {{FIELD_OF_STUDY}}.",
            'WHY_THIS_PROGRAM': "it aligns perfectly with my academic and career interests. I am impressed by the "
                                "curriculum, the faculty's expertise, and the research opportunities available.",
            'WHY_THIS_COUNTRY': "The country's reputation for academic excellence in {{FIELD_OF_STUDY}}, its "
                                "multicultural environment, and the potential for global exposure are key factors "
                                "that attract me.",
            'FUTURE_GOALS': "apply the acquired knowledge and skills in a professional setting and contribute "
                            "meaningfully to my field.",
        },
        sections={
            'introduction': (
                "My name is **{{FULL_NAME}}**, and I am writing to express my profound interest in pursuing a "
                "**{{TARGET_EDUCATION_LEVEL}}** in **{{FIELD_OF_STUDY}}** in **{{TARGET_COUNTRY}}**. My passion for "
                "**{{FIELD_OF_STUDY}}** has been a driving force throughout my academic journey, and I am eager to "
                "deepen my knowledge and skills at a renowned institution."
            ),
            'academic_background': (
                "Throughout my academic career, I have consistently demonstrated a strong aptitude for "
                "**{{FIELD_OF_STUDY}}**.\n{{ACADEMIC_BACKGROUND}}\nI am confident that my academic achievements "
                "have prepared me well for the rigors of this program."
            ),
            'reasons_for_program': (
                "I am particularly drawn to the **{{TARGET_EDUCATION_LEVEL}}** in **{{FIELD_OF_STUDY}}** at an "
                "institution in **{{TARGET_COUNTRY}}** because **{{WHY_THIS_PROGRAM}}**"
            ),
            'reasons_for_country': (
                "Choosing **{{TARGET_COUNTRY}}** for my studies is a deliberate decision. **{{WHY_THIS_COUNTRY}}**"
            ),
            'future_career_plans': (
                "Upon completion of my **{{TARGET_EDUCATION_LEVEL}}**, my future goals are to **{{FUTURE_GOALS}}** "
                "I am confident that this program will be instrumental in achieving these aspirations."
            ),
            'conclusion': (
                "In conclusion, I am a highly motivated and dedicated individual with a clear vision for my "
                "academic and professional future. I am eager to embrace the challenges and opportunities that "
                "studying **{{FIELD_OF_STUDY}}** in **{{TARGET_COUNTRY}}** will offer. {{ADDITIONAL_POINTS}} "
                "Thank you for considering my application."
            ),
        },
    ),
    SopTemplate(
        id='usa-masters',
        country='USA',
        education_level="Master's Degree",
        defaults={
            'ACADEMIC_BACKGROUND': "This background has equipped me with the analytical and research skills "
                                   "necessary to excel in a demanding graduate program in the USA.",
            'WHY_THIS_PROGRAM': "its comprehensive curriculum and renowned faculty.",
            'WHY_THIS_COUNTRY': "The opportunity to learn from and collaborate with leading experts in a dynamic "
                                "and diverse academic environment is a primary reason for choosing the USA.",
            'FUTURE_GOALS': "making significant contributions to my field",
        },
        sections={
            'introduction': (
                "With great enthusiasm, I, **{{FULL_NAME}}**, submit my application for the Master's Degree "
                "program in **{{FIELD_OF_STUDY}}** at a distinguished university in the United States. My ambition "
                "to specialize in **{{FIELD_OF_STUDY}}** stems from a deep-seated interest and a desire to "
                "contribute to innovative advancements in this domain."
            ),
            'academic_background': (
                "My undergraduate studies have provided a robust foundation for graduate work. {{ACADEMIC_BACKGROUND}}"
            ),
            'reasons_for_program': (
                "The specific Master's program in **{{FIELD_OF_STUDY}}** in the USA appeals to me due to "
                "**{{WHY_THIS_PROGRAM}}**. The **American approach to graduate education**, emphasizing research "
                "and practical application, is something I highly value."
            ),
            'reasons_for_country': (
                "The United States is globally recognized as a leader in **{{FIELD_OF_STUDY}}**. "
                "**{{WHY_THIS_COUNTRY}}**"
            ),
            'future_career_plans': (
                "My long-term career aspirations involve **{{FUTURE_GOALS}}**. A Master's degree from an American "
                "institution will provide the **specialized knowledge and global network** essential for "
                "achieving these goals."
            ),
            'conclusion': (
                "I am confident that I possess the dedication, aptitude, and vision to succeed in this program and "
                "contribute positively to the university community. I eagerly anticipate the opportunity to "
                "further my education in **{{FIELD_OF_STUDY}}** in the United States. {{ADDITIONAL_POINTS}}"
            ),
        },
    ),
    SopTemplate(
        id='canada-diploma-social-services',
        country='Canada',
        education_level='Diploma',
        defaults={
            'EXPECTED_INITIAL_SALARY_NPR': "between NPR 80,000 and 90,000",
            'WHY_THIS_COUNTRY': (
                "Canada provides limitless opportunities for international students with a dynamic learning "
                "environment. Teaching and research facilities are world class, and students have the flexibility "
                "to choose the study path that best suits their goal. Canadian colleges are repeatedly ranked "
                "among the best in the world, and Canada's society is a safe, multicultural and friendly place "
                "to live."
            ),
            'WHY_NOT_HOME_COUNTRY': (
                "International programs are more industry relevant and research based than the degrees available "
                "to me in Nepal. Employers in Nepal also give preference to graduates with an international "
                "qualification."
            ),
            'WHY_THIS_PROGRAM': (
                "I have been passionate about assisting others and bringing about positive change in my community "
                "since I was a child. A Diploma in {{FIELD_OF_STUDY}} will give me the knowledge and abilities to "
                "offer person-centered support to people dealing with a variety of difficulties."
            ),
            'WHY_THIS_INSTITUTION': (
                "{{INSTITUTION_NAME}} offers nationally recognized qualifications and is committed to its "
                "students' achievement. Its supportive faculty will help my professional progress in the "
                "{{FIELD_OF_STUDY_LOWER}} industry."
            ),
            'FUTURE_GOALS': (
                "Nepal is a developing country with enormous potential in every industry, and I have always "
                "wanted to contribute to my country's well-being. A qualification from a Canadian institution "
                "will help me reach this goal. In a future job in Nepal, I may expect to earn "
                "{{EXPECTED_INITIAL_SALARY_NPR}} at the beginning of my career."
            ),
            'INCENTIVES_TO_RETURN_HOME': (
                "My family, property and future career are all in Nepal, and I will return after completing "
                "my studies in Canada."
            ),
        },
        sections={
            'salutation': (
                "Date: {{CURRENT_DATE}}\n\nTo,\nThe Visa Officer,\nHigh Commission of Canada\nNew Delhi, India."
            ),
            'subject_line': (
                "**Subject: Application to pursue a {{TARGET_EDUCATION_LEVEL}} in {{FIELD_OF_STUDY}} at "
                "{{INSTITUTION_NAME}}**"
            ),
            'introduction': (
                "Respected Sir/Madam,\n\nI am appreciative of the chance to compose this statement of intent for my "
                "student application to the Canadian High Commission. I have been admitted to "
                "**{{INSTITUTION_NAME}}** to pursue **{{TARGET_EDUCATION_LEVEL}} in {{FIELD_OF_STUDY}}**. This "
                "statement contains details about my educational background and my plans after the course, and I "
                "guarantee that all the information included in it is accurate and truthful.\n\n"
                "**Introduction and Academic Background**\n\nGlad to introduce myself as **{{FULL_NAME}}**, a "
                "permanent resident of **{{PERMANENT_ADDRESS}}**."
            ),
            'academic_background': (
                "I graduated from **{{SEE_SCHOOL_NAME}}** in **{{SEE_YEAR}}** with a **{{SEE_GPA}} GPA** and "
                "completed my Secondary Education Examination (SEE). I then enrolled in "
                "**{{PLUS_TWO_SCHOOL_NAME}}** and completed my +2 with a **{{PLUS_TWO_GPA}} GPA** in "
                "**{{PLUS_TWO_YEAR}}**."
            ),
            'english_proficiency': (
                "After finishing my higher education I prepared for the **PTE** exam and appeared for the test on "
                "**{{PTE_TEST_DATE}}**, in which I scored an overall band of **{{PTE_OVERALL_SCORE}}**. "
                "(L-{{PTE_LISTENING_SCORE}}, R-{{PTE_READING_SCORE}}, W-{{PTE_WRITING_SCORE}}, "
                "S-{{PTE_SPEAKING_SCORE}})."
            ),
            'sponsorship': (
                "**SPONSOR DETAILS**\n\n"
                "I am being sponsored by my family, who have a sound income and can afford my tuition fees and "
                "living expenses. My sponsors have the following annual income:\n"
                "- **{{FATHER_NAME}}** (Father), NPR **{{FATHER_ANNUAL_INCOME_NPR}}** ({{FATHER_INCOME_DETAILS}})\n"
                "- **{{MOTHER_NAME}}** (Mother), NPR **{{MOTHER_ANNUAL_INCOME_NPR}}** ({{MOTHER_INCOME_DETAILS}})\n"
                "- **{{BROTHER_NAME}}** (Brother), NPR **{{BROTHER_ANNUAL_INCOME_NPR}}** "
                "({{BROTHER_INCOME_DETAILS}})\n"
                "- **{{UNCLE_NAME}}** (Uncle), NPR **{{UNCLE_ANNUAL_INCOME_NPR}}** ({{UNCLE_INCOME_DETAILS}})\n"
                "Total Annual Income: NPR **{{TOTAL_ANNUAL_INCOME_NPR}}** "
                "({{TOTAL_ANNUAL_INCOME_FOREIGN_EQUIVALENT}})\n"
                "I have also been approved an education loan from **{{EDUCATION_LOAN_BANK}}** "
                "({{EDUCATION_LOAN_BANK_DESCRIPTION}}) of NPR **{{EDUCATION_LOAN_AMOUNT_NPR}}** "
                "({{EDUCATION_LOAN_FOREIGN_EQUIVALENT}})."
            ),
            'reasons_for_country': (
                "**REASONS TO CHOOSE CANADA AS A STUDY DESTINATION**\n\n"
                "After a lot of research, I finally chose Canada for my higher studies. The first and foremost "
                "reason is its **excellent education system and a degree that has a global recognition**.\n\n"
                "{{WHY_THIS_COUNTRY}}"
            ),
            'reasons_against_home_country': "**REASONS NOT TO CHOOSE NEPAL**\n\n{{WHY_NOT_HOME_COUNTRY}}",
            'reasons_for_program': "**REASON TO CHOOSE {{FIELD_OF_STUDY}}**\n\n{{WHY_THIS_PROGRAM}}",
            'reasons_for_institution': "**REASONS TO CHOOSE {{INSTITUTION_NAME}}**\n\n{{WHY_THIS_INSTITUTION}}",
            'future_career_plans': "**FUTURE CAREER PLAN**\n\n{{FUTURE_GOALS}}",
            'incentives_to_return_home': "**INCENTIVES TO RETURN TO HOME-COUNTRY**\n\n{{INCENTIVES_TO_RETURN_HOME}}",
            'conclusion': (
                "**CONCLUSION**\n\n"
                "At last, I would like to state myself as a genuine student with a good academic track record who "
                "meets the English language proficiency requirement. My only intention in going to Canada is "
                "academic, and I look forward to a long and beneficial association with my college. "
                "{{ADDITIONAL_POINTS}}"
            ),
            'closing': (
                "Thank you for your time and consideration,\n\nYours Sincerely,\nName: **{{FULL_NAME}}**\n"
                "Passport Number: **{{PASSPORT_NUMBER}}**"
            ),
        },
    ),
]


def format_current_date(today=None):
    """18 October 2026"""
    today = today or timezone.localdate()
    return f"{today.day} {today:%B %Y}"


def select_template(country, education_level):
    """Exact country and level first, then a country-only template, then generic."""
    for template in TEMPLATES:
        if template.country and template.matches(country, education_level):
            return template
    for template in TEMPLATES:
        if template.country == country and not template.education_level:
            return template
    return next(t for t in TEMPLATES if t.id == GENERIC)


def _substitute(text, values):
    return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), m.group(0)), text)


def placeholder_values(template, data, today=None):
    values = {}
    for token, (name, default) in TOKENS.items():
        value = (data.get(name) or '').strip()
        values[token] = value or default
    values['CURRENT_DATE'] = format_current_date(today)
    values['FIELD_OF_STUDY_LOWER'] = values['FIELD_OF_STUDY'].lower()

    # Template wording for blank fields may itself reference filled tokens.
    for token, wording in template.defaults.items():
        name = TOKENS[token][0] if token in TOKENS else None
        if name is None or not (data.get(name) or '').strip():
            values[token] = _substitute(wording, values)
    return values


def render_sections(template, data, today=None):
    """Yield (section name, text) in document order."""
    values = placeholder_values(template, data, today)
    for name, condition in SECTION_ORDER:
        text = template.sections.get(name)
        if text is None:
            continue
        if condition is not None and not condition(data):
            continue
        yield name, _substitute(text, values).strip()


def generate_sop(data, today=None):
    template = select_template(data.get('target_country', ''), data.get('target_education_level', ''))
    return "\n\n".join(text for _, text in render_sections(template, data, today))
