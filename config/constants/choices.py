"""
==========================================================
CHOICES & OPTION LISTS
==========================================================
Counselors, education levels, tests and destinations offered in every
form, filter and report.
"""

UNASSIGNED = 'Unassigned'

COUNSELOR_NAMES = [
    UNASSIGNED,
    'Pawan Acharya',
    'Mujal Amatya',
    'Sabina Thapa',
    'Shyam Babu Ojha',
    'Mamata Chapagain',
    'Pradeep Khadka',
]

# Old short names still present on older records.
LEGACY_COUNSELOR_NAMES = {
    'Pawan Sir': 'Pawan Acharya',
    'Mujal Sir': 'Mujal Amatya',
    'Sabina Mam': 'Sabina Thapa',
    'Shyam Sir': 'Shyam Babu Ojha',
    'Mamta Miss': 'Mamata Chapagain',
    'Pradeep Sir': 'Pradeep Khadka',
}

# Used by the one-off rename command, which also covers former staff.
COUNSELOR_RENAMES = {
    **LEGACY_COUNSELOR_NAMES,
    'Shikhar Sir': 'Shikhar KC',
    'Ram Sir': 'Ram Babu Ojha',
    'Sonima Mam': 'Sonima Rijal',
    'Sujata Mam': 'Sujata Nepal',
    'Anisha Mam': 'Anisha Thapa',
    'Saubhana Mam': 'Saubhana Bhandari',
    'Sunita Mam': 'Sunita Khadka',
}

EDUCATION_LEVELS = [
    "10+2",
    "Diploma",
    "Bachelor's Degree",
    "Master's Degree",
]

TARGET_EDUCATION_LEVELS = [
    ("Associate Degree", "Seeking Associate Degree"),
    ("Bachelor's Degree", "Seeking Bachelor's Degree"),
    ("Postgraduate Diploma", "Seeking Postgraduate Diploma"),
    ("Master's Degree", "Seeking Master's Degree"),
    ("Diploma", "Seeking Diploma"),
]

ENGLISH_TESTS = [
    "IELTS",
    "PTE",
    "TOEFL",
    "DUOLINGO",
    "Not Taken Yet",
]

TEST_PREP_OPTIONS = [
    ("IELTS Prep", "IELTS"),
    ("PTE Prep", "PTE"),
    ("TOEFL Prep", "TOEFL"),
    ("Duolingo Prep", "Duolingo"),
    ("USA Visa Prep", "Unlimited USA Visa Prep"),
    ("General English", "General English"),
]

STUDY_DESTINATIONS = [
    "USA",
    "New Zealand",
    "Australia",
    "Canada",
    "UK",
]

GPA_SCALE_OPTIONS = [
    ("4.0", "4.0 (or equivalent)"),
    ("3.7-3.9", "3.7 - 3.9 (or equivalent)"),
    ("3.3-3.6", "3.3 - 3.6 (or equivalent)"),
    ("3.0-3.2", "3.0 - 3.2 (or equivalent)"),
    ("2.5-2.9", "2.5 - 2.9 (or equivalent)"),
    ("Below 2.5", "Below 2.5 (or equivalent)"),
    ("N/A", "Not Applicable / Varies"),
]

SOP_TONES = [
    "Formal",
    "Slightly Informal",
    "Enthusiastic",
    "Objective",
]

FIELDS_OF_STUDY = [
    "Accounting", "Aerospace Engineering", "Agriculture", "Architecture",
    "Artificial Intelligence", "Biology", "Biotechnology", "Business Administration",
    "Civil Engineering", "Computer Engineering", "Computer Science", "Cybersecurity",
    "Data Science", "Economics", "Education", "Electrical Engineering",
    "Environmental Science", "Finance", "Health Sciences", "Hospitality Management",
    "Information Technology", "International Relations", "Journalism", "Law",
    "Marketing", "Mathematics", "Mechanical Engineering", "Medicine", "Nursing",
    "Pharmacy", "Physics", "Psychology", "Public Health", "Social Services",
    "Social Work", "Software Engineering", "Supply Chain Management",
    "Tourism Management",
]


def as_choices(values):
    """["A", "B"] -> [("A", "A"), ("B", "B")] for Django form/model choices."""
    return [(value, value) for value in values]

PROFICIENCY_LEVELS = [
    ("beginner", "Beginner"),
    ("intermediate", "Intermediate"),
    ("advanced", "Advanced"),
]

TEST_TIMELINES = [
    ("1 month", "Within 1 month"),
    ("3 months", "Within 3 months"),
    ("6 months", "Within 6 months"),
    ("flexible", "Flexible"),
]

TEST_BUDGETS = [
    ("< $100", "Less than $100"),
    ("$100 - $200", "$100 - $200"),
    ("$200 - $300", "$200 - $300"),
    ("> $300", "More than $300"),
]
