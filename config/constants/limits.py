"""
==========================================================
LIMITS, THRESHOLDS & METRICS
==========================================================
All numeric limits, pagination sizes and thresholds.
Change once here → applies everywhere.
"""

# --- Pagination ---
PAGINATION_STUDENTS_ALL = 50        # cursor page size on the all-students page
STUDENT_TABLE_RECENT = 20           # rows in the searchable student table
WELCOME_SCREEN_LIMIT = 20           # names on the office TV screen
PAGINATION_LLM_LOGS = 25

# --- Student form limits ---
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PHONE_MIN_LENGTH = 7
PHONE_MAX_LENGTH = 15
PHONE_PATTERN = r'^\+?[0-9\s\-()]*$'
NOTES_MAX_LENGTH = 500

# --- CSV Import ---
MAX_CSV_SIZE_MB = 10
MAX_CSV_SIZE = MAX_CSV_SIZE_MB * 1024 * 1024
CSV_IMPORT_BATCH_SIZE = 250
CSV_REQUIRED_HEADERS = ['Full Name', 'Email Address']

# --- Dashboard metrics ---
MONTHLY_ADMISSIONS_WINDOW_MONTHS = 12

# --- SOP generator ---
SOP_FULL_NAME_RANGE = (2, 100)
SOP_ACADEMIC_BACKGROUND_RANGE = (50, 2000)
SOP_NARRATIVE_RANGE = (50, 1500)
SOP_EXTRACURRICULARS_RANGE = (20, 2000)
SOP_ADDITIONAL_POINTS_MAX = 1000

# --- Chatbot ---
CHAT_QUERY_MAX_LENGTH = 1000
CHAT_HISTORY_MAX_TURNS = 10

# --- Security ---
IDLE_TIMEOUT_MINUTES = 30
IDLE_WARNING_MINUTES = 2
PASSWORD_MIN_LENGTH = 6
