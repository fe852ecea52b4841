"""
==========================================================
USER-FACING MESSAGES
==========================================================
All success, error, and info messages shown to users.
Change the wording once → updates across the entire site.
"""

from .branding import SITE_NAME

# --- Auth ---
MSG_LOGIN_HEADING = f"{SITE_NAME} Staff Login"
MSG_IDLE_LOGOUT = "You have been logged out due to inactivity."
MSG_IDLE_WARNING = "You will be logged out in 2 minutes due to inactivity."

# --- Home Page ---
MSG_HOME_WELCOME = f"Welcome to {SITE_NAME}"
MSG_HOME_CTA = "Book a Free Consultation"

# --- Public forms ---
MSG_CONTACT_SUCCESS = "Your message has been sent successfully! We'll get back to you soon."
MSG_CONTACT_INVALID = "Invalid data provided. Please check your entries."
MSG_CLASS_BOOKING_SUCCESS = "Your class booking request has been received! We'll contact you to confirm."
MSG_APPOINTMENT_SUCCESS = "Your appointment request has been received! We'll confirm it shortly."
MSG_REMOTE_VISIT_NOTE = "Remote Inquiry: Scheduled for an office visit on {date}."
MSG_REMOTE_PHONE_NOTE = "Remote Inquiry: Requested phone counselling."
MSG_ORIGINAL_NOTES = "{prefix}\n\nStudent's original notes: {notes}"
MSG_APPOINTMENT_NOTE = "Appointment request: {service} with {staff} on {date} ({slot})."

# --- Students ---
MSG_STUDENT_CREATED = "Student record created."
MSG_STUDENT_UPDATED = "Student details updated successfully."
MSG_STUDENT_DELETED = "Student record deleted."
MSG_NO_MORE_STUDENTS = "No more students"
MSG_REACHED_BEGINNING = "You have reached the beginning"
MSG_INVALID_CURSOR = "That page link has expired. Showing the first page."
MSG_NO_COUNSELOR_PROFILE = "Your account is not linked to a counselor name. Ask an admin to set it."

# --- CSV Upload ---
MSG_CSV_INVALID_TYPE = "Please upload a CSV file."
MSG_CSV_TOO_LARGE = "File size too large (max {max_mb}MB)."
MSG_CSV_ENCODING = "File encoding error. Please ensure the file is UTF-8 encoded."
MSG_CSV_MISSING_HEADERS = "Missing required columns. Found: {found}. Required: {required}"
MSG_CSV_SUCCESS = "Successfully imported {count} students!"
MSG_CSV_SKIPPED = "Some rows were skipped: {errors}"
MSG_CSV_ERROR = "An unexpected error occurred during processing."

# --- Reports ---
MSG_REPORT_COUNSELOR_REQUIRED = "Please select a counselor."
MSG_REPORT_UNASSIGNED = "Reports cannot be generated for unassigned students."
MSG_REPORT_DATES_REQUIRED = "Please select a start and end date."
MSG_REPORT_DATE_ORDER = "The end date must be on or after the start date."

# --- Assistants ---
MSG_SOP_NOT_GENERATED = "Generate an SOP first, then download it."
MSG_ASSISTANT_UNAVAILABLE = "I'm sorry, I'm having trouble generating a response at the moment. Please try again."
MSG_TOKEN_CAP_REACHED = "Monthly token cap reached. Generation disabled."
MSG_EMPTY_MODEL_RESPONSE = "Empty response from model"

# --- Generic ---
MSG_PERMISSION_DENIED = "You do not have permission to perform this action."
MSG_NOT_FOUND = "The requested resource was not found."
MSG_GENERIC_ERROR = "Something went wrong. Please try again."
