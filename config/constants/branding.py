"""
==========================================================
BRANDING & IDENTITY
==========================================================
Change these values to rebrand the entire site instantly.
Every template, email, PDF and page title reads from here.
"""

# --- Core Identity ---
SITE_NAME = "Pixar Edu"
SITE_TAGLINE = "Your trusted partner for studying abroad."
SITE_DESCRIPTION = "Counseling, test preparation and visa support for students from Nepal."
SITE_FULL_TITLE = "Pixar Educational Consultancy"

# --- Company Info ---
COMPANY_NAME = "Pixar Educational Consultancy"
COMPANY_EMAIL = "info@pixaredu.com"
COMPANY_PHONE = "+977 9761859757"
COMPANY_ADDRESS = "New Baneshwor, Kathmandu, Nepal, 44600"
COMPANY_WEBSITE = "https://pixaredu.com"

# --- SEO & Meta ---
META_TITLE_SUFFIX = f" | {SITE_NAME}"
META_DESCRIPTION = SITE_DESCRIPTION
META_KEYWORDS = "study abroad, IELTS, PTE, student visa, USA, Australia, Canada, UK, New Zealand, Nepal"

# --- Social ---
SOCIAL_FACEBOOK = "https://www.facebook.com/pixaredu"
SOCIAL_TIKTOK = "https://www.tiktok.com/@pixareducation"
SOCIAL_YOUTUBE = "https://www.youtube.com/@pixareducation"
SOCIAL_INSTAGRAM = "https://www.instagram.com/pixar.education"

# --- Copyright ---
COPYRIGHT_YEAR = "2026"
COPYRIGHT_TEXT = f"© {COPYRIGHT_YEAR} {COMPANY_NAME}. All rights reserved."
