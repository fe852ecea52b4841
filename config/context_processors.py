"""
Context processor: branding constants for every template.

PLATFORM_CONFIG (core.context_processors) holds the admin-editable values;
templates fall back to these constants, e.g.
    {{ PLATFORM_CONFIG.site_name|default:SITE_NAME }}
"""

from config.constants import branding
from config.constants.limits import IDLE_WARNING_MINUTES
from config.constants.messages import (
    MSG_HOME_CTA, MSG_HOME_WELCOME, MSG_IDLE_WARNING, MSG_LOGIN_HEADING,
)

BRANDING_KEYS = (
    'SITE_NAME', 'SITE_TAGLINE', 'SITE_DESCRIPTION',
    'COMPANY_NAME', 'COMPANY_EMAIL', 'COMPANY_PHONE', 'COMPANY_ADDRESS', 'COPYRIGHT_TEXT',
    'META_DESCRIPTION', 'META_KEYWORDS',
    'SOCIAL_FACEBOOK', 'SOCIAL_TIKTOK', 'SOCIAL_YOUTUBE', 'SOCIAL_INSTAGRAM',
)


def site_config(request):
    context = {key: getattr(branding, key) for key in BRANDING_KEYS}
    context.update(
        MSG_LOGIN_HEADING=MSG_LOGIN_HEADING,
        MSG_HOME_WELCOME=MSG_HOME_WELCOME,
        MSG_HOME_CTA=MSG_HOME_CTA,
        MSG_IDLE_WARNING=MSG_IDLE_WARNING,
        # Staff pages warn this long before the idle sign-out
        IDLE_WARNING_SECONDS=IDLE_WARNING_MINUTES * 60,
    )
    return context
