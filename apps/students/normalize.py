"""
Key normalization shared by the dashboard counters and the reports.

Free-text form values arrive in every casing ("USA", "usa", " Usa "), and
older records carry short counselor names ("Pawan Sir"). Counters are keyed
on the normalized form so those collapse into one bucket.
"""
import re

from django.utils import timezone

from config.constants import LEGACY_COUNSELOR_NAMES, UNASSIGNED

NOT_AVAILABLE = "N/A"

_WORD = re.compile(r'\w\S*')


def title_case(value):
    """
    "  bachelor's DEGREE " -> "Bachelor's Degree". Empty or None -> "N/A".
    Only the first character of each word is upper-cased; the rest is lowered.
    """
    if not value:
        return NOT_AVAILABLE
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), value.strip())


def normalize_counselor(value):
    if not value:
        return UNASSIGNED
    name = value.strip()
    return LEGACY_COUNSELOR_NAMES.get(name) or title_case(name)


def month_key(dt):
    """Month bucket ("YYYY-MM") of a timestamp, in the active time zone."""
    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return f"{dt.year}-{dt.month:02d}"
