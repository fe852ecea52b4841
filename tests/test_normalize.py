from datetime import datetime, timezone as dt_timezone

from students.normalize import NOT_AVAILABLE, month_key, normalize_counselor, title_case


def test_title_case_lowers_the_rest_of_each_word():
    assert title_case("  bachelor's DEGREE ") == "Bachelor's Degree"
    assert title_case("usa") == "Usa"
    assert title_case("NEW zealand") == "New Zealand"


def test_title_case_of_blank_is_not_available():
    assert title_case("") == NOT_AVAILABLE
    assert title_case(None) == NOT_AVAILABLE


def test_normalize_counselor_maps_legacy_names():
    assert normalize_counselor("Pawan Sir") == "Pawan Acharya"
    assert normalize_counselor(" Mamta Miss ") == "Mamata Chapagain"


def test_normalize_counselor_blank_is_unassigned():
    assert normalize_counselor("") == "Unassigned"
    assert normalize_counselor(None) == "Unassigned"


def test_normalize_counselor_title_cases_unknown_names():
    assert normalize_counselor("sabina thapa") == "Sabina Thapa"


def test_month_key_uses_local_time():
    # 20:00 UTC on the last day of January is already February in Kathmandu (+05:45).
    late_january = datetime(2026, 1, 31, 20, 0, tzinfo=dt_timezone.utc)
    assert month_key(late_january) == "2026-02"


def test_month_key_of_naive_datetime():
    assert month_key(datetime(2025, 7, 4, 12, 0)) == "2025-07"
