from datetime import datetime

from src.timesheet_ledger.timesheet_ledger.core.enums import DateOrder
from src.timesheet_ledger.timesheet_ledger.punches.extractor import (
    DATETIME_PATTERN,
    PunchExtractor,
    detect_date_order,
    extract_timestamps,
    normalize_meridiem,
    normalize_year,
)


def _instants(text: str) -> list[datetime]:
    return [p.timestamp for p in PunchExtractor().extract(text)]


def test_day_first_detected_from_day_above_twelve():
    text = "13/01/2024 08:05:00 AM\n02/01/2024 09:00:00 AM"

    assert _instants(text) == [datetime(2024, 1, 2, 9, 0), datetime(2024, 1, 13, 8, 5)]


def test_date_order_is_decided_once_for_the_whole_batch():
    # The ambiguous 02/03 comes first but 25/03 fixes day-first for both.
    text = "02/03/2024 08:00:00 AM | 25/03/2024 08:00:00 AM"

    assert _instants(text) == [datetime(2024, 3, 2, 8, 0), datetime(2024, 3, 25, 8, 0)]


def test_month_first_detected_from_second_component():
    text = "01/13/2024 08:00:00 AM 02/03/2024 08:00:00 AM"

    assert _instants(text) == [datetime(2024, 1, 13, 8, 0), datetime(2024, 2, 3, 8, 0)]


def test_ambiguous_batch_defaults_to_month_first():
    assert _instants("02/03/2024 08:00:00 AM") == [datetime(2024, 2, 3, 8, 0)]


def test_detect_date_order_first_disambiguating_match_wins():
    matches = list(DATETIME_PATTERN.finditer("01/02/2024 08:00:00 AM 01/20/2024 08:00:00 AM 20/01/2024 08:00:00 AM"))

    assert detect_date_order(matches) == DateOrder.MONTH_FIRST


def test_vietnamese_meridiem_markers():
    text = "05/01/2024 08:00:00 SA\n05/01/2024 05:30:00 ch"

    assert _instants(text) == [datetime(2024, 5, 1, 8, 0), datetime(2024, 5, 1, 17, 30)]
    assert normalize_meridiem("sa") == "AM"
    assert normalize_meridiem("CH") == "PM"
    assert normalize_meridiem("pm") == "PM"


def test_two_digit_years_use_cutoff_50():
    assert normalize_year("24") == 2024
    assert normalize_year("49") == 2049
    assert normalize_year("50") == 1950
    assert normalize_year("99") == 1999
    assert normalize_year("2024") == 2024

    assert _instants("13/01/24 08:00:00 AM") == [datetime(2024, 1, 13, 8, 0)]


def test_invalid_calendar_dates_are_skipped():
    text = "31/04/2024 08:00:00 AM garbage 13/01/2024 08:00:00 AM"

    assert _instants(text) == [datetime(2024, 1, 13, 8, 0)]


def test_twelve_o_clock_meridiem():
    text = "13/01/2024 12:15:00 AM 13/01/2024 12:15:00 PM"

    assert _instants(text) == [datetime(2024, 1, 13, 0, 15), datetime(2024, 1, 13, 12, 15)]


def test_24_hour_clock_with_matching_marker():
    assert _instants("13/01/2024 18:10:00 PM") == [datetime(2024, 1, 13, 18, 10)]
    assert _instants("13/01/2024 18:10:00 AM") == []


def test_hour_zero_is_not_a_12_hour_clock_value():
    assert _instants("13/01/2024 00:30:00 AM") == []
    assert _instants("13/01/2024 00:00:00 PM") == []
    assert _instants("13/01/2024 00:30:00 AM 13/01/2024 13:00:00 PM") == [datetime(2024, 1, 13, 13, 0)]


def test_raw_string_is_the_matched_substring():
    punches = PunchExtractor().extract("NV001  13/01/2024 08:05:00 SA  Vân tay")

    assert len(punches) == 1
    assert punches[0].raw_string == "13/01/2024 08:05:00 SA"


def test_equal_instants_keep_input_order():
    punches = PunchExtractor().extract("13/01/2024 08:00:00 SA\n13/01/2024 08:00:00 AM")

    assert [p.raw_string for p in punches] == ["13/01/2024 08:00:00 SA", "13/01/2024 08:00:00 AM"]


def test_no_matches_gives_empty_result():
    assert PunchExtractor().extract("") == []
    assert PunchExtractor().extract("no punches here 2024-01-13 08:00") == []


def test_extraction_is_deterministic():
    text = "19/01/2024 04:40:00 PM\n13/01/2024 08:05:00 SA\n15/01/2024 08:25:00 AM"

    assert extract_timestamps(text) == extract_timestamps(text)
    assert [p.timestamp for p in extract_timestamps(text)] == sorted(p.timestamp for p in extract_timestamps(text))
