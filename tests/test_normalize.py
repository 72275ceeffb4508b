import math

from mhc_dashboard.data.normalize import clean_string, normalize_row, parse_number


def _raw(**overrides):
    row = {
        "Indicator": "anxiety disorder",
        "Group": "by age",
        "Subgroup": "18 - 29 years",
        "Time Period": "aug 19 - aug 31, 2020",
        "Value": "12.5%",
        "Confidence Interval (Low Bound)": "11.0",
        "Confidence Interval (High Bound)": "14.0",
    }
    row.update(overrides)
    return row


def test_clean_string_rejects_missing_and_non_strings():
    assert clean_string(None) is None
    assert clean_string("") is None
    assert clean_string(float("nan")) is None
    assert clean_string(42) is None


def test_clean_string_title_cases_and_collapses_whitespace():
    assert clean_string("  mOOD   disorder ") == "Mood Disorder"
    assert clean_string("NATIONAL ESTIMATE") == "National Estimate"


def test_clean_string_is_naive_about_acronyms():
    assert clean_string("LGBT adults") == "Lgbt Adults"
    assert clean_string("18 - 29 years") == "18 - 29 Years"


def test_clean_string_whitespace_only_is_empty():
    assert clean_string("   ") == ""


def test_parse_number_strips_symbols():
    assert parse_number("12.5%") == 12.5
    assert parse_number("$1,200") == 1200
    assert parse_number(" 7.5 % ") == 7.5


def test_parse_number_missing_input():
    assert parse_number(None) is None
    assert parse_number("") is None


def test_parse_number_non_numeric_is_nan():
    assert math.isnan(parse_number("abc"))
    assert math.isnan(parse_number("n/a"))


def test_parse_number_reads_leading_number_only():
    assert parse_number("12.5 (est.)") == 12.5
    assert parse_number("-3e2") == -300.0


def test_parse_number_ignores_non_ascii_digits():
    assert math.isnan(parse_number("\u0661\u0662"))
    assert math.isnan(parse_number("\uff11\uff10%"))


def test_normalize_row_maps_all_fields():
    c = normalize_row(_raw())
    assert c.indicator == "Anxiety Disorder"
    assert c.group == "By Age"
    assert c.subgroup == "18 - 29 Years"
    assert c.time_period == "Aug 19 - Aug 31, 2020"
    assert c.value == 12.5
    assert c.ci_lower == 11.0
    assert c.ci_upper == 14.0


def test_normalize_row_is_idempotent():
    raw = _raw()
    assert normalize_row(raw) == normalize_row(raw)
    assert normalize_row(raw).to_record() == normalize_row(raw).to_record()


def test_empty_group_is_not_retained():
    assert normalize_row(_raw(Group="")).to_record() is None


def test_nan_value_is_not_retained():
    assert normalize_row(_raw(Value="suppressed")).to_record() is None


def test_missing_ci_bounds_still_retained():
    record = normalize_row(_raw(**{
        "Confidence Interval (Low Bound)": "",
        "Confidence Interval (High Bound)": "n/a",
    })).to_record()
    assert record is not None
    assert record.ci_lower is None
    assert math.isnan(record.ci_upper)
    assert record.to_dict()["ci_upper"] is None
