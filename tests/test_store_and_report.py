import pytest
from openpyxl import load_workbook

from mhc_dashboard.data.loader import LoadError
from mhc_dashboard.data.schemas import Selection
from mhc_dashboard.data.store import DataStore
from mhc_dashboard.reports import selection_report


def test_store_load(survey_csv):
    store = DataStore(survey_csv).load()
    assert store.is_loaded
    assert store.row_count() == 4
    assert store.filter_options().groups == ["Adult", "Youth"]


def test_store_failed_load_stays_unloaded(tmp_path):
    store = DataStore(tmp_path / "missing.csv")
    with pytest.raises(LoadError):
        store.load()
    assert not store.is_loaded
    assert store.records == ()


def test_store_records_are_immutable(survey_csv):
    store = DataStore(survey_csv).load()
    with pytest.raises(AttributeError):
        store.records[0].value = 99.0


def test_generate_json_summaries(survey_csv):
    store = DataStore(survey_csv).load()
    data = selection_report.generate_json(store, Selection("Adult", "Aug 2020", "Anxiety"))
    assert data["line"]["summary"] == {"count": 2, "min": 10.0, "max": 15.0, "mean": 12.5}
    assert data["selection"]["group"] == "Adult"


def test_generate_json_incomplete_selection(survey_csv):
    store = DataStore(survey_csv).load()
    data = selection_report.generate_json(store, Selection(group="Adult"))
    assert data["label"] == "Incomplete selection"
    assert data["line"]["summary"]["count"] == 0
    assert data["bar"]["records"] == []


def test_generate_excel_writes_both_sheets(survey_csv, tmp_path):
    store = DataStore(survey_csv).load()
    path = selection_report.generate_excel(
        store, Selection("Youth", "Jul 2020", "Anxiety"), tmp_path / "out" / "report.xlsx",
    )
    wb = load_workbook(path)
    assert wb.sheetnames == ["Over Time", "By Subgroup"]
    # Youth has one Aug 2020 estimate; nothing was reported in Jul 2020
    over_time = [c.value for c in wb["Over Time"]["A"] if c.value is not None]
    assert "Aug 2020" in over_time
    by_subgroup = [c.value for c in wb["By Subgroup"]["A"] if c.value is not None]
    assert "No data available for this selection." in by_subgroup


def test_reload_swaps_records_and_options_together(survey_csv, tmp_path):
    from conftest import write_csv

    store = DataStore(survey_csv).load()
    other = write_csv(tmp_path / "other.csv", ["Stress,Seniors,65+,Oct 2020,20,18,22"])
    store.load(other)
    assert store.filter_options().groups == ["Seniors"]
    assert [r.group for r in store.records] == ["Seniors"]

    with pytest.raises(LoadError):
        store.load(tmp_path / "missing.csv")
    assert store.filter_options().indicators == ["Stress"]
    assert store.row_count() == 1


def test_generate_excel_header_uses_chart_palette(survey_csv, tmp_path):
    from mhc_dashboard.excel.styles import STEEL_BLUE

    store = DataStore(survey_csv).load()
    path = selection_report.generate_excel(
        store, Selection("Adult", "Aug 2020", "Anxiety"), tmp_path / "report.xlsx",
    )
    ws = load_workbook(path)["Over Time"]
    header = next(c for c in ws["A"] if c.value == "Time Period")
    assert header.fill.start_color.rgb.endswith(STEEL_BLUE)
