import pytest

from mhc_dashboard.cli import main


def test_options_prints_sorted_lists(survey_csv, capsys):
    main(["options", "--source", str(survey_csv)])
    out = capsys.readouterr().out
    assert "GROUPS (2):" in out
    assert out.index("Adult") < out.index("Youth")


def test_views_prints_placeholder_for_unknown_group(survey_csv, capsys):
    main([
        "views", "--source", str(survey_csv),
        "--group", "Seniors", "--time-period", "Aug 2020", "--indicator", "Anxiety",
    ])
    out = capsys.readouterr().out
    assert "OVER TIME (0):" in out
    assert "No data available" in out
    assert "BY SUBGROUP (2):" in out


def test_export_writes_files(survey_csv, tmp_path):
    out = tmp_path / "export"
    main([
        "export", "--source", str(survey_csv), "--output", str(out),
        "--group", "Adult", "--time-period", "Aug 2020", "--indicator", "Anxiety",
    ])
    assert (out / "line_chart.html").exists()
    assert (out / "bar_chart.html").exists()
    assert (out / "Selection_Report.xlsx").exists()


def test_load_failure_exits_nonzero(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["options", "--source", str(tmp_path / "missing.csv")])
    assert exc.value.code == 1
