from mhc_dashboard.charts import build_bar_chart, build_line_chart, figure_to_dict
from mhc_dashboard.config import NO_DATA_MESSAGE
from mhc_dashboard.data.schemas import CleanedRecord


def _annotation_texts(fig):
    return [a.text for a in fig.layout.annotations]


def test_empty_line_view_shows_placeholder():
    fig = build_line_chart(())
    assert len(fig.data) == 0
    assert _annotation_texts(fig) == [NO_DATA_MESSAGE]
    assert fig.layout.xaxis.visible is False


def test_empty_bar_view_shows_placeholder():
    fig = build_bar_chart(())
    assert len(fig.data) == 0
    assert _annotation_texts(fig) == [NO_DATA_MESSAGE]


def test_line_chart_points_and_order(scenario_records):
    view = (scenario_records[1], scenario_records[0])
    fig = build_line_chart(view)

    trace = fig.data[0]
    assert list(trace.x) == ["Sep 2020", "Aug 2020"]
    assert list(trace.y) == [15.0, 10.0]
    assert list(fig.layout.xaxis.categoryarray) == ["Sep 2020", "Aug 2020"]
    assert list(fig.layout.yaxis.range) == [0, 15.0]
    assert trace.text[0] == "Value: 15%<br>CI: [14 - 16]"


def test_line_tooltip_handles_missing_ci():
    record = CleanedRecord("Anxiety", "Youth", "All Youth", "Aug 2020", 5.5, None, float("nan"))
    fig = build_line_chart((record,))
    assert fig.data[0].text[0] == "Value: 5.5%<br>CI: [N/A - N/A]"


def test_bar_chart_one_bar_per_subgroup(scenario_records):
    view = (scenario_records[0], scenario_records[2])
    fig = build_bar_chart(view)

    trace = fig.data[0]
    assert list(trace.x) == ["All Adults", "All Youth"]
    assert fig.layout.xaxis.tickangle == -45
    assert fig.layout.margin.b == 80
    assert trace.text[1] == "Subgroup: All Youth<br>Value: 5%"


def test_figure_to_dict_is_plain_json(scenario_records):
    fig_dict = figure_to_dict(build_line_chart(scenario_records[:2]))
    assert fig_dict["data"][0]["type"] == "scatter"
    assert "layout" in fig_dict
