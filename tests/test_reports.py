import logging

import plotly.graph_objects as go
import pytest

from fars import InvalidStateError, fars_map_state, fars_summarize_years
from fars.reports import generators


@pytest.fixture
def shown(monkeypatch):
    """Capture figures passed to Figure.show() instead of rendering them."""
    figures = []

    def fake_show(self, *args, **kwargs):
        figures.append(self)

    monkeypatch.setattr(go.Figure, "show", fake_show)
    return figures


# ---------------------------------------------------------------------------
# fars_summarize_years
# ---------------------------------------------------------------------------

def test_summarize_years_one_row_per_month(data_dir):
    summary = fars_summarize_years([2013, 2014], data_dir=data_dir)

    assert summary.shape == (12, 3)
    assert list(summary.columns) == ['MONTH', 2013, 2014]
    assert summary['MONTH'].tolist() == list(range(1, 13))
    # 2013 fixture: month m has m accidents
    assert summary[2013].tolist() == list(range(1, 13))


def test_summarize_years_leaves_missing_months_unpopulated(data_dir):
    summary = fars_summarize_years(["2014", 2013], data_dir=data_dir)
    may = summary.loc[summary['MONTH'] == 5]

    assert may[2014].isna().all()
    assert may[2013].tolist() == [5]
    assert summary.loc[summary['MONTH'] != 5, 2014].eq(2).all()


def test_summarize_years_skips_invalid_years(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        summary = fars_summarize_years([2013, 9999], data_dir=data_dir)

    assert list(summary.columns) == ['MONTH', 2013]
    assert "invalid year: 9999" in caplog.messages


def test_summarize_years_all_invalid_gives_empty_table(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        summary = fars_summarize_years([9998, 9999], data_dir=data_dir)

    assert summary.empty
    assert list(summary.columns) == ['MONTH']
    assert "invalid year: 9998" in caplog.messages
    assert "invalid year: 9999" in caplog.messages
    assert any(m.startswith("no data loaded for years") for m in caplog.messages)


def test_summarize_years_accepts_generator(data_dir):
    summary = fars_summarize_years((y for y in [2013]), data_dir=data_dir)
    assert summary[2013].sum() == 78


def test_summarize_years_packaged_data():
    summary = fars_summarize_years([2013, 2014])

    assert summary.shape == (12, 3)
    assert summary[2013].sum() > 0


# ---------------------------------------------------------------------------
# fars_map_state
# ---------------------------------------------------------------------------

def test_map_state_draws_valid_points_only(data_dir, shown):
    result = fars_map_state(6, 2015, data_dir=data_dir)

    assert result is None
    (fig,) = shown
    (trace,) = fig.data
    assert isinstance(trace, go.Scattergeo)
    assert list(trace.lat) == [34.0, 37.5]
    assert list(trace.lon) == [-118.0, -122.5]


def test_map_state_range_excludes_sentinels(data_dir, shown):
    fars_map_state("6", "2015", data_dir=data_dir)

    geo = shown[0].layout.geo
    # Latitude 33.0 (longitude missing) and longitude -125.0 (latitude
    # missing) still bound the map; sentinel values never do.
    assert list(geo.lataxis.range) == pytest.approx([32.75, 37.75])
    assert list(geo.lonaxis.range) == pytest.approx([-125.25, -117.75])


def test_map_state_unknown_state(data_dir, shown):
    with pytest.raises(InvalidStateError, match="invalid STATE number: 1") as excinfo:
        fars_map_state(1, 2015, data_dir=data_dir)

    assert excinfo.value.state_num == 1
    assert shown == []


def test_map_state_missing_year_propagates(data_dir, shown):
    with pytest.raises(FileNotFoundError, match="accident_1999.csv.bz2"):
        fars_map_state(6, 1999, data_dir=data_dir)


def test_map_state_non_numeric_state(data_dir, shown):
    with pytest.raises(ValueError, match="state_num must be integer-like"):
        fars_map_state("CA", 2015, data_dir=data_dir)


def test_map_state_no_accidents_is_not_an_error(data_dir, shown, caplog, monkeypatch):
    monkeypatch.setattr(
        generators, "select_state", lambda df, state: df.iloc[0:0]
    )

    with caplog.at_level(logging.INFO, logger="fars"):
        result = fars_map_state(6, 2015, data_dir=data_dir)

    assert result is None
    assert shown == []
    assert "no accidents to plot" in caplog.messages


def test_map_state_no_valid_coordinates(data_dir, shown, caplog):
    with caplog.at_level(logging.INFO, logger="fars"):
        fars_map_state(12, 2015, data_dir=data_dir)

    assert shown == []
    assert "no valid coordinates to plot" in caplog.messages


def test_map_state_writes_html(data_dir, shown, tmp_path):
    out = tmp_path / "tx.html"

    fars_map_state(48, 2015, data_dir=data_dir, output_path=out)

    assert shown == []
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_map_state_does_not_touch_source_file(data_dir, shown):
    path = data_dir / "accident_2015.csv.bz2"
    before = path.read_bytes()

    fars_map_state(6, 2015, data_dir=data_dir)

    assert path.read_bytes() == before
