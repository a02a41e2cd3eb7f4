"""Tests for chart analytics derived from the historical series."""

import json
import math

import pytest

from app.sentiment.analytics import (
    build_chart_data,
    classify_rsi,
    month_label,
    price_axis_bounds,
    smooth_sentiment,
    volume_directions,
)
from app.sentiment.schemas import HistoricalDataPoint, RsiZone, VolumeDirection
from app.sentiment.validation import validate_payload


def _points(scores=None, prices=None) -> list[HistoricalDataPoint]:
    length = len(scores if scores is not None else prices)
    scores = scores or [None] * length
    prices = prices or [None] * length
    return [
        HistoricalDataPoint(date=f"2025-{i + 1:02d}", sentiment_score=score, price=price)
        for i, (score, price) in enumerate(zip(scores, prices))
    ]


class TestSmoothSentiment:
    """Tests for the trailing sentiment band."""

    def test_sparse_series_has_no_bands(self):
        """Fewer than three scored points produce no bands at all."""
        bands = smooth_sentiment(_points(scores=[0.2, None, 0.4, None]))

        assert [b.sentiment_score for b in bands] == [0.2, None, 0.4, None]
        assert all(b.sma is None and b.upper_band is None and b.lower_band is None for b in bands)

    def test_trailing_window(self):
        """The window covers up to three trailing positions."""
        bands = smooth_sentiment(_points(scores=[0.0, 0.3, 0.6, 0.9]))

        assert bands[0].sma == pytest.approx(0.0)
        assert bands[0].upper_band == pytest.approx(0.0)
        assert bands[1].sma == pytest.approx(0.15)
        assert bands[2].sma == pytest.approx(0.3)
        assert bands[3].sma == pytest.approx(0.6)

        std = math.sqrt(((0.3 - 0.6) ** 2 + 0 + (0.9 - 0.6) ** 2) / 3)
        assert bands[3].upper_band == pytest.approx(0.6 + 2 * std)
        assert bands[3].lower_band == pytest.approx(0.6 - 2 * std)

    def test_window_skips_undefined_scores(self):
        """Undefined scores inside the window are ignored; unscored points get no band."""
        bands = smooth_sentiment(_points(scores=[0.2, None, 0.4, 0.8]))

        assert bands[1].sma is None
        assert bands[2].sma == pytest.approx(0.3)
        assert bands[3].sma == pytest.approx(0.6)

    def test_idempotent(self):
        """Running the smoothing twice gives identical results."""
        points = _points(scores=[0.1, -0.2, 0.5, 0.3, None, 0.0])
        assert smooth_sentiment(points) == smooth_sentiment(points)

    def test_labels(self):
        bands = smooth_sentiment(_points(scores=[0.1]))
        assert bands[0].label == "Jan 25"


class TestClassifyRsi:
    """Tests for RSI zone thresholds."""

    @pytest.mark.parametrize(
        "value,zone",
        [
            (75, RsiZone.OVERBOUGHT),
            (25, RsiZone.OVERSOLD),
            (50, RsiZone.NEUTRAL),
            (70, RsiZone.NEUTRAL),
            (30, RsiZone.NEUTRAL),
            (70.01, RsiZone.OVERBOUGHT),
        ],
    )
    def test_thresholds(self, value, zone):
        assert classify_rsi(value) == zone


class TestVolumeDirections:
    """Tests for volume bar colouring."""

    def test_first_bar_is_down(self):
        assert volume_directions(_points(prices=[10.0])) == [VolumeDirection.DOWN]

    def test_up_only_on_price_increase(self):
        """A bar is up only when both prices are defined and rising."""
        directions = volume_directions(_points(prices=[10.0, 12.0, 12.0, 9.0, None, 11.0]))

        assert directions == [
            VolumeDirection.DOWN,
            VolumeDirection.UP,
            VolumeDirection.DOWN,
            VolumeDirection.DOWN,
            VolumeDirection.DOWN,
            VolumeDirection.DOWN,
        ]

    def test_zero_price_counts_as_defined(self):
        assert volume_directions(_points(prices=[0.0, 1.0]))[1] == VolumeDirection.UP


class TestPriceAxisBounds:
    """Tests for the price axis domain."""

    def test_bounds_ignore_missing_prices(self):
        lower, upper = price_axis_bounds(_points(prices=[100.0, None, 200.0]))

        assert lower == pytest.approx(95.0)
        assert upper == pytest.approx(210.0)

    def test_no_prices(self):
        """The degenerate case is rejected so callers must guard it."""
        with pytest.raises(ValueError, match="No historical point has a defined price"):
            price_axis_bounds(_points(prices=[None, None]))


class TestMonthLabel:
    def test_format(self):
        assert month_label("2024-11") == "Nov 24"

    def test_unparsable(self):
        assert month_label("last month") == "last month"


class TestBuildChartData:
    """Tests for the bundled chart payload."""

    def test_full_series(self, valid_payload):
        analysis = validate_payload(json.dumps(valid_payload))

        chart = build_chart_data(analysis)

        assert len(chart.labels) == 12
        assert chart.labels[0] == "Nov 24"
        assert len(chart.sentiment_band) == 12
        assert chart.volume_directions[0] == VolumeDirection.DOWN
        assert chart.volume_directions[1] == VolumeDirection.UP
        assert chart.price_axis.lower == pytest.approx(150.0 * 0.95)
        assert chart.rsi_zone == RsiZone.NEUTRAL

    def test_without_prices(self, payload_factory):
        """No defined price leaves the price axis unset."""
        payload = payload_factory(historicalData=[{"date": "2025-01"}, {"date": "2025-02"}])
        analysis = validate_payload(json.dumps(payload))

        assert build_chart_data(analysis).price_axis is None
