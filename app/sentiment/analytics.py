"""Chart-side analytics derived from a validated analysis.

All functions are pure; none of them reorders the historical series.
"""

import math
from collections.abc import Sequence
from datetime import datetime

from app.sentiment.schemas import (
    ChartData,
    HistoricalDataPoint,
    PriceAxis,
    RsiZone,
    SentimentAnalysis,
    SentimentBandPoint,
    VolumeDirection,
)

SMOOTHING_WINDOW = 3
MIN_SCORED_POINTS = 3
BAND_WIDTH = 2.0

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0

PRICE_AXIS_LOWER_PAD = 0.95
PRICE_AXIS_UPPER_PAD = 1.05


def month_label(date: str) -> str:
    """Format ``"2025-01"`` as ``"Jan 25"``; anything unparsable is returned as is."""
    try:
        return datetime.strptime(date, "%Y-%m").strftime("%b %y")
    except ValueError:
        return date


def smooth_sentiment(points: Sequence[HistoricalDataPoint]) -> list[SentimentBandPoint]:
    """Trailing mean of sentiment with a +/- 2 sigma band.

    The window covers the current position and the two before it, restricted
    to defined scores. With fewer than three scored points in the whole series
    no band is produced.
    """
    scores = [point.sentiment_score for point in points]
    with_bands = sum(score is not None for score in scores) >= MIN_SCORED_POINTS

    result: list[SentimentBandPoint] = []
    for i, point in enumerate(points):
        band = SentimentBandPoint(
            date=point.date,
            label=month_label(point.date),
            sentiment_score=point.sentiment_score,
        )
        if with_bands and point.sentiment_score is not None:
            start = max(0, i - SMOOTHING_WINDOW + 1)
            window = [score for score in scores[start : i + 1] if score is not None]
            mean = sum(window) / len(window)
            std_dev = math.sqrt(sum((score - mean) ** 2 for score in window) / len(window))
            band = band.model_copy(
                update={
                    "sma": mean,
                    "upper_band": mean + BAND_WIDTH * std_dev,
                    "lower_band": mean - BAND_WIDTH * std_dev,
                }
            )
        result.append(band)
    return result


def classify_rsi(value: float) -> RsiZone:
    if value > RSI_OVERBOUGHT:
        return RsiZone.OVERBOUGHT
    if value < RSI_OVERSOLD:
        return RsiZone.OVERSOLD
    return RsiZone.NEUTRAL


def volume_directions(points: Sequence[HistoricalDataPoint]) -> list[VolumeDirection]:
    """Colour each volume bar by the price move from the previous month."""
    directions: list[VolumeDirection] = []
    for i, point in enumerate(points):
        previous = points[i - 1].price if i > 0 else None
        if previous is not None and point.price is not None and previous < point.price:
            directions.append(VolumeDirection.UP)
        else:
            directions.append(VolumeDirection.DOWN)
    return directions


def price_axis_bounds(points: Sequence[HistoricalDataPoint]) -> tuple[float, float]:
    prices = [point.price for point in points if point.price is not None]
    if not prices:
        raise ValueError("No historical point has a defined price")
    return min(prices) * PRICE_AXIS_LOWER_PAD, max(prices) * PRICE_AXIS_UPPER_PAD


def build_chart_data(analysis: SentimentAnalysis) -> ChartData:
    points = analysis.historical_data

    price_axis = None
    if any(point.price is not None for point in points):
        lower, upper = price_axis_bounds(points)
        price_axis = PriceAxis(lower=lower, upper=upper)

    return ChartData(
        labels=tuple(month_label(point.date) for point in points),
        sentiment_band=tuple(smooth_sentiment(points)),
        volume_directions=tuple(volume_directions(points)),
        price_axis=price_axis,
        rsi_zone=classify_rsi(analysis.technical_indicators.rsi14),
    )
