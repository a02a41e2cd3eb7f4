from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, field_validator
from pydantic.alias_generators import to_camel

REQUIRED_ASPECTS = ("financials", "management", "marketPosition")


def _clamp_score(value: float) -> float:
    return max(-1.0, min(1.0, value))


class CamelModel(BaseModel):
    """Immutable model exchanged with the model provider and the UI in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False
    )


class Sentiment(StrEnum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class Recommendation(StrEnum):
    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"


class AnalysisRequest(BaseModel):
    symbol: str = Field(min_length=1)
    exchange: str = Field(min_length=1)

    @field_validator("symbol", "exchange", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class PointReason(CamelModel):
    point: str
    reason: str


class NewsArticle(CamelModel):
    title: str = Field(min_length=1)
    snippet: str = Field(min_length=1)
    uri: str = Field(pattern=r"^[A-Za-z][A-Za-z0-9+.\-]*:\S+")


class HistoricalDataPoint(CamelModel):
    date: str  # "YYYY-MM"
    price: StrictFloat | None = None
    ma50: StrictFloat | None = None
    ma200: StrictFloat | None = None
    rsi14: StrictFloat | None = None
    volume: StrictFloat | None = None
    sentiment_score: StrictFloat | None = None


class TechnicalIndicators(CamelModel):
    moving_average50: StrictFloat
    moving_average200: StrictFloat
    rsi14: StrictFloat


class SourceRef(CamelModel):
    title: str
    uri: str = Field(min_length=1)


def dedupe_sources(*groups: Iterable[SourceRef]) -> tuple[SourceRef, ...]:
    """Merge source groups by exact uri; the first occurrence keeps its title."""
    seen: dict[str, SourceRef] = {}
    for group in groups:
        for source in group:
            seen.setdefault(source.uri, source)
    return tuple(seen.values())


class SentimentAnalysis(CamelModel):
    # Field order decides which violation is reported first.
    company_name: str = Field(min_length=1)
    stock_symbol: str = Field(min_length=1)
    currency_symbol: str = Field(min_length=1)
    overall_sentiment: Sentiment
    sentiment_score: StrictFloat
    summary: str
    recommendation: Recommendation
    recommendation_summary: str
    current_price: StrictFloat
    fifty_two_week_high: StrictFloat
    fifty_two_week_low: StrictFloat
    current_volume: StrictFloat | None = None
    average_volume: StrictFloat | None = None
    technical_indicators: TechnicalIndicators
    positive_points: tuple[PointReason, ...] = ()
    negative_points: tuple[PointReason, ...] = ()
    aspect_sentiment: dict[str, StrictFloat | None] | None = None
    historical_data: tuple[HistoricalDataPoint, ...] = ()
    news_articles: tuple[NewsArticle, ...] = ()
    data_sources: tuple[SourceRef, ...] = ()

    @field_validator("sentiment_score")
    @classmethod
    def _clamp_sentiment(cls, value: float) -> float:
        return _clamp_score(value)

    @field_validator("positive_points", "negative_points", mode="before")
    @classmethod
    def _missing_points(cls, value: object) -> object:
        return () if value is None else value

    @field_validator("data_sources")
    @classmethod
    def _unique_sources(cls, value: tuple[SourceRef, ...]) -> tuple[SourceRef, ...]:
        return dedupe_sources(value)

    @field_validator("aspect_sentiment")
    @classmethod
    def _check_aspects(cls, value: dict[str, float | None] | None) -> dict[str, float | None] | None:
        if value is None:
            return None
        missing = [aspect for aspect in REQUIRED_ASPECTS if aspect not in value]
        if missing:
            raise ValueError(f"missing aspects: {', '.join(missing)}")
        return {
            aspect: None if score is None else _clamp_score(score)
            for aspect, score in value.items()
        }


# Derived analytics consumed by the charts


class RsiZone(StrEnum):
    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    NEUTRAL = "Neutral"


class VolumeDirection(StrEnum):
    UP = "up"
    DOWN = "down"


class SentimentBandPoint(CamelModel):
    date: str
    label: str
    sentiment_score: float | None = None
    sma: float | None = None
    upper_band: float | None = None
    lower_band: float | None = None


class PriceAxis(CamelModel):
    lower: float
    upper: float


class ChartData(CamelModel):
    labels: tuple[str, ...]
    sentiment_band: tuple[SentimentBandPoint, ...]
    volume_directions: tuple[VolumeDirection, ...]
    price_axis: PriceAxis | None = None
    rsi_zone: RsiZone
