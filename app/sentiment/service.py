import pydantic
import structlog

from app.exceptions import AppError, TransportError, ValidationError
from app.llm.base import ModelClient
from app.sentiment.assembler import ingest_response
from app.sentiment.prompts import build_sentiment_prompt
from app.sentiment.schemas import AnalysisRequest, SentimentAnalysis

logger = structlog.get_logger()

# Ordered: the first matching group decides the message.
_TRANSPORT_MESSAGES: list[tuple[tuple[str, ...], str]] = [
    (
        ("api key", "api_key", "authentication", "unauthorized", "permission denied", "401", "403"),
        "Invalid API key. Please check the model provider API key configuration.",
    ),
    (
        ("quota", "rate limit", "resource_exhausted", "resource exhausted", "429"),
        "API quota exceeded. Please try again later.",
    ),
    (
        ("timeout", "timed out", "deadline"),
        "Request timeout. The AI service is taking too long to respond. Please try again.",
    ),
    (
        ("network", "connect", "connection", "enotfound", "econnrefused", "name resolution"),
        "Network error. The AI service might be temporarily unavailable. Please try again.",
    ),
]


def describe_transport_failure(exc: BaseException) -> str:
    """Map a model-invocation failure onto a user-facing message."""
    detail = str(exc) or type(exc).__name__
    haystack = f"{type(exc).__name__} {detail}".lower()
    for needles, message in _TRANSPORT_MESSAGES:
        if any(needle in haystack for needle in needles):
            return message
    return f"Failed to generate sentiment analysis: {detail}. Please try again."


class SentimentService:
    def __init__(self, client: ModelClient) -> None:
        self._client = client

    async def analyze(self, symbol: str, exchange: str) -> SentimentAnalysis:
        try:
            request = AnalysisRequest(symbol=symbol, exchange=exchange)
        except pydantic.ValidationError as exc:
            raise ValidationError("Please enter a company name or stock symbol and an exchange.") from exc

        logger.info("sentiment_analyze", symbol=request.symbol, exchange=request.exchange)
        prompt = build_sentiment_prompt(request.symbol, request.exchange)

        try:
            raw = await self._client.invoke(prompt)
        except AppError:
            raise
        except Exception as exc:
            logger.error(
                "sentiment_llm_error",
                symbol=request.symbol,
                exchange=request.exchange,
                error=str(exc),
            )
            raise TransportError(describe_transport_failure(exc)) from exc

        analysis = ingest_response(raw)
        logger.info(
            "sentiment_analyzed",
            symbol=request.symbol,
            sentiment=analysis.overall_sentiment,
            recommendation=analysis.recommendation,
            sources=len(analysis.data_sources),
            news=len(analysis.news_articles),
            months=len(analysis.historical_data),
        )
        return analysis
