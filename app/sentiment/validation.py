"""Parsing and validation of the model's JSON payload.

Two modes apply to different parts of the payload:

* ``LENIENT`` - enrichment arrays (news, history, sources). Malformed elements
  are dropped and the analysis proceeds.
* ``STRICT`` - everything else, including the positive/negative point arrays.
  Any violation rejects the whole analysis.
"""

import json
from enum import StrEnum
from typing import Any

import pydantic
import structlog
from pydantic import TypeAdapter

from app.exceptions import InvalidSchemaError, MalformedResponseError
from app.sentiment.schemas import HistoricalDataPoint, NewsArticle, SentimentAnalysis, SourceRef

logger = structlog.get_logger()

_RAW_PREVIEW_CHARS = 2000


class ValidationMode(StrEnum):
    LENIENT = "lenient"
    STRICT = "strict"


LENIENT_ARRAYS: dict[str, TypeAdapter] = {
    "newsArticles": TypeAdapter(NewsArticle),
    "historicalData": TypeAdapter(HistoricalDataPoint),
    "dataSources": TypeAdapter(SourceRef),
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json(text: str) -> Any:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
        # Some models double-encode the object as a JSON string.
        if isinstance(data, str):
            data = json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.error(
            "sentiment_parse_error",
            error=str(exc),
            raw_text=text[:_RAW_PREVIEW_CHARS],
        )
        raise MalformedResponseError(text) from exc
    return data


def filter_elements(key: str, items: Any, adapter: TypeAdapter) -> list:
    """Keep the elements of ``items`` that validate against ``adapter``."""
    if not isinstance(items, list):
        return []

    kept = []
    for item in items:
        try:
            adapter.validate_python(item)
        except pydantic.ValidationError:
            continue
        kept.append(item)

    dropped = len(items) - len(kept)
    if dropped:
        logger.debug(
            "sentiment_elements_dropped",
            field=key,
            mode=ValidationMode.LENIENT,
            dropped=dropped,
            kept=len(kept),
        )
    return kept


def format_error_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``technicalIndicators.rsi14`` / ``positivePoints[0]``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "$"


def validate_payload(text: str) -> SentimentAnalysis:
    data = parse_json(text)
    if not isinstance(data, dict):
        logger.error("sentiment_schema_error", field="$", raw_text=text[:_RAW_PREVIEW_CHARS])
        raise InvalidSchemaError("$", "expected a JSON object")

    payload = dict(data)
    for key, adapter in LENIENT_ARRAYS.items():
        payload[key] = filter_elements(key, payload.get(key), adapter)

    try:
        return SentimentAnalysis.model_validate(payload)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = format_error_location(first["loc"])
        logger.error(
            "sentiment_schema_error",
            field=field,
            mode=ValidationMode.STRICT,
            error=first["msg"],
            error_count=exc.error_count(),
            raw_text=text[:_RAW_PREVIEW_CHARS],
        )
        raise InvalidSchemaError(field, first["msg"]) from exc
