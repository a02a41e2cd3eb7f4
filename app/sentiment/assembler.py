from collections.abc import Iterable

from app.llm.base import RawModelResponse
from app.sentiment.extraction import extract_json_text
from app.sentiment.grounding import dedupe_sources, merge_grounding
from app.sentiment.schemas import SentimentAnalysis, SourceRef
from app.sentiment.validation import validate_payload


def assemble_analysis(payload: SentimentAnalysis, sources: Iterable[SourceRef]) -> SentimentAnalysis:
    """Attach grounding sources to a validated payload.

    Sources already present in the payload come first; grounding sources with a
    uri seen before are dropped.
    """
    return payload.model_copy(update={"data_sources": dedupe_sources(payload.data_sources, sources)})


def ingest_response(raw: RawModelResponse) -> SentimentAnalysis:
    """Turn a raw model response into a validated analysis, or raise."""
    payload = validate_payload(extract_json_text(raw.text))
    return assemble_analysis(payload, merge_grounding(raw.grounding_metadata))
