"""Normalization of provider citation metadata into ``SourceRef`` entries.

Each supported shape has its own adapter yielding ``(uri, title)`` pairs. Keys
are looked up in both camelCase (REST payloads) and snake_case (SDK dumps).
"""

from collections.abc import Callable, Iterator
from typing import Any
from urllib.parse import urlparse

from app.sentiment.schemas import SourceRef, dedupe_sources

SourcePair = tuple[Any, Any]
GroundingAdapter = Callable[[dict[str, Any]], Iterator[SourcePair]]


def _field(node: Any, *keys: str) -> Any:
    if not isinstance(node, dict):
        return None
    for key in keys:
        if key in node and node[key] is not None:
            return node[key]
    return None


def _items(node: Any, *keys: str) -> list:
    value = _field(node, *keys)
    return value if isinstance(value, list) else []


def _grounding_chunks(metadata: dict[str, Any]) -> Iterator[SourcePair]:
    for chunk in _items(metadata, "groundingChunks", "grounding_chunks"):
        web = _field(chunk, "web")
        yield _field(web, "uri"), _field(web, "title")


def _web_search_queries(metadata: dict[str, Any]) -> Iterator[SourcePair]:
    for query in _items(metadata, "webSearchQueries", "web_search_queries"):
        for result in _items(query, "results"):
            yield _field(result, "uri"), _field(result, "title")


def _citation_sources(metadata: dict[str, Any]) -> Iterator[SourcePair]:
    for source in _items(metadata, "citationSources", "citation_sources"):
        yield _field(source, "uri"), None


def _citations(metadata: dict[str, Any]) -> Iterator[SourcePair]:
    for citation in _items(metadata, "citations"):
        yield _field(citation, "uri", "url"), _field(citation, "title")


GROUNDING_ADAPTERS: dict[str, GroundingAdapter] = {
    "grounding_chunks": _grounding_chunks,
    "web_search_queries": _web_search_queries,
    "citation_sources": _citation_sources,
    "citations": _citations,
}


def default_title(uri: str) -> str:
    return urlparse(uri).hostname or uri


def merge_grounding(metadata: dict[str, Any] | None) -> tuple[SourceRef, ...]:
    if not isinstance(metadata, dict):
        return ()

    sources: list[SourceRef] = []
    for adapter in GROUNDING_ADAPTERS.values():
        for uri, title in adapter(metadata):
            if not isinstance(uri, str) or not uri.strip():
                continue
            uri = uri.strip()
            if not isinstance(title, str) or not title.strip():
                title = default_title(uri)
            sources.append(SourceRef(title=title.strip(), uri=uri))
    return dedupe_sources(sources)
