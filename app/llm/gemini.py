from typing import Any

import structlog
from google import genai
from google.genai import types

from app.llm.base import ModelClient, RawModelResponse

logger = structlog.get_logger()


class GeminiClient(ModelClient):
    """Gemini via the google-genai SDK, optionally grounded with Google Search."""

    def __init__(
        self,
        api_key: str,
        model: str,
        *,
        use_search: bool = True,
        temperature: float = 0.3,
    ) -> None:
        self._client = genai.Client(api_key=api_key)
        self._model = model
        self._use_search = use_search
        self._temperature = temperature

    def _build_config(self) -> types.GenerateContentConfig:
        tools = [types.Tool(google_search=types.GoogleSearch())] if self._use_search else None
        return types.GenerateContentConfig(tools=tools, temperature=self._temperature)

    async def invoke(self, prompt: str) -> RawModelResponse:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=self._build_config(),
        )
        text = response.text or ""
        metadata = _candidate_metadata(response)
        logger.debug(
            "gemini_response",
            model=self._model,
            chars=len(text),
            grounded=metadata is not None,
        )
        return RawModelResponse(text=text, grounding_metadata=metadata)


def _candidate_metadata(response: types.GenerateContentResponse) -> dict[str, Any] | None:
    """Flatten grounding and citation metadata of the first candidate into one dict."""
    if not response.candidates:
        return None
    candidate = response.candidates[0]

    metadata: dict[str, Any] = {}
    if candidate.grounding_metadata is not None:
        metadata.update(candidate.grounding_metadata.model_dump(mode="json", exclude_none=True))
    if candidate.citation_metadata is not None and candidate.citation_metadata.citations:
        metadata["citations"] = [
            citation.model_dump(mode="json", exclude_none=True)
            for citation in candidate.citation_metadata.citations
        ]
    return metadata or None
