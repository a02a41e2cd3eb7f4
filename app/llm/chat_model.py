from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from app.llm.base import ModelClient, RawModelResponse


class ChatModelClient(ModelClient):
    """Adapts a LangChain chat model to the ModelClient interface."""

    def __init__(self, llm: BaseChatModel) -> None:
        self._llm = llm

    async def invoke(self, prompt: str) -> RawModelResponse:
        response = await self._llm.ainvoke([HumanMessage(content=prompt)])
        raw = response.content
        text = raw if isinstance(raw, str) else _join_text_blocks(raw)

        metadata: dict[str, Any] = {}
        grounding = response.response_metadata.get("grounding_metadata")
        if isinstance(grounding, dict):
            metadata.update(grounding)
        if not isinstance(raw, str):
            citations = _collect_citations(raw)
            if citations:
                metadata["citations"] = citations

        return RawModelResponse(text=text, grounding_metadata=metadata or None)


def _join_text_blocks(blocks: list) -> str:
    parts: list[str] = []
    for block in blocks:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _collect_citations(blocks: list) -> list[dict]:
    """Gather Anthropic ``citations`` and OpenAI ``url_citation`` annotations."""
    citations: list[dict] = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        for citation in block.get("citations") or []:
            if isinstance(citation, dict):
                citations.append(citation)
        for annotation in block.get("annotations") or []:
            if isinstance(annotation, dict) and annotation.get("type") == "url_citation":
                citations.append(annotation)
    return citations
