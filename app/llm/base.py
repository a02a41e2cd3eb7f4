from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RawModelResponse:
    """Untrusted model output: free-form text plus provider-specific citations."""

    text: str
    grounding_metadata: dict[str, Any] | None = None


class ModelClient(ABC):
    @abstractmethod
    async def invoke(self, prompt: str) -> RawModelResponse: ...
