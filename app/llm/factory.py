from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from app.config import settings
from app.exceptions import AppError
from app.llm.base import ModelClient
from app.llm.chat_model import ChatModelClient
from app.llm.config import LLMProvider
from app.llm.gemini import GeminiClient


class LLMFactory:
    @staticmethod
    def create(
        provider: str | None = None,
        model: str | None = None,
        **kwargs: object,
    ) -> ModelClient:
        provider = provider or settings.llm_provider
        model = model or settings.llm_model
        temperature = settings.llm_temperature

        match provider:
            case LLMProvider.GEMINI:
                api_key = settings.gemini_api_key
                if not api_key:
                    raise AppError("Gemini API key is not configured", code="LLM_CONFIG_ERROR")
                return GeminiClient(
                    api_key,
                    model,
                    use_search=settings.gemini_use_search,
                    temperature=temperature,
                )

            case LLMProvider.OPENAI:
                api_key = settings.openai_api_key
                if not api_key:
                    raise AppError("OpenAI API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatModelClient(
                    ChatOpenAI(model=model, api_key=api_key, temperature=temperature, **kwargs)  # type: ignore[arg-type]
                )

            case LLMProvider.ANTHROPIC:
                api_key = settings.anthropic_api_key
                if not api_key:
                    raise AppError("Anthropic API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatModelClient(
                    ChatAnthropic(model=model, api_key=api_key, temperature=temperature, **kwargs)  # type: ignore[arg-type]
                )

            case _:
                raise AppError(f"Unknown LLM provider: '{provider}'", code="LLM_CONFIG_ERROR")
