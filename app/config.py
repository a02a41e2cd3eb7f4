from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    llm_provider: str = Field(default="gemini", pattern=r"^(gemini|openai|anthropic)$")
    llm_model: str = Field(default="gemini-2.5-flash")
    llm_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    gemini_api_key: str = Field(default="")
    gemini_use_search: bool = Field(default=True)
    openai_api_key: str = Field(default="")
    anthropic_api_key: str = Field(default="")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    db_path: str = Field(default="stock_sentiment.db")
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
