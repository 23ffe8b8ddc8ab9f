from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "BrandLens"
    debug: bool = False
    log_level: str = "INFO"

    default_strategy: str = "both"

    discovery_provider: str = "ollama"
    discovery_timeout_seconds: float = 8.0

    ollama_base_url: str = "http://localhost:11434"
    ollama_model_discovery: str = "qwen2.5:7b"

    openai_api_key: Optional[str] = None
    openai_api_base: str = "https://api.openai.com/v1"
    openai_model_discovery: str = "gpt-4o-mini"


settings = Settings()
