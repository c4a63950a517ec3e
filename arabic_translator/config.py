from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_key: str = Field(
        default="", validation_alias=AliasChoices("KITAB_API_KEY", "API_KEY")
    )
    llm_provider: str = "gemini"  # "gemini", "anthropic" or "openai"
    llm_model: str = "gemini-2.5-flash"
    max_tokens: int = 8192

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    model_config = {
        "env_prefix": "KITAB_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }


def get_settings() -> Settings:
    return Settings()
