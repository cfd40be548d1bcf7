"""Application configuration loaded from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Hugging Face Inference API
    huggingface_api_token: str = ""
    hf_api_base_url: str = "https://api-inference.huggingface.co"
    hf_model: str = "finiteautomata/bertweet-base-sentiment-analysis"
    hf_timeout_seconds: float | None = None  # unset means wait indefinitely

    # Transcript export
    transcript_filename: str = "sentiment-analysis-chat.txt"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("hf_timeout_seconds", mode="before")
    @classmethod
    def _blank_timeout_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
