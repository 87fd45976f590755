from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    # Which inference backend handles generation: "replicate" or "openai"
    LLM_PROVIDER: Literal["replicate", "openai"] = "replicate"

    # Replicate (poll-based predictions API)
    REPLICATE_API_KEY: str = ""
    REPLICATE_API_URL: str = "https://api.replicate.com/v1/predictions"
    # CodeLlama
    REPLICATE_MODEL_VERSION: str = "d24902e3fa9b698cc208b5e63136c4e26e828659a9f09827ca6ec5bb83014381"
    POLL_INTERVAL_SECONDS: float = 1.0
    POLL_MAX_ATTEMPTS: int = 60

    # Sampling
    MAX_LENGTH: int = 1000
    TEMPERATURE: float = 0.1
    TOP_P: float = 0.9

    # OpenAI-compatible synchronous API (Cerebras by default)
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.cerebras.ai/v1"
    OPENAI_MODEL: str = "llama-3.3-70b"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    # App
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
