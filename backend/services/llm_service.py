import logging
import asyncio
from openai import OpenAI
from config import Settings, get_settings
from services.errors import ConfigurationError, PredictionError
from services.replicate_client import ReplicateClient

logger = logging.getLogger("llm_service")

SYSTEM_INSTRUCTION = "You are an expert software engineer. Respond with code only."


class LLMService:
    """Synchronous generation over an OpenAI-compatible chat completions API."""

    env_var = "OPENAI_API_KEY"

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.base_url = settings.OPENAI_BASE_URL
        self.api_key = settings.OPENAI_API_KEY
        self.model = settings.OPENAI_MODEL
        self.temperature = settings.TEMPERATURE
        self.top_p = settings.TOP_P
        self.max_tokens = settings.MAX_LENGTH
        self._client = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> OpenAI:
        # The SDK refuses to build without a key, so defer until first use
        if self._client is None:
            self._client = OpenAI(base_url=self.base_url, api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        """Generate text content."""
        messages = [
            {"role": "system", "content": SYSTEM_INSTRUCTION},
            {"role": "user", "content": prompt},
        ]

        try:
            response = await asyncio.to_thread(
                self.client.chat.completions.create,
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_completion_tokens=self.max_tokens,
                top_p=self.top_p,
            )
        except Exception as e:
            logger.error(f"LLM generation error: {e}")
            raise

        content = response.choices[0].message.content
        if not content:
            raise PredictionError("No output received from model")
        return content


def get_llm_backend() -> ReplicateClient | LLMService:
    """Backend selected by LLM_PROVIDER."""
    settings = get_settings()
    if settings.LLM_PROVIDER == "openai":
        return LLMService(settings)
    return ReplicateClient(settings)


def ensure_configured(backend: ReplicateClient | LLMService) -> None:
    if not backend.is_configured:
        raise ConfigurationError(
            f"API key is not configured. Please set the {backend.env_var} environment variable."
        )
