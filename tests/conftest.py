import pytest
from config import Settings

API_URL = "https://api.replicate.com/v1/predictions"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        LLM_PROVIDER="replicate",
        REPLICATE_API_KEY="test-key",
        REPLICATE_API_URL=API_URL,
        REPLICATE_MODEL_VERSION="test-version",
        POLL_INTERVAL_SECONDS=0,
        POLL_MAX_ATTEMPTS=3,
        OPENAI_API_KEY="",
    )


class FakeBackend:
    """Stands in for an inference backend; records the prompts it receives."""

    env_var = "REPLICATE_API_KEY"

    def __init__(self, output: str = "", error: Exception | None = None, configured: bool = True):
        self.output = output
        self.error = error
        self.is_configured = configured
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.output


@pytest.fixture
def fake_backend():
    return FakeBackend
