import httpx
import logging
import asyncio
from config import Settings, get_settings
from models.prediction import Prediction, PredictionStatus
from services.errors import UpstreamError, PredictionError, PredictionTimeout

logger = logging.getLogger("llm.replicate")


class ReplicateClient:
    """Client for the Replicate predictions API (create, then poll until done)."""

    env_var = "REPLICATE_API_KEY"

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.api_url = settings.REPLICATE_API_URL.rstrip("/")
        self.api_key = settings.REPLICATE_API_KEY
        self.model_version = settings.REPLICATE_MODEL_VERSION
        self.poll_interval = settings.POLL_INTERVAL_SECONDS
        self.max_attempts = settings.POLL_MAX_ATTEMPTS
        self.sampling = {
            "max_length": settings.MAX_LENGTH,
            "temperature": settings.TEMPERATURE,
            "top_p": settings.TOP_P,
        }

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Token {self.api_key}",
            "Content-Type": "application/json",
        }

    async def generate(self, prompt: str) -> str:
        """Create a prediction for the prompt and wait for its output."""
        async with httpx.AsyncClient(timeout=30.0) as client:
            prediction = await self.create_prediction(client, prompt)
            return await self.poll_prediction(client, prediction.id)

    async def create_prediction(self, client: httpx.AsyncClient, prompt: str) -> Prediction:
        response = await client.post(
            self.api_url,
            headers=self.headers,
            json={
                "version": self.model_version,
                "input": {"prompt": prompt, **self.sampling},
            },
        )

        if response.is_error:
            error = _error_body(response)
            logger.error(f"Prediction creation error ({response.status_code}): {error}")
            if response.status_code == 402:
                raise UpstreamError(
                    "Payment required. Please check your Replicate API account balance.",
                    status_code=402,
                )
            raise UpstreamError(
                error.get("detail") or "Error creating prediction",
                status_code=response.status_code,
            )

        prediction = Prediction(**response.json())
        logger.info(f"Created prediction {prediction.id}")
        return prediction

    async def get_prediction(self, client: httpx.AsyncClient, prediction_id: str) -> Prediction:
        response = await client.get(f"{self.api_url}/{prediction_id}", headers=self.headers)
        if response.is_error:
            error = _error_body(response)
            raise PredictionError(error.get("detail") or "Error checking prediction status")
        return Prediction(**response.json())

    async def poll_prediction(self, client: httpx.AsyncClient, prediction_id: str) -> str:
        """
        Poll a prediction every ``poll_interval`` seconds, at most
        ``max_attempts`` times. Returns the joined output text.
        """
        for attempt in range(self.max_attempts):
            prediction = await self.get_prediction(client, prediction_id)
            logger.debug(f"Prediction {prediction_id} is {prediction.status} (attempt {attempt + 1})")

            if prediction.status == PredictionStatus.SUCCEEDED:
                if not prediction.output:
                    raise PredictionError("No output received from model")
                return prediction.output_text()

            if prediction.status == PredictionStatus.FAILED:
                raise PredictionError(prediction.error or "Prediction failed")

            if prediction.status == PredictionStatus.CANCELED:
                raise PredictionError("Prediction was canceled")

            await asyncio.sleep(self.poll_interval)

        raise PredictionTimeout("Prediction timed out")


def _error_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
