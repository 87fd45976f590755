from pydantic import BaseModel
from typing import Optional, Union


class PredictionStatus:
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


class Prediction(BaseModel):
    id: str
    status: str = PredictionStatus.STARTING
    output: Optional[Union[str, list[str]]] = None
    error: Optional[str] = None

    def output_text(self) -> str:
        """Join streamed output fragments into a single string."""
        if isinstance(self.output, list):
            return "".join(self.output)
        return self.output or ""
