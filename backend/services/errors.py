class CodeGenerationError(Exception):
    """Base error for anything that should reach the UI as ``{"error": ...}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(CodeGenerationError):
    pass


class UpstreamError(CodeGenerationError):
    """Non-2xx response from the inference provider, status is proxied."""


class PredictionError(CodeGenerationError):
    pass


class PredictionTimeout(PredictionError):
    pass
