from pydantic import BaseModel
from typing import Literal, Optional

Language = Literal["python", "typescript", "java", "cpp", "rust", "go"]


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class GeneratedCode(BaseModel):
    code: str
    language: Language


class ErrorResponse(BaseModel):
    error: str
