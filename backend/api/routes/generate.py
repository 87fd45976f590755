import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from agents.code_generation_agent import CodeGenerationAgent
from models.code import GenerateRequest, GeneratedCode, ErrorResponse
from models.language import EditorSettings
from services.errors import CodeGenerationError, ConfigurationError
from services.languages import editor_settings
from services.llm_service import get_llm_backend, ensure_configured

logger = logging.getLogger("api.generate")
router = APIRouter(prefix="/api", tags=["generate"])


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/generate",
    response_model=GeneratedCode,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_code(request: Request, llm=Depends(get_llm_backend)):
    """Generate code for a prompt: ``{"prompt": ...}`` -> ``{"code", "language"}``."""
    try:
        ensure_configured(llm)
    except ConfigurationError as e:
        logger.error(e.message)
        return _error(e.message, e.status_code)

    try:
        payload = GenerateRequest.model_validate(await request.json())
    except ValueError:
        payload = GenerateRequest()

    if not payload.prompt or not payload.prompt.strip():
        return _error("Prompt is required", 400)

    agent = CodeGenerationAgent(llm)
    try:
        return await agent.run(payload.prompt)
    except CodeGenerationError as e:
        logger.error(f"Generation failed ({e.status_code}): {e.message}")
        return _error(e.message, e.status_code)
    except Exception as e:
        logger.error(f"Request error: {e}")
        return _error(str(e) or "Error generating code", 500)


@router.get("/languages", response_model=list[EditorSettings])
async def list_languages():
    """Editor settings (tab size, spaces vs tabs) for each supported language."""
    return editor_settings()
