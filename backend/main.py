from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from config import get_settings
from api.routes.generate import router as generate_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("codeforge")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting CodeForge API (provider: {settings.LLM_PROVIDER})...")
    yield
    # Shutdown
    logger.info("Shutting down CodeForge API...")


app = FastAPI(
    title="CodeForge API",
    description="Natural-language to code generation over hosted LLMs",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(generate_router)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "codeforge"}
