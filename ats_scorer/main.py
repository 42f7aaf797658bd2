from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats_scorer.routers import score
from ats_scorer.utils.logging_config import configure_for_environment, get_logger
from ats_scorer.middleware.error_handlers import (
    ExceptionHandlerMiddleware,
    PerformanceMiddleware,
    register_exception_handlers,
)

# Configure logging first
configure_for_environment()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info("ATS Resume Scorer starting up...")
    yield
    logger.info("ATS Resume Scorer shutting down...")


app = FastAPI(title="ATS Resume Scorer", version="1.0.0", lifespan=lifespan)

# Last added runs first: request ids are assigned before timing
app.add_middleware(PerformanceMiddleware, slow_request_threshold=2.0)
app.add_middleware(ExceptionHandlerMiddleware)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
@app.head("/")
async def root():
    """Root endpoint - handles both GET and HEAD requests for health checks"""
    return {"message": "Welcome to the ATS Resume Scorer", "version": "1.0.0", "status": "ok"}


@app.get("/health")
@app.head("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(score.router, prefix="/api/score", tags=["score"])

logger.info("ATS Resume Scorer initialized successfully")
