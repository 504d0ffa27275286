"""
Health check endpoint
"""
import time
from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ticket_triage import __version__
from ticket_triage.classification.lexicon import LEXICON_VERSION

router = APIRouter(prefix="/api/v1/health", tags=["health"])

# Application start time for uptime calculation
APP_START_TIME = time.time()


class HealthResponse(BaseModel):
    """Basic health check response"""
    status: str = Field(..., description="Overall status")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    version: str = Field(..., description="Application version")
    lexicon_version: str = Field(..., description="Classification lexicon revision")
    uptime_seconds: float = Field(..., description="Application uptime in seconds")


@router.get("", response_model=HealthResponse)
async def health_check():
    """
    Basic liveness check; the service has no external dependencies
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        lexicon_version=LEXICON_VERSION,
        uptime_seconds=round(time.time() - APP_START_TIME, 3)
    )
