"""
Route handlers for health reporting.
"""
from datetime import datetime, timezone
from fastapi import APIRouter
from config import Config
from models.api_models import StatusResponse

router = APIRouter()


@router.get("/api/status", response_model=StatusResponse)
async def service_status():
    """Liveness report with the runtime environment tag."""
    return StatusResponse(
        status="ok",
        environment=Config.ENVIRONMENT,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
