"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from speech_common import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Reports that the relay is up."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return HealthResponse(
        status="OK",
        message="Speech to Text API is running",
        timestamp=timestamp.replace("+00:00", "Z"),
    )
