from speech_common.logging import setup_logging
from speech_common.models import (
    ErrorResponse,
    HealthResponse,
    ResultMetadata,
    TranscriptionResponse,
    WordTiming,
)

__all__ = [
    "setup_logging",
    "ErrorResponse",
    "HealthResponse",
    "ResultMetadata",
    "TranscriptionResponse",
    "WordTiming",
]
