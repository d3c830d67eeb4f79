"""Domain layer exports."""

from .capture_session import CaptureSession
from .formatting import (
    build_download_text,
    download_filename,
    format_confidence,
    format_duration,
)
from .level_meter import bar_heights, frequency_levels
from .models import AudioCapture, CaptureState, ResultPanel

__all__ = [
    "AudioCapture",
    "CaptureSession",
    "CaptureState",
    "ResultPanel",
    "bar_heights",
    "build_download_text",
    "download_filename",
    "format_confidence",
    "format_duration",
    "frequency_levels",
]
