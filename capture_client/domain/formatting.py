"""Display and export formatting for transcription results."""

import math
from datetime import datetime

from speech_common import TranscriptionResponse


def format_confidence(confidence: float) -> str:
    """0.925 -> "93%" (half rounds up)."""
    return f"{math.floor(confidence * 100 + 0.5)}%"


def format_duration(duration: float) -> str:
    """3.04 -> "3.0s"."""
    return f"{duration:.1f}s"


def download_filename(epoch_ms: int) -> str:
    return f"transcription-{epoch_ms}.txt"


def build_download_text(result: TranscriptionResponse, generated_at: datetime) -> str:
    """Renders a result and its metadata as a plain-text document."""
    lines = [
        "Speech to Text Transcription",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Model: {result.metadata.model}",
        f"Confidence: {format_confidence(result.confidence)}",
        f"Duration: {format_duration(result.duration)}",
        f"Word Count: {result.word_count}",
        "",
        "Transcript:",
        result.transcript,
    ]
    return "\n".join(lines)
