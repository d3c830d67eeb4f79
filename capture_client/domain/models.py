"""Domain models for the capture client."""

from enum import Enum

from pydantic import BaseModel

PLACEHOLDER_TEXT = "Your transcription will appear here..."
NO_SPEECH_TEXT = "No speech detected in the audio."


class CaptureState(str, Enum):
    IDLE = "idle"
    CAPTURING = "capturing"


class AudioCapture(BaseModel, frozen=True):
    """Audio ready to be submitted: recorded or read from a file."""

    data: bytes
    mime_type: str
    filename: str


class ResultPanel(BaseModel, frozen=True):
    """What the result area currently shows."""

    text: str = PLACEHOLDER_TEXT
    is_placeholder: bool = True
    confidence: str | None = None
    word_count: int | None = None
    duration: str | None = None
    model: str | None = None
    metadata_visible: bool = False
    actions_enabled: bool = False
