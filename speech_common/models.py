"""Wire models shared by the relay and its clients."""

from pydantic import BaseModel, Field


class WordTiming(BaseModel, frozen=True):
    """A single recognized word with its position in the audio, in seconds."""

    word: str
    start: float = 0.0
    end: float = 0.0
    confidence: float = 0.0


class ResultMetadata(BaseModel, frozen=True):
    """Provider settings used for a transcription."""

    model: str
    language: str
    processed_at: str


class TranscriptionResponse(BaseModel, frozen=True):
    """Normalized body returned by POST /api/transcribe."""

    success: bool = True
    transcript: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    word_count: int = 0
    duration: float = 0.0
    words: list[WordTiming] = Field(default_factory=list, max_length=10)
    paragraphs: list[str] = Field(default_factory=list)
    metadata: ResultMetadata


class ErrorResponse(BaseModel, frozen=True):
    """Body returned for any 4xx/5xx relay response."""

    error: str
    message: str


class HealthResponse(BaseModel, frozen=True):
    status: str = "OK"
    message: str
    timestamp: str
