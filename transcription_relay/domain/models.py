"""Domain models for the transcription relay."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AudioUpload(BaseModel, frozen=True):
    """An uploaded audio file that passed validation."""

    filename: str
    content_type: str | None
    size: int
    # Readable binary stream positioned at the start of the upload.
    data: Any


class ProviderWord(BaseModel, frozen=True):
    """A word as reported by the provider; timings are in milliseconds."""

    text: str | None = None
    start: int | None = None
    end: int | None = None
    confidence: float | None = None


class ProviderParagraph(BaseModel, frozen=True):
    text: str | None = None
    start: int | None = None
    end: int | None = None


class ProviderTranscript(BaseModel):
    """
    Raw provider result. Every field may be missing or null, so nothing
    here is trusted until the normalizer applies defaults.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str | None = None
    confidence: float | None = None
    audio_duration: float | None = None
    words: list[ProviderWord] | None = None
    paragraphs: list[ProviderParagraph] | None = None
