"""Request handler exports."""

from .transcription_handler import TranscriptionHandler

__all__ = ["TranscriptionHandler"]
