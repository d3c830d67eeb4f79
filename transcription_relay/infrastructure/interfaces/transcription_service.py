"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from typing import Any


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes) -> dict[str, Any]:
        """
        Transcribes audio data and returns the provider's raw result.

        Args:
            audio_data: Raw audio file bytes.

        Returns:
            Provider result as a dictionary. Any field may be absent.

        Raises:
            TranscriptionError: If the provider reports a failure.
        """
