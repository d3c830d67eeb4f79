"""Abstract interface for the transcription relay API."""

from abc import ABC, abstractmethod

from capture_client.domain.models import AudioCapture
from speech_common import TranscriptionResponse


class RelayClient(ABC):
    """Abstract base class for relay API clients."""

    @abstractmethod
    def transcribe(self, capture: AudioCapture) -> TranscriptionResponse:
        """
        Submits audio for transcription.

        Args:
            capture: The audio to transcribe.

        Returns:
            The relay's normalized transcription.

        Raises:
            RelayRequestError: If the request fails or the relay reports
                an error.
        """
