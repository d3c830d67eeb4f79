"""Abstract interface for microphone capture."""

from abc import ABC, abstractmethod

import numpy as np


class AudioRecorder(ABC):
    """Abstract base class for microphone recorders."""

    @abstractmethod
    def check_available(self) -> None:
        """
        Probes for a usable input device without recording.

        Raises:
            MicrophoneUnavailableError: If no microphone can be used.
        """

    @abstractmethod
    def start(self) -> None:
        """
        Opens the microphone and starts buffering audio chunks.

        Raises:
            MicrophoneUnavailableError: If the microphone cannot be opened.
        """

    @abstractmethod
    def stop(self) -> bytes:
        """
        Stops recording and releases the microphone.

        Returns:
            All buffered audio encoded as one WAV file. Header-only when
            nothing was captured.
        """

    @abstractmethod
    def latest_block(self) -> np.ndarray:
        """Returns the most recent block of mono samples, empty if none yet."""
