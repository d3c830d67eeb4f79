"""Abstract interfaces for client infrastructure dependencies."""

from .audio_recorder import AudioRecorder
from .clipboard import Clipboard
from .relay_client import RelayClient

__all__ = ["AudioRecorder", "Clipboard", "RelayClient"]
