"""Dependency wiring for the capture client."""

from capture_client.config import ClientConfig
from capture_client.controller import TranscriptionController
from capture_client.infrastructure import (
    HttpRelayClient,
    PyperclipClipboard,
    SoundDeviceRecorder,
)
from capture_client.ui import ConsoleView


def get_controller(config: ClientConfig) -> TranscriptionController:
    """Returns a controller wired to the terminal, microphone and relay."""
    return TranscriptionController(
        view=ConsoleView(refresh_rate=config.refresh_rate),
        recorder=SoundDeviceRecorder(config.recorder),
        relay=HttpRelayClient(config.relay_url),
        clipboard=PyperclipClipboard(),
        config=config,
    )
