"""Concrete implementations of client interfaces."""

from .http_relay_client import HttpRelayClient
from .pyperclip_clipboard import PyperclipClipboard
from .sounddevice_recorder import SoundDeviceRecorder

__all__ = ["HttpRelayClient", "PyperclipClipboard", "SoundDeviceRecorder"]
