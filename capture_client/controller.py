"""UI controller owning one client session."""

import logging
import mimetypes
import os
import time
from collections.abc import Callable
from datetime import datetime

from capture_client.config import ClientConfig
from capture_client.domain import (
    AudioCapture,
    CaptureSession,
    ResultPanel,
    bar_heights,
    build_download_text,
    download_filename,
    format_confidence,
    format_duration,
)
from capture_client.domain.models import NO_SPEECH_TEXT
from capture_client.exceptions import (
    ClipboardError,
    MicrophoneUnavailableError,
    RelayRequestError,
    UnsupportedFileError,
)
from capture_client.interfaces import AudioRecorder, Clipboard, RelayClient
from capture_client.ui import StatusLevel, View
from speech_common import TranscriptionResponse

logger = logging.getLogger(__name__)

# Types the platform registry may not know about.
AUDIO_MIME_TYPES = {
    ".wav": "audio/wav",
    ".mp3": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
    ".flac": "audio/flac",
}


def declared_type(path: str) -> str | None:
    """Returns the MIME type a file declares through its extension."""
    extension = os.path.splitext(path)[1].lower()
    return AUDIO_MIME_TYPES.get(extension) or mimetypes.guess_type(path)[0]


class TranscriptionController:
    """
    Drives capture, submission and result actions for one session.

    All mutable session state lives here: the capture state machine, the
    active result and the panel shown for it. At most one result is active;
    a successful submission replaces it and clear() drops it.
    """

    def __init__(
        self,
        view: View,
        recorder: AudioRecorder,
        relay: RelayClient,
        clipboard: Clipboard,
        config: ClientConfig,
        clock: Callable[[], float] = time.time,
    ):
        self._view = view
        self._recorder = recorder
        self._relay = relay
        self._clipboard = clipboard
        self._config = config
        self._clock = clock
        self._capture = CaptureSession(recorder, clock)
        self.recording_enabled = True
        self.result: TranscriptionResponse | None = None
        self.panel = ResultPanel()

    @property
    def is_capturing(self) -> bool:
        return self._capture.is_capturing

    def initialize(self) -> None:
        """Probes the microphone; recording is disabled if it is unusable."""
        try:
            self._recorder.check_available()
            self._view.show_status("Microphone access granted", StatusLevel.SUCCESS)
        except MicrophoneUnavailableError as e:
            logger.warning("Microphone unavailable", extra={"reason": e.reason})
            self._disable_recording()
            self._view.show_status(
                "Microphone access denied. File upload is still available.",
                StatusLevel.ERROR,
            )
        self._view.render_result(self.panel)

    def start_capture(self) -> None:
        if not self.recording_enabled:
            self._view.show_status("Recording is unavailable", StatusLevel.ERROR)
            return
        try:
            started = self._capture.start()
        except MicrophoneUnavailableError as e:
            logger.warning("Failed to start recording", extra={"reason": e.reason})
            self._disable_recording()
            self._view.show_status(
                f"Failed to start recording: {e.reason}", StatusLevel.ERROR
            )
            return

        if not started:
            self._view.show_status("Already recording", StatusLevel.INFO)
            return

        self._view.set_recording_controls(enabled=True, capturing=True)
        self._view.start_level_meter(self._sample_bars)
        self._view.show_status("Recording started", StatusLevel.SUCCESS)

    def stop_capture(self) -> None:
        """Stops recording and submits whatever was captured, even if empty."""
        self._view.stop_level_meter()
        capture = self._capture.stop()
        if capture is None:
            return
        self._view.set_recording_controls(enabled=True, capturing=False)
        self._view.show_status("Recording stopped", StatusLevel.SUCCESS)
        self.submit(capture)

    def select_file(self, path: str) -> None:
        try:
            capture = self._read_audio_file(path)
        except UnsupportedFileError:
            self._view.show_status("Please upload an audio file", StatusLevel.ERROR)
            return
        except OSError as e:
            self._view.show_status(f"Could not read file: {e}", StatusLevel.ERROR)
            return
        self.submit(capture)

    def submit(self, capture: AudioCapture) -> None:
        """Sends audio to the relay; on failure the previous result is kept."""
        self._view.show_processing(True)
        try:
            result = self._relay.transcribe(capture)
        except RelayRequestError as e:
            logger.warning("Transcription error", extra={"error": e.message})
            self._view.show_status(
                f"Transcription failed: {e.message}", StatusLevel.ERROR
            )
            return
        finally:
            self._view.show_processing(False)

        self._display(result)
        self._view.show_status(
            "Transcription completed successfully!", StatusLevel.SUCCESS
        )

    def copy(self) -> None:
        if self.result is None or not self.result.transcript:
            return
        try:
            self._clipboard.copy(self.result.transcript)
        except ClipboardError:
            self._view.show_status("Failed to copy transcription", StatusLevel.ERROR)
            return
        self._view.show_status(
            "Transcription copied to clipboard!", StatusLevel.SUCCESS
        )

    def download(self) -> str | None:
        """Writes the active result to a timestamped text file and returns its path."""
        if self.result is None:
            return None
        now = self._clock()
        path = os.path.join(
            self._config.download_dir, download_filename(int(now * 1000))
        )
        content = build_download_text(self.result, datetime.fromtimestamp(now))
        try:
            with open(path, "w", encoding="utf-8") as target:
                target.write(content)
        except OSError as e:
            logger.exception("Download failed", extra={"path": path})
            self._view.show_status(f"Download failed: {e}", StatusLevel.ERROR)
            return None
        self._view.show_status(
            f"Transcription downloaded to {path}", StatusLevel.SUCCESS
        )
        return path

    def clear(self) -> None:
        self.result = None
        self.panel = ResultPanel()
        self._view.render_result(self.panel)
        self._view.show_status("Transcription cleared", StatusLevel.SUCCESS)

    def _display(self, result: TranscriptionResponse) -> None:
        self.result = result
        self.panel = ResultPanel(
            text=result.transcript or NO_SPEECH_TEXT,
            is_placeholder=False,
            confidence=format_confidence(result.confidence),
            word_count=result.word_count,
            duration=format_duration(result.duration),
            model=result.metadata.model,
            metadata_visible=True,
            actions_enabled=True,
        )
        self._view.render_result(self.panel)

    def _disable_recording(self) -> None:
        self.recording_enabled = False
        self._view.set_recording_controls(enabled=False, capturing=False)

    def _read_audio_file(self, path: str) -> AudioCapture:
        mime_type = declared_type(path)
        if not mime_type or not mime_type.startswith("audio/"):
            raise UnsupportedFileError(path, mime_type)
        with open(path, "rb") as source:
            data = source.read()
        return AudioCapture(
            data=data, mime_type=mime_type, filename=os.path.basename(path)
        )

    def _sample_bars(self) -> list[float]:
        return bar_heights(self._recorder.latest_block())
