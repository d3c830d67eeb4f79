"""Microphone capture state machine."""

import time
from collections.abc import Callable

from capture_client.interfaces.audio_recorder import AudioRecorder

from .models import AudioCapture, CaptureState

RECORDING_MIME_TYPE = "audio/wav"


class CaptureSession:
    """
    Tracks one microphone session: Idle -> Capturing -> Idle.

    Starting while already capturing is a no-op, and stopping while idle
    produces nothing.
    """

    def __init__(
        self,
        recorder: AudioRecorder,
        clock: Callable[[], float] = time.time,
    ):
        self._recorder = recorder
        self._clock = clock
        self.state = CaptureState.IDLE

    @property
    def is_capturing(self) -> bool:
        return self.state is CaptureState.CAPTURING

    def start(self) -> bool:
        """
        Opens the microphone and begins buffering.

        Returns:
            True if capture started, False if it was already running.

        Raises:
            MicrophoneUnavailableError: If the microphone cannot be opened.
                The session stays idle.
        """
        if self.is_capturing:
            return False
        self._recorder.start()
        self.state = CaptureState.CAPTURING
        return True

    def stop(self) -> AudioCapture | None:
        """
        Finalizes the buffered audio and releases the microphone.

        Returns:
            The recorded audio, possibly empty, or None if nothing was
            being captured.
        """
        if not self.is_capturing:
            return None
        try:
            data = self._recorder.stop()
        finally:
            self.state = CaptureState.IDLE
        return AudioCapture(
            data=data,
            mime_type=RECORDING_MIME_TYPE,
            filename=f"recording-{int(self._clock() * 1000)}.wav",
        )
