"""sounddevice implementation of the AudioRecorder interface."""

import io
import logging
import threading

import numpy as np
import soundfile as sf

from capture_client.config import RecorderConfig
from capture_client.exceptions import MicrophoneUnavailableError
from capture_client.interfaces import AudioRecorder

logger = logging.getLogger(__name__)

SAMPLE_DTYPE = "int16"


def _load_sounddevice():
    """Imports sounddevice on first use; it needs the PortAudio system library."""
    try:
        import sounddevice
    except OSError as e:
        raise MicrophoneUnavailableError(str(e)) from e
    return sounddevice


class SoundDeviceRecorder(AudioRecorder):
    """
    Records from the default input device.

    PortAudio delivers small blocks on its own thread; they are grouped
    into chunks of `chunk_seconds` and encoded to WAV on stop.
    """

    def __init__(self, config: RecorderConfig):
        self._config = config
        self._chunk_frames = int(config.sample_rate * config.chunk_seconds)
        self._lock = threading.Lock()
        self._stream = None
        self._chunks: list[np.ndarray] = []
        self._pending: list[np.ndarray] = []
        self._pending_frames = 0
        self._latest = np.zeros(0, dtype=SAMPLE_DTYPE)

    def check_available(self) -> None:
        sd = _load_sounddevice()
        try:
            sd.query_devices(kind="input")
        except (sd.PortAudioError, ValueError) as e:
            raise MicrophoneUnavailableError(str(e)) from e

    def start(self) -> None:
        sd = _load_sounddevice()
        with self._lock:
            self._chunks = []
            self._pending = []
            self._pending_frames = 0
            self._latest = np.zeros(0, dtype=SAMPLE_DTYPE)
        try:
            self._stream = sd.InputStream(
                samplerate=self._config.sample_rate,
                channels=self._config.channels,
                dtype=SAMPLE_DTYPE,
                blocksize=self._config.block_size,
                callback=self._on_block,
            )
            self._stream.start()
        except (sd.PortAudioError, ValueError) as e:
            self._stream = None
            raise MicrophoneUnavailableError(str(e)) from e
        logger.info(
            "Recording started",
            extra={"sample_rate": self._config.sample_rate},
        )

    def stop(self) -> bytes:
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None

        with self._lock:
            self._flush_pending()
            chunks = self._chunks
            self._chunks = []

        if chunks:
            samples = np.concatenate(chunks)
        else:
            samples = np.zeros((0, self._config.channels), dtype=SAMPLE_DTYPE)

        logger.info(
            "Recording stopped",
            extra={"chunks": len(chunks), "frames": len(samples)},
        )
        return self._encode(samples)

    def latest_block(self) -> np.ndarray:
        with self._lock:
            return self._latest

    def _on_block(self, indata, frames, time_info, status) -> None:
        if status:
            logger.warning("Input stream status", extra={"status": str(status)})
        block = indata.copy()
        with self._lock:
            self._latest = block[:, 0]
            self._pending.append(block)
            self._pending_frames += frames
            if self._pending_frames >= self._chunk_frames:
                self._flush_pending()

    def _flush_pending(self) -> None:
        if self._pending:
            self._chunks.append(np.concatenate(self._pending))
        self._pending = []
        self._pending_frames = 0

    def _encode(self, samples: np.ndarray) -> bytes:
        buffer = io.BytesIO()
        sf.write(
            buffer,
            samples,
            self._config.sample_rate,
            format="WAV",
            subtype="PCM_16",
        )
        return buffer.getvalue()
