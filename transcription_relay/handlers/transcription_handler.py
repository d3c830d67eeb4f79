"""Handler for transcribing uploaded audio files."""

from speech_common import TranscriptionResponse, setup_logging
from transcription_relay.domain import AudioUpload, ResponseNormalizer
from transcription_relay.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates store, transcribe, normalize and cleanup for one upload."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        normalizer: ResponseNormalizer,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._normalizer = normalizer

    def process(self, upload: AudioUpload) -> TranscriptionResponse:
        """
        Transcribes a validated upload.

        The temporary file is deleted whether or not the provider call
        succeeds.

        Args:
            upload: The accepted audio upload.

        Returns:
            The normalized transcription response.

        Raises:
            StorageWriteError: If the upload cannot be stored.
            TranscriptionError: If the provider reports a failure.
        """
        logger.info(
            "Processing audio file",
            extra={
                "file_name": upload.filename,
                "size": upload.size,
                "content_type": upload.content_type,
            },
        )

        location = self._storage.save(upload.filename, upload.data)
        try:
            audio_data = self._storage.read(location)
            payload = self._transcription_service.transcribe(audio_data)
            response = self._normalizer.normalize(payload)
        finally:
            self._storage.delete(location)

        logger.info(
            "Transcription completed successfully",
            extra={
                "file_name": upload.filename,
                "word_count": response.word_count,
                "confidence": response.confidence,
            },
        )
        return response
