"""Validation of incoming audio uploads."""

import os

from fastapi import UploadFile

from transcription_relay.config import UploadConfig
from transcription_relay.exceptions import (
    AudioFileTooLargeError,
    MissingAudioFileError,
    UnsupportedAudioTypeError,
)

from .models import AudioUpload


class UploadValidator:
    """Checks presence, size and type of an upload before it is stored."""

    def __init__(self, config: UploadConfig):
        self._config = config

    def validate(self, file: UploadFile | None) -> AudioUpload:
        """
        Validates an uploaded file.

        Args:
            file: The multipart `audio` field, or None when absent.

        Returns:
            AudioUpload wrapping the accepted file.

        Raises:
            MissingAudioFileError: If no file was sent.
            AudioFileTooLargeError: If the file exceeds the size ceiling.
            UnsupportedAudioTypeError: If the file is not recognizably audio.
        """
        if file is None or not file.filename:
            raise MissingAudioFileError()

        size = self._measure(file)
        if size > self._config.max_bytes:
            raise AudioFileTooLargeError(size, self._config.max_bytes)

        if not self.is_audio(file.filename, file.content_type):
            raise UnsupportedAudioTypeError(file.filename, file.content_type)

        return AudioUpload(
            filename=file.filename,
            content_type=file.content_type,
            size=size,
            data=file.file,
        )

    def is_audio(self, filename: str, content_type: str | None) -> bool:
        """True when either the MIME type or the extension is an allowed audio type."""
        mime = (content_type or "").lower()
        has_valid_mime = any(
            mime.startswith(prefix) for prefix in self._config.allowed_mime_prefixes
        )
        extension = os.path.splitext(filename.lower())[1]
        return has_valid_mime or extension in self._config.allowed_extensions

    def _measure(self, file: UploadFile) -> int:
        if file.size is not None:
            return file.size
        file.file.seek(0, os.SEEK_END)
        size = file.file.tell()
        file.file.seek(0)
        return size
