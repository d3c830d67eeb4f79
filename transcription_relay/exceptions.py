"""Custom exceptions for the transcription relay."""


class RelayError(Exception):
    """Base for errors that map to a JSON error response."""

    status_code = 500

    def __init__(self, error: str, message: str):
        self.error = error
        self.message = message
        super().__init__(f"{error}: {message}")


class MissingAudioFileError(RelayError):
    """Raised when the request carries no `audio` file field."""

    status_code = 400

    def __init__(self):
        super().__init__("No audio file provided", "Please upload an audio file")


class AudioFileTooLargeError(RelayError):
    """Raised when the upload exceeds the configured size ceiling."""

    status_code = 400

    def __init__(self, size: int, max_bytes: int):
        self.size = size
        self.max_bytes = max_bytes
        limit_mb = max_bytes // (1024 * 1024)
        super().__init__(
            "File too large", f"Audio file must be smaller than {limit_mb}MB"
        )


class UnsupportedAudioTypeError(RelayError):
    """Raised when neither MIME type nor extension identifies audio."""

    status_code = 400

    def __init__(self, filename: str, content_type: str | None):
        self.filename = filename
        self.content_type = content_type
        super().__init__("Invalid file type", "Only audio files are allowed!")


class TranscriptionError(RelayError):
    """Raised when the speech provider reports a failure."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        message = str(cause) if cause and str(cause) else "Unknown error occurred"
        super().__init__("Transcription failed", message)


class InternalRelayError(RelayError):
    """Raised for unexpected failures; details stay in the server log."""

    def __init__(self):
        super().__init__("Internal server error", "An unexpected error occurred")


class StorageWriteError(Exception):
    """Raised when writing an upload to temporary storage fails."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write '{path}' to temporary storage")
