"""Custom exceptions for the capture client."""


class MicrophoneUnavailableError(Exception):
    """Raised when the microphone cannot be opened."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Microphone unavailable: {reason}")


class UnsupportedFileError(Exception):
    """Raised when a selected file is not declared as audio."""

    def __init__(self, path: str, declared_type: str | None):
        self.path = path
        self.declared_type = declared_type
        super().__init__(f"'{path}' is not an audio file ({declared_type})")


class RelayRequestError(Exception):
    """Raised when a transcription request fails for any reason."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ClipboardError(Exception):
    """Raised when writing to the system clipboard fails."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to write to clipboard")
