"""requests implementation of the RelayClient interface."""

import logging

import requests
from pydantic import ValidationError

from capture_client.domain.models import AudioCapture
from capture_client.exceptions import RelayRequestError
from capture_client.interfaces import RelayClient
from speech_common import TranscriptionResponse

logger = logging.getLogger(__name__)

TRANSCRIBE_PATH = "/api/transcribe"


class HttpRelayClient(RelayClient):
    """Posts audio to the relay as a multipart form."""

    def __init__(self, base_url: str, session: requests.Session | None = None):
        self._url = base_url.rstrip("/") + TRANSCRIBE_PATH
        self._session = session or requests.Session()

    def transcribe(self, capture: AudioCapture) -> TranscriptionResponse:
        files = {"audio": (capture.filename, capture.data, capture.mime_type)}
        logger.info(
            "Submitting audio",
            extra={"file_name": capture.filename, "size": len(capture.data)},
        )

        try:
            response = self._session.post(self._url, files=files)
        except requests.RequestException as e:
            logger.exception("Relay request failed", extra={"url": self._url})
            raise RelayRequestError(str(e)) from e

        try:
            body = response.json()
        except ValueError as e:
            raise RelayRequestError(
                f"Unexpected response from relay (HTTP {response.status_code})",
                response.status_code,
            ) from e

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else None
            raise RelayRequestError(
                message or "Transcription failed", response.status_code
            )

        try:
            return TranscriptionResponse.model_validate(body)
        except ValidationError as e:
            logger.exception("Malformed relay response")
            raise RelayRequestError("Malformed response from relay") from e
