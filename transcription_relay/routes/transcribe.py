"""Speech-to-text endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from speech_common import ErrorResponse, TranscriptionResponse, setup_logging
from transcription_relay.dependencies import get_handler, get_validator
from transcription_relay.domain import UploadValidator
from transcription_relay.exceptions import InternalRelayError, RelayError
from transcription_relay.handlers import TranscriptionHandler

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]
ValidatorDep = Annotated[UploadValidator, Depends(get_validator)]


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def transcribe_audio(
    handler: HandlerDep,
    validator: ValidatorDep,
    audio: Annotated[UploadFile | None, File()] = None,
) -> TranscriptionResponse:
    """
    Transcribes an uploaded audio file.

    Rejected uploads never reach storage or the provider.
    """
    upload = validator.validate(audio)

    try:
        return handler.process(upload)
    except RelayError:
        raise
    except Exception as e:
        logger.exception(
            "Server error", extra={"file_name": upload.filename, "error": str(e)}
        )
        raise InternalRelayError() from e
