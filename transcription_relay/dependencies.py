"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated

import assemblyai as aai
from fastapi import Depends

from speech_common import setup_logging
from transcription_relay.config import load_config
from transcription_relay.domain import ResponseNormalizer, UploadValidator
from transcription_relay.handlers import TranscriptionHandler
from transcription_relay.infrastructure import AssemblyAITranscriber, TempFileStorage
from transcription_relay.infrastructure.assemblyai_transcriber import (
    build_transcription_config,
)
from transcription_relay.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)

_config = load_config()

logger = setup_logging(_config.server.log_level)


def get_config():
    """Returns the loaded application configuration."""
    return _config


def get_storage() -> StorageClient:
    """Returns the temporary upload storage."""
    return TempFileStorage(_config.upload.upload_dir)


def get_validator() -> UploadValidator:
    """Returns the upload validator."""
    return UploadValidator(_config.upload)


@lru_cache(maxsize=1)
def get_transcription_service() -> TranscriptionService:
    """Returns the process-wide AssemblyAI transcription service."""
    aai.settings.api_key = _config.assemblyai.api_key
    options = _config.assemblyai.options
    transcriber = aai.Transcriber(config=build_transcription_config(options))
    logger.info(
        "AssemblyAI client initialized",
        extra={"model": options.model, "language": options.language},
    )
    return AssemblyAITranscriber(transcriber, options)


def get_normalizer() -> ResponseNormalizer:
    """Returns the response normalizer for the configured provider options."""
    return ResponseNormalizer(_config.assemblyai.options)


def get_handler(
    storage: Annotated[StorageClient, Depends(get_storage)],
    transcription_service: Annotated[
        TranscriptionService, Depends(get_transcription_service)
    ],
    normalizer: Annotated[ResponseNormalizer, Depends(get_normalizer)],
) -> TranscriptionHandler:
    """Returns a handler wired to the configured collaborators."""
    return TranscriptionHandler(storage, transcription_service, normalizer)
