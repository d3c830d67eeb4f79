"""AssemblyAI implementation of the TranscriptionService interface."""

import io
from typing import Any

import assemblyai as aai

from speech_common import setup_logging
from transcription_relay.config import ProviderOptions
from transcription_relay.exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


def build_transcription_config(options: ProviderOptions) -> aai.TranscriptionConfig:
    """Maps the relay's fixed options onto an AssemblyAI request config."""
    return aai.TranscriptionConfig(
        speech_model=aai.SpeechModel(options.model),
        language_code=options.language,
        punctuate=options.punctuate,
        format_text=options.smart_format,
        speaker_labels=options.diarize,
    )


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber, options: ProviderOptions):
        self._transcriber = transcriber
        self._options = options

    def transcribe(self, audio_data: bytes) -> dict[str, Any]:
        """
        Transcribes in-memory audio with AssemblyAI.

        The SDK call blocks until the transcript completes. Paragraph
        segmentation is fetched in a second request when enabled; if that
        request fails the payload is returned without paragraphs.
        """
        logger.info("Sending request to AssemblyAI", extra={"size": len(audio_data)})

        try:
            transcript = self._transcriber.transcribe(io.BytesIO(audio_data))
        except aai.types.AssemblyAIError as e:
            logger.exception("AssemblyAI request failed")
            raise TranscriptionError("audio_file", e) from e

        if transcript.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI reported an error", extra={"error": transcript.error}
            )
            raise TranscriptionError(
                transcript.id or "audio_file", Exception(transcript.error)
            )

        payload = {
            "text": transcript.text,
            "confidence": transcript.confidence,
            "audio_duration": transcript.audio_duration,
            "words": [
                {
                    "text": w.text,
                    "start": w.start,
                    "end": w.end,
                    "confidence": w.confidence,
                }
                for w in transcript.words or []
            ],
        }

        if self._options.paragraphs and transcript.text:
            try:
                payload["paragraphs"] = [
                    {"text": p.text, "start": p.start, "end": p.end}
                    for p in transcript.get_paragraphs()
                ]
            except aai.types.AssemblyAIError:
                logger.exception(
                    "AssemblyAI paragraph request failed",
                    extra={"transcript_id": transcript.id},
                )

        logger.info(
            "Audio transcription successful",
            extra={
                "transcript_id": transcript.id,
                "word_count": len(payload["words"]),
                "confidence": transcript.confidence,
            },
        )
        return payload
