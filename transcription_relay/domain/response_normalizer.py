"""Reshapes provider results into the relay's response format."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from speech_common.models import ResultMetadata, TranscriptionResponse, WordTiming
from transcription_relay.config import ProviderOptions

from .models import ProviderTranscript, ProviderWord

MAX_RETURNED_WORDS = 10


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResponseNormalizer:
    """Builds a TranscriptionResponse from a raw provider payload."""

    def __init__(
        self,
        options: ProviderOptions,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._options = options
        self._clock = clock

    def normalize(self, payload: dict[str, Any] | None) -> TranscriptionResponse:
        """
        Normalizes a provider payload.

        Missing transcript, confidence or words default to "", 0 and []
        rather than failing. Only the first MAX_RETURNED_WORDS words are
        returned; word_count always reflects the full list.

        Args:
            payload: Raw provider result as a dictionary.

        Returns:
            The normalized response body.
        """
        transcript = ProviderTranscript.model_validate(payload or {})
        words = transcript.words or []

        return TranscriptionResponse(
            success=True,
            transcript=transcript.text or "",
            confidence=transcript.confidence or 0.0,
            word_count=len(words),
            duration=transcript.audio_duration or 0.0,
            words=[self._to_timing(w) for w in words[:MAX_RETURNED_WORDS]],
            paragraphs=[p.text for p in transcript.paragraphs or [] if p.text],
            metadata=ResultMetadata(
                model=self._options.model,
                language=self._options.language,
                processed_at=self._timestamp(),
            ),
        )

    def _to_timing(self, word: ProviderWord) -> WordTiming:
        """Converts millisecond provider timings to seconds."""
        return WordTiming(
            word=word.text or "",
            start=(word.start or 0) / 1000,
            end=(word.end or 0) / 1000,
            confidence=word.confidence or 0.0,
        )

    def _timestamp(self) -> str:
        return (
            self._clock()
            .astimezone(timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )
