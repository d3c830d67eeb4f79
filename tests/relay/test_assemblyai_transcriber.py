from unittest.mock import MagicMock

import assemblyai as aai
import pytest

from transcription_relay.config import ProviderOptions
from transcription_relay.exceptions import TranscriptionError
from transcription_relay.infrastructure import AssemblyAITranscriber
from transcription_relay.infrastructure.assemblyai_transcriber import (
    build_transcription_config,
)


def make_word(text, start, end, confidence=0.95):
    word = MagicMock()
    word.text = text
    word.start = start
    word.end = end
    word.confidence = confidence
    return word


def make_transcript(status=aai.TranscriptStatus.completed, text="hello world"):
    transcript = MagicMock()
    transcript.id = "tr_123"
    transcript.status = status
    transcript.error = None
    transcript.text = text
    transcript.confidence = 0.91
    transcript.audio_duration = 3
    transcript.words = [make_word("hello", 0, 400), make_word("world", 450, 900)]
    paragraph = MagicMock()
    paragraph.text = text
    paragraph.start = 0
    paragraph.end = 900
    transcript.get_paragraphs.return_value = [paragraph]
    return transcript


def test_build_config_uses_fixed_options():
    config = build_transcription_config(ProviderOptions())

    assert config.punctuate is True
    assert config.format_text is True
    assert config.speaker_labels is False
    assert config.language_code == "en_us"


def test_transcribe_returns_raw_payload():
    sdk = MagicMock()
    sdk.transcribe.return_value = make_transcript()
    service = AssemblyAITranscriber(sdk, ProviderOptions())

    payload = service.transcribe(b"fake-audio")

    assert payload["text"] == "hello world"
    assert payload["confidence"] == 0.91
    assert payload["audio_duration"] == 3
    assert payload["words"][1] == {
        "text": "world",
        "start": 450,
        "end": 900,
        "confidence": 0.95,
    }
    assert payload["paragraphs"][0]["text"] == "hello world"
    sent = sdk.transcribe.call_args.args[0]
    assert sent.getvalue() == b"fake-audio"


def test_paragraphs_skipped_when_disabled():
    sdk = MagicMock()
    transcript = make_transcript()
    sdk.transcribe.return_value = transcript
    service = AssemblyAITranscriber(sdk, ProviderOptions(paragraphs=False))

    payload = service.transcribe(b"audio")

    assert "paragraphs" not in payload
    transcript.get_paragraphs.assert_not_called()


def test_empty_transcript_is_not_an_error():
    sdk = MagicMock()
    transcript = make_transcript(text="")
    transcript.words = []
    sdk.transcribe.return_value = transcript

    payload = AssemblyAITranscriber(sdk, ProviderOptions()).transcribe(b"")

    assert payload["text"] == ""
    assert payload["words"] == []


def test_provider_error_status_raises():
    sdk = MagicMock()
    transcript = make_transcript(status=aai.TranscriptStatus.error)
    transcript.error = "Audio file contains no speech"
    sdk.transcribe.return_value = transcript

    with pytest.raises(TranscriptionError) as exc_info:
        AssemblyAITranscriber(sdk, ProviderOptions()).transcribe(b"audio")

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Audio file contains no speech"


def test_sdk_exception_becomes_transcription_error():
    sdk = MagicMock()
    sdk.transcribe.side_effect = aai.types.TranscriptError("upload rejected")

    with pytest.raises(TranscriptionError) as exc_info:
        AssemblyAITranscriber(sdk, ProviderOptions()).transcribe(b"audio")

    assert exc_info.value.error == "Transcription failed"


def test_paragraph_failure_keeps_transcript():
    sdk = MagicMock()
    transcript = make_transcript()
    transcript.get_paragraphs.side_effect = aai.types.TranscriptError(
        "paragraphs unavailable"
    )
    sdk.transcribe.return_value = transcript

    payload = AssemblyAITranscriber(sdk, ProviderOptions()).transcribe(b"audio")

    assert payload["text"] == "hello world"
    assert "paragraphs" not in payload
