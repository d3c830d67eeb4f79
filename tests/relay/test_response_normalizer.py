from datetime import datetime, timezone

from transcription_relay.domain import ResponseNormalizer
from transcription_relay.domain.response_normalizer import MAX_RETURNED_WORDS

from .fakes import make_payload

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def normalizer(options):
    return ResponseNormalizer(options, clock=lambda: FIXED_NOW)


def test_normalizes_complete_payload(options):
    response = normalizer(options).normalize(make_payload(3))

    assert response.success is True
    assert response.transcript == "word0 word1 word2"
    assert response.confidence == 0.93
    assert response.word_count == 3
    assert response.duration == 3.0
    assert response.words[1].word == "word1"
    assert response.words[1].start == 0.5
    assert response.words[1].end == 0.9


def test_missing_fields_default(options):
    response = normalizer(options).normalize({})

    assert response.transcript == ""
    assert response.confidence == 0
    assert response.words == []
    assert response.word_count == 0
    assert response.duration == 0


def test_null_fields_default(options):
    payload = {"text": None, "confidence": None, "words": None, "audio_duration": None}

    response = normalizer(options).normalize(payload)

    assert (response.transcript, response.confidence, response.words) == ("", 0, [])


def test_none_payload_defaults(options):
    assert normalizer(options).normalize(None).transcript == ""


def test_words_with_missing_fields(options):
    response = normalizer(options).normalize({"words": [{"text": "hi"}, {}]})

    assert response.word_count == 2
    assert response.words[0].word == "hi"
    assert response.words[0].start == 0
    assert response.words[1].word == ""


def test_returns_at_most_ten_words(options):
    response = normalizer(options).normalize(make_payload(25))

    assert len(response.words) == MAX_RETURNED_WORDS == 10
    assert response.word_count == 25
    assert response.words[-1].word == "word9"


def test_ignores_unknown_provider_fields(options):
    payload = {"text": "hello", "status": "completed", "id": "abc"}

    assert normalizer(options).normalize(payload).transcript == "hello"


def test_metadata(options):
    metadata = normalizer(options).normalize({}).metadata

    assert metadata.model == options.model
    assert metadata.language == options.language
    assert metadata.processed_at == "2024-05-01T12:00:00.000Z"


def test_paragraph_texts(options):
    payload = {"paragraphs": [{"text": "First."}, {"text": None}, {"text": "Second."}]}

    assert normalizer(options).normalize(payload).paragraphs == ["First.", "Second."]
