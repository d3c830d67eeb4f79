from datetime import datetime

from capture_client.domain import (
    build_download_text,
    download_filename,
    format_confidence,
    format_duration,
)

from .fakes import make_result


def test_confidence_rounds_to_percentage():
    assert format_confidence(0.925) == "93%"
    assert format_confidence(0.5) == "50%"
    assert format_confidence(0.994) == "99%"
    assert format_confidence(0) == "0%"
    assert format_confidence(1) == "100%"


def test_duration_has_one_decimal():
    assert format_duration(3.04) == "3.0s"
    assert format_duration(0) == "0.0s"
    assert format_duration(2.96) == "3.0s"


def test_download_filename_uses_timestamp():
    assert download_filename(1700000000123) == "transcription-1700000000123.txt"


def test_download_text_contains_transcript_and_metadata():
    text = build_download_text(make_result(), datetime(2024, 5, 1, 9, 30, 0))

    assert text.splitlines() == [
        "Speech to Text Transcription",
        "Generated: 2024-05-01 09:30:00",
        "Model: best",
        "Confidence: 93%",
        "Duration: 3.0s",
        "Word Count: 3",
        "",
        "Transcript:",
        "hello there world",
    ]
