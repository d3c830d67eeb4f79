import os

import pytest
from fastapi.testclient import TestClient

from transcription_relay.dependencies import get_storage, get_transcription_service
from transcription_relay.exceptions import TranscriptionError
from transcription_relay.infrastructure import TempFileStorage
from transcription_relay.main import app

from .fakes import FakeTranscriptionService, make_payload


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def service():
    return FakeTranscriptionService(payload=make_payload(12))


@pytest.fixture
def client(upload_dir, service):
    app.dependency_overrides[get_storage] = lambda: TempFileStorage(str(upload_dir))
    app.dependency_overrides[get_transcription_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def post_audio(client, filename="clip.wav", data=b"RIFF-audio", content_type="audio/wav"):
    return client.post(
        "/api/transcribe", files={"audio": (filename, data, content_type)}
    )


def test_transcribe_success(client, service, upload_dir):
    response = post_audio(client)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["transcript"].startswith("word0 word1")
    assert 0 <= body["confidence"] <= 1
    assert body["word_count"] == 12
    assert len(body["words"]) == 10
    assert body["duration"] == 3.0
    assert set(body["metadata"]) == {"model", "language", "processed_at"}
    assert service.calls == [b"RIFF-audio"]
    assert os.listdir(upload_dir) == []


def test_missing_file_returns_400(client, service):
    response = client.post("/api/transcribe", data={"note": "no file"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "No audio file provided",
        "message": "Please upload an audio file",
    }
    assert service.calls == []


def test_text_audio_field_returns_400(client, service, upload_dir):
    response = client.post("/api/transcribe", data={"audio": "not-a-file"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "No audio file provided",
        "message": "Please upload an audio file",
    }
    assert service.calls == []
    assert os.listdir(upload_dir) == []


def test_text_file_rejected_before_provider(client, service, upload_dir):
    response = post_audio(client, "notes.txt", b"hello", "text/plain")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid file type"
    assert service.calls == []
    assert os.listdir(upload_dir) == []


def test_oversized_file_rejected(client, service, upload_dir):
    response = post_audio(client, "long.wav", b"0" * (15 * 1024 * 1024))

    assert response.status_code == 400
    assert "File too large" in response.text
    assert service.calls == []
    assert os.listdir(upload_dir) == []


def test_provider_error_returns_500_with_message(client, service, upload_dir):
    service.error = TranscriptionError("clip.wav", Exception("Audio is corrupt"))

    response = post_audio(client)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Transcription failed",
        "message": "Audio is corrupt",
    }
    assert os.listdir(upload_dir) == []


def test_unexpected_error_returns_generic_500(client, service, upload_dir):
    service.error = RuntimeError("secret stack detail")

    response = post_audio(client)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal server error",
        "message": "An unexpected error occurred",
    }
    assert "secret" not in response.text
    assert os.listdir(upload_dir) == []


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["message"] == "Speech to Text API is running"
    assert body["timestamp"].endswith("Z")


def test_index_serves_client_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/transcribe" in response.text
