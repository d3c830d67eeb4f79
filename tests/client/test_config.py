import pytest

from capture_client.config import ClientConfig, load_config


def test_defaults(monkeypatch):
    for name in ("RELAY_URL", "DOWNLOAD_DIR", "SAMPLE_RATE", "CHUNK_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.relay_url == "http://localhost:3001"
    assert config.recorder.sample_rate == 44100
    assert config.recorder.chunk_seconds == 1.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RELAY_URL", "http://relay:9000")
    monkeypatch.setenv("SAMPLE_RATE", "16000")

    config = load_config()

    assert config.relay_url == "http://relay:9000"
    assert config.recorder.sample_rate == 16000


def test_config_immutable():
    config = ClientConfig()

    with pytest.raises(Exception):
        config.relay_url = "http://elsewhere"
