"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class RecorderConfig(BaseModel, frozen=True):
    """Microphone capture configuration."""

    sample_rate: int = 44100
    channels: int = 1
    chunk_seconds: float = 1.0
    block_size: int = 1024


class ClientConfig(BaseModel, frozen=True):
    """Root client configuration."""

    relay_url: str = "http://localhost:3001"
    download_dir: str = "."
    refresh_rate: int = 60
    log_level: str = "WARNING"
    recorder: RecorderConfig = RecorderConfig()


def load_config() -> ClientConfig:
    """Loads configuration from environment variables."""
    return ClientConfig(
        relay_url=os.getenv("RELAY_URL", "http://localhost:3001"),
        download_dir=os.getenv("DOWNLOAD_DIR", "."),
        refresh_rate=int(os.getenv("REFRESH_RATE", "60")),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        recorder=RecorderConfig(
            sample_rate=int(os.getenv("SAMPLE_RATE", "44100")),
            chunk_seconds=float(os.getenv("CHUNK_SECONDS", "1.0")),
        ),
    )
