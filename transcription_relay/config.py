"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class ProviderOptions(BaseModel, frozen=True):
    """Fixed options sent with every transcription request."""

    model: str = "best"
    language: str = "en_us"
    smart_format: bool = True
    punctuate: bool = True
    diarize: bool = False
    utterances: bool = True
    paragraphs: bool = True


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    options: ProviderOptions = ProviderOptions()


class UploadConfig(BaseModel, frozen=True):
    """Upload validation and temporary storage configuration."""

    upload_dir: str = "uploads"
    max_bytes: int = MAX_UPLOAD_BYTES
    allowed_mime_prefixes: tuple[str, ...] = ("audio/", "video/webm")
    allowed_extensions: tuple[str, ...] = (
        ".wav",
        ".mp3",
        ".m4a",
        ".ogg",
        ".webm",
        ".flac",
    )


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    upload: UploadConfig
    server: ServerConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            options=ProviderOptions(
                model=os.getenv("SPEECH_MODEL", "best"),
                language=os.getenv("LANGUAGE_CODE", "en_us"),
            ),
        ),
        upload=UploadConfig(
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            max_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES))),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        ),
    )
