import pytest

from transcription_relay.config import ProviderOptions, UploadConfig


@pytest.fixture
def upload_config(tmp_path):
    return UploadConfig(upload_dir=str(tmp_path / "uploads"))


@pytest.fixture
def options():
    return ProviderOptions()
