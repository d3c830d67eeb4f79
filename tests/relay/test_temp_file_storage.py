import io
import os

import pytest

from transcription_relay.exceptions import StorageWriteError
from transcription_relay.infrastructure import TempFileStorage


class BrokenStream(io.BytesIO):
    def read(self, *args):
        raise IOError("connection reset")


def test_save_writes_unique_file_with_extension(tmp_path):
    storage = TempFileStorage(str(tmp_path / "uploads"))

    first = storage.save("Clip.WAV", io.BytesIO(b"abc"))
    second = storage.save("Clip.WAV", io.BytesIO(b"abc"))

    assert first != second
    assert os.path.basename(first).startswith("audio-")
    assert first.endswith(".wav")
    assert storage.read(first) == b"abc"


def test_delete_removes_file(tmp_path):
    storage = TempFileStorage(str(tmp_path))
    location = storage.save("a.mp3", io.BytesIO(b"data"))

    assert storage.delete(location) is True
    assert not os.path.exists(location)


def test_delete_missing_file_is_noop(tmp_path):
    assert TempFileStorage(str(tmp_path)).delete(str(tmp_path / "gone.wav")) is False


def test_delete_failure_is_logged_not_raised(tmp_path, monkeypatch, caplog):
    storage = TempFileStorage(str(tmp_path))
    location = storage.save("a.wav", io.BytesIO(b"data"))

    def refuse(path):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr("transcription_relay.infrastructure.temp_file_storage.os.remove", refuse)

    assert storage.delete(location) is False
    assert any(r.getMessage() == "Error deleting file" for r in caplog.records)


def test_failed_write_leaves_no_partial_file(tmp_path):
    storage = TempFileStorage(str(tmp_path))

    with pytest.raises(StorageWriteError):
        storage.save("a.wav", BrokenStream())

    assert os.listdir(tmp_path) == []
