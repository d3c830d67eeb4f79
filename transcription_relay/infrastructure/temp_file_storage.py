"""Local filesystem implementation of the StorageClient interface."""

import os
import random
import shutil
import time
from typing import BinaryIO

from speech_common import setup_logging
from transcription_relay.exceptions import StorageWriteError

from .interfaces import StorageClient

logger = setup_logging()


class TempFileStorage(StorageClient):
    """Keeps uploads in a local directory between accept and cleanup."""

    def __init__(self, upload_dir: str):
        self._upload_dir = upload_dir

    def save(self, original_name: str, data: BinaryIO) -> str:
        os.makedirs(self._upload_dir, exist_ok=True)
        path = os.path.join(self._upload_dir, self._unique_name(original_name))
        try:
            with open(path, "wb") as target:
                shutil.copyfileobj(data, target)
            logger.info(
                "Upload stored",
                extra={"path": path, "original_name": original_name},
            )
            return path
        except Exception as e:
            logger.exception("Upload write failed", extra={"path": path})
            self.delete(path)
            raise StorageWriteError(path, e) from e

    def read(self, location: str) -> bytes:
        with open(location, "rb") as source:
            return source.read()

    def delete(self, location: str) -> bool:
        if not os.path.exists(location):
            return False
        try:
            os.remove(location)
            logger.info("Upload deleted", extra={"path": location})
            return True
        except OSError:
            logger.exception("Error deleting file", extra={"path": location})
            return False

    def _unique_name(self, original_name: str) -> str:
        """Builds `audio-<epoch-ms>-<random><ext>`."""
        extension = os.path.splitext(original_name)[1].lower()
        suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"audio-{suffix}{extension}"
