"""Abstract interface for temporary upload storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for temporary upload storage backends."""

    @abstractmethod
    def save(self, original_name: str, data: BinaryIO) -> str:
        """
        Stores an upload under a unique name.

        Args:
            original_name: The client-supplied filename; only its extension
                is kept.
            data: File-like object containing the upload.

        Returns:
            The location of the stored file.

        Raises:
            StorageWriteError: If the write fails. Partially written files
                are removed before raising.
        """

    @abstractmethod
    def read(self, location: str) -> bytes:
        """
        Reads a stored file fully into memory.

        Args:
            location: Value previously returned by save().

        Returns:
            The file contents.
        """

    @abstractmethod
    def delete(self, location: str) -> bool:
        """
        Deletes a stored file. Failures are logged, never raised.

        Args:
            location: Value previously returned by save().

        Returns:
            True if the file was removed.
        """
