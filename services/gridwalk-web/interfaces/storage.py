"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import Any


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload_json(self, object_name: str, data: Any) -> str:
        """
        Serialises ``data`` as JSON and stores it under ``object_name``.

        Args:
            object_name: The destination key in the bucket.
            data: Any JSON-serialisable value.

        Returns:
            The public URL of the stored object.

        Raises:
            StorageUploadError: If the upload fails.
        """
