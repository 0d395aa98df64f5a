#!/usr/bin/env python3
"""
Blob storage for uploaded files.

Callers hand over bytes and a key and get back an opaque URL. Nothing
else about the storage backend leaks out.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class BlobStoreError(Exception):
    """Raised when a blob cannot be stored."""
    pass


class BlobStore(ABC):

    @abstractmethod
    def put(self, key: str, content: bytes, content_type: str) -> str:
        """Store content under key and return its public URL."""


class LocalBlobStore(BlobStore):
    """
    Stores blobs on the local filesystem under storage_dir.

    URLs are formed as {base_url}/{key}; serving them is left to whatever
    fronts storage_dir.
    """

    def __init__(self, storage_dir: str, base_url: str):
        self.storage_dir = Path(storage_dir).resolve()
        self.base_url = base_url.rstrip('/')

    def _resolve(self, key: str) -> Path:
        target = (self.storage_dir / key).resolve()
        if self.storage_dir not in target.parents:
            raise BlobStoreError(f"Invalid blob key: {key}")
        return target

    def put(self, key: str, content: bytes, content_type: str) -> str:
        target = self._resolve(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise BlobStoreError(f"Failed to store blob {key}: {e}") from e

        logger.info(f"Stored blob {key} ({len(content)} bytes, {content_type})")
        return f"{self.base_url}/{key}"
