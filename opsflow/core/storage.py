"""HTTP client for the external object-storage upload endpoint."""

from __future__ import annotations

import logging

import requests

from opsflow.core.config import settings

logger = logging.getLogger("opsflow.storage")


class StorageError(Exception):
    pass


class StorageClient:
    def __init__(self, upload_url: str, api_key: str = "", timeout: int = 30) -> None:
        self.upload_url = upload_url
        self.api_key = api_key
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.upload_url)

    def upload(self, filename: str, content: bytes, content_type: str | None = None, prefix: str = "documents") -> str:
        """Upload one file and return its public URL."""
        if not self.enabled:
            raise StorageError("Storage upload URL is not configured")

        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        try:
            resp = requests.post(
                self.upload_url,
                headers=headers,
                files=files,
                data={"prefix": prefix},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            url = resp.json().get("url")
        except (requests.RequestException, ValueError) as exc:
            raise StorageError(f"Upload of {filename} failed: {exc}") from exc

        if not url:
            raise StorageError(f"Upload of {filename} returned no URL")
        logger.info("Uploaded %s (%d bytes) to storage", filename, len(content))
        return url


def get_storage() -> StorageClient:
    return StorageClient(settings.STORAGE_UPLOAD_URL, settings.STORAGE_API_KEY, settings.STORAGE_TIMEOUT)
