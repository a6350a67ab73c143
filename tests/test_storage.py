from __future__ import annotations

import unittest
from unittest.mock import MagicMock, patch

import requests

from opsflow.core.storage import StorageClient, StorageError


class StorageClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = StorageClient("https://storage.example/upload", api_key="k", timeout=5)

    @patch("opsflow.core.storage.requests.post")
    def test_upload_returns_url(self, post: MagicMock) -> None:
        post.return_value.json.return_value = {"url": "https://cdn.example/licenses/a.pdf"}
        url = self.client.upload("a.pdf", b"%PDF", "application/pdf", prefix="licenses")

        self.assertEqual(url, "https://cdn.example/licenses/a.pdf")
        _, kwargs = post.call_args
        self.assertEqual(kwargs["headers"], {"Authorization": "Bearer k"})
        self.assertEqual(kwargs["data"], {"prefix": "licenses"})
        self.assertEqual(kwargs["timeout"], 5)

    @patch("opsflow.core.storage.requests.post")
    def test_http_failure_raises_storage_error(self, post: MagicMock) -> None:
        post.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(StorageError):
            self.client.upload("a.pdf", b"data")

    @patch("opsflow.core.storage.requests.post")
    def test_missing_url_in_response(self, post: MagicMock) -> None:
        post.return_value.json.return_value = {}
        with self.assertRaises(StorageError):
            self.client.upload("a.pdf", b"data")

    def test_unconfigured_client_refuses_upload(self) -> None:
        client = StorageClient("")
        self.assertFalse(client.enabled)
        with self.assertRaises(StorageError):
            client.upload("a.pdf", b"data")


if __name__ == "__main__":
    unittest.main()
