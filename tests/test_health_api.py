from __future__ import annotations

import unittest

from tests.api_base import ApiTestCase


class HealthTests(ApiTestCase):
    def test_health_reports_database(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok", "database": "ok"})

    def test_unknown_route_uses_error_shape(self) -> None:
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not Found"})


if __name__ == "__main__":
    unittest.main()
