from __future__ import annotations

import unittest
import uuid

from opsflow.models.credential import Credential, CredentialCategory
from tests.api_base import ApiTestCase


class CredentialApiTests(ApiTestCase):
    def _create(self, **overrides) -> dict:
        payload = {
            "name": "Payroll Portal",
            "category": "Business Login",
            "username": "ops@example.com",
            "password": "Secr3t!Pass",
            "tags": ["finance", "monthly"],
            **overrides,
        }
        resp = self.client.post("/api/credentials", json=payload, headers={"X-User-Id": "admin_1"})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_password_is_encrypted_at_rest(self) -> None:
        created = self._create()
        self.assertEqual(created["password"], "Secr3t!Pass")
        self.assertEqual(created["strength"], "strong")
        self.assertEqual(created["created_by"], "admin_1")

        row = self.db.query(Credential).one()
        self.assertNotIn("Secr3t!Pass", row.password_encrypted)
        self.assertEqual(self.client.get(f"/api/credentials/{created['id']}").json()["password"], "Secr3t!Pass")

    def test_strength_recomputed_when_password_changes(self) -> None:
        created = self._create()
        resp = self.client.put(f"/api/credentials/{created['id']}", json={"password": "abc"})
        self.assertEqual(resp.json()["strength"], "weak")
        resp = self.client.put(f"/api/credentials/{created['id']}", json={"notes": "rotated"})
        self.assertEqual(resp.json()["strength"], "weak")
        self.assertEqual(resp.json()["password"], "abc")

    def test_required_fields(self) -> None:
        resp = self.client.post("/api/credentials", json={"name": "x", "username": "u", "password": "p"})
        self.assertEqual(resp.status_code, 400)

    def test_filters(self) -> None:
        self._create()
        self._create(name="AWS", category="API Key", username="svc", tags=["cloud"], notes="prod account")
        self.assertEqual(len(self.client.get("/api/credentials", params={"category": "API Key"}).json()), 1)
        self.assertEqual(self.client.get("/api/credentials", params={"search": "cloud"}).json()[0]["name"], "AWS")
        self.assertEqual(self.client.get("/api/credentials", params={"search": "PROD"}).json()[0]["name"], "AWS")
        self.assertEqual(len(self.client.get("/api/credentials", params={"search": "ops@"}).json()), 1)

    def test_search_percent_is_literal(self) -> None:
        self._create(name="VPN", username="vpn", tags=["net"], notes="100% uptime")
        self._create(name="Wiki", username="wiki", tags=["docs"], notes="1000 pages")
        names = [c["name"] for c in self.client.get("/api/credentials", params={"search": "0%"}).json()]
        self.assertEqual(names, ["VPN"])

    def test_delete(self) -> None:
        created = self._create()
        self.assertEqual(self.client.delete(f"/api/credentials/{created['id']}").status_code, 200)
        self.assertEqual(self.client.get(f"/api/credentials/{created['id']}").status_code, 404)
        self.assertEqual(self.client.delete(f"/api/credentials/{uuid.uuid4()}").status_code, 404)

    def test_categories(self) -> None:
        self.db.add(CredentialCategory(name="Other"))
        self.db.commit()

        resp = self.client.post("/api/credentials/categories", json={"name": "VPN", "description": "Remote access"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(self.client.post("/api/credentials/categories", json={"name": "vpn"}).status_code, 409)
        names = [c["name"] for c in self.client.get("/api/credentials/categories").json()]
        self.assertEqual(names, ["Other", "VPN"])


if __name__ == "__main__":
    unittest.main()
