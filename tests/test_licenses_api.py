from __future__ import annotations

import unittest
from datetime import timedelta
from unittest.mock import MagicMock

from opsflow.core.expiry import utc_today
from opsflow.core.storage import StorageClient, StorageError, get_storage
from opsflow.main import app
from opsflow.models.license import License, LicenseStatus
from tests.api_base import ApiTestCase


class LicenseApiTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.today = utc_today()
        self.employee = self.create_employee()
        self.base = f"/api/employees/{self.employee['id']}/licenses"

    def _create(self, name: str, expires_in: int, **extra) -> dict:
        payload = {
            "name": name,
            "license_number": f"LN-{name}",
            "issue_date": str(self.today - timedelta(days=400)),
            "expiry_date": str(self.today + timedelta(days=expires_in)),
            **extra,
        }
        resp = self.client.post(self.base, json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_status_is_derived_from_expiry(self) -> None:
        expired = self._create("Crane", -1)
        soon = self._create("Forklift", 0)
        edge = self._create("Rigging", 30)
        valid = self._create("Driving", 31)

        self.assertEqual(expired["status"], "Expired")
        self.assertEqual(expired["days_until_expiry"], -1)
        self.assertEqual(soon["status"], "Expiring Soon")
        self.assertEqual(edge["status"], "Expiring Soon")
        self.assertEqual(valid["status"], "Valid")
        self.assertEqual(valid["expiry_status"], "Valid")

    def test_stale_stored_status_is_recomputed_on_read(self) -> None:
        created = self._create("Crane", 90)
        row = self.db.query(License).filter(License.name == "Crane").one()
        row.status = LicenseStatus.RENEWAL_PENDING
        row.expiry_date = self.today - timedelta(days=2)
        self.db.commit()

        resp = self.client.get(f"/api/licenses/{created['id']}")
        self.assertEqual(resp.json()["status"], "Expired")
        self.assertEqual(resp.json()["employee"]["id"], self.employee["id"])

    def test_expiry_before_issue_is_rejected(self) -> None:
        resp = self.client.post(
            self.base,
            json={"name": "Bad", "issue_date": str(self.today), "expiry_date": str(self.today - timedelta(days=1))},
        )
        self.assertEqual(resp.status_code, 400)

    def test_update_recomputes_status(self) -> None:
        created = self._create("Crane", 90)
        resp = self.client.put(f"{self.base}/{created['id']}", json={"expiry_date": str(self.today + timedelta(days=3))})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "Expiring Soon")
        stored = self.db.query(License).filter(License.name == "Crane").one()
        self.assertEqual(stored.status, LicenseStatus.EXPIRING_SOON)

    def test_listing_filters(self) -> None:
        self._create("Crane", -5)
        self._create("Forklift", 10)
        self._create("Driving", 200)

        by_status = self.client.get("/api/licenses", params={"status": "Expiring Soon"}).json()
        self.assertEqual([item["name"] for item in by_status], ["Forklift"])
        expired = self.client.get("/api/licenses", params={"status": "Expired"}).json()
        self.assertEqual([item["name"] for item in expired], ["Crane"])

        expiring = self.client.get("/api/licenses/expiring", params={"days": 60}).json()
        self.assertEqual([item["name"] for item in expiring], ["Forklift"])
        wide = self.client.get("/api/licenses/expiring", params={"days": 365}).json()
        self.assertEqual([item["name"] for item in wide], ["Forklift", "Driving"])

        own = [item["name"] for item in self.client.get(self.base).json()]
        self.assertEqual(own, ["Driving", "Forklift", "Crane"])

    def test_renewal_pending_is_reported_and_filtered(self) -> None:
        created = self._create("Crane", 200)
        self._create("Driving", 200)
        resp = self.client.patch(f"/api/licenses/{created['id']}", json={"status": "Renewal Pending"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "Renewal Pending")

        pending = self.client.get("/api/licenses", params={"status": "Renewal Pending"}).json()
        self.assertEqual([(item["name"], item["status"]) for item in pending], [("Crane", "Renewal Pending")])
        valid = self.client.get("/api/licenses", params={"status": "Valid"}).json()
        self.assertEqual([(item["name"], item["status"]) for item in valid], [("Driving", "Valid")])

        # Editing other fields keeps the pending renewal
        resp = self.client.patch(f"/api/licenses/{created['id']}", json={"notes": "awaiting card"})
        self.assertEqual(resp.json()["status"], "Renewal Pending")

    def test_renewal_clears_pending_status(self) -> None:
        created = self._create("Crane", 10)
        row = self.db.query(License).filter(License.name == "Crane").one()
        row.status = LicenseStatus.RENEWAL_PENDING
        self.db.commit()
        self.assertEqual(self.client.get(f"/api/licenses/{created['id']}").json()["status"], "Renewal Pending")

        app.dependency_overrides[get_storage] = lambda: MagicMock(spec=StorageClient)
        resp = self.client.post(
            f"/api/licenses/{created['id']}/renew", data={"expiry_date": str(self.today + timedelta(days=365))}
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "Valid")

    def test_license_of_another_employee_is_not_found(self) -> None:
        created = self._create("Crane", 90)
        other = self.create_employee(first_name="Other")
        resp = self.client.get(f"/api/employees/{other['id']}/licenses/{created['id']}")
        self.assertEqual(resp.status_code, 404)

    def test_delete(self) -> None:
        created = self._create("Crane", 90)
        self.assertEqual(self.client.delete(f"/api/licenses/{created['id']}").status_code, 200)
        self.assertEqual(self.client.get(f"/api/licenses/{created['id']}").status_code, 404)


class LicenseRenewalTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.today = utc_today()
        employee = self.create_employee()
        self.license = self.client.post(
            f"/api/employees/{employee['id']}/licenses",
            json={
                "name": "Crane",
                "issue_date": str(self.today - timedelta(days=700)),
                "expiry_date": str(self.today - timedelta(days=1)),
                "document_url": "https://files.example/old.pdf",
            },
        ).json()
        self.storage = MagicMock(spec=StorageClient)
        app.dependency_overrides[get_storage] = lambda: self.storage

    def test_renew_with_document(self) -> None:
        self.storage.upload.return_value = "https://files.example/new.pdf"
        new_expiry = self.today + timedelta(days=365)
        resp = self.client.post(
            f"/api/licenses/{self.license['id']}/renew",
            data={"expiry_date": str(new_expiry)},
            files={"document": ("renewal.pdf", b"%PDF-1.4", "application/pdf")},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["expiry_date"], str(new_expiry))
        self.assertEqual(body["status"], "Valid")
        self.assertEqual(body["document_url"], "https://files.example/new.pdf")
        self.storage.upload.assert_called_once_with("renewal.pdf", b"%PDF-1.4", "application/pdf", prefix="licenses")

    def test_upload_failure_does_not_block_renewal(self) -> None:
        self.storage.upload.side_effect = StorageError("storage down")
        resp = self.client.post(
            f"/api/licenses/{self.license['id']}/renew",
            data={"expiry_date": str(self.today + timedelta(days=20))},
            files={"document": ("renewal.pdf", b"data", "application/pdf")},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["status"], "Expiring Soon")
        self.assertEqual(resp.json()["document_url"], "https://files.example/old.pdf")

    def test_renew_without_document_or_date(self) -> None:
        resp = self.client.post(
            f"/api/licenses/{self.license['id']}/renew", data={"expiry_date": str(self.today + timedelta(days=90))}
        )
        self.assertEqual(resp.status_code, 200)
        self.storage.upload.assert_not_called()

        resp = self.client.post(f"/api/licenses/{self.license['id']}/renew", data={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "expiry_date: Field required"})

    def test_renew_accepts_camel_case_expiry(self) -> None:
        new_expiry = self.today + timedelta(days=120)
        resp = self.client.post(f"/api/licenses/{self.license['id']}/renew", data={"expiryDate": str(new_expiry)})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["expiry_date"], str(new_expiry))
        self.assertEqual(resp.json()["status"], "Valid")


if __name__ == "__main__":
    unittest.main()
