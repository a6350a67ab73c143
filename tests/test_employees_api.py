from __future__ import annotations

import unittest
import uuid
from datetime import date, timedelta

from opsflow.models.audit_log import AuditLog
from tests.api_base import ApiTestCase


class EmployeeApiTests(ApiTestCase):
    def test_create_and_fetch(self) -> None:
        created = self.create_employee(first_name="Ana", last_name="Lopez", email="ana@example.com", hire_date="2024-02-01")
        self.assertEqual(created["status"], "Active")

        resp = self.client.get(f"/api/employees/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "ana@example.com")
        self.assertEqual(resp.json()["hire_date"], "2024-02-01")

    def test_required_fields_and_duplicate_email(self) -> None:
        resp = self.client.post("/api/employees", json={"first_name": "No", "last_name": "Email"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("email", resp.json()["error"])

        self.create_employee(email="dup@example.com")
        resp = self.client.post("/api/employees", json={"first_name": "X", "last_name": "Y", "email": "DUP@example.com"})
        self.assertEqual(resp.status_code, 409)

    def test_partial_update_only_changes_given_fields(self) -> None:
        created = self.create_employee(phone="555-1000")
        resp = self.client.put(f"/api/employees/{created['id']}", json={"position": "Manager", "status": "On Leave"})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["position"], "Manager")
        self.assertEqual(body["status"], "On Leave")
        self.assertEqual(body["phone"], "555-1000")

    def test_search_and_filters(self) -> None:
        self.create_employee(first_name="Maria", last_name="Silva", department="Mining")
        self.create_employee(first_name="John", last_name="Smith", department="Logistics", status="Inactive")
        self.create_employee(first_name="Mario", last_name="Rossi", department="Mining")

        names = [e["first_name"] for e in self.client.get("/api/employees", params={"search": "mari"}).json()]
        self.assertEqual(sorted(names), ["Maria", "Mario"])
        mining = self.client.get("/api/employees", params={"department": "Mining"}).json()
        self.assertEqual(len(mining), 2)
        inactive = self.client.get("/api/employees", params={"status": "Inactive"}).json()
        self.assertEqual([e["last_name"] for e in inactive], ["Smith"])

        self.assertEqual(self.client.get("/api/departments").json(), ["Logistics", "Mining"])

    def test_search_underscore_is_not_a_wildcard(self) -> None:
        self.create_employee(first_name="Ana", email="a_lee@example.com")
        self.create_employee(first_name="Ben", email="axlee@example.com")
        names = [e["first_name"] for e in self.client.get("/api/employees", params={"search": "a_lee"}).json()]
        self.assertEqual(names, ["Ana"])

    def test_delete_cascades_to_records(self) -> None:
        employee = self.create_employee()
        base = f"/api/employees/{employee['id']}"
        today = date.today()
        self.client.post(
            f"{base}/licenses",
            json={"name": "Forklift", "issue_date": str(today), "expiry_date": str(today + timedelta(days=365))},
        )
        self.client.post(f"{base}/emergency-contacts", json={"name": "A", "relationship": "Parent", "phone": "1"})
        task = self.client.post("/api/tasks", json={"title": "Onboard", "employee_id": employee["id"]}).json()

        resp = self.client.delete(base)
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(self.client.get(base).status_code, 404)
        self.assertEqual(self.client.get(f"{base}/licenses").status_code, 404)
        self.assertEqual(self.client.get("/api/licenses").json(), [])
        self.assertIsNone(self.client.get(f"/api/tasks/{task['id']}").json()["employee_id"])

    def test_unknown_and_malformed_ids(self) -> None:
        resp = self.client.get(f"/api/employees/{uuid.uuid4()}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Employee not found"})
        self.assertEqual(self.client.get("/api/employees/not-a-uuid").status_code, 400)

    def test_writes_are_recorded_in_activity_log(self) -> None:
        employee = self.client.post(
            "/api/employees",
            json={"first_name": "Log", "last_name": "Me", "email": "log@example.com"},
            headers={"X-User-Id": "admin_1"},
        ).json()
        entry = self.db.query(AuditLog).filter(AuditLog.entity_id == employee["id"]).one()
        self.assertEqual(entry.actor, "admin_1")
        self.assertEqual(entry.action, "CREATE")
        self.assertEqual(entry.entity_type, "employee")


if __name__ == "__main__":
    unittest.main()
