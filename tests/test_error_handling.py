from __future__ import annotations

import unittest
import uuid
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from opsflow.core.errors import PersistenceError
from opsflow.db import gateway
from opsflow.models.employee import Employee
from tests.api_base import ApiTestCase


def _driver_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("could not connect: password=hunter2 host=db.internal"))


class ServerErrorResponseTests(ApiTestCase):
    """Database failures answer 500 with a fixed message; the cause only goes to the log."""

    def assertGenericServerError(self, resp) -> None:
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Internal server error"})
        self.assertNotIn("hunter2", resp.text)
        self.assertNotIn("db.internal", resp.text)

    def test_unhandled_driver_error_in_repository(self) -> None:
        with patch("opsflow.repositories.employees.list_employees", side_effect=_driver_error()):
            with self.assertLogs("opsflow", level="ERROR") as logs:
                resp = self.client.get("/api/employees")
        self.assertGenericServerError(resp)
        self.assertTrue(any("GET /api/employees" in line for line in logs.output))

    def test_failed_bulk_statement(self) -> None:
        with patch.object(Session, "execute", side_effect=_driver_error()):
            with self.assertLogs("opsflow", level="ERROR") as logs:
                resp = self.client.post("/api/documents/batch", json={"action": "delete", "documentIds": [str(uuid.uuid4())]})
        self.assertGenericServerError(resp)
        self.assertTrue(any("hunter2" in line for line in logs.output))

    def test_failed_commit_is_rolled_back(self) -> None:
        with patch.object(Session, "commit", side_effect=_driver_error()):
            with self.assertLogs("opsflow", level="ERROR"):
                resp = self.client.post(
                    "/api/employees", json={"first_name": "Jane", "last_name": "Doe", "email": "jane@example.com"}
                )
        self.assertGenericServerError(resp)
        self.assertEqual(self.db.query(Employee).count(), 0)


class GatewayTests(unittest.TestCase):
    def test_execute_wraps_driver_errors(self) -> None:
        db = MagicMock()
        db.execute.side_effect = _driver_error()
        with self.assertRaises(PersistenceError) as ctx:
            gateway.execute(db, MagicMock())
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertNotIn("hunter2", ctx.exception.message)

    def test_check_connection_reports_failure(self) -> None:
        db = MagicMock()
        db.execute.side_effect = _driver_error()
        self.assertFalse(gateway.check_connection(db))


if __name__ == "__main__":
    unittest.main()
