from __future__ import annotations

import unittest
from datetime import date

from opsflow.core.errors import ValidationError
from opsflow.db.updates import UpdateSet
from opsflow.models.employee import Employee
from opsflow.schemas.employee import EmployeeUpdate


class UpdateSetTests(unittest.TestCase):
    def test_only_provided_fields_are_included(self) -> None:
        changes = UpdateSet.for_model(Employee, EmployeeUpdate(position="Manager", phone=None))
        self.assertEqual(changes.values, {"position": "Manager", "phone": None})
        self.assertNotIn("first_name", changes)

    def test_protected_and_excluded_fields_are_dropped(self) -> None:
        changes = UpdateSet.for_model(
            Employee,
            {"id": "x", "created_at": "y", "department": "HR", "status": "Active"},
            exclude={"status"},
        )
        self.assertEqual(changes.values, {"department": "HR"})

    def test_unknown_column_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            UpdateSet.for_model(Employee, {"salary": 1})

    def test_null_for_required_column_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            UpdateSet.for_model(Employee, EmployeeUpdate(first_name=None))
        self.assertEqual(UpdateSet.for_model(Employee, {"phone": None}).values, {"phone": None})

    def test_apply_sets_values_and_touches_updated_at(self) -> None:
        employee = Employee(first_name="A", last_name="B", email="a@b.c")
        UpdateSet.for_model(Employee, {"hire_date": date(2026, 1, 5)}).apply(employee)
        self.assertEqual(employee.hire_date, date(2026, 1, 5))
        self.assertIsNotNone(employee.updated_at)

    def test_with_value_returns_new_set(self) -> None:
        base = UpdateSet({"a": 1})
        extended = base.with_value("b", 2)
        self.assertEqual(base.values, {"a": 1})
        self.assertEqual(extended.values, {"a": 1, "b": 2})
        self.assertFalse(UpdateSet())


if __name__ == "__main__":
    unittest.main()
