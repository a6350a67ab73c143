"""Partial-update sets built from validated payloads.

An :class:`UpdateSet` is the explicit mapping of column name to new value for
one row. Column names are checked against the mapped table, so no identifier
ever comes from user input unchecked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import BaseModel
from sqlalchemy import inspect

from opsflow.core.errors import ValidationError
from opsflow.db.base import utcnow

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


@dataclass(frozen=True)
class UpdateSet:
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_model(
        cls,
        model: type,
        changes: Mapping[str, Any] | BaseModel,
        exclude: Iterable[str] = (),
    ) -> "UpdateSet":
        if isinstance(changes, BaseModel):
            changes = changes.model_dump(exclude_unset=True)
        skipped = PROTECTED_FIELDS | frozenset(exclude)
        attrs = inspect(model).column_attrs
        values: dict[str, Any] = {}
        for name, value in changes.items():
            if name in skipped:
                continue
            if name not in attrs:
                raise ValidationError(f"Unknown field: {name}")
            if value is None and not attrs[name].columns[0].nullable:
                raise ValidationError(f"{name} cannot be null")
            values[name] = value
        return cls(values)

    def __bool__(self) -> bool:
        return bool(self.values)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def with_value(self, name: str, value: Any) -> "UpdateSet":
        return UpdateSet({**self.values, name: value})

    def apply(self, instance: Any) -> None:
        """Write the values onto a loaded ORM instance."""
        for name, value in self.values.items():
            setattr(instance, name, value)
        if hasattr(instance, "updated_at"):
            instance.updated_at = utcnow()
