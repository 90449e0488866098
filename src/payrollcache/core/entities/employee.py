"""Employee record entity."""

from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class EmployeeStatus(Enum):
    """Employment status of an employee record."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class Employee:
    """Employee row as stored in the ``employees`` table.

    An empty ``id`` means the record has not been persisted yet; the
    accessor assigns one on ``add``.
    """

    name: str
    id: str = ""
    email: str = ""
    position: str = ""
    department: str = ""
    base_salary: float = 0.0
    join_date: str = ""
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: str = ""

    @property
    def is_active(self) -> bool:
        """Check if the employee is active."""
        return self.status is EmployeeStatus.ACTIVE

    def with_changes(self, **changes: Any) -> "Employee":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_row(self) -> dict[str, Any]:
        """Convert to a store row.

        Returns:
            A JSON-compatible dict with the status as its string value.
        """
        row = asdict(self)
        row["status"] = self.status.value
        return row

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Employee":
        """Build an Employee from a store row.

        Unknown columns are ignored so that rows carrying extra
        backend-managed columns still load.

        Args:
            row: The row dict from the remote or fallback store.

        Returns:
            A new Employee instance.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in row.items() if k in known and v is not None}
        if "id" in values:
            values["id"] = str(values["id"])
        if "base_salary" in values:
            values["base_salary"] = float(values["base_salary"])
        if "status" in values:
            values["status"] = EmployeeStatus(values["status"])
        return cls(**values)


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()
