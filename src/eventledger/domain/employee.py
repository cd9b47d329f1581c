"""Employee domain service."""

from decimal import Decimal
from typing import Any, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import Employee, to_money
from eventledger.domain.errors import NotFoundError, ValidationError, employee_not_found

FIELDS = {"name", "phone", "role", "base_payment", "individual_transport_cost"}


class EmployeeService:
    """Service for managing staff.

    Payment changes only affect events the employee joins afterwards.
    """

    def __init__(self, db: Database):
        """Initialize employee service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_employee(
        self,
        name: str,
        role: str,
        base_payment: Decimal,
        individual_transport_cost: Decimal,
        phone: Optional[str] = None,
    ) -> int:
        """Create an employee.

        Args:
            name: Employee name
            role: Job role, e.g. "Driver"
            base_payment: Payment per event
            individual_transport_cost: Paid per event when travelling on their own
            phone: Optional phone number

        Returns:
            Employee ID

        Raises:
            ValidationError: If a value is missing or negative
        """
        fields = self._validate(
            {
                "name": name,
                "role": role,
                "base_payment": base_payment,
                "individual_transport_cost": individual_transport_cost,
            }
        )
        return self.db.create_employee(
            name=name.strip(),
            role=role.strip(),
            base_payment=fields["base_payment"],
            individual_transport_cost=fields["individual_transport_cost"],
            phone=phone,
        )

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        """Get an active employee by ID."""
        return self.db.get_employee(employee_id)

    def list_employees(self) -> list[Employee]:
        """List active employees."""
        return self.db.list_employees()

    def update_employee(self, employee_id: int, **fields: Any) -> None:
        """Update employee fields.

        Raises:
            ValidationError: If a field is unknown or invalid
            NotFoundError: If the employee doesn't exist
        """
        unknown = set(fields) - FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        if self.db.get_employee(employee_id) is None:
            raise NotFoundError(employee_not_found(employee_id))
        self.db.update_employee(employee_id, **self._validate(fields))

    def delete_employee(self, employee_id: int) -> None:
        """Soft-delete an employee. Existing team memberships are kept."""
        if self.db.get_employee(employee_id) is None:
            raise NotFoundError(employee_not_found(employee_id))
        self.db.deactivate_employee(employee_id)

    @staticmethod
    def _validate(fields: dict[str, Any]) -> dict[str, Any]:
        fields = dict(fields)
        for name in ("name", "role"):
            if name in fields and (not fields[name] or not fields[name].strip()):
                raise ValidationError(f"Employee {name} is required")
        for name in ("base_payment", "individual_transport_cost"):
            if name not in fields:
                continue
            label = name.replace("_", " ").capitalize()
            fields[name] = to_money(fields[name], label)
            if fields[name] < 0:
                raise ValidationError(f"{label} must not be negative")
        return fields
