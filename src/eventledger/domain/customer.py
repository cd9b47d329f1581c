"""Customer domain service."""

from typing import Any, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import Customer, Event
from eventledger.domain.errors import NotFoundError, ValidationError, customer_not_found

FIELDS = {"name", "phone", "email", "address", "notes"}


class CustomerService:
    """Service for managing clients."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_customer(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a customer.

        Returns:
            Customer ID

        Raises:
            ValidationError: If the name is empty or the email is malformed
        """
        self._validate({"name": name, "email": email})
        return self.db.create_customer(
            name=name.strip(), phone=phone, email=email, address=address, notes=notes
        )

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get an active customer by ID."""
        return self.db.get_customer(customer_id)

    def list_customers(self) -> list[Customer]:
        """List active customers."""
        return self.db.list_customers()

    def search(self, term: str) -> list[Customer]:
        """Find active customers whose name or phone contains ``term``."""
        term = term.strip()
        if not term:
            return self.db.list_customers()
        return self.db.list_customers(search=term)

    def get_history(self, customer_id: int) -> list[Event]:
        """List the customer's active events, newest first.

        Raises:
            NotFoundError: If the customer doesn't exist
        """
        if self.db.get_customer(customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))
        return self.db.list_events(customer_id=customer_id)

    def update_customer(self, customer_id: int, **fields: Any) -> None:
        """Update customer fields.

        Raises:
            ValidationError: If a field is unknown or invalid
            NotFoundError: If the customer doesn't exist
        """
        unknown = set(fields) - FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        if self.db.get_customer(customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))
        self._validate(fields)
        self.db.update_customer(customer_id, **fields)

    def delete_customer(self, customer_id: int) -> None:
        """Soft-delete a customer. Their events are kept."""
        if self.db.get_customer(customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))
        self.db.deactivate_customer(customer_id)

    @staticmethod
    def _validate(fields: dict[str, Any]) -> None:
        if "name" in fields and (not fields["name"] or not fields["name"].strip()):
            raise ValidationError("Customer name is required")
        email = fields.get("email")
        if email and "@" not in email:
            raise ValidationError(f"Invalid email address '{email}'")
