"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care that the input was rejected.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist or is inactive."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InternalError(DomainError):
    """Persistence layer failure."""


def event_not_found(event_id: int) -> str:
    """Return message for missing event."""
    return f"Event {event_id} not found"


def catalog_item_not_found(item_id: int) -> str:
    """Return message for missing catalog item."""
    return f"Catalog item {item_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category."""
    return f"Category {category_id} not found"


def employee_not_found(employee_id: int) -> str:
    """Return message for missing employee."""
    return f"Employee {employee_id} not found"


def vehicle_not_found(vehicle_id: int) -> str:
    """Return message for missing vehicle."""
    return f"Vehicle {vehicle_id} not found"


def customer_not_found(customer_id: int) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def duplicate_category_name(name: str) -> str:
    """Return message for duplicate category name."""
    return f"Category with name '{name}' already exists"


def item_already_attached(catalog_item_id: int, event_id: int) -> str:
    """Return message when a catalog item is already on an event."""
    return (
        f"Catalog item {catalog_item_id} is already attached to event {event_id}. "
        "Remove it first to change the quantity."
    )


def employee_already_attached(employee_id: int, event_id: int) -> str:
    """Return message when an employee is already on an event's team."""
    return f"Employee {employee_id} is already on the team of event {event_id}"
