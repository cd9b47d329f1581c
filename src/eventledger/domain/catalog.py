"""Catalog domain service: categories and the products/services they group."""

import logging
from decimal import Decimal
from typing import Any, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import CatalogItem, CatalogItemType, Category, to_money
from eventledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    catalog_item_not_found,
    category_not_found,
    duplicate_category_name,
)

logger = logging.getLogger(__name__)

ITEM_FIELDS = {
    "category_id",
    "name",
    "description",
    "type",
    "price_client",
    "internal_cost",
    "stock_quantity",
}


class CatalogService:
    """Service for managing categories and catalog items.

    Price changes here never touch events already holding the item: event
    items carry their own price snapshots.
    """

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    # Categories
    def create_category(self, name: str) -> int:
        """Create a category.

        Args:
            name: Category name, unique across active and inactive categories

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the name is taken
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name(name))
        return self.db.create_category(name=name)

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def list_categories(self) -> list[Category]:
        """List active categories."""
        return self.db.list_categories()

    def rename_category(self, category_id: int, name: str) -> None:
        """Rename a category.

        Raises:
            NotFoundError: If the category doesn't exist
            ConflictError: If another category has the name
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        existing = self.db.get_category_by_name(name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(duplicate_category_name(name))
        self.db.update_category(category_id, name)

    def delete_category(self, category_id: int) -> None:
        """Soft-delete a category. Its items keep their category reference."""
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        self.db.deactivate_category(category_id)

    # Items
    def create_item(
        self,
        name: str,
        type: CatalogItemType,
        price_client: Decimal,
        internal_cost: Decimal,
        category_id: Optional[int] = None,
        description: Optional[str] = None,
        stock_quantity: int = 0,
    ) -> int:
        """Create a catalog item.

        Args:
            name: Item name
            type: PRODUCT or SERVICE
            price_client: Price charged to the client
            internal_cost: Cost to the business
            category_id: Optional category
            description: Optional description
            stock_quantity: Units in stock

        Returns:
            Catalog item ID

        Raises:
            ValidationError: If a value is invalid
            NotFoundError: If the category doesn't exist
        """
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        fields = self._validate_item_fields(
            {
                "type": type,
                "price_client": price_client,
                "internal_cost": internal_cost,
                "category_id": category_id,
                "stock_quantity": stock_quantity,
            }
        )
        item_id = self.db.create_catalog_item(
            name=name.strip(),
            type=fields["type"],
            price_client=fields["price_client"],
            internal_cost=fields["internal_cost"],
            category_id=category_id,
            description=description,
            stock_quantity=stock_quantity,
        )
        logger.debug("Created catalog item %s (%s)", item_id, name)
        return item_id

    def get_item(self, item_id: int) -> Optional[CatalogItem]:
        """Get an active catalog item by ID."""
        return self.db.get_catalog_item(item_id)

    def list_items(self, category_id: Optional[int] = None) -> list[CatalogItem]:
        """List active catalog items, optionally filtered by category."""
        return self.db.list_catalog_items(category_id=category_id)

    def update_item(self, item_id: int, **fields: Any) -> None:
        """Update catalog item fields.

        Raises:
            ValidationError: If a field is unknown or invalid
            NotFoundError: If the item or category doesn't exist
        """
        unknown = set(fields) - ITEM_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        if self.db.get_catalog_item(item_id) is None:
            raise NotFoundError(catalog_item_not_found(item_id))
        if "name" in fields and (not fields["name"] or not fields["name"].strip()):
            raise ValidationError("Item name is required")
        self.db.update_catalog_item(item_id, **self._validate_item_fields(fields))

    def delete_item(self, item_id: int) -> None:
        """Soft-delete a catalog item."""
        if self.db.get_catalog_item(item_id) is None:
            raise NotFoundError(catalog_item_not_found(item_id))
        self.db.deactivate_catalog_item(item_id)

    def _validate_item_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        fields = dict(fields)
        if "type" in fields:
            try:
                fields["type"] = CatalogItemType(fields["type"])
            except ValueError:
                raise ValidationError(f"Invalid item type '{fields['type']}'")
        for name in ("price_client", "internal_cost"):
            if name not in fields:
                continue
            label = name.replace("_", " ").capitalize()
            fields[name] = to_money(fields[name], label)
            if fields[name] < 0:
                raise ValidationError(f"{label} must not be negative")
        if "stock_quantity" in fields and (fields["stock_quantity"] is None or fields["stock_quantity"] < 0):
            raise ValidationError("Stock quantity must not be negative")
        category_id = fields.get("category_id")
        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        return fields
