"""Vehicle domain service."""

from decimal import Decimal
from typing import Any, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import Vehicle, to_money
from eventledger.domain.errors import NotFoundError, ValidationError, vehicle_not_found

FIELDS = {"name", "license_plate", "km_per_liter", "avg_fuel_price", "maintenance_cost_per_km"}


class VehicleService:
    """Service for managing the fleet.

    Vehicle parameters are read live by every recalculation, so an update
    here changes the transport cost of each fleet event using the vehicle the
    next time that event is recalculated.
    """

    def __init__(self, db: Database):
        """Initialize vehicle service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_vehicle(
        self,
        name: str,
        license_plate: str,
        km_per_liter: Decimal,
        avg_fuel_price: Decimal,
        maintenance_cost_per_km: Decimal,
    ) -> int:
        """Create a vehicle.

        Returns:
            Vehicle ID

        Raises:
            ValidationError: If consumption is not positive or a cost is negative
        """
        fields = self._validate(
            {
                "name": name,
                "license_plate": license_plate,
                "km_per_liter": km_per_liter,
                "avg_fuel_price": avg_fuel_price,
                "maintenance_cost_per_km": maintenance_cost_per_km,
            }
        )
        return self.db.create_vehicle(
            name=name.strip(),
            license_plate=license_plate.strip(),
            km_per_liter=fields["km_per_liter"],
            avg_fuel_price=fields["avg_fuel_price"],
            maintenance_cost_per_km=fields["maintenance_cost_per_km"],
        )

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        """Get an active vehicle by ID."""
        return self.db.get_vehicle(vehicle_id)

    def list_vehicles(self) -> list[Vehicle]:
        """List active vehicles."""
        return self.db.list_vehicles()

    def update_vehicle(self, vehicle_id: int, **fields: Any) -> None:
        """Update vehicle fields.

        Raises:
            ValidationError: If a field is unknown or invalid
            NotFoundError: If the vehicle doesn't exist
        """
        unknown = set(fields) - FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
        if self.db.get_vehicle(vehicle_id) is None:
            raise NotFoundError(vehicle_not_found(vehicle_id))
        self.db.update_vehicle(vehicle_id, **self._validate(fields))

    def delete_vehicle(self, vehicle_id: int) -> None:
        """Soft-delete a vehicle.

        Events already referencing it keep using its parameters.
        """
        if self.db.get_vehicle(vehicle_id) is None:
            raise NotFoundError(vehicle_not_found(vehicle_id))
        self.db.deactivate_vehicle(vehicle_id)

    @staticmethod
    def _validate(fields: dict[str, Any]) -> dict[str, Any]:
        fields = dict(fields)
        for name in ("name", "license_plate"):
            if name in fields and (not fields[name] or not fields[name].strip()):
                raise ValidationError(f"Vehicle {name.replace('_', ' ')} is required")
        for name in ("km_per_liter", "avg_fuel_price", "maintenance_cost_per_km"):
            if name in fields:
                fields[name] = to_money(fields[name], name.replace("_", " ").capitalize())
        if "km_per_liter" in fields and fields["km_per_liter"] <= 0:
            raise ValidationError("Km per liter must be positive")
        for name in ("avg_fuel_price", "maintenance_cost_per_km"):
            if name in fields and fields[name] < 0:
                raise ValidationError(f"{name.replace('_', ' ').capitalize()} must not be negative")
        return fields
