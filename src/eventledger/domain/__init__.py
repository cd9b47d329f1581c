"""Domain layer for eventledger application.

Services are exposed lazily so that the database layer can import
``eventledger.domain.entities`` without pulling the services (which depend on
the database layer) into a circular import.
"""

_SERVICES = {
    "EventService": "eventledger.domain.event",
    "CatalogService": "eventledger.domain.catalog",
    "EmployeeService": "eventledger.domain.employee",
    "VehicleService": "eventledger.domain.vehicle",
    "CustomerService": "eventledger.domain.customer",
    "StatsService": "eventledger.domain.stats",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
