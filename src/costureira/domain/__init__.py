"""Domain layer for costureira application."""

# Services are imported lazily: they depend on the database package, which in
# turn imports the entities module of this package.
_SERVICES = {
    "ProfileService": "costureira.domain.profile",
    "ClientService": "costureira.domain.client",
    "ServiceOrderService": "costureira.domain.service_order",
    "PieceCounterService": "costureira.domain.piece_counter",
    "DashboardService": "costureira.domain.dashboard",
    "StatisticsService": "costureira.domain.statistics",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
