"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only handle ValueError.
    """


class NotAuthenticatedError(DomainError):
    """Mutating call issued without a resolved account."""


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConstraintError(DomainError):
    """Write rejected by a data-layer constraint."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for the account."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class LookupRaceError(ConflictError):
    """A find-or-create insert lost a race against an identical insert.

    Recoverable by re-resolving; the database layer retries on it.
    """


def not_authenticated() -> str:
    """Return message for a call without a resolved account."""
    return "User not authenticated"


def profile_not_found(user_id: str) -> str:
    """Return message for a user without a profile."""
    return f"No profile for user '{user_id}'; authenticate first"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def service_not_found(service_id: int) -> str:
    """Return message for missing service."""
    return f"Service {service_id} not found"


def counter_not_found(counter_id: int) -> str:
    """Return message for missing piece counter."""
    return f"Piece counter {counter_id} not found"


def duplicate_client_name(name: str) -> str:
    """Return message when another client already uses the name."""
    return f"Client with name '{name}' already exists"


def invalid_status(status: object) -> str:
    """Return message for an unknown service status."""
    from costureira.domain.entities import ServiceStatus

    return f"Invalid status '{status}'. Expected one of: {', '.join(ServiceStatus.values())}"


def lookup_race(entity: str, key: str) -> str:
    """Return message when find-or-create kept colliding."""
    return f"Concurrent creation of {entity} '{key}' could not be resolved; please retry"
