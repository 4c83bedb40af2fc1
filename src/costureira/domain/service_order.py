"""Service order domain service.

Every write here goes through the database layer's unit of work, which also
recomputes the owning client's ``total_spent`` and ``last_service_date``.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from costureira.database.base import Database
from costureira.domain.client import require_client_name
from costureira.domain.entities import Service as ServiceEntity, ServiceStatus
from costureira.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_status,
    service_not_found,
)
from costureira.domain.profile import require_account
from costureira.utils.names import is_blank

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Largest amount a Numeric(10, 2) column holds
MAX_VALUE = Decimal("99999999.99")


def coerce_status(status: ServiceStatus | str) -> ServiceStatus:
    """Convert a status value or name to ServiceStatus.

    Raises:
        ValidationError: If status is not one of progress, delivered, paid
    """
    if isinstance(status, ServiceStatus):
        return status
    try:
        return ServiceStatus(str(status).strip().lower())
    except ValueError:
        raise ValidationError(invalid_status(status)) from None


def validate_value(value: Decimal) -> Decimal:
    """Check that a monetary value is a non-negative amount in whole cents.

    Raises:
        ValidationError: If value is missing, not numeric, negative, has
            fractions of a cent or does not fit the value column
    """
    if value is None:
        raise ValidationError("Service value is required")
    if isinstance(value, float):
        value = Decimal(str(value))
    if not isinstance(value, (Decimal, int)) or isinstance(value, bool):
        raise ValidationError(f"Service value must be a number, got {value!r}")
    value = Decimal(value)
    if not value.is_finite():
        raise ValidationError(f"Service value must be a number, got {value!r}")
    if value < 0:
        raise ValidationError(f"Service value cannot be negative: {value}")
    if value > MAX_VALUE:
        raise ValidationError(f"Service value cannot exceed {MAX_VALUE}: {value}")
    if value != value.quantize(CENTS):
        raise ValidationError(f"Service value cannot have fractions of a cent: {value}")
    return value.quantize(CENTS)


def validate_description(description: Optional[str]) -> str:
    """Require a non-blank description."""
    if is_blank(description):
        raise ValidationError("Service description is required")
    return description


class ServiceOrderService:
    """Service for managing service orders."""

    def __init__(self, db: Database):
        """Initialize service order service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_service(
        self,
        user_id: Optional[str],
        client_name: str,
        description: str,
        value: Decimal,
        delivery_date: Optional[date] = None,
        status: ServiceStatus | str = ServiceStatus.PROGRESS,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ServiceEntity:
        """Create a service order.

        The client is resolved by name (case-insensitive) and created on
        first reference; client lookup, service insert and statistics
        recompute commit together.

        Args:
            user_id: Authenticated user ID
            client_name: Client display name
            description: What is being made or repaired
            value: Price, non-negative
            delivery_date: Optional promised delivery date
            status: Initial status (defaults to progress)
            notes: Optional notes
            created_at: Optional creation timestamp (defaults to now, UTC)

        Returns:
            Created service entity

        Raises:
            NotAuthenticatedError: If the user is not authenticated
            ValidationError: If any field is invalid
        """
        require_account(self.db, user_id)
        require_client_name(client_name)
        validate_description(description)
        value = validate_value(value)
        status = coerce_status(status)

        service = self.db.create_service(
            user_id=user_id,
            client_name=client_name,
            description=description,
            value=value,
            delivery_date=delivery_date,
            status=status,
            notes=notes,
            created_at=created_at,
        )
        logger.info(
            "Created service %s for client %r (%s, %s)",
            service.id,
            client_name,
            service.value,
            service.status.value,
        )
        return service

    def get_service(self, user_id: Optional[str], service_id: int) -> Optional[ServiceEntity]:
        """Get service by ID, or None if it does not belong to the user."""
        require_account(self.db, user_id)
        return self.db.get_service(user_id, service_id)

    def require_service(self, user_id: Optional[str], service_id: int) -> ServiceEntity:
        """Get service by ID.

        Raises:
            NotFoundError: If the service does not exist for the user
        """
        service = self.get_service(user_id, service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))
        return service

    def list_services(
        self,
        user_id: Optional[str],
        status: Optional[ServiceStatus | str] = None,
        client_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ServiceEntity]:
        """List services, newest first, with optional filters."""
        require_account(self.db, user_id)
        if status is not None:
            status = coerce_status(status)
        return self.db.list_services(
            user_id,
            status=status,
            client_id=client_id,
            start_date=start_date,
            end_date=end_date,
        )

    def update_status(
        self, user_id: Optional[str], service_id: int, status: ServiceStatus | str
    ) -> ServiceEntity:
        """Move a service to another status.

        Any status may follow any other; moving into or out of paid changes
        the client's total spent.
        """
        require_account(self.db, user_id)
        status = coerce_status(status)
        service = self.db.update_service(user_id, service_id, status=status)
        logger.info("Service %s is now %s", service_id, status.value)
        return service

    def update_service(
        self,
        user_id: Optional[str],
        service_id: int,
        client_name: Optional[str] = None,
        description: Optional[str] = None,
        value: Optional[Decimal] = None,
        delivery_date: Optional[date] = None,
        status: Optional[ServiceStatus | str] = None,
        notes: Optional[str] = None,
        clear_delivery_date: bool = False,
    ) -> ServiceEntity:
        """Update service fields.

        Args:
            user_id: Authenticated user ID
            service_id: Service to update
            client_name: Reassign to this client (created if absent)
            description: New description
            value: New value, non-negative
            delivery_date: New delivery date
            status: New status
            notes: New notes
            clear_delivery_date: If True, clear the delivery date

        Raises:
            NotFoundError: If the service does not exist for the user
            ValidationError: If any field is invalid
        """
        require_account(self.db, user_id)
        if client_name is not None:
            require_client_name(client_name)
        if description is not None:
            validate_description(description)
        if value is not None:
            value = validate_value(value)
        if status is not None:
            status = coerce_status(status)
        if clear_delivery_date and delivery_date is not None:
            raise ValidationError("Cannot set and clear the delivery date at the same time")

        return self.db.update_service(
            user_id,
            service_id,
            client_name=client_name,
            description=description,
            value=value,
            delivery_date=delivery_date,
            status=status,
            notes=notes,
            clear_delivery_date=clear_delivery_date,
        )

    def delete_service(self, user_id: Optional[str], service_id: int) -> None:
        """Delete a service and recompute its client's statistics."""
        require_account(self.db, user_id)
        self.db.delete_service(user_id, service_id)
        logger.info("Deleted service %s", service_id)
