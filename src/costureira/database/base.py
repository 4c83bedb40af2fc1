"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from costureira.domain.entities import (
    Profile,
    Client,
    Service,
    ServiceStatus,
    PieceCounter,
    PieceCounterHistory,
    RebuildReport,
)


class Database(ABC):
    """Abstract database interface for costureira.

    Every operation is scoped to one account (``user_id``); rows owned by a
    different account behave as if they did not exist. Each mutating method
    is one unit of work: the ledger write and every derived-field update it
    implies commit together or not at all.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Profile operations
    @abstractmethod
    def ensure_profile(self, user_id: str, full_name: Optional[str] = None) -> Profile:
        """Return the profile for user_id, creating it on first authentication."""
        pass

    @abstractmethod
    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Get profile by user ID."""
        pass

    @abstractmethod
    def update_profile(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        business_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Profile:
        """Update profile fields that are not None."""
        pass

    # Client operations
    @abstractmethod
    def resolve_or_create_client(self, user_id: str, name: str) -> int:
        """Find a client by case-insensitive name, creating it if absent. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, user_id: str, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def get_client_by_name(self, user_id: str, name: str) -> Optional[Client]:
        """Get client by case-insensitive name."""
        pass

    @abstractmethod
    def list_clients(self, user_id: str, search: Optional[str] = None) -> list[Client]:
        """List clients, most recently served first (never-served last).

        Args:
            user_id: Owning account
            search: Optional case-insensitive substring filter on the name
        """
        pass

    @abstractmethod
    def update_client(
        self,
        user_id: str,
        client_id: int,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
        is_favorite: Optional[bool] = None,
    ) -> Client:
        """Update user-editable client fields that are not None."""
        pass

    @abstractmethod
    def rename_client(self, user_id: str, client_id: int, name: str) -> Client:
        """Rename a client, keeping case-insensitive names unique per account."""
        pass

    @abstractmethod
    def delete_client(self, user_id: str, client_id: int) -> None:
        """Delete a client together with its services and piece counter."""
        pass

    # Service operations
    @abstractmethod
    def create_service(
        self,
        user_id: str,
        client_name: str,
        description: str,
        value: Decimal,
        delivery_date: Optional[date] = None,
        status: ServiceStatus = ServiceStatus.PROGRESS,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Service:
        """Create a service for a client resolved (or created) by name."""
        pass

    @abstractmethod
    def get_service(self, user_id: str, service_id: int) -> Optional[Service]:
        """Get service by ID."""
        pass

    @abstractmethod
    def list_services(
        self,
        user_id: str,
        status: Optional[ServiceStatus] = None,
        client_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Service]:
        """List services, newest first.

        Args:
            user_id: Owning account
            status: Optional status filter
            client_id: Optional client filter
            start_date: Optional inclusive lower bound on the creation date
            end_date: Optional inclusive upper bound on the creation date
        """
        pass

    @abstractmethod
    def update_service(
        self,
        user_id: str,
        service_id: int,
        client_name: Optional[str] = None,
        description: Optional[str] = None,
        value: Optional[Decimal] = None,
        delivery_date: Optional[date] = None,
        status: Optional[ServiceStatus] = None,
        notes: Optional[str] = None,
        clear_delivery_date: bool = False,
    ) -> Service:
        """Update service fields that are not None.

        Args:
            client_name: Moves the service to the client with this name
                (created if absent)
            clear_delivery_date: If True, clear the delivery date
        """
        pass

    @abstractmethod
    def delete_service(self, user_id: str, service_id: int) -> None:
        """Delete a service."""
        pass

    @abstractmethod
    def count_clients(self, user_id: str) -> int:
        """Count clients of an account."""
        pass

    # Piece counter operations
    @abstractmethod
    def resolve_or_create_counter(self, user_id: str, client_id: int, client_name: str) -> int:
        """Find the client's piece counter, creating it if absent. Returns counter ID."""
        pass

    @abstractmethod
    def add_pieces(
        self, user_id: str, client_name: str, pieces: int, description: Optional[str] = None
    ) -> PieceCounterHistory:
        """Append a piece movement and add it to the client's running total."""
        pass

    @abstractmethod
    def get_counter(self, user_id: str, counter_id: int) -> Optional[PieceCounter]:
        """Get piece counter by ID."""
        pass

    @abstractmethod
    def get_counter_for_client(self, user_id: str, client_id: int) -> Optional[PieceCounter]:
        """Get the piece counter of a client, if any."""
        pass

    @abstractmethod
    def list_counters(self, user_id: str) -> list[PieceCounter]:
        """List piece counters, most recently moved first."""
        pass

    @abstractmethod
    def list_history(
        self, user_id: str, counter_id: Optional[int] = None
    ) -> list[PieceCounterHistory]:
        """List piece movements, newest first, optionally for one counter."""
        pass

    # Maintenance
    @abstractmethod
    def rebuild_statistics(self, user_id: str) -> RebuildReport:
        """Recompute every derived field of an account from its ledgers."""
        pass
