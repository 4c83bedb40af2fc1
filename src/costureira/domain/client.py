"""Client domain service."""

import logging
from decimal import Decimal
from typing import Optional
from costureira.database.base import Database
from costureira.domain.entities import Client as ClientEntity
from costureira.domain.errors import NotFoundError, ValidationError, client_not_found
from costureira.domain.profile import require_account
from costureira.utils.names import is_blank

logger = logging.getLogger(__name__)

VIP_THRESHOLD = Decimal("300")
REGULAR_THRESHOLD = Decimal("150")


def client_tier(client: ClientEntity) -> str:
    """Label a client by how much they have paid so far."""
    if client.total_spent > VIP_THRESHOLD:
        return "VIP"
    if client.total_spent > REGULAR_THRESHOLD:
        return "Regular"
    return "New"


def require_client_name(name: Optional[str]) -> str:
    """Return name unchanged if it is not blank.

    Raises:
        ValidationError: If name is missing or whitespace only
    """
    if is_blank(name):
        raise ValidationError("Client name is required")
    return name


class ClientService:
    """Service for resolving and managing clients."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def resolve_or_create_client(self, user_id: Optional[str], name: str) -> int:
        """Resolve a client by name, creating it on first reference.

        Matching is case-insensitive within the account, so "ana" and "Ana"
        resolve to the same client. Calling this twice with the same name
        never creates a second client.

        Args:
            user_id: Authenticated user ID
            name: Client display name

        Returns:
            Client ID

        Raises:
            NotAuthenticatedError: If the user is not authenticated
            ValidationError: If the name is blank
        """
        require_account(self.db, user_id)
        require_client_name(name)
        return self.db.resolve_or_create_client(user_id, name)

    def get_client(self, user_id: Optional[str], client_id: int) -> Optional[ClientEntity]:
        """Get client by ID, or None if it does not belong to the user."""
        require_account(self.db, user_id)
        return self.db.get_client(user_id, client_id)

    def require_client(self, user_id: Optional[str], client_id: int) -> ClientEntity:
        """Get client by ID.

        Raises:
            NotFoundError: If the client does not exist for the user
        """
        client = self.get_client(user_id, client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client

    def get_client_by_name(self, user_id: Optional[str], name: str) -> Optional[ClientEntity]:
        """Get client by case-insensitive name."""
        require_account(self.db, user_id)
        return self.db.get_client_by_name(user_id, name)

    def list_clients(self, user_id: Optional[str]) -> list[ClientEntity]:
        """List clients, most recently served first."""
        require_account(self.db, user_id)
        return self.db.list_clients(user_id)

    def search_clients(self, user_id: Optional[str], query: str) -> list[ClientEntity]:
        """List clients whose name contains query (case-insensitive)."""
        require_account(self.db, user_id)
        return self.db.list_clients(user_id, search=query)

    def frequent_clients(self, user_id: Optional[str], limit: int = 4) -> list[ClientEntity]:
        """Top clients for quick selection: favorites first, then by total spent."""
        clients = self.list_clients(user_id)
        ranked = sorted(clients, key=lambda c: (not c.is_favorite, -c.total_spent))
        return ranked[:limit]

    def set_favorite(self, user_id: Optional[str], client_id: int, is_favorite: bool) -> ClientEntity:
        """Mark or unmark a client as favorite."""
        require_account(self.db, user_id)
        return self.db.update_client(user_id, client_id, is_favorite=is_favorite)

    def update_contact(
        self,
        user_id: Optional[str],
        client_id: int,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> ClientEntity:
        """Update client contact details.

        Derived statistics cannot be edited through this or any other method.
        """
        require_account(self.db, user_id)
        if email is not None and email and "@" not in email:
            raise ValidationError(f"Invalid email address '{email}'")
        return self.db.update_client(user_id, client_id, phone=phone, email=email, notes=notes)

    def rename_client(self, user_id: Optional[str], client_id: int, name: str) -> ClientEntity:
        """Rename a client.

        Raises:
            ConflictError: If another client already uses the name (case-insensitive)
        """
        require_account(self.db, user_id)
        require_client_name(name)
        client = self.db.rename_client(user_id, client_id, name)
        logger.info("Renamed client %s to %r", client_id, name)
        return client

    def delete_client(self, user_id: Optional[str], client_id: int) -> None:
        """Delete a client with all of its services and piece history."""
        require_account(self.db, user_id)
        self.db.delete_client(user_id, client_id)
