"""Utility for resolving existing client names to IDs."""

from typing import Optional
from costureira.domain.client import ClientService
from costureira.domain.errors import NotFoundError


def resolve_client(client_service: ClientService, user_id: Optional[str], client: str | int) -> int:
    """Resolve client name or ID to client ID without creating anything.

    Args:
        client_service: ClientService instance
        user_id: Authenticated user ID
        client: Client name (str) or ID (int or string representation of int)

    Returns:
        Client ID

    Raises:
        NotFoundError: If client is not found
        NotAuthenticatedError: If the user is not authenticated
    """
    # If it's already an integer, use it as ID
    if isinstance(client, int):
        return client_service.require_client(user_id, client).id

    # Try to parse as integer (handles string IDs like "1")
    try:
        client_id = int(client)
    except (ValueError, TypeError):
        # Not a number, treat as name
        client_id = None

    if client_id is not None:
        return client_service.require_client(user_id, client_id).id

    found = client_service.get_client_by_name(user_id, client)
    if found is None:
        raise NotFoundError(f"Client '{client}' not found")
    return found.id
