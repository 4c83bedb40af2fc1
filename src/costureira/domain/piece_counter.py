"""Piece counter domain service."""

import logging
from typing import Optional
from costureira.database.base import Database
from costureira.domain.client import require_client_name
from costureira.domain.entities import (
    PieceCounter as PieceCounterEntity,
    PieceCounterHistory as HistoryEntity,
)
from costureira.domain.errors import NotFoundError, ValidationError, client_not_found
from costureira.domain.profile import require_account

logger = logging.getLogger(__name__)

DEFAULT_ADDED_DESCRIPTION = "Pieces added"
DEFAULT_REMOVED_DESCRIPTION = "Pieces removed"
# Movements must fit the 32-bit integer columns
MAX_PIECES = 2**31 - 1


class PieceCounterService:
    """Service for counting pieces delivered per client."""

    def __init__(self, db: Database):
        """Initialize piece counter service.

        Args:
            db: Database instance
        """
        self.db = db

    def resolve_or_create_counter(
        self, user_id: Optional[str], client_id: int, client_name: str
    ) -> int:
        """Resolve the piece counter of a client, creating it at zero if absent.

        Args:
            user_id: Authenticated user ID
            client_id: Client the counter belongs to
            client_name: Display name stored on a new counter

        Returns:
            Counter ID

        Raises:
            NotFoundError: If the client does not belong to the user
        """
        require_account(self.db, user_id)
        require_client_name(client_name)
        if self.db.get_client(user_id, client_id) is None:
            raise NotFoundError(client_not_found(client_id))
        return self.db.resolve_or_create_counter(user_id, client_id, client_name)

    def add_pieces(
        self,
        user_id: Optional[str],
        client_name: str,
        pieces: int,
        description: Optional[str] = None,
    ) -> HistoryEntity:
        """Record a piece movement for a client.

        Positive counts add pieces, negative counts remove them; the total
        may go below zero. The client and its counter are created on first
        use.

        Args:
            user_id: Authenticated user ID
            client_name: Client display name
            pieces: Signed, non-zero piece delta
            description: Optional note (defaults by sign)

        Returns:
            The appended history entry

        Raises:
            ValidationError: If pieces is zero, not an integer or out of range
        """
        require_account(self.db, user_id)
        require_client_name(client_name)
        if isinstance(pieces, bool) or not isinstance(pieces, int):
            raise ValidationError(f"Piece count must be a whole number, got {pieces!r}")
        if pieces == 0:
            raise ValidationError("Piece count cannot be zero")
        if abs(pieces) > MAX_PIECES:
            raise ValidationError(f"Piece count cannot exceed {MAX_PIECES:,} at a time")

        if not description:
            description = DEFAULT_ADDED_DESCRIPTION if pieces > 0 else DEFAULT_REMOVED_DESCRIPTION

        entry = self.db.add_pieces(user_id, client_name, pieces, description=description)
        logger.info("Recorded %+d pieces for client %r", pieces, client_name)
        return entry

    def remove_pieces(
        self,
        user_id: Optional[str],
        client_name: str,
        pieces: int,
        description: Optional[str] = None,
    ) -> HistoryEntity:
        """Record a removal of pieces (pieces is given as a positive count)."""
        if isinstance(pieces, int) and pieces < 0:
            raise ValidationError("Give the number of pieces to remove as a positive count")
        return self.add_pieces(user_id, client_name, -pieces, description=description)

    def get_counter(self, user_id: Optional[str], counter_id: int) -> Optional[PieceCounterEntity]:
        """Get counter by ID."""
        require_account(self.db, user_id)
        return self.db.get_counter(user_id, counter_id)

    def get_counter_for_client(
        self, user_id: Optional[str], client_name: str
    ) -> Optional[PieceCounterEntity]:
        """Get the counter of the client with this name, if both exist."""
        require_account(self.db, user_id)
        client = self.db.get_client_by_name(user_id, client_name)
        if client is None:
            return None
        return self.db.get_counter_for_client(user_id, client.id)

    def list_counters(self, user_id: Optional[str]) -> list[PieceCounterEntity]:
        """List counters, most recently moved first."""
        require_account(self.db, user_id)
        return self.db.list_counters(user_id)

    def list_history(
        self, user_id: Optional[str], counter_id: Optional[int] = None
    ) -> list[HistoryEntity]:
        """List piece movements, newest first."""
        require_account(self.db, user_id)
        return self.db.list_history(user_id, counter_id=counter_id)

    def total_pieces(self, user_id: Optional[str]) -> int:
        """Sum of all counter totals of the account."""
        return sum(counter.total_pieces for counter in self.list_counters(user_id))
