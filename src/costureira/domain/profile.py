"""Profile (account) domain service."""

import logging
from typing import Optional
from costureira.database.base import Database
from costureira.domain.entities import Profile as ProfileEntity
from costureira.domain.errors import (
    NotAuthenticatedError,
    not_authenticated,
    profile_not_found,
)
from costureira.utils.names import is_blank

logger = logging.getLogger(__name__)


def require_account(db: Database, user_id: Optional[str]) -> str:
    """Return user_id if it names an established account.

    Raises:
        NotAuthenticatedError: If user_id is missing or has no profile
    """
    if is_blank(user_id):
        raise NotAuthenticatedError(not_authenticated())
    if db.get_profile(user_id) is None:
        raise NotAuthenticatedError(profile_not_found(user_id))
    return user_id


class ProfileService:
    """Service for managing the account profile."""

    def __init__(self, db: Database):
        """Initialize profile service.

        Args:
            db: Database instance
        """
        self.db = db

    def ensure_profile(self, user_id: Optional[str], full_name: Optional[str] = None) -> ProfileEntity:
        """Create the profile on first authentication, or return the existing one.

        An existing profile is returned unchanged, even when full_name differs.

        Args:
            user_id: Identity issued by the authentication provider
            full_name: Optional display name stored on creation

        Returns:
            Profile entity

        Raises:
            NotAuthenticatedError: If user_id is missing
        """
        if is_blank(user_id):
            raise NotAuthenticatedError(not_authenticated())
        return self.db.ensure_profile(user_id, full_name=full_name)

    def get_profile(self, user_id: str) -> Optional[ProfileEntity]:
        """Get profile by user ID."""
        return self.db.get_profile(user_id)

    def update_profile(
        self,
        user_id: Optional[str],
        full_name: Optional[str] = None,
        business_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> ProfileEntity:
        """Update profile details.

        Args:
            user_id: Authenticated user ID
            full_name: New full name (unchanged if None)
            business_name: New business name (unchanged if None)
            phone: New phone (unchanged if None)

        Raises:
            NotAuthenticatedError: If the user has no profile
        """
        require_account(self.db, user_id)
        profile = self.db.update_profile(
            user_id, full_name=full_name, business_name=business_name, phone=phone
        )
        logger.info("Updated profile for user %s", user_id)
        return profile
