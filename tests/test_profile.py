"""Tests for profiles and account resolution."""

import pytest

from costureira.domain.errors import NotAuthenticatedError
from costureira.domain.profile import require_account


def test_ensure_profile_creates_once(profile_service, temp_db):
    """The first call creates the profile; later calls return it unchanged."""
    created = profile_service.ensure_profile("new-user", full_name="Ana")
    again = profile_service.ensure_profile("new-user", full_name="Someone Else")

    assert created.id == again.id == "new-user"
    assert again.full_name == "Ana"


def test_ensure_profile_requires_user_id(profile_service, temp_db):
    """A missing identity cannot create a profile."""
    with pytest.raises(NotAuthenticatedError):
        profile_service.ensure_profile(None)
    with pytest.raises(NotAuthenticatedError):
        profile_service.ensure_profile("  ")


def test_update_profile(profile_service, user_id):
    """Fields left as None are not changed."""
    profile_service.update_profile(user_id, business_name="Ateliê da Ana")
    profile = profile_service.update_profile(user_id, phone="11 98888-7777")

    assert profile.full_name == "Ana Costureira"
    assert profile.business_name == "Ateliê da Ana"
    assert profile.phone == "11 98888-7777"


def test_update_unknown_profile(profile_service, temp_db):
    """Updating a profile that was never created is an authentication error."""
    with pytest.raises(NotAuthenticatedError):
        profile_service.update_profile("ghost", full_name="Nobody")


def test_require_account(temp_db, user_id):
    """Only users with a profile count as authenticated."""
    assert require_account(temp_db, user_id) == user_id

    with pytest.raises(NotAuthenticatedError):
        require_account(temp_db, None)
    with pytest.raises(NotAuthenticatedError):
        require_account(temp_db, "someone-else")
