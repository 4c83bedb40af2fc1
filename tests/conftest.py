"""Shared pytest fixtures for costureira tests."""

import tempfile
import os
import pytest

from costureira.database.factories import create_sqlite_database
from costureira.domain.profile import ProfileService
from costureira.domain.client import ClientService
from costureira.domain.service_order import ServiceOrderService
from costureira.domain.piece_counter import PieceCounterService
from costureira.domain.dashboard import DashboardService
from costureira.domain.statistics import StatisticsService

USER_ID = "7d4f1c2e-0000-4000-8000-000000000001"
OTHER_USER_ID = "7d4f1c2e-0000-4000-8000-000000000002"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_id(temp_db):
    """Authenticate the default test user (creates the profile)."""
    ProfileService(temp_db).ensure_profile(USER_ID, full_name="Ana Costureira")
    return USER_ID


@pytest.fixture
def other_user_id(temp_db):
    """Authenticate a second, unrelated user."""
    ProfileService(temp_db).ensure_profile(OTHER_USER_ID, full_name="Bia")
    return OTHER_USER_ID


@pytest.fixture
def profile_service(temp_db):
    """Create a ProfileService with a temporary database."""
    return ProfileService(temp_db)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def service_order_service(temp_db):
    """Create a ServiceOrderService with a temporary database."""
    return ServiceOrderService(temp_db)


@pytest.fixture
def piece_counter_service(temp_db):
    """Create a PieceCounterService with a temporary database."""
    return PieceCounterService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def statistics_service(temp_db):
    """Create a StatisticsService with a temporary database."""
    return StatisticsService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI arguments pointing at the temporary database as the test user."""
    return ["--db-path", temp_db.database_path, "--user", USER_ID]
