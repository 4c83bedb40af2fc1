"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so that the domain entities stay
independent of the table layout (e.g. the stored normalized client name never
leaves the database package).
"""

from decimal import Decimal

from costureira.domain import entities as domain
from costureira.database.models import (
    Profile as ORMProfile,
    Client as ORMClient,
    Service as ORMService,
    PieceCounter as ORMPieceCounter,
    PieceCounterHistory as ORMPieceCounterHistory,
)

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Normalize a numeric column value to a two-place Decimal."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENTS)


def profile_to_domain(orm_profile: ORMProfile) -> domain.Profile:
    """Convert SQLAlchemy Profile model to domain Profile entity."""
    return domain.Profile(
        id=orm_profile.id,
        full_name=orm_profile.full_name,
        business_name=orm_profile.business_name,
        phone=orm_profile.phone,
        created_at=orm_profile.created_at,
        updated_at=orm_profile.updated_at,
    )


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        user_id=orm_client.user_id,
        name=orm_client.name,
        phone=orm_client.phone,
        email=orm_client.email,
        notes=orm_client.notes,
        is_favorite=bool(orm_client.is_favorite),
        total_spent=to_money(orm_client.total_spent),
        last_service_date=orm_client.last_service_date,
        created_at=orm_client.created_at,
        updated_at=orm_client.updated_at,
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        user_id=orm_service.user_id,
        client_id=orm_service.client_id,
        client_name=orm_service.client_name,
        description=orm_service.description,
        value=to_money(orm_service.value),
        delivery_date=orm_service.delivery_date,
        status=domain.ServiceStatus(orm_service.status),
        notes=orm_service.notes,
        created_at=orm_service.created_at,
        updated_at=orm_service.updated_at,
    )


def piece_counter_to_domain(orm_counter: ORMPieceCounter) -> domain.PieceCounter:
    """Convert SQLAlchemy PieceCounter model to domain PieceCounter entity."""
    return domain.PieceCounter(
        id=orm_counter.id,
        user_id=orm_counter.user_id,
        client_id=orm_counter.client_id,
        client_name=orm_counter.client_name,
        total_pieces=orm_counter.total_pieces,
        created_at=orm_counter.created_at,
        updated_at=orm_counter.updated_at,
    )


def history_to_domain(orm_entry: ORMPieceCounterHistory) -> domain.PieceCounterHistory:
    """Convert SQLAlchemy PieceCounterHistory model to domain entity."""
    return domain.PieceCounterHistory(
        id=orm_entry.id,
        user_id=orm_entry.user_id,
        counter_id=orm_entry.counter_id,
        client_name=orm_entry.client_name,
        pieces_added=orm_entry.pieces_added,
        description=orm_entry.description,
        created_at=orm_entry.created_at,
    )
