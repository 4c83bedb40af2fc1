"""Domain model entities for costureira.

These are pure data classes representing business concepts, independent of
database schema. Derived fields (client totals, counter totals) are carried
here as read-only values; only the write paths in the database layer compute
them.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class ServiceStatus(str, Enum):
    """Lifecycle status of a service order.

    Transitions are free: any status may move to any other.
    """

    PROGRESS = "progress"
    DELIVERED = "delivered"
    PAID = "paid"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(status.value for status in cls)


@dataclass(frozen=True)
class Profile:
    """Account owning every other entity (one per authenticated user)."""

    id: str
    full_name: Optional[str]
    business_name: Optional[str]
    phone: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Client:
    """Client domain entity.

    ``total_spent`` and ``last_service_date`` are derived from the client's
    services and are never edited directly.
    """

    id: int
    user_id: str
    name: str
    phone: Optional[str]
    email: Optional[str]
    notes: Optional[str]
    is_favorite: bool
    total_spent: Decimal
    last_service_date: Optional[date]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Service:
    """Service order domain entity."""

    id: int
    user_id: str
    client_id: int
    client_name: str
    description: str
    value: Decimal
    delivery_date: Optional[date]
    status: ServiceStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PieceCounter:
    """Running piece total for one client."""

    id: int
    user_id: str
    client_id: int
    client_name: str
    total_pieces: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PieceCounterHistory:
    """Immutable ledger entry of a piece movement (positive adds, negative removes)."""

    id: int
    user_id: str
    counter_id: int
    client_name: str
    pieces_added: int
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class RebuildReport:
    """Result of recomputing derived fields from the ledgers."""

    clients_checked: int
    clients_fixed: int
    counters_checked: int
    counters_fixed: int

    @property
    def consistent(self) -> bool:
        return self.clients_fixed == 0 and self.counters_fixed == 0


@dataclass(frozen=True)
class WeekComparison:
    """Paid earnings for the last seven days, oldest first."""

    days: tuple[date, ...]
    earnings: tuple[Decimal, ...]
    percentage_change: Decimal

    @property
    def today(self) -> Decimal:
        return self.earnings[-1]

    @property
    def yesterday(self) -> Decimal:
        return self.earnings[-2]

    @property
    def is_positive(self) -> bool:
        return self.percentage_change >= 0


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for an account."""

    today_earnings: Decimal
    pending_count: int
    monthly_earnings: Decimal
    client_count: int
    week: WeekComparison
