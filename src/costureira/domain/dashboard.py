"""Dashboard domain service."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from costureira.database.base import Database
from costureira.domain.entities import (
    DashboardSummary,
    Service,
    ServiceStatus,
    WeekComparison,
)
from costureira.domain.profile import require_account
from costureira.utils.date_parser import last_days, month_range, utc_today

WEEK_DAYS = 7
ZERO = Decimal("0.00")


def percentage_change(today: Decimal, yesterday: Decimal) -> Decimal:
    """Day-over-day change in percent.

    Growth from nothing counts as +100%; no earnings on either day is 0%.
    """
    if yesterday > 0:
        return ((today - yesterday) / yesterday * 100).quantize(Decimal("0.1"))
    if today > 0:
        return Decimal("100")
    return Decimal("0")


def earnings_by_day(services: Sequence[Service]) -> dict[date, Decimal]:
    """Sum paid service values per creation date."""
    totals: dict[date, Decimal] = defaultdict(lambda: ZERO)
    for service in services:
        if service.status == ServiceStatus.PAID:
            totals[service.created_at.date()] += service.value
    return totals


class DashboardService:
    """Service for building the headline dashboard figures."""

    def __init__(self, db: Database):
        """Initialize dashboard service.

        Args:
            db: Database instance
        """
        self.db = db

    def week_comparison(self, user_id: Optional[str], today: Optional[date] = None) -> WeekComparison:
        """Paid earnings for the last seven days and today's change versus yesterday."""
        require_account(self.db, user_id)
        today = today or utc_today()
        days = last_days(today, WEEK_DAYS)
        paid = self.db.list_services(
            user_id, status=ServiceStatus.PAID, start_date=days[0], end_date=today
        )
        totals = earnings_by_day(paid)
        earnings = tuple(totals.get(day, ZERO) for day in days)
        return WeekComparison(
            days=days,
            earnings=earnings,
            percentage_change=percentage_change(earnings[-1], earnings[-2]),
        )

    def build_summary(self, user_id: Optional[str], today: Optional[date] = None) -> DashboardSummary:
        """Build the dashboard summary.

        Args:
            user_id: Authenticated user ID
            today: Reference date (defaults to the current UTC date)

        Returns:
            DashboardSummary with today's and this month's paid earnings,
            the number of services in progress, the client count and the
            seven-day comparison
        """
        require_account(self.db, user_id)
        today = today or utc_today()
        month_start, month_end = month_range(today)

        paid_this_month = self.db.list_services(
            user_id, status=ServiceStatus.PAID, start_date=month_start, end_date=month_end
        )
        totals = earnings_by_day(paid_this_month)
        pending = self.db.list_services(user_id, status=ServiceStatus.PROGRESS)

        return DashboardSummary(
            today_earnings=totals.get(today, ZERO),
            pending_count=len(pending),
            monthly_earnings=sum(totals.values(), ZERO),
            client_count=self.db.count_clients(user_id),
            week=self.week_comparison(user_id, today=today),
        )
