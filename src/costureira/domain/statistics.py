"""Derived-statistics maintenance."""

import logging
from typing import Optional

from costureira.database.base import Database
from costureira.domain.entities import RebuildReport
from costureira.domain.profile import require_account

logger = logging.getLogger(__name__)


class StatisticsService:
    """Service for re-deriving cached totals from the ledgers."""

    def __init__(self, db: Database):
        """Initialize statistics service.

        Args:
            db: Database instance
        """
        self.db = db

    def rebuild(self, user_id: Optional[str]) -> RebuildReport:
        """Recompute client statistics and piece totals from services and history.

        Every write path already keeps these fields current, so a clean
        account reports nothing fixed. Drifted rows are corrected in one
        transaction.
        """
        require_account(self.db, user_id)
        report = self.db.rebuild_statistics(user_id)
        if report.consistent:
            logger.info("Statistics for user %s are consistent", user_id)
        else:
            logger.warning(
                "Repaired statistics for user %s: %d clients, %d counters",
                user_id,
                report.clients_fixed,
                report.counters_fixed,
            )
        return report
