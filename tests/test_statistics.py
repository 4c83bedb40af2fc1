"""Tests for rebuilding derived statistics."""

from datetime import date, datetime
from decimal import Decimal

from costureira.database.models import Client, PieceCounter


def test_rebuild_clean_account_is_consistent(
    statistics_service, service_order_service, piece_counter_service, user_id
):
    """Nothing to fix when every write kept the totals current."""
    service_order_service.create_service(user_id, "Ana", "Vestido", Decimal("120"), status="paid")
    piece_counter_service.add_pieces(user_id, "Bia", 4)

    report = statistics_service.rebuild(user_id)

    assert report.consistent
    assert report.clients_checked == 2
    assert report.counters_checked == 1


def test_rebuild_repairs_drifted_rows(
    temp_db,
    statistics_service,
    client_service,
    service_order_service,
    piece_counter_service,
    user_id,
):
    """Corrupted totals are recomputed from services and piece history."""
    service = service_order_service.create_service(
        user_id,
        "Ana",
        "Vestido",
        Decimal("120"),
        status="paid",
        created_at=datetime(2024, 1, 10, 12, 0),
    )
    entry = piece_counter_service.add_pieces(user_id, "Ana", 6)

    # Simulate a write that bypassed the application
    session = temp_db._get_session()
    session.get(Client, service.client_id).total_spent = Decimal("999.00")
    session.get(PieceCounter, entry.counter_id).total_pieces = 42
    session.commit()

    report = statistics_service.rebuild(user_id)

    assert not report.consistent
    assert report.clients_fixed == 1
    assert report.counters_fixed == 1
    client = client_service.get_client(user_id, service.client_id)
    assert client.total_spent == Decimal("120.00")
    assert client.last_service_date == date(2024, 1, 10)
    assert piece_counter_service.get_counter(user_id, entry.counter_id).total_pieces == 6

    assert statistics_service.rebuild(user_id).consistent


def test_rebuild_touches_only_own_account(
    temp_db, statistics_service, service_order_service, user_id, other_user_id
):
    """Rebuilding one account leaves another account's rows alone."""
    theirs = service_order_service.create_service(
        other_user_id, "Ana", "Vestido", Decimal("50"), status="paid"
    )
    session = temp_db._get_session()
    session.get(Client, theirs.client_id).total_spent = Decimal("1.00")
    session.commit()

    report = statistics_service.rebuild(user_id)

    assert report.clients_checked == 0
    assert report.consistent
    assert statistics_service.rebuild(other_user_id).clients_fixed == 1
