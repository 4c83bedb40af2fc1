"""Tests for service orders and client statistics recomputation."""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from costureira.domain.entities import ServiceStatus
from costureira.domain.errors import (
    ConstraintError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def ana_services(service_order_service, user_id):
    """Ana with one paid and one in-progress service on different days."""
    paid = service_order_service.create_service(
        user_id,
        "Ana",
        "Vestido de festa",
        Decimal("120.00"),
        status=ServiceStatus.PAID,
        created_at=datetime(2024, 1, 10, 14, 30),
    )
    progress = service_order_service.create_service(
        user_id,
        "Ana",
        "Ajuste de calça",
        Decimal("80.00"),
        status=ServiceStatus.PROGRESS,
        created_at=datetime(2024, 2, 5, 9, 0),
    )
    return paid, progress


def test_new_client_has_zero_statistics(client_service, user_id):
    """A client with no services has nothing spent and no service date."""
    client_id = client_service.resolve_or_create_client(user_id, "Ana")
    client = client_service.get_client(user_id, client_id)

    assert client.total_spent == Decimal("0.00")
    assert client.last_service_date is None


def test_only_paid_services_count(client_service, ana_services, user_id):
    """total_spent sums paid services; last_service_date covers every status."""
    paid, progress = ana_services
    assert paid.client_id == progress.client_id

    client = client_service.get_client(user_id, paid.client_id)
    assert client.total_spent == Decimal("120.00")
    assert client.last_service_date == date(2024, 2, 5)


def test_status_change_to_paid_recomputes(
    client_service, service_order_service, ana_services, user_id
):
    """Moving the second service to paid adds its value."""
    paid, progress = ana_services

    updated = service_order_service.update_status(user_id, progress.id, "paid")

    assert updated.status == ServiceStatus.PAID
    assert client_service.get_client(user_id, paid.client_id).total_spent == Decimal("200.00")


def test_status_change_out_of_paid_recomputes(
    client_service, service_order_service, ana_services, user_id
):
    """Moving a paid service back to delivered removes its value."""
    paid, _ = ana_services

    service_order_service.update_status(user_id, paid.id, ServiceStatus.DELIVERED)

    assert client_service.get_client(user_id, paid.client_id).total_spent == Decimal("0.00")


def test_delete_service_recomputes(client_service, service_order_service, ana_services, user_id):
    """Deleting the first service leaves only the second one's value once paid."""
    paid, progress = ana_services
    service_order_service.update_status(user_id, progress.id, "paid")

    service_order_service.delete_service(user_id, paid.id)

    client = client_service.get_client(user_id, paid.client_id)
    assert client.total_spent == Decimal("80.00")
    assert client.last_service_date == date(2024, 2, 5)


def test_delete_latest_service_moves_last_date_back(
    client_service, service_order_service, ana_services, user_id
):
    """last_service_date falls back to the remaining services."""
    paid, progress = ana_services

    service_order_service.delete_service(user_id, progress.id)

    assert client_service.get_client(user_id, paid.client_id).last_service_date == date(2024, 1, 10)


def test_delete_last_service_resets_statistics(
    client_service, service_order_service, ana_services, user_id
):
    """A client left without services returns to the zero state."""
    paid, progress = ana_services

    service_order_service.delete_service(user_id, paid.id)
    service_order_service.delete_service(user_id, progress.id)

    client = client_service.get_client(user_id, paid.client_id)
    assert client.total_spent == Decimal("0.00")
    assert client.last_service_date is None


def test_description_only_update_keeps_statistics(
    client_service, service_order_service, ana_services, user_id
):
    """Updates that do not touch value or status leave the totals as they were."""
    paid, _ = ana_services

    service_order_service.update_service(user_id, paid.id, description="Vestido longo")

    client = client_service.get_client(user_id, paid.client_id)
    assert client.total_spent == Decimal("120.00")
    assert client.last_service_date == date(2024, 2, 5)


def test_value_change_on_paid_service_recomputes(
    client_service, service_order_service, ana_services, user_id
):
    """Changing the price of a paid service changes total spent."""
    paid, _ = ana_services

    service_order_service.update_service(user_id, paid.id, value=Decimal("135.50"))

    assert client_service.get_client(user_id, paid.client_id).total_spent == Decimal("135.50")


def test_moving_service_to_other_client_recomputes_both(
    client_service, service_order_service, ana_services, user_id
):
    """Reassigning a paid service moves its value to the new client."""
    paid, _ = ana_services

    moved = service_order_service.update_service(user_id, paid.id, client_name="Bia")

    ana = client_service.get_client(user_id, paid.client_id)
    bia = client_service.get_client(user_id, moved.client_id)
    assert moved.client_name == "Bia"
    assert ana.total_spent == Decimal("0.00")
    assert ana.last_service_date == date(2024, 2, 5)
    assert bia.total_spent == Decimal("120.00")
    assert bia.last_service_date == date(2024, 1, 10)


def test_statistics_match_ledger_after_many_changes(
    client_service, service_order_service, user_id
):
    """After any mix of writes the derived fields equal a recomputation."""
    base = datetime(2024, 5, 1, 12, 0)
    created = []
    for i, value in enumerate(["10.00", "25.50", "40.00", "5.25", "99.99"]):
        created.append(
            service_order_service.create_service(
                user_id, "Ana", f"Peça {i}", Decimal(value), created_at=base + timedelta(days=i)
            )
        )
    service_order_service.update_status(user_id, created[0].id, "paid")
    service_order_service.update_status(user_id, created[1].id, "paid")
    service_order_service.update_status(user_id, created[4].id, "delivered")
    service_order_service.update_status(user_id, created[3].id, "paid")
    service_order_service.update_status(user_id, created[1].id, "progress")
    service_order_service.delete_service(user_id, created[4].id)

    services = service_order_service.list_services(user_id, client_id=created[0].client_id)
    expected_total = sum(
        (s.value for s in services if s.status == ServiceStatus.PAID), Decimal("0.00")
    )
    expected_last = max(s.created_at for s in services).date()

    client = client_service.get_client(user_id, created[0].client_id)
    assert client.total_spent == expected_total == Decimal("15.25")
    assert client.last_service_date == expected_last == date(2024, 5, 4)


def test_create_service_defaults(service_order_service, user_id):
    """New services start in progress and are stamped with the creation time."""
    service = service_order_service.create_service(user_id, "Ana", "Barra", Decimal("25"))

    assert service.status == ServiceStatus.PROGRESS
    assert service.value == Decimal("25.00")
    assert service.delivery_date is None
    assert isinstance(service.created_at, datetime)


def test_create_service_with_delivery_and_notes(service_order_service, user_id):
    """Optional fields are stored."""
    service = service_order_service.create_service(
        user_id,
        "Ana",
        "Vestido",
        Decimal("180"),
        delivery_date=date(2024, 6, 1),
        notes="Forro azul",
    )

    fetched = service_order_service.get_service(user_id, service.id)
    assert fetched.delivery_date == date(2024, 6, 1)
    assert fetched.notes == "Forro azul"


def test_create_service_reuses_client_case_insensitively(service_order_service, user_id):
    """Services for 'ana' and 'Ana' land on the same client."""
    first = service_order_service.create_service(user_id, "Ana", "Vestido", Decimal("10"))
    second = service_order_service.create_service(user_id, "ana", "Saia", Decimal("10"))

    assert first.client_id == second.client_id
    assert second.client_name == "ana"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"value": Decimal("-0.01")},
        {"value": None},
        {"value": "abc"},
        {"description": ""},
        {"description": "   "},
        {"client_name": ""},
        {"status": "cancelled"},
    ],
)
def test_create_service_validation(service_order_service, client_service, user_id, kwargs):
    """Invalid input is rejected before anything is written."""
    args = {
        "client_name": "Nova",
        "description": "Vestido",
        "value": Decimal("10"),
        "status": "progress",
    }
    args.update(kwargs)

    with pytest.raises(ValidationError):
        service_order_service.create_service(user_id, **args)

    assert client_service.get_client_by_name(user_id, "Nova") is None


def test_create_service_requires_authentication(service_order_service, temp_db):
    """No account, no service."""
    with pytest.raises(NotAuthenticatedError):
        service_order_service.create_service(None, "Ana", "Vestido", Decimal("10"))
    with pytest.raises(NotAuthenticatedError):
        service_order_service.create_service("", "Ana", "Vestido", Decimal("10"))


def test_constraint_violation_rolls_back_client_creation(temp_db, user_id):
    """A rejected service insert also discards the client created for it."""
    with pytest.raises(ConstraintError):
        temp_db.create_service(user_id, "Nova", "Vestido", Decimal("-5.00"))

    assert temp_db.get_client_by_name(user_id, "Nova") is None


def test_update_status_rejects_unknown_status(service_order_service, ana_services, user_id):
    """Only progress, delivered and paid exist."""
    _, progress = ana_services
    with pytest.raises(ValidationError):
        service_order_service.update_status(user_id, progress.id, "archived")


def test_status_transitions_are_free(service_order_service, ana_services, user_id):
    """Any status can follow any other."""
    paid, _ = ana_services
    for status in ["progress", "paid", "delivered", "progress", "delivered", "paid"]:
        assert service_order_service.update_status(user_id, paid.id, status).status.value == status


def test_update_service_clear_delivery(service_order_service, user_id):
    """Delivery date can be cleared."""
    service = service_order_service.create_service(
        user_id, "Ana", "Vestido", Decimal("10"), delivery_date=date(2024, 6, 1)
    )

    updated = service_order_service.update_service(user_id, service.id, clear_delivery_date=True)
    assert updated.delivery_date is None

    with pytest.raises(ValidationError):
        service_order_service.update_service(
            user_id, service.id, delivery_date=date(2024, 7, 1), clear_delivery_date=True
        )


def test_other_accounts_services_are_invisible(
    service_order_service, ana_services, user_id, other_user_id
):
    """Services of another account are not found."""
    paid, _ = ana_services

    assert service_order_service.get_service(other_user_id, paid.id) is None
    assert service_order_service.list_services(other_user_id) == []
    with pytest.raises(NotFoundError):
        service_order_service.update_status(other_user_id, paid.id, "delivered")
    with pytest.raises(NotFoundError):
        service_order_service.delete_service(other_user_id, paid.id)


def test_list_services_filters(service_order_service, ana_services, user_id):
    """Services can be filtered by status and creation date."""
    paid, progress = ana_services
    service_order_service.create_service(
        user_id, "Bia", "Saia", Decimal("60"), created_at=datetime(2024, 2, 20, 8, 0)
    )

    assert [s.id for s in service_order_service.list_services(user_id, status="paid")] == [paid.id]
    in_february = service_order_service.list_services(
        user_id, start_date=date(2024, 2, 1), end_date=date(2024, 2, 5)
    )
    assert [s.id for s in in_february] == [progress.id]
    newest_first = [s.created_at for s in service_order_service.list_services(user_id)]
    assert newest_first == sorted(newest_first, reverse=True)


def test_require_service_missing(service_order_service, user_id):
    """Unknown IDs raise NotFoundError."""
    with pytest.raises(NotFoundError):
        service_order_service.require_service(user_id, 999)


def test_total_spent_equals_sum_of_stored_values(client_service, service_order_service, user_id):
    """Values are kept in whole cents, so the paid total matches the services."""
    first = service_order_service.create_service(
        user_id, "Ana", "Bainha", Decimal("10.5"), status="paid"
    )
    second = service_order_service.create_service(
        user_id, "Ana", "Botões", Decimal("0.01"), status="paid"
    )

    client = client_service.get_client(user_id, first.client_id)
    assert first.value == Decimal("10.50")
    assert client.total_spent == first.value + second.value == Decimal("10.51")


@pytest.mark.parametrize("value", [Decimal("0.005"), Decimal("12.345"), 0.001])
def test_fractions_of_a_cent_rejected(service_order_service, client_service, user_id, value):
    """Sub-cent amounts are a validation error, on create and on update."""
    with pytest.raises(ValidationError):
        service_order_service.create_service(user_id, "Ana", "Bainha", value, status="paid")
    assert client_service.get_client_by_name(user_id, "Ana") is None

    service = service_order_service.create_service(user_id, "Ana", "Bainha", Decimal("1"))
    with pytest.raises(ValidationError):
        service_order_service.update_service(user_id, service.id, value=value)


def test_value_upper_bound(service_order_service, user_id):
    """Values must fit the value column."""
    largest = service_order_service.create_service(
        user_id, "Ana", "Enxoval", Decimal("99999999.99")
    )
    assert largest.value == Decimal("99999999.99")

    for value in [Decimal("100000000.00"), Decimal("1E+40")]:
        with pytest.raises(ValidationError):
            service_order_service.create_service(user_id, "Ana", "Enxoval", value)
