"""Service order commands."""

import click
from costureira.cli.client_resolution import resolve_client_or_exit
from costureira.cli.error_handling import format_money, handle_domain_error
from costureira.domain.client import ClientService
from costureira.domain.entities import ServiceStatus
from costureira.domain.service_order import ServiceOrderService
from costureira.utils.amount_parser import parse_amount
from costureira.utils.date_parser import parse_date

STATUS_CHOICE = click.Choice(ServiceStatus.values(), case_sensitive=False)


@click.group()
def service_group():
    """Manage service orders."""
    pass


@service_group.command("add")
@click.option("--client", "client_name", required=True, help="Client name (created if new)")
@click.option("--description", required=True, help="What is being made or repaired")
@click.option("--value", required=True, help="Price (e.g., 120.00 or 'R$ 120,00')")
@click.option("--delivery", help="Delivery date (YYYY-MM-DD, DD/MM/YYYY, 'tomorrow', 'in 3 days')")
@click.option("--status", type=STATUS_CHOICE, default=ServiceStatus.PROGRESS.value, show_default=True)
@click.option("--notes", help="Notes")
@click.pass_context
def add_service(
    ctx,
    client_name: str,
    description: str,
    value: str,
    delivery: str | None,
    status: str,
    notes: str | None,
):
    """Add a service order.

    Examples:
        costureira service add --client "Ana" --description "Barra de calça" --value 25
        costureira service add --client "Ana" --description "Vestido" --value "R$ 180,00" --status paid
    """
    service = ServiceOrderService(ctx.obj["db"])

    try:
        amount = parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid value: {e}", err=True)
        ctx.exit(1)

    delivery_date = None
    if delivery:
        try:
            delivery_date = parse_date(delivery)
        except ValueError as e:
            click.echo(f"Error: Invalid delivery date: {e}", err=True)
            ctx.exit(1)

    try:
        created = service.create_service(
            ctx.obj["user_id"],
            client_name=client_name,
            description=description,
            value=amount,
            delivery_date=delivery_date,
            status=status,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created service {created.id}")
    click.echo(f"  Client: {created.client_name}")
    click.echo(f"  Description: {created.description}")
    click.echo(f"  Value: {format_money(created.value)}")
    click.echo(f"  Status: {created.status.value}")
    if created.delivery_date:
        click.echo(f"  Delivery: {created.delivery_date}")


@service_group.command("list")
@click.option("--status", type=STATUS_CHOICE, help="Only services with this status")
@click.option("--client", help="Client name or ID")
@click.pass_context
def list_services(ctx, status: str | None, client: str | None):
    """List service orders, newest first."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    service = ServiceOrderService(db)

    client_id = None
    if client:
        client_id = resolve_client_or_exit(ctx, ClientService(db), client)

    try:
        services = service.list_services(user_id, status=status, client_id=client_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not services:
        click.echo("No services found.")
        return

    click.echo("\nServices:")
    click.echo("-" * 88)
    for s in services:
        delivery = s.delivery_date.isoformat() if s.delivery_date else "-"
        click.echo(
            f"ID: {s.id:3d} | {s.created_at:%Y-%m-%d} | {s.client_name:16s} | "
            f"{s.description[:24]:24s} | {format_money(s.value):>11s} | {s.status.value:9s} | {delivery}"
        )


@service_group.command("status")
@click.argument("service_id", type=int)
@click.argument("status", type=STATUS_CHOICE)
@click.pass_context
def set_status(ctx, service_id: int, status: str):
    """Change the status of a service (progress, delivered, paid)."""
    service = ServiceOrderService(ctx.obj["db"])

    try:
        updated = service.update_status(ctx.obj["user_id"], service_id, status)
        click.echo(f"Service {updated.id} is now {updated.status.value}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@service_group.command("update")
@click.argument("service_id", type=int)
@click.option("--client", "client_name", help="Move to this client (created if new)")
@click.option("--description", help="New description")
@click.option("--value", help="New price")
@click.option("--delivery", help="New delivery date")
@click.option("--clear-delivery", is_flag=True, help="Remove the delivery date")
@click.option("--status", type=STATUS_CHOICE, help="New status")
@click.option("--notes", help="New notes")
@click.pass_context
def update_service(
    ctx,
    service_id: int,
    client_name: str | None,
    description: str | None,
    value: str | None,
    delivery: str | None,
    clear_delivery: bool,
    status: str | None,
    notes: str | None,
):
    """Update a service order."""
    service = ServiceOrderService(ctx.obj["db"])

    amount = None
    if value is not None:
        try:
            amount = parse_amount(value)
        except ValueError as e:
            click.echo(f"Error: Invalid value: {e}", err=True)
            ctx.exit(1)

    delivery_date = None
    if delivery:
        try:
            delivery_date = parse_date(delivery)
        except ValueError as e:
            click.echo(f"Error: Invalid delivery date: {e}", err=True)
            ctx.exit(1)

    try:
        updated = service.update_service(
            ctx.obj["user_id"],
            service_id,
            client_name=client_name,
            description=description,
            value=amount,
            delivery_date=delivery_date,
            status=status,
            notes=notes,
            clear_delivery_date=clear_delivery,
        )
        click.echo(f"Updated service {updated.id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@service_group.command("delete")
@click.argument("service_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_service(ctx, service_id: int, yes: bool):
    """Delete a service order."""
    service = ServiceOrderService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]

    try:
        existing = service.require_service(user_id, service_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete service {service_id} ({existing.description}, {existing.client_name})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_service(user_id, service_id)
        click.echo(f"Deleted service {service_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
