"""Client management commands."""

import click
from costureira.cli.client_resolution import resolve_client_or_exit
from costureira.cli.error_handling import format_money, handle_domain_error
from costureira.domain.client import ClientService, client_tier
from costureira.domain.entities import Client


def print_clients(clients: list[Client]) -> None:
    """Print a client table."""
    click.echo("-" * 72)
    for c in clients:
        star = "*" if c.is_favorite else " "
        last = c.last_service_date.isoformat() if c.last_service_date else "never"
        click.echo(
            f"{star} ID: {c.id:3d} | {c.name:20s} | {format_money(c.total_spent):>12s} "
            f"| {client_tier(c):7s} | Last: {last}"
        )


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("list")
@click.option("--search", help="Only clients whose name contains this text")
@click.pass_context
def list_clients(ctx, search: str | None):
    """List clients, most recently served first."""
    service = ClientService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]

    try:
        if search:
            clients = service.search_clients(user_id, search)
        else:
            clients = service.list_clients(user_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    print_clients(clients)


@client_group.command("search")
@click.argument("query")
@click.pass_context
def search_clients(ctx, query: str):
    """Find clients whose name contains QUERY (case-insensitive)."""
    ctx.invoke(list_clients, search=query)


@client_group.command("top")
@click.option("--limit", type=int, default=4, show_default=True, help="Number of clients")
@click.pass_context
def top_clients(ctx, limit: int):
    """Show frequent clients: favorites first, then by total spent."""
    service = ClientService(ctx.obj["db"])

    try:
        clients = service.frequent_clients(ctx.obj["user_id"], limit=limit)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nFrequent clients:")
    print_clients(clients)


@client_group.command("show")
@click.argument("client", metavar="CLIENT")
@click.pass_context
def show_client(ctx, client: str):
    """Show client details. CLIENT can be a name or ID."""
    service = ClientService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]
    client_id = resolve_client_or_exit(ctx, service, client)
    c = service.require_client(user_id, client_id)

    click.echo(f"Client {c.id}: {c.name}{' (favorite)' if c.is_favorite else ''}")
    click.echo(f"  Phone: {c.phone or '-'}")
    click.echo(f"  Email: {c.email or '-'}")
    click.echo(f"  Total spent: {format_money(c.total_spent)} ({client_tier(c)})")
    last = c.last_service_date.isoformat() if c.last_service_date else "never"
    click.echo(f"  Last service: {last}")
    if c.notes:
        click.echo(f"  Notes: {c.notes}")


@client_group.command("favorite")
@click.argument("client", metavar="CLIENT")
@click.option("--off", is_flag=True, help="Remove the favorite mark instead")
@click.pass_context
def favorite_client(ctx, client: str, off: bool):
    """Mark a client as favorite. CLIENT can be a name or ID."""
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        updated = service.set_favorite(ctx.obj["user_id"], client_id, not off)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if updated.is_favorite:
        click.echo(f"'{updated.name}' marked as favorite")
    else:
        click.echo(f"'{updated.name}' is no longer a favorite")


@client_group.command("update")
@click.argument("client", metavar="CLIENT")
@click.option("--phone", help="Phone number")
@click.option("--email", help="Email address")
@click.option("--notes", help="Free-form notes")
@click.pass_context
def update_client(ctx, client: str, phone: str | None, email: str | None, notes: str | None):
    """Update client contact details. CLIENT can be a name or ID."""
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        updated = service.update_contact(
            ctx.obj["user_id"], client_id, phone=phone, email=email, notes=notes
        )
        click.echo(f"Updated client '{updated.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@client_group.command("rename")
@click.argument("client", metavar="CLIENT")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_client(ctx, client: str, new_name: str):
    """Rename a client. CLIENT can be a name or ID."""
    service = ClientService(ctx.obj["db"])
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        service.rename_client(ctx.obj["user_id"], client_id, new_name)
        click.echo(f"Renamed client to '{new_name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@client_group.command("delete")
@click.argument("client", metavar="CLIENT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_client(ctx, client: str, yes: bool):
    """Delete a client with all of its services and piece history."""
    service = ClientService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]
    client_id = resolve_client_or_exit(ctx, service, client)
    client_obj = service.require_client(user_id, client_id)

    if not yes and not click.confirm(
        f"Delete client '{client_obj.name}' and all of their services?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_client(user_id, client_id)
        click.echo(f"Deleted client '{client_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
