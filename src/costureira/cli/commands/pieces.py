"""Piece counter commands."""

import click
from costureira.cli.error_handling import handle_domain_error
from costureira.domain.piece_counter import PieceCounterService
from costureira.utils.amount_parser import parse_pieces


@click.group()
def pieces_group():
    """Count pieces delivered to clients."""
    pass


@pieces_group.command("add")
@click.argument("client_name", metavar="CLIENT")
@click.argument("count", metavar="COUNT")
@click.option("--remove", is_flag=True, help="Remove COUNT pieces instead of adding")
@click.option("--description", help="What the movement was about")
@click.pass_context
def add_pieces(ctx, client_name: str, count: str, remove: bool, description: str | None):
    """Add (or with --remove, remove) pieces for a client.

    Examples:
        costureira pieces add "Ana" 10
        costureira pieces add "Ana" 3 --remove --description "Returned"
    """
    service = PieceCounterService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]

    try:
        pieces = parse_pieces(count)
    except ValueError as e:
        click.echo(f"Error: Invalid piece count: {e}", err=True)
        ctx.exit(1)

    try:
        if remove:
            entry = service.remove_pieces(user_id, client_name, pieces, description=description)
        else:
            entry = service.add_pieces(user_id, client_name, pieces, description=description)
        counter = service.get_counter(user_id, entry.counter_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{entry.pieces_added:+d} pieces for '{entry.client_name}' ({entry.description})")
    click.echo(f"  Total: {counter.total_pieces} pieces")


@pieces_group.command("list")
@click.pass_context
def list_counters(ctx):
    """List piece totals per client."""
    service = PieceCounterService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]

    try:
        counters = service.list_counters(user_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not counters:
        click.echo("No piece counters found.")
        return

    click.echo("\nPiece counters:")
    click.echo("-" * 50)
    for counter in counters:
        click.echo(f"ID: {counter.id:3d} | {counter.client_name:20s} | {counter.total_pieces:6d} pieces")
    click.echo("-" * 50)
    click.echo(f"Total: {sum(c.total_pieces for c in counters)} pieces")


@pieces_group.command("history")
@click.option("--client", "client_name", help="Only movements of this client")
@click.pass_context
def show_history(ctx, client_name: str | None):
    """Show piece movements, newest first."""
    service = PieceCounterService(ctx.obj["db"])
    user_id = ctx.obj["user_id"]

    try:
        counter_id = None
        if client_name:
            counter = service.get_counter_for_client(user_id, client_name)
            if counter is None:
                click.echo(f"No piece counter for '{client_name}'.")
                return
            counter_id = counter.id
        entries = service.list_history(user_id, counter_id=counter_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No piece movements found.")
        return

    click.echo("\nPiece history:")
    click.echo("-" * 72)
    for entry in entries:
        click.echo(
            f"{entry.created_at:%Y-%m-%d %H:%M} | {entry.client_name:20s} | "
            f"{entry.pieces_added:+5d} | {entry.description or ''}"
        )


def register_commands(cli):
    """Register piece counter commands with main CLI."""
    cli.add_command(pieces_group, name="pieces")
