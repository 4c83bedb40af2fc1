"""CLI error handling helpers."""

import click

from costureira.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def format_money(value) -> str:
    """Render a monetary amount the way the app shows it (R$ 1,234.50)."""
    return f"R$ {value:,.2f}"
