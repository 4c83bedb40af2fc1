"""Dashboard command."""

import click
from costureira.cli.error_handling import format_money, handle_domain_error
from costureira.domain.dashboard import DashboardService
from costureira.utils.date_parser import parse_date


@click.command("dashboard")
@click.option("--date", "on_date", help="Show the dashboard as of this date (default: today)")
@click.pass_context
def show_dashboard(ctx, on_date: str | None):
    """Show earnings, pending work and the last seven days."""
    service = DashboardService(ctx.obj["db"])

    today = None
    if on_date:
        try:
            today = parse_date(on_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    try:
        summary = service.build_summary(ctx.obj["user_id"], today=today)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Today: {format_money(summary.today_earnings)}")
    click.echo(f"This month: {format_money(summary.monthly_earnings)}")
    click.echo(f"Pending services: {summary.pending_count}")
    click.echo(f"Clients: {summary.client_count}")

    week = summary.week
    sign = "+" if week.is_positive else ""
    click.echo(f"\nLast 7 days ({sign}{week.percentage_change:.0f}% vs yesterday):")
    for day, earned in zip(week.days, week.earnings):
        click.echo(f"  {day:%a %d/%m}: {format_money(earned)}")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
