"""Statistics maintenance commands."""

import click
from costureira.cli.error_handling import handle_domain_error
from costureira.domain.statistics import StatisticsService


@click.group()
def stats_group():
    """Maintain derived client and piece statistics."""
    pass


@stats_group.command("rebuild")
@click.pass_context
def rebuild_stats(ctx):
    """Recompute client totals and piece counts from the service and piece history."""
    service = StatisticsService(ctx.obj["db"])

    try:
        report = service.rebuild(ctx.obj["user_id"])
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Checked {report.clients_checked} clients and {report.counters_checked} piece counters")
    if report.consistent:
        click.echo("All statistics are consistent.")
    else:
        click.echo(f"Fixed {report.clients_fixed} clients and {report.counters_fixed} piece counters")


def register_commands(cli):
    """Register statistics commands with main CLI."""
    cli.add_command(stats_group, name="stats")
