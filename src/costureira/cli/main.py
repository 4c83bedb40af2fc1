"""Main CLI entry point."""

import logging

import click
from costureira.database.factories import create_database
from costureira.domain.errors import DomainError
from costureira.domain.profile import ProfileService
from costureira.cli.error_handling import handle_domain_error

# Import and register all commands at module level
from costureira.cli.commands import (
    profile,
    client,
    service,
    pieces,
    dashboard,
    stats,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides COSTUREIRA_DB_PATH environment variable)",
    envvar="COSTUREIRA_DB_PATH",
)
@click.option(
    "--db-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="COSTUREIRA_DATABASE_URL",
)
@click.option(
    "--user",
    "user_id",
    help="Authenticated user ID (or set COSTUREIRA_USER)",
    envvar="COSTUREIRA_USER",
)
@click.option(
    "--name",
    "full_name",
    help="Full name stored on the profile when the user is first seen",
    envvar="COSTUREIRA_USER_NAME",
)
@click.option("--verbose", "-v", is_flag=True, help="Log what the application is doing")
@click.pass_context
def cli(ctx, db_path: str | None, db_url: str | None, user_id: str | None, full_name: str | None, verbose: bool):
    """Costureira Pro - business management for seamstresses.

    Track clients, service orders, payments and piece counts.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=db_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["user_id"] = user_id
        ctx.call_on_close(db.disconnect)

        # First authentication creates the profile
        if user_id:
            try:
                ProfileService(db).ensure_profile(user_id, full_name=full_name)
            except DomainError as e:
                handle_domain_error(ctx, e)


# Register all commands
profile.register_commands(cli)
client.register_commands(cli)
service.register_commands(cli)
pieces.register_commands(cli)
dashboard.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
