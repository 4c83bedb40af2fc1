"""Profile commands."""

import click
from costureira.cli.error_handling import handle_domain_error
from costureira.domain.profile import ProfileService, require_account


@click.group()
def profile_group():
    """Show or update your profile."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show the profile of the current user."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]

    try:
        require_account(db, user_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    profile = ProfileService(db).get_profile(user_id)
    click.echo(f"User: {profile.id}")
    click.echo(f"  Name: {profile.full_name or '-'}")
    click.echo(f"  Business: {profile.business_name or '-'}")
    click.echo(f"  Phone: {profile.phone or '-'}")
    click.echo(f"  Member since: {profile.created_at:%Y-%m-%d}")


@profile_group.command("update")
@click.option("--full-name", help="Your name")
@click.option("--business-name", help="Name of the business")
@click.option("--phone", help="Contact phone")
@click.pass_context
def update_profile(ctx, full_name: str | None, business_name: str | None, phone: str | None):
    """Update profile details.

    Examples:
        costureira --user u1 profile update --business-name "Ateliê da Ana"
    """
    db = ctx.obj["db"]
    service = ProfileService(db)

    if full_name is None and business_name is None and phone is None:
        click.echo("Error: Nothing to update. Use --full-name, --business-name or --phone.", err=True)
        ctx.exit(1)

    try:
        service.update_profile(
            ctx.obj["user_id"], full_name=full_name, business_name=business_name, phone=phone
        )
        click.echo("Profile updated")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
