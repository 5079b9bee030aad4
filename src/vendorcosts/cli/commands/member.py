"""Member management commands."""

import click
from vendorcosts.cli.error_handling import handle_domain_error
from vendorcosts.domain.errors import DomainError
from vendorcosts.domain.member import MemberService


@click.group()
def member_group():
    """Manage community members."""
    pass


@member_group.command("create")
@click.argument("name")
@click.argument("email")
@click.option("--address", help="Household address used to attribute costs")
@click.option("--admin", "is_admin", is_flag=True, help="Grant moderation rights")
@click.pass_context
def create_member(ctx, name: str, email: str, address: str | None, is_admin: bool):
    """Create a new member.

    Examples:
        vendorcosts member create "Dana" dana@example.com --address "12 Palm Ct"
    """
    db = ctx.obj["db"]
    service = MemberService(db)

    try:
        member_id = service.create_member(name=name, email=email, address=address, is_admin=is_admin)
    except DomainError as e:
        handle_domain_error(ctx, e)
    role = " as admin" if is_admin else ""
    click.echo(f"Created member '{name}'{role} (ID: {member_id})")
    if not address:
        click.echo("No address set; add one before submitting costs.")


@member_group.command("set-address")
@click.argument("member_id", type=int)
@click.argument("address", required=False)
@click.pass_context
def set_address(ctx, member_id: int, address: str | None):
    """Set a member's household address (omit ADDRESS to clear it)."""
    db = ctx.obj["db"]
    service = MemberService(db)

    try:
        service.update_address(member_id, address)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if address:
        click.echo(f"Updated address for member {member_id}")
    else:
        click.echo(f"Cleared address for member {member_id}")


def register_commands(cli):
    """Register member commands with main CLI."""
    cli.add_command(member_group, name="member")
