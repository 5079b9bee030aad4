"""Cost moderation commands."""

import click
from vendorcosts.cli.error_handling import handle_domain_error
from vendorcosts.cli.vendor_resolution import resolve_vendor_or_exit
from vendorcosts.domain.cost import CostService
from vendorcosts.domain.display import format_price
from vendorcosts.domain.entities import Cost
from vendorcosts.domain.errors import DomainError
from vendorcosts.utils.amount_parser import parse_amount
from vendorcosts.utils.date_parser import parse_date


def _admin_option(f):
    return click.option("--admin", "admin_id", type=int, required=True, help="Acting admin member ID")(f)


def _cost_line(cost: Cost) -> str:
    flags = []
    if cost.is_deleted:
        flags.append("deleted")
    if cost.admin_modified:
        flags.append("edited")
    author = f"member {cost.created_by}" if cost.created_by is not None else f"session {cost.session_id}"
    line = (
        f"ID: {cost.id:4d} | vendor {cost.vendor_id:3d} | {cost.cost_kind.value:13s} | "
        f"{format_price(cost.amount, cost.unit) or '-':>12s} | {author}"
    )
    if flags:
        line += f" [{', '.join(flags)}]"
    return line


@click.group()
def admin_group():
    """Moderate submitted costs."""
    pass


@admin_group.command("costs")
@_admin_option
@click.option("--vendor", help="Vendor name or ID")
@click.option("--kind", "cost_kind", help="Cost kind (e.g., service_call)")
@click.option("--search", help="Match vendor name or notes")
@click.option("--since", help="Created on or after (YYYY-MM-DD or 'last month')")
@click.option("--active-only", is_flag=True, help="Hide soft-deleted entries")
@click.pass_context
def list_costs(
    ctx,
    admin_id: int,
    vendor: str | None,
    cost_kind: str | None,
    search: str | None,
    since: str | None,
    active_only: bool,
):
    """List submitted cost entries."""
    db = ctx.obj["db"]
    service = CostService(db)

    vendor_id = None
    if vendor:
        vendor_id = resolve_vendor_or_exit(ctx, service.vendors, vendor)

    since_date = None
    if since:
        try:
            since_date = parse_date(since)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    try:
        costs = service.list_costs(
            admin_id,
            vendor_id=vendor_id,
            cost_kind=cost_kind,
            search=search,
            since=since_date,
            include_deleted=not active_only,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not costs:
        click.echo("No cost entries found.")
        return

    click.echo(f"Total entries: {len(costs)}")
    click.echo("-" * 80)
    for cost in costs:
        click.echo(_cost_line(cost))


@admin_group.command("edit-cost")
@click.argument("cost_id", type=int)
@_admin_option
@click.option("--amount", help="New amount")
@click.option("--kind", "cost_kind", help="New cost kind")
@click.option("--unit", help="New unit (month, visit, hour, ...)")
@click.option("--period", help="New period (monthly, yearly, one_time, ...)")
@click.option("--quantity", help="New quantity")
@click.option("--notes", help="New notes")
@click.pass_context
def edit_cost(
    ctx,
    cost_id: int,
    admin_id: int,
    amount: str | None,
    cost_kind: str | None,
    unit: str | None,
    period: str | None,
    quantity: str | None,
    notes: str | None,
):
    """Override fields of a cost entry."""
    db = ctx.obj["db"]
    service = CostService(db)

    try:
        cost = service.admin_update_cost(
            admin_id,
            cost_id,
            amount=parse_amount(amount) if amount is not None else None,
            cost_kind=cost_kind,
            unit=unit,
            period=period,
            quantity=parse_amount(quantity) if quantity is not None else None,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo("Cost entry updated:")
    click.echo(_cost_line(cost))


@admin_group.command("delete-cost")
@click.argument("cost_id", type=int)
@_admin_option
@click.pass_context
def delete_cost(ctx, cost_id: int, admin_id: int):
    """Soft delete a cost entry (excluded from community figures)."""
    db = ctx.obj["db"]
    service = CostService(db)

    try:
        service.soft_delete_cost(admin_id, cost_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Cost entry {cost_id} deleted. Use 'admin restore-cost' to undo.")


@admin_group.command("restore-cost")
@click.argument("cost_id", type=int)
@_admin_option
@click.pass_context
def restore_cost(ctx, cost_id: int, admin_id: int):
    """Restore a soft-deleted cost entry."""
    db = ctx.obj["db"]
    service = CostService(db)

    try:
        service.restore_cost(admin_id, cost_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Cost entry {cost_id} restored.")


def register_commands(cli):
    """Register admin commands with main CLI."""
    cli.add_command(admin_group, name="admin")
