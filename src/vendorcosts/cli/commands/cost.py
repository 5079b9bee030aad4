"""Cost submission commands."""

import click
from vendorcosts.cli.error_handling import handle_domain_error, handle_submission_failure
from vendorcosts.cli.vendor_resolution import resolve_vendor_or_exit
from vendorcosts.domain.cost import CostService, parse_cost_kind
from vendorcosts.domain.display import entry_label, format_price, quantity_label
from vendorcosts.domain.entities import Identity
from vendorcosts.domain.errors import DomainError, ValidationError
from vendorcosts.domain.form import CostForm
from vendorcosts.domain.vendor import VendorService
from vendorcosts.utils.amount_parser import parse_amount, parse_assignment


def _identity_options(f):
    f = click.option("--session", "session_id", help="Preview session ID (unauthenticated flow)")(f)
    f = click.option("--member", "member_id", type=int, help="Submitting member ID")(f)
    return f


def _entry_index(form: CostForm, kind_name: str) -> int:
    """Find the form position of a cost kind."""
    kind = parse_cost_kind(kind_name)
    for index, entry in enumerate(form.entries):
        if entry.cost_kind == kind:
            return index
    collected = ", ".join(e.cost_kind.value for e in form.entries) or "none"
    raise ValidationError(
        f"'{kind.value}' is not collected for {form.category} (fields: {collected})"
    )


def _print_form(form: CostForm) -> None:
    if form.requires_guidance:
        click.echo(form.guidance)
        return
    for entry in form.entries:
        price = format_price(entry.amount, entry.unit) or "-"
        click.echo(f"  {entry_label(entry):25s} {price}")
        label = quantity_label(entry)
        if label and entry.quantity is not None:
            click.echo(f"    {label}: {entry.quantity}")
    if form.notes:
        click.echo(f"  Notes: {form.notes}")


@click.group()
def cost_group():
    """Share what you pay a vendor."""
    pass


@cost_group.command("show")
@click.argument("vendor")
@_identity_options
@click.pass_context
def show_costs(ctx, vendor: str, member_id: int | None, session_id: str | None):
    """Show the cost form for VENDOR as it would open for you."""
    db = ctx.obj["db"]
    service = CostService(db)
    vendor_id = resolve_vendor_or_exit(ctx, service.vendors, vendor)

    identity = Identity(member_id=member_id, session_id=session_id)
    try:
        form = service.open_form(vendor_id, identity)
    except DomainError as e:
        handle_domain_error(ctx, e)

    vendor_obj = service.vendors.get_vendor(vendor_id)
    click.echo(f"{form.title} - {vendor_obj.name}")
    _print_form(form)


@cost_group.command("add")
@click.argument("vendor")
@_identity_options
@click.option("--cost", "costs", multiple=True, help="KIND=AMOUNT, e.g. service_call=150")
@click.option("--quantity", "quantities", multiple=True, help="KIND=N, e.g. yearly_plan=2")
@click.option("--notes", help="Notes shared by all costs in this submission")
@click.option("--show-name/--anonymous", default=None, help="Show your name with these costs")
@click.pass_context
def add_costs(
    ctx,
    vendor: str,
    member_id: int | None,
    session_id: str | None,
    costs: tuple[str, ...],
    quantities: tuple[str, ...],
    notes: str | None,
    show_name: bool | None,
):
    """Add or update what you pay VENDOR.

    VENDOR can be a vendor name or ID. Only the cost kinds collected for the
    vendor's category (plus any you already have on file) are accepted.

    Examples:
        vendorcosts cost add "CoolAir" --member 1 --cost service_call=150 --cost yearly_plan=400 --quantity yearly_plan=2
        vendorcosts cost add 3 --session abc123 --cost monthly_plan=160 --show-name
    """
    db = ctx.obj["db"]
    service = CostService(db)
    vendor_id = resolve_vendor_or_exit(ctx, VendorService(db), vendor)

    identity = Identity(member_id=member_id, session_id=session_id)
    try:
        form = service.open_form(vendor_id, identity)
        if form.requires_guidance:
            raise ValidationError(form.guidance)
        for assignment in costs:
            kind, value = parse_assignment(assignment)
            form.edit(_entry_index(form, kind), amount=parse_amount(value))
        for assignment in quantities:
            kind, value = parse_assignment(assignment)
            form.edit(_entry_index(form, kind), quantity=parse_amount(value))
    except ValueError as e:
        handle_domain_error(ctx, e)

    if notes is not None:
        form.set_notes(notes)
    if show_name is not None:
        form.set_anonymous(not show_name)

    result = service.submit(form, identity)
    if not result.ok:
        handle_submission_failure(ctx, result)

    click.echo(f"Saved {len(result.records)} cost(s):")
    for record in result.records:
        click.echo(f"  {record.cost_kind.value:15s} {format_price(record.amount, record.unit)}")


def register_commands(cli):
    """Register cost commands with main CLI."""
    cli.add_command(cost_group, name="cost")
