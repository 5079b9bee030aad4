"""Vendor management commands."""

import click
from vendorcosts.cli.error_handling import handle_domain_error
from vendorcosts.domain.categories import ServiceCategory, classify_category
from vendorcosts.domain.display import entry_label, format_unit, quantity_label
from vendorcosts.domain.errors import DomainError
from vendorcosts.domain.templates import build_default_costs, pricing_guidance
from vendorcosts.domain.vendor import VendorService


@click.group()
def vendor_group():
    """Manage vendors."""
    pass


@vendor_group.command("create")
@click.argument("name", metavar="VENDOR_NAME")
@click.option("--category", required=True, help="Vendor category (see 'vendor categories')")
@click.pass_context
def create_vendor(ctx, name: str, category: str):
    """Create a new vendor.

    Examples:
        vendorcosts vendor create "Blue Wave Pools" --category "Pool Service"
        vendorcosts vendor create "CoolAir" --category HVAC
    """
    db = ctx.obj["db"]
    service = VendorService(db)

    try:
        vendor_id = service.create_vendor(name=name, category=category)
    except DomainError as e:
        handle_domain_error(ctx, e)
    vendor = service.get_vendor(vendor_id)
    click.echo(f"Created vendor '{vendor.name}' in {vendor.category} (ID: {vendor_id})")


@vendor_group.command("list")
@click.option("--category", help="Only show vendors in this category")
@click.pass_context
def list_vendors(ctx, category: str | None):
    """List vendors."""
    db = ctx.obj["db"]
    service = VendorService(db)

    try:
        vendors = service.list_vendors(category=category)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not vendors:
        click.echo("No vendors found.")
        return

    click.echo("\nVendors:")
    click.echo("-" * 60)
    for v in vendors:
        click.echo(f"ID: {v.id:3d} | {v.name:25s} | {v.category}")


@vendor_group.command("categories")
def list_categories():
    """List accepted vendor categories."""
    for category in ServiceCategory:
        click.echo(category.value)


@vendor_group.command("template")
@click.argument("category")
def show_template(category: str):
    """Show the cost fields collected for a category.

    CATEGORY may be any label; it is matched the same way vendor categories
    are when a cost form opens.

    Examples:
        vendorcosts vendor template "Pool & Spa"
    """
    click.echo(f"Template: {classify_category(category)}")
    entries = build_default_costs(category)
    if not entries:
        click.echo(pricing_guidance(category))
        return

    for entry in entries:
        suffix = format_unit(entry.unit)
        click.echo(f"  {entry_label(entry)} (USD{suffix})")
        label = quantity_label(entry)
        if label:
            click.echo(f"    {label} (optional)")


def register_commands(cli):
    """Register vendor commands with main CLI."""
    cli.add_command(vendor_group, name="vendor")
