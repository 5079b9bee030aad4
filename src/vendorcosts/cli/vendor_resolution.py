"""CLI helper that resolves a vendor argument or exits with an error."""

from __future__ import annotations

import click
from vendorcosts.domain.vendor import VendorService
from vendorcosts.utils.vendor_resolver import resolve_vendor


def resolve_vendor_or_exit(
    ctx: click.Context, vendor_service: VendorService, vendor: str | int
) -> int:
    """Resolve vendor name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_vendor(vendor_service, vendor)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
