"""Labels and price formatting for cost entries."""

from decimal import Decimal
from typing import Optional

from vendorcosts.domain.entities import CostEntry, CostKind


ENTRY_LABELS = {
    CostKind.MONTHLY_PLAN: "Monthly cost",
    CostKind.YEARLY_PLAN: "Yearly plan",
    CostKind.SERVICE_CALL: "Cost per service call",
    CostKind.HOURLY: "Hourly rate",
    CostKind.ONE_TIME: "One-time cost",
    CostKind.INSTALLATION: "Installation cost",
}

UNIT_SUFFIXES = {
    "month": "/mo",
    "visit": "/visit",
    "hour": "/hour",
    "job": "",
}


def entry_label(entry: CostEntry) -> str:
    """Return the input label for an entry."""
    return ENTRY_LABELS[entry.cost_kind]


def quantity_label(entry: CostEntry) -> Optional[str]:
    """Return the quantity input label, or None if the entry has no quantity."""
    if not entry.quantity_enabled:
        return None
    if entry.cost_kind == CostKind.MONTHLY_PLAN:
        return "Visits per month"
    return "Visits per year"


def format_unit(unit: Optional[str]) -> str:
    """Format a unit as a price suffix (e.g. 'month' -> '/mo')."""
    if not unit:
        return ""
    return UNIT_SUFFIXES.get(unit, f"/{unit}")


def format_price(amount: Optional[Decimal], unit: Optional[str] = None) -> Optional[str]:
    """Format an amount with its unit suffix.

    Whole amounts are shown without cents. Returns None for missing or zero
    amounts.
    """
    if not amount:
        return None
    amount = Decimal(amount)
    if amount == amount.to_integral_value():
        text = f"${amount:,.0f}"
    else:
        text = f"${amount:,.2f}"
    return f"{text}{format_unit(unit)}"
