"""Default cost templates per vendor category."""

from typing import Optional, Sequence

from vendorcosts.domain.categories import classify_category, get_template
from vendorcosts.domain.entities import CostEntry


def build_default_costs(category: Optional[str]) -> list[CostEntry]:
    """Build the initial cost entries for a vendor category.

    Args:
        category: Vendor category label (free text, case-insensitive)

    Returns:
        Ordered list of unset entries; empty for categories that only collect
        free-text pricing guidance
    """
    template = get_template(classify_category(category))
    return [
        CostEntry(
            cost_kind=spec.cost_kind,
            unit=spec.unit,
            period=spec.period,
            quantity_enabled=spec.quantity_enabled,
        )
        for spec in template.entries
    ]


def pricing_guidance(category: Optional[str]) -> Optional[str]:
    """Return the free-text prompt for categories without numeric fields."""
    return get_template(classify_category(category)).guidance


def has_entered_values(entries: Sequence[CostEntry]) -> bool:
    """Check whether any entry carries a user-entered amount or quantity."""
    return any(e.amount is not None or e.quantity is not None for e in entries)


def rebuild_for_category(entries: Sequence[CostEntry], category: Optional[str]) -> list[CostEntry]:
    """Return the entry set to hold after a category change.

    Entries are only replaced by the new category's template while nothing has
    been entered; otherwise the current entries are kept as they are.
    """
    if has_entered_values(entries):
        return list(entries)
    return build_default_costs(category)
