"""Field-level edits on cost entries."""

from dataclasses import replace
from typing import Sequence

from vendorcosts.domain.entities import CostEntry
from vendorcosts.domain.errors import ValidationError
from vendorcosts.domain.normalizer import to_decimal


EDITABLE_FIELDS = frozenset({"amount", "unit", "period", "quantity"})
NUMERIC_FIELDS = ("amount", "quantity")


def update_entry(entries: Sequence[CostEntry], index: int, **patch) -> list[CostEntry]:
    """Apply a partial patch to one entry and return a new list.

    ``amount`` and ``quantity`` are coerced to Decimal; ``None`` clears them.

    Args:
        entries: Current entries
        index: Position of the entry to edit
        **patch: Field values to set (amount, unit, period, quantity)

    Returns:
        New list with the same length and cost kinds as ``entries``

    Raises:
        ValidationError: If the index is out of range, a field is not editable,
            or a numeric field is not a number of zero or more
    """
    if not 0 <= index < len(entries):
        raise ValidationError(f"No cost entry at position {index}")

    unknown = set(patch) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")

    for field in NUMERIC_FIELDS:
        if patch.get(field) is None:
            continue
        number = to_decimal(patch[field])
        if number is None or number < 0:
            raise ValidationError(f"{field.capitalize()} must be a number of zero or more")
        patch[field] = number

    updated = list(entries)
    updated[index] = replace(updated[index], **patch)
    return updated


def clear_entry(entries: Sequence[CostEntry], index: int) -> list[CostEntry]:
    """Reset the amount and quantity of one entry."""
    return update_entry(entries, index, amount=None, quantity=None)
