"""Overlay previously submitted costs onto a default template."""

from dataclasses import replace
from typing import Sequence

from vendorcosts.domain.entities import Cost, CostEntry, CostKind


def latest_by_kind(rows: Sequence[Cost]) -> dict[CostKind, Cost]:
    """Keep the most recent row per cost kind.

    Rows are ranked by ``created_at`` and then by ``id``, newest first. The
    returned mapping is ordered by that ranking, so kinds appear in the order
    they are encountered from newest to oldest.
    """
    ranked = sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)
    latest: dict[CostKind, Cost] = {}
    for row in ranked:
        if row.cost_kind not in latest:
            latest[row.cost_kind] = row
    return latest


def _pick(value, fallback):
    return value if value is not None else fallback


def merge_persisted_costs(template: Sequence[CostEntry], rows: Sequence[Cost]) -> list[CostEntry]:
    """Merge persisted cost rows into a default template.

    Args:
        template: Default entries for the vendor's category
        rows: Persisted rows for this vendor and identity, in any order

    Returns:
        Template entries with matching rows overlaid, followed by entries for
        kinds on file that the template does not contain
    """
    latest = latest_by_kind(rows)

    merged = []
    for entry in template:
        row = latest.get(entry.cost_kind)
        if row is None:
            merged.append(entry)
            continue
        merged.append(
            replace(
                entry,
                amount=_pick(row.amount, entry.amount),
                period=_pick(row.period, entry.period),
                unit=_pick(row.unit, entry.unit),
                quantity=_pick(row.quantity, entry.quantity),
            )
        )

    template_kinds = {entry.cost_kind for entry in template}
    for kind, row in latest.items():
        if kind in template_kinds:
            continue
        merged.append(
            CostEntry(
                cost_kind=kind,
                amount=row.amount,
                unit=row.unit,
                period=row.period,
                quantity=row.quantity,
                quantity_enabled=row.quantity is not None,
            )
        )
    return merged
