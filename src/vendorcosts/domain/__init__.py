"""Domain layer for vendorcosts application.

Services live in their own modules (``vendorcosts.domain.cost`` and friends)
and are imported from there; this package only exposes the cost model engine.
"""

from vendorcosts.domain.categories import ServiceCategory, classify_category
from vendorcosts.domain.entities import CostEntry, CostKind, CostRecord, Identity
from vendorcosts.domain.mutator import update_entry
from vendorcosts.domain.normalizer import build_cost_records, normalize_entries
from vendorcosts.domain.prefill import merge_persisted_costs
from vendorcosts.domain.templates import build_default_costs, rebuild_for_category

__all__ = [
    "ServiceCategory",
    "classify_category",
    "CostEntry",
    "CostKind",
    "CostRecord",
    "Identity",
    "update_entry",
    "build_cost_records",
    "normalize_entries",
    "merge_persisted_costs",
    "build_default_costs",
    "rebuild_for_category",
]
