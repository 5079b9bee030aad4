"""Editing state for one cost form session."""

from typing import Optional

from vendorcosts.domain.categories import classify_category
from vendorcosts.domain.entities import CostEntry
from vendorcosts.domain.mutator import clear_entry, update_entry
from vendorcosts.domain.normalizer import is_valid_amount
from vendorcosts.domain.templates import (
    build_default_costs,
    pricing_guidance,
    rebuild_for_category,
)


class CostForm:
    """Cost entries being edited for one vendor.

    The form lives as long as the dialog that shows it. Notes and the
    anonymity choice belong to the whole submission, not to any one entry.
    """

    def __init__(
        self,
        vendor_id: int,
        category: Optional[str],
        entries: Optional[list[CostEntry]] = None,
        notes: Optional[str] = None,
        anonymous: bool = True,
        has_existing_costs: bool = False,
    ):
        """Initialize a cost form.

        Args:
            vendor_id: Vendor the costs are for
            category: Vendor category label
            entries: Prefilled entries; defaults to the category template
            notes: Submission notes
            anonymous: Hide the author's name with these costs
            has_existing_costs: Whether the identity already has costs on file
        """
        self.vendor_id = vendor_id
        self.category = category
        self.entries = list(entries) if entries is not None else build_default_costs(category)
        self.notes = notes
        self.anonymous = anonymous
        self.has_existing_costs = has_existing_costs
        self.in_flight = False
        self.closed = False

    @property
    def category_key(self) -> str:
        return classify_category(self.category)

    @property
    def title(self) -> str:
        return "Edit Costs" if self.has_existing_costs else "Add Costs"

    @property
    def guidance(self) -> Optional[str]:
        """Free-text prompt shown instead of numeric fields, if any."""
        if self.entries:
            return None
        return pricing_guidance(self.category)

    @property
    def requires_guidance(self) -> bool:
        """Whether the form collects free text only, with no numeric fields."""
        return not self.entries and self.guidance is not None

    def change_category(self, category: Optional[str]) -> None:
        """Switch category, replacing entries only if nothing was entered."""
        self.category = category
        self.entries = rebuild_for_category(self.entries, category)

    def edit(self, index: int, **patch) -> None:
        """Edit fields of one entry."""
        self.entries = update_entry(self.entries, index, **patch)

    def clear(self, index: int) -> None:
        self.entries = clear_entry(self.entries, index)

    def set_notes(self, notes: Optional[str]) -> None:
        self.notes = notes

    def set_anonymous(self, anonymous: bool) -> None:
        self.anonymous = anonymous

    def valid_entries(self) -> list[CostEntry]:
        """Entries that would be persisted as they stand."""
        return [entry for entry in self.entries if is_valid_amount(entry.amount)]

    def can_submit(self) -> bool:
        """Whether the save action should be enabled."""
        return not self.closed and not self.in_flight and bool(self.valid_entries())

    def close(self) -> None:
        """Discard the form; pending submissions are abandoned."""
        self.closed = True
