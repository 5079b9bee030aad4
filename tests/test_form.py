"""Tests for entry edits and the cost form."""

from decimal import Decimal

import pytest

from vendorcosts.domain.entities import CostEntry, CostKind
from vendorcosts.domain.errors import ValidationError
from vendorcosts.domain.form import CostForm
from vendorcosts.domain.mutator import clear_entry, update_entry
from vendorcosts.domain.templates import build_default_costs, rebuild_for_category


class TestUpdateEntry:
    """Tests for update_entry."""

    def test_returns_new_list(self):
        """Test edits do not modify the input list."""
        entries = build_default_costs("HVAC")
        updated = update_entry(entries, 1, amount=Decimal("400"))
        assert entries[1].amount is None
        assert updated[1].amount == Decimal("400")
        assert updated[0] is entries[0]

    def test_shape_preserved(self):
        """Test length and kinds never change on a field edit."""
        entries = build_default_costs("Generator")
        updated = update_entry(entries, 2, amount=Decimal("300"), quantity=Decimal("1"), unit="plan")
        assert len(updated) == len(entries)
        assert [e.cost_kind for e in updated] == [e.cost_kind for e in entries]

    def test_cost_kind_not_editable(self):
        """Test the kind of an entry cannot be patched."""
        with pytest.raises(ValidationError):
            update_entry(build_default_costs("HVAC"), 0, cost_kind=CostKind.HOURLY)

    @pytest.mark.parametrize("index", [-1, 2])
    def test_index_out_of_range(self, index):
        with pytest.raises(ValidationError):
            update_entry(build_default_costs("HVAC"), index, amount=Decimal("1"))

    def test_clear_entry(self):
        entries = [CostEntry(CostKind.MONTHLY_PLAN, amount=Decimal("80"), quantity=Decimal("4"))]
        cleared = clear_entry(entries, 0)
        assert cleared[0].amount is None
        assert cleared[0].quantity is None

    def test_numeric_fields_coerced(self):
        """Test amounts and quantities typed as text or ints become Decimals."""
        updated = update_entry(build_default_costs("Landscaping"), 0, amount="150", quantity=2)
        assert updated[0].amount == Decimal("150")
        assert isinstance(updated[0].amount, Decimal)
        assert updated[0].quantity == Decimal("2")

    def test_zero_amount_accepted(self):
        """Test zero is a valid edit; it is only dropped at submit."""
        updated = update_entry(build_default_costs("Pool Service"), 0, amount=0)
        assert updated[0].amount == Decimal("0")

    @pytest.mark.parametrize(
        "field, value",
        [
            ("amount", "abc"),
            ("amount", -5),
            ("amount", float("nan")),
            ("amount", True),
            ("quantity", Decimal("-1")),
            ("quantity", "two"),
        ],
    )
    def test_invalid_numeric_values(self, field, value):
        with pytest.raises(ValidationError):
            update_entry(build_default_costs("Pool Service"), 0, **{field: value})

    def test_rejected_edit_keeps_category_reset(self):
        """Test a refused edit leaves the entries unset, so a category change still rebuilds."""
        entries = build_default_costs("Pool Service")
        with pytest.raises(ValidationError):
            entries = update_entry(entries, 0, amount="abc")
        rebuilt = rebuild_for_category(entries, "HVAC")
        assert [e.cost_kind for e in rebuilt] == [CostKind.SERVICE_CALL, CostKind.YEARLY_PLAN]


class TestCostForm:
    """Tests for CostForm."""

    def test_defaults_from_category(self):
        form = CostForm(vendor_id=1, category="HVAC")
        assert [e.cost_kind for e in form.entries] == [CostKind.SERVICE_CALL, CostKind.YEARLY_PLAN]
        assert form.title == "Add Costs"
        assert form.category_key == "hvac"

    def test_change_category_without_values(self):
        """Test switching category rebuilds an untouched form."""
        form = CostForm(vendor_id=1, category="Pool Service")
        form.change_category("Handyman")
        assert [e.cost_kind for e in form.entries] == [CostKind.HOURLY]

    def test_change_category_keeps_values(self):
        """Test entered amounts survive a category change."""
        form = CostForm(vendor_id=1, category="Landscaping")
        form.edit(0, amount=Decimal("160"))
        form.change_category("HVAC")
        assert len(form.entries) == 1
        assert form.entries[0].amount == Decimal("160")
        assert form.category == "HVAC"

    def test_notes_belong_to_form(self):
        """Test notes are stored once for the whole submission."""
        form = CostForm(vendor_id=1, category="HVAC")
        form.set_notes("Includes filter change")
        assert form.notes == "Includes filter change"
        assert not hasattr(form.entries[0], "notes")

    def test_guidance_for_roofing(self):
        form = CostForm(vendor_id=1, category="Roofing")
        assert form.entries == []
        assert form.guidance is not None
        assert form.requires_guidance
        assert not form.can_submit()

    def test_can_submit(self):
        """Test the save action needs a positive amount and an idle, open form."""
        form = CostForm(vendor_id=1, category="Pool Service")
        assert not form.can_submit()
        form.edit(0, amount=Decimal("0"))
        assert not form.can_submit()
        form.edit(0, amount=Decimal("120"))
        assert form.can_submit()
        assert form.valid_entries() == form.entries
        form.in_flight = True
        assert not form.can_submit()
        form.in_flight = False
        form.close()
        assert not form.can_submit()
