"""Tests for vendor category classification."""

import pytest

from vendorcosts.domain.categories import (
    DEFAULT_KEY,
    TEMPLATES,
    ServiceCategory,
    classify_category,
    get_template,
    parse_category,
)
from vendorcosts.domain.errors import ValidationError


class TestClassifyCategory:
    """Tests for classify_category."""

    @pytest.mark.parametrize(
        "label, key",
        [
            ("Pool Service", "pool_service"),
            ("pool", "pool_service"),
            ("POOL SERVICE", "pool_service"),
            ("HVAC", "hvac"),
            ("hvac", "hvac"),
            ("Pressure Washing", "power_washing"),
            ("Car Wash & Detail", "car_wash_detail"),
            ("car wash and detail", "car_wash_detail"),
            ("Landscape Lighting", "landscape_lighting"),
            ("General Contractor", "general_contractor"),
            ("Other", DEFAULT_KEY),
        ],
    )
    def test_known_labels(self, label, key):
        """Test exact names and aliases map to their template key."""
        assert classify_category(label) == key

    def test_substring_match(self):
        """Test a label containing a known category as whole words."""
        assert classify_category("Pool & Spa") == "pool_service"
        assert classify_category("Residential Plumbing Services") == "plumbing"

    def test_longest_alias_wins(self):
        """Test the most specific alias decides between overlapping matches."""
        assert classify_category("Mobile Tire Repair & More") == "mobile_tire_repair"
        assert classify_category("Pool Cleaning Co") == "pool_service"

    def test_landscape_lighting_is_not_landscaping(self):
        """Test lighting vendors are not treated as landscapers."""
        assert classify_category("landscape lighting") != "landscaping"

    def test_partial_word_does_not_match(self):
        """Test aliases only match whole words."""
        assert classify_category("Poolside Catering") == DEFAULT_KEY

    @pytest.mark.parametrize("label", [None, "", "   ", "Dog Walking"])
    def test_unknown_falls_back_to_default(self, label):
        """Test every input maps to some template."""
        assert classify_category(label) == DEFAULT_KEY

    def test_every_category_has_a_template(self):
        """Test each accepted category resolves to an existing template."""
        for category in ServiceCategory:
            assert classify_category(category.value) in TEMPLATES
            assert classify_category(category.value) == category.key


class TestParseCategory:
    """Tests for parse_category."""

    def test_parse_display_name(self):
        """Test parsing is case-insensitive on display names."""
        assert parse_category("pool service") is ServiceCategory.POOL_SERVICE
        assert parse_category("Car Wash & Detail") is ServiceCategory.CAR_WASH_DETAIL

    def test_parse_enum_name(self):
        """Test enum member names are accepted."""
        assert parse_category("GENERAL_CONTRACTOR") is ServiceCategory.GENERAL_CONTRACTOR

    def test_parse_unknown_category(self):
        """Test aliases and free text are rejected at creation time."""
        with pytest.raises(ValidationError) as exc_info:
            parse_category("Pool & Spa")
        assert "Accepted categories" in str(exc_info.value)


def test_get_template_unknown_key():
    """Test unknown keys resolve to the default template."""
    assert get_template("nope").key == DEFAULT_KEY
