"""Vendor categories and the cost template table.

Every vendor category maps to exactly one template key, and every template key
maps to one ``CostTemplate``. The desktop form, the mobile form and the preview
form all read from this table.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vendorcosts.domain.entities import CostKind
from vendorcosts.domain.errors import ValidationError


DEFAULT_KEY = "default"


class ServiceCategory(str, Enum):
    """Closed list of vendor categories accepted at vendor creation."""

    POOL_SERVICE = "Pool Service"
    LANDSCAPING = "Landscaping"
    PEST_CONTROL = "Pest Control"
    HVAC = "HVAC"
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    PET_GROOMING = "Pet Grooming"
    HOUSE_CLEANING = "House Cleaning"
    MOBILE_TIRE_REPAIR = "Mobile Tire Repair"
    APPLIANCE_REPAIR = "Appliance Repair"
    HANDYMAN = "Handyman"
    LANDSCAPE_LIGHTING = "Landscape Lighting"
    POWER_WASHING = "Power Washing"
    CAR_WASH_DETAIL = "Car Wash & Detail"
    WATER_FILTRATION = "Water Filtration"
    GENERATOR = "Generator"
    ROOFING = "Roofing"
    GENERAL_CONTRACTOR = "General Contractor"
    OTHER = "Other"

    @property
    def key(self) -> str:
        """Template key for this category."""
        if self is ServiceCategory.OTHER:
            return DEFAULT_KEY
        return self.name.lower()


@dataclass(frozen=True)
class EntrySpec:
    """Fixed fields of one entry in a cost template."""

    cost_kind: CostKind
    unit: Optional[str] = None
    period: Optional[str] = None
    quantity_enabled: bool = False


@dataclass(frozen=True)
class CostTemplate:
    """Cost-entry shape for a category.

    A template with no entries collects free-text ``guidance`` instead of
    numeric fields.
    """

    key: str
    entries: tuple[EntrySpec, ...]
    guidance: Optional[str] = None


_MONTHLY = EntrySpec(CostKind.MONTHLY_PLAN, unit="month", period="monthly")
_MONTHLY_VISITS = EntrySpec(CostKind.MONTHLY_PLAN, unit="month", period="monthly", quantity_enabled=True)
_SERVICE_CALL = EntrySpec(CostKind.SERVICE_CALL, unit="visit")
_SERVICE_CALL_VISITS = EntrySpec(CostKind.SERVICE_CALL, unit="visit", quantity_enabled=True)
_YEARLY = EntrySpec(CostKind.YEARLY_PLAN, unit="year", period="yearly", quantity_enabled=True)
_HOURLY = EntrySpec(CostKind.HOURLY, unit="hour")

_GUIDANCE = "Please add pricing guidance in a review for this category."

TEMPLATES: dict[str, CostTemplate] = {
    template.key: template
    for template in (
        CostTemplate("pool_service", (_MONTHLY_VISITS,)),
        CostTemplate("landscaping", (_MONTHLY_VISITS,)),
        CostTemplate("pest_control", (_MONTHLY_VISITS,)),
        CostTemplate("hvac", (_SERVICE_CALL, _YEARLY)),
        CostTemplate("plumbing", (_SERVICE_CALL,)),
        CostTemplate("electrical", (_SERVICE_CALL,)),
        CostTemplate("pet_grooming", (_SERVICE_CALL,)),
        CostTemplate("house_cleaning", (_SERVICE_CALL,)),
        CostTemplate("mobile_tire_repair", (_SERVICE_CALL,)),
        CostTemplate("appliance_repair", (_SERVICE_CALL,)),
        CostTemplate("handyman", (_HOURLY,)),
        CostTemplate("landscape_lighting", (_HOURLY,)),
        CostTemplate("power_washing", (_SERVICE_CALL_VISITS,)),
        CostTemplate("car_wash_detail", (_SERVICE_CALL_VISITS,)),
        CostTemplate(
            "water_filtration",
            (EntrySpec(CostKind.ONE_TIME, unit="installation"), _YEARLY),
        ),
        CostTemplate(
            "generator",
            (
                _SERVICE_CALL,
                EntrySpec(CostKind.INSTALLATION, unit="installation"),
                _YEARLY,
            ),
        ),
        CostTemplate("roofing", (), guidance=_GUIDANCE),
        CostTemplate("general_contractor", (), guidance=_GUIDANCE),
        CostTemplate(DEFAULT_KEY, (_MONTHLY,)),
    )
}

# Free-text spellings seen in vendor records, matched as whole words.
ALIASES: dict[str, str] = {
    "pool service": "pool_service",
    "pool cleaning": "pool_service",
    "pool": "pool_service",
    "landscaping": "landscaping",
    "lawn care": "landscaping",
    "pest control": "pest_control",
    "exterminator": "pest_control",
    "hvac": "hvac",
    "heating and air": "hvac",
    "air conditioning": "hvac",
    "plumbing": "plumbing",
    "plumber": "plumbing",
    "electrical": "electrical",
    "electrician": "electrical",
    "pet grooming": "pet_grooming",
    "house cleaning": "house_cleaning",
    "maid service": "house_cleaning",
    "mobile tire repair": "mobile_tire_repair",
    "tire repair": "mobile_tire_repair",
    "appliance repair": "appliance_repair",
    "handyman": "handyman",
    "landscape lighting": "landscape_lighting",
    "outdoor lighting": "landscape_lighting",
    "power washing": "power_washing",
    "pressure washing": "power_washing",
    "car wash and detail": "car_wash_detail",
    "car wash": "car_wash_detail",
    "auto detailing": "car_wash_detail",
    "mobile detailing": "car_wash_detail",
    "water filtration": "water_filtration",
    "water treatment": "water_filtration",
    "water softener": "water_filtration",
    "generator": "generator",
    "roofing": "roofing",
    "roofer": "roofing",
    "general contractor": "general_contractor",
    "gc": "general_contractor",
}


def normalize_label(label: Optional[str]) -> str:
    """Lowercase a category label and collapse separators to single spaces."""
    text = (label or "").lower().replace("&", " and ")
    text = re.sub(r"[-_/]+", " ", text)
    return " ".join(text.split())


def classify_category(label: Optional[str]) -> str:
    """Map a free-text vendor category to a template key.

    Exact category names, template keys and aliases win first; otherwise the
    longest alias appearing as whole words in the label decides. Labels that
    match nothing fall back to ``DEFAULT_KEY``.
    """
    text = normalize_label(label)
    if not text:
        return DEFAULT_KEY

    for category in ServiceCategory:
        if text == normalize_label(category.value):
            return category.key
    if text.replace(" ", "_") in TEMPLATES:
        return text.replace(" ", "_")
    if text in ALIASES:
        return ALIASES[text]

    best: Optional[str] = None
    for alias in ALIASES:
        if re.search(rf"\b{re.escape(alias)}\b", text):
            if best is None or len(alias) > len(best):
                best = alias
    if best is None:
        return DEFAULT_KEY
    return ALIASES[best]


def parse_category(label: str) -> ServiceCategory:
    """Resolve a label to a member of the closed category list.

    Raises:
        ValidationError: If the label is not one of the accepted categories
    """
    text = normalize_label(label)
    for category in ServiceCategory:
        if text in (normalize_label(category.value), normalize_label(category.name)):
            return category
    accepted = ", ".join(c.value for c in ServiceCategory)
    raise ValidationError(f"Unknown category '{label}'. Accepted categories: {accepted}")


def get_template(key: str) -> CostTemplate:
    """Return the template for a key, or the default template."""
    return TEMPLATES.get(key, TEMPLATES[DEFAULT_KEY])
