"""Domain model entities for vendorcosts.

These are pure data classes representing business concepts, independent of
database schema. Cost entries edited in a form are transient; only the
normalized cost records ever reach the database.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


CURRENCY = "USD"


class CostKind(str, Enum):
    """Pricing shape captured by a cost entry."""

    MONTHLY_PLAN = "monthly_plan"
    YEARLY_PLAN = "yearly_plan"
    SERVICE_CALL = "service_call"
    HOURLY = "hourly"
    ONE_TIME = "one_time"
    INSTALLATION = "installation"


@dataclass(frozen=True)
class Vendor:
    """Service provider domain entity."""

    id: int
    name: str
    category: str
    created_at: datetime


@dataclass(frozen=True)
class Member:
    """Community resident domain entity."""

    id: int
    name: str
    email: str
    address: Optional[str]
    is_admin: bool
    created_at: datetime


@dataclass(frozen=True)
class Identity:
    """Who is acting: a signed-in member or a preview session."""

    member_id: Optional[int] = None
    session_id: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return self.member_id is None and not self.session_id


@dataclass(frozen=True)
class Cost:
    """Persisted cost record domain entity."""

    id: int
    vendor_id: int
    amount: Decimal
    currency: str
    cost_kind: CostKind
    unit: Optional[str]
    period: Optional[str]
    quantity: Optional[Decimal]
    notes: Optional[str]
    household_address: Optional[str]
    created_by: Optional[int]
    session_id: Optional[str]
    anonymous: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[int] = None
    admin_modified: bool = False
    admin_modified_by: Optional[int] = None
    admin_modified_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class CostEntry:
    """One priced line in the cost form.

    ``amount is None`` is the canonical unset state. ``quantity_enabled`` is a
    template flag telling the form to offer a quantity input.
    """

    cost_kind: CostKind
    amount: Optional[Decimal] = None
    unit: Optional[str] = None
    period: Optional[str] = None
    quantity: Optional[Decimal] = None
    quantity_enabled: bool = False


@dataclass(frozen=True)
class CostRecord:
    """A normalized cost ready to be upserted."""

    vendor_id: int
    cost_kind: CostKind
    amount: Decimal
    unit: Optional[str]
    period: Optional[str]
    quantity: Optional[Decimal]
    notes: Optional[str]
    household_address: Optional[str]
    created_by: Optional[int]
    session_id: Optional[str]
    anonymous: bool
    currency: str = CURRENCY

    @property
    def conflict_key(self) -> tuple:
        """Upsert target: one row per (identity, vendor, cost_kind)."""
        owner = ("member", self.created_by) if self.created_by is not None else ("session", self.session_id)
        return (owner, self.vendor_id, self.cost_kind)
