"""Turn form entries into cost records ready for persistence."""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Sequence

from vendorcosts.domain import errors
from vendorcosts.domain.entities import CostEntry, CostKind, CostRecord, Identity, Member


@dataclass(frozen=True)
class SubmissionContext:
    """Submission-scope fields that do not belong to any single entry."""

    vendor_id: int
    identity: Identity
    member: Optional[Member] = None
    notes: Optional[str] = None
    anonymous: bool = True


CENT = Decimal("0.01")


def to_decimal(value) -> Optional[Decimal]:
    """Coerce a numeric form value to a finite Decimal, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def to_cents(value) -> Optional[Decimal]:
    """Coerce a value to a Decimal rounded half-up to whole cents, or None.

    Amounts and quantities are stored with two decimal places, so every
    check on them runs on the rounded value.
    """
    number = to_decimal(value)
    if number is None:
        return None
    return number.quantize(CENT, rounding=ROUND_HALF_UP)


def is_valid_amount(value) -> bool:
    """Check whether a value is still greater than zero once rounded to cents."""
    amount = to_cents(value)
    return amount is not None and amount > 0


def normalize_entries(entries: Sequence[CostEntry]) -> list[CostEntry]:
    """Filter and normalize entries at submit time.

    Amounts and quantities are rounded to cents. Entries whose rounded amount
    is not positive are dropped. A monthly plan without a
    period gets ``"monthly"``. Quantities that are not positive are cleared.

    Raises:
        ValidationError: If two entries share a cost kind
    """
    seen: set[CostKind] = set()
    normalized = []
    for entry in entries:
        if entry.cost_kind in seen:
            raise errors.ValidationError(errors.duplicate_cost_kind(entry.cost_kind.value))
        seen.add(entry.cost_kind)

        if not is_valid_amount(entry.amount):
            continue

        quantity = to_cents(entry.quantity)
        if quantity is not None and quantity <= 0:
            quantity = None

        period = entry.period
        if period is None and entry.cost_kind == CostKind.MONTHLY_PLAN:
            period = "monthly"

        normalized.append(
            replace(entry, amount=to_cents(entry.amount), quantity=quantity, period=period)
        )
    return normalized


def build_cost_records(entries: Sequence[CostEntry], context: SubmissionContext) -> list[CostRecord]:
    """Build the records to upsert for one submission.

    Args:
        entries: Current form entries
        context: Vendor, identity and submission-level fields

    Returns:
        One record per surviving entry, never two with the same cost kind

    Raises:
        AuthenticationRequiredError: If nobody is signed in
        AddressRequiredError: If the member has no household address
        NoValidEntriesError: If no entry has a positive amount
    """
    identity = context.identity
    if identity.is_anonymous:
        raise errors.AuthenticationRequiredError(errors.AUTHENTICATION_REQUIRED)

    household_address = None
    if identity.member_id is not None:
        if context.member is None or not (context.member.address or "").strip():
            raise errors.AddressRequiredError(errors.ADDRESS_REQUIRED)
        household_address = context.member.address

    valid = normalize_entries(entries)
    if not valid:
        raise errors.NoValidEntriesError(errors.NO_VALID_ENTRIES)

    notes = (context.notes or "").strip() or None
    return [
        CostRecord(
            vendor_id=context.vendor_id,
            cost_kind=entry.cost_kind,
            amount=entry.amount,
            unit=entry.unit,
            period=entry.period,
            quantity=entry.quantity,
            notes=notes,
            household_address=household_address,
            created_by=identity.member_id,
            session_id=identity.session_id if identity.member_id is None else None,
            anonymous=context.anonymous,
        )
        for entry in valid
    ]
