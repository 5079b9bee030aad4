"""Cost domain service.

Opens cost forms prefilled with what the acting member or preview session
already submitted, persists submissions, and carries the admin moderation
operations on stored cost entries.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from vendorcosts.database.base import Database
from vendorcosts.domain import errors
from vendorcosts.domain.entities import Cost, CostEntry, CostKind, CostRecord, Identity
from vendorcosts.domain.form import CostForm
from vendorcosts.domain.member import MemberService
from vendorcosts.domain.normalizer import (
    SubmissionContext,
    build_cost_records,
    is_valid_amount,
    to_cents,
)
from vendorcosts.domain.prefill import latest_by_kind, merge_persisted_costs
from vendorcosts.domain.templates import build_default_costs
from vendorcosts.domain.vendor import VendorService

logger = structlog.get_logger()


class FailureKind(str, Enum):
    """Why a submission did not reach the database."""

    VALIDATION = "validation"
    NO_VALID_ENTRIES = "no_valid_entries"
    ADDRESS_REQUIRED = "address_required"
    AUTHENTICATION_REQUIRED = "authentication_required"
    WRITE_FAILED = "write_failed"
    IN_PROGRESS = "in_progress"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PrefillResult:
    """Entries to show when a cost form opens."""

    entries: tuple[CostEntry, ...]
    has_existing_costs: bool = False
    notes: Optional[str] = None
    anonymous: bool = True
    fallback: bool = False


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submission: saved records or a failure kind."""

    records: tuple[CostRecord, ...] = ()
    cost_ids: tuple[int, ...] = ()
    failure: Optional[FailureKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def retryable(self) -> bool:
        return self.failure == FailureKind.WRITE_FAILED


def _failure(kind: FailureKind, message: str) -> SubmissionResult:
    return SubmissionResult(failure=kind, message=message)


class CostService:
    """Service for cost forms, submissions and moderation."""

    def __init__(self, db: Database):
        """Initialize cost service.

        Args:
            db: Database instance
        """
        self.db = db
        self.vendors = VendorService(db)
        self.members = MemberService(db)

    def prefill(self, vendor_id: int, identity: Identity) -> PrefillResult:
        """Build the starting entries for a vendor's cost form.

        Lookup failures are logged and answered with the plain category
        template, so the form always opens.

        Args:
            vendor_id: Vendor ID
            identity: Acting member or preview session

        Returns:
            PrefillResult with merged entries

        Raises:
            NotFoundError: If the vendor doesn't exist
        """
        vendor = self.vendors.require_vendor(vendor_id)
        template = build_default_costs(vendor.category)
        if identity.is_anonymous:
            return PrefillResult(entries=tuple(template))

        try:
            rows = self.db.list_costs_for_identity(
                vendor_id,
                member_id=identity.member_id,
                session_id=identity.session_id,
            )
        except (SQLAlchemyError, errors.DomainError) as exc:
            logger.warning(
                "cost_prefill_failed",
                vendor_id=vendor_id,
                member_id=identity.member_id,
                session_id=identity.session_id,
                error=str(exc),
            )
            return PrefillResult(entries=tuple(template), fallback=True)

        if not rows:
            return PrefillResult(entries=tuple(template))

        newest = next(iter(latest_by_kind(rows).values()))
        return PrefillResult(
            entries=tuple(merge_persisted_costs(template, rows)),
            has_existing_costs=True,
            notes=newest.notes,
            anonymous=newest.anonymous,
        )

    def open_form(self, vendor_id: int, identity: Identity) -> CostForm:
        """Open a cost form for a vendor, prefilled for the identity."""
        vendor = self.vendors.require_vendor(vendor_id)
        prefill = self.prefill(vendor_id, identity)
        return CostForm(
            vendor_id=vendor.id,
            category=vendor.category,
            entries=list(prefill.entries),
            notes=prefill.notes,
            anonymous=prefill.anonymous,
            has_existing_costs=prefill.has_existing_costs,
        )

    def submit(self, form: CostForm, identity: Identity) -> SubmissionResult:
        """Persist the valid entries of a form.

        Never raises for expected outcomes. Validation problems are reported
        before anything is written; write failures leave the form untouched so
        the submission can be retried.

        Args:
            form: Form being submitted
            identity: Acting member or preview session

        Returns:
            SubmissionResult with saved records, or a failure kind and message
        """
        if form.closed:
            return _failure(FailureKind.CANCELLED, "The cost form was closed")
        if form.in_flight:
            return _failure(FailureKind.IN_PROGRESS, "A save is already in progress")

        form.in_flight = True
        try:
            return self._submit(form, identity)
        finally:
            form.in_flight = False

    def _submit(self, form: CostForm, identity: Identity) -> SubmissionResult:
        try:
            member = None
            if identity.member_id is not None:
                member = self.db.get_member(identity.member_id)
                if member is None:
                    return _failure(FailureKind.AUTHENTICATION_REQUIRED, errors.AUTHENTICATION_REQUIRED)

            context = SubmissionContext(
                vendor_id=form.vendor_id,
                identity=identity,
                member=member,
                notes=form.notes,
                anonymous=form.anonymous,
            )
            try:
                records = build_cost_records(form.entries, context)
            except errors.AuthenticationRequiredError as exc:
                return _failure(FailureKind.AUTHENTICATION_REQUIRED, str(exc))
            except errors.AddressRequiredError as exc:
                return _failure(FailureKind.ADDRESS_REQUIRED, str(exc))
            except errors.NoValidEntriesError as exc:
                return _failure(FailureKind.NO_VALID_ENTRIES, str(exc))
            except errors.ValidationError as exc:
                return _failure(FailureKind.VALIDATION, str(exc))

            if form.closed:
                return _failure(FailureKind.CANCELLED, "The cost form was closed")
            cost_ids = self.db.upsert_costs(records)
        except SQLAlchemyError as exc:
            logger.error(
                "cost_upsert_failed",
                vendor_id=form.vendor_id,
                member_id=identity.member_id,
                session_id=identity.session_id,
                error=str(exc),
            )
            return _failure(FailureKind.WRITE_FAILED, "Error saving cost information. Please try again.")

        form.has_existing_costs = True
        logger.info(
            "costs_saved",
            vendor_id=form.vendor_id,
            member_id=identity.member_id,
            session_id=identity.session_id,
            cost_kinds=[r.cost_kind.value for r in records],
        )
        return SubmissionResult(records=tuple(records), cost_ids=tuple(cost_ids))

    # Moderation
    def list_costs(
        self,
        admin_id: int,
        vendor_id: Optional[int] = None,
        cost_kind: Optional[str] = None,
        search: Optional[str] = None,
        since: Optional[date] = None,
        include_deleted: bool = True,
    ) -> list[Cost]:
        """List stored cost entries for moderation.

        Raises:
            PermissionDeniedError: If the member is not an admin
            ValidationError: If the cost kind is unknown
        """
        self.members.require_admin(admin_id)
        kind = parse_cost_kind(cost_kind) if cost_kind is not None else None
        return self.db.list_costs(
            vendor_id=vendor_id,
            cost_kind=kind,
            search=search,
            since=since,
            include_deleted=include_deleted,
        )

    def require_cost(self, cost_id: int) -> Cost:
        """Get cost entry by ID or raise NotFoundError."""
        cost = self.db.get_cost(cost_id)
        if cost is None:
            raise errors.NotFoundError(errors.cost_not_found(cost_id))
        return cost

    def admin_update_cost(
        self,
        admin_id: int,
        cost_id: int,
        amount: Optional[Decimal] = None,
        cost_kind: Optional[str] = None,
        unit: Optional[str] = None,
        period: Optional[str] = None,
        quantity: Optional[Decimal] = None,
        notes: Optional[str] = None,
    ) -> Cost:
        """Override fields of a stored cost entry.

        Returns:
            The updated cost entry

        Raises:
            PermissionDeniedError: If the member is not an admin
            NotFoundError: If the cost entry doesn't exist
            ValidationError: If the amount or quantity is not positive once
                rounded to cents, or the kind is unknown
        """
        self.members.require_admin(admin_id)
        self.require_cost(cost_id)
        if amount is not None:
            if not is_valid_amount(amount):
                raise errors.ValidationError("Amount must be a positive number")
            amount = to_cents(amount)
        if quantity is not None:
            if not is_valid_amount(quantity):
                raise errors.ValidationError("Quantity must be a positive number")
            quantity = to_cents(quantity)
        kind = parse_cost_kind(cost_kind) if cost_kind is not None else None

        self.db.update_cost(
            cost_id,
            admin_id=admin_id,
            amount=amount,
            cost_kind=kind,
            unit=unit,
            period=period,
            quantity=quantity,
            notes=notes,
        )
        logger.info("cost_admin_modified", cost_id=cost_id, admin_id=admin_id)
        return self.require_cost(cost_id)

    def soft_delete_cost(self, admin_id: int, cost_id: int) -> Cost:
        """Exclude a cost entry from community figures without removing it."""
        self.members.require_admin(admin_id)
        cost = self.require_cost(cost_id)
        if cost.is_deleted:
            return cost
        self.db.soft_delete_cost(cost_id, deleted_by=admin_id)
        logger.info("cost_soft_deleted", cost_id=cost_id, admin_id=admin_id)
        return self.require_cost(cost_id)

    def restore_cost(self, admin_id: int, cost_id: int) -> Cost:
        """Bring a soft-deleted cost entry back."""
        self.members.require_admin(admin_id)
        cost = self.require_cost(cost_id)
        if not cost.is_deleted:
            return cost
        self.db.restore_cost(cost_id)
        logger.info("cost_restored", cost_id=cost_id, admin_id=admin_id)
        return self.require_cost(cost_id)


def parse_cost_kind(value: str) -> CostKind:
    """Parse a cost kind name such as 'service_call' or 'Service Call'."""
    text = value.strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return CostKind(text)
    except ValueError:
        accepted = ", ".join(k.value for k in CostKind)
        raise errors.ValidationError(f"Unknown cost kind '{value}'. Accepted kinds: {accepted}")
