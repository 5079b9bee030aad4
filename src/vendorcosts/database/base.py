"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from vendorcosts.domain.entities import (
    Cost,
    CostKind,
    CostRecord,
    Member,
    Vendor,
)


class Database(ABC):
    """Abstract database interface for vendorcosts."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Vendor operations
    @abstractmethod
    def create_vendor(self, name: str, category: str) -> int:
        """Create a new vendor. Returns vendor ID."""
        pass

    @abstractmethod
    def get_vendor(self, vendor_id: int) -> Optional[Vendor]:
        """Get vendor by ID."""
        pass

    @abstractmethod
    def get_vendor_by_name(self, name: str, ignore_case: bool = False) -> Optional[Vendor]:
        """Get vendor by name, exact unless ignore_case is set."""
        pass

    @abstractmethod
    def list_vendors(self, category: Optional[str] = None) -> list[Vendor]:
        """List vendors, optionally filtered by category."""
        pass

    # Member operations
    @abstractmethod
    def create_member(
        self, name: str, email: str, address: Optional[str] = None, is_admin: bool = False
    ) -> int:
        """Create a member. Returns member ID."""
        pass

    @abstractmethod
    def get_member(self, member_id: int) -> Optional[Member]:
        """Get member by ID."""
        pass

    @abstractmethod
    def get_member_by_email(self, email: str) -> Optional[Member]:
        """Get member by email."""
        pass

    @abstractmethod
    def update_member_address(self, member_id: int, address: Optional[str]) -> None:
        """Update a member's household address."""
        pass

    # Cost operations
    @abstractmethod
    def list_costs_for_identity(
        self,
        vendor_id: int,
        member_id: Optional[int] = None,
        session_id: Optional[str] = None,
        include_deleted: bool = False,
    ) -> list[Cost]:
        """List one identity's costs for a vendor, newest first."""
        pass

    @abstractmethod
    def upsert_costs(self, records: Sequence[CostRecord]) -> list[int]:
        """Insert or update one row per record.

        The conflict target is (created_by or session_id, vendor_id, cost_kind).
        All records are written in a single transaction. Returns row IDs in
        record order.
        """
        pass

    @abstractmethod
    def get_cost(self, cost_id: int) -> Optional[Cost]:
        """Get cost entry by ID."""
        pass

    @abstractmethod
    def list_costs(
        self,
        vendor_id: Optional[int] = None,
        cost_kind: Optional[CostKind] = None,
        search: Optional[str] = None,
        since: Optional[date] = None,
        include_deleted: bool = True,
    ) -> list[Cost]:
        """List cost entries with optional filters, newest first.

        Args:
            vendor_id: Optional vendor ID filter
            cost_kind: Optional cost kind filter
            search: Optional text matched against vendor name and notes
            since: Optional earliest creation date
            include_deleted: If False, skip soft-deleted entries
        """
        pass

    @abstractmethod
    def update_cost(
        self,
        cost_id: int,
        admin_id: int,
        amount: Optional[Decimal] = None,
        cost_kind: Optional[CostKind] = None,
        unit: Optional[str] = None,
        period: Optional[str] = None,
        quantity: Optional[Decimal] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Apply an admin override to a cost entry."""
        pass

    @abstractmethod
    def soft_delete_cost(self, cost_id: int, deleted_by: int) -> None:
        """Mark a cost entry deleted without removing the row."""
        pass

    @abstractmethod
    def restore_cost(self, cost_id: int) -> None:
        """Clear the soft-delete marks of a cost entry."""
        pass
