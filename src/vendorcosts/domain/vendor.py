"""Vendor domain service."""

from typing import Optional
from vendorcosts.database.base import Database
from vendorcosts.domain import errors
from vendorcosts.domain.categories import parse_category
from vendorcosts.domain.entities import Vendor as VendorEntity


class VendorService:
    """Service for managing vendors."""

    def __init__(self, db: Database):
        """Initialize vendor service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_vendor(self, name: str, category: str) -> int:
        """Create a new vendor.

        Args:
            name: Vendor name
            category: Vendor category, one of the accepted categories

        Returns:
            Vendor ID

        Raises:
            ValidationError: If the name is empty or the category is unknown
            ConflictError: If a vendor with the same name exists
        """
        name = name.strip()
        if not name:
            raise errors.ValidationError("Vendor name cannot be empty")
        service_category = parse_category(category)

        if self.db.get_vendor_by_name(name) is not None:
            raise errors.ConflictError(errors.duplicate_vendor_name(name))

        return self.db.create_vendor(name=name, category=service_category.value)

    def get_vendor(self, vendor_id: int) -> Optional[VendorEntity]:
        """Get vendor by ID.

        Args:
            vendor_id: Vendor ID

        Returns:
            Vendor entity or None if not found
        """
        return self.db.get_vendor(vendor_id)

    def find_vendor_by_name(self, name: str) -> Optional[VendorEntity]:
        """Find a vendor by name, ignoring case and surrounding spaces."""
        return self.db.get_vendor_by_name(name.strip(), ignore_case=True)

    def require_vendor(self, vendor_id: int) -> VendorEntity:
        """Get vendor by ID or raise NotFoundError."""
        vendor = self.db.get_vendor(vendor_id)
        if vendor is None:
            raise errors.NotFoundError(errors.vendor_not_found(vendor_id))
        return vendor

    def list_vendors(self, category: Optional[str] = None) -> list[VendorEntity]:
        """List vendors.

        Args:
            category: Optional category to filter by

        Returns:
            List of vendor entities
        """
        if category is not None:
            category = parse_category(category).value
        return self.db.list_vendors(category=category)
