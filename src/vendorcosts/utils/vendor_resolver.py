"""Utility for resolving vendor names to IDs."""

from vendorcosts.domain.vendor import VendorService


def resolve_vendor(vendor_service: VendorService, vendor: str | int) -> int:
    """Resolve vendor name or ID to vendor ID.

    Args:
        vendor_service: VendorService instance
        vendor: Vendor name (str) or ID (int or string representation of int)

    Returns:
        Vendor ID

    Raises:
        ValueError: If vendor is not found
    """
    try:
        vendor_id = int(vendor)
    except (ValueError, TypeError):
        vendor_id = None

    if vendor_id is not None:
        if vendor_service.get_vendor(vendor_id) is None:
            raise ValueError(f"Vendor ID {vendor_id} not found")
        return vendor_id

    found = vendor_service.find_vendor_by_name(str(vendor))
    if found is not None:
        return found.id

    raise ValueError(f"Vendor '{vendor}' not found")
