"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class PermissionDeniedError(DomainError):
    """The acting member may not perform the operation."""


class NoValidEntriesError(ValidationError):
    """No cost entry carries a positive amount."""


class AddressRequiredError(ValidationError):
    """The submitting member has no household address on file."""


class AuthenticationRequiredError(DomainError):
    """No member or preview session is attached to the submission."""


def vendor_not_found(vendor_id: int) -> str:
    """Return message for missing vendor."""
    return f"Vendor {vendor_id} not found"


def member_not_found(member_id: int) -> str:
    """Return message for missing member."""
    return f"Member {member_id} not found"


def cost_not_found(cost_id: int) -> str:
    """Return message for missing cost entry."""
    return f"Cost entry {cost_id} not found"


def duplicate_vendor_name(name: str) -> str:
    """Return message for duplicate vendor name."""
    return f"Vendor with name '{name}' already exists"


def duplicate_member_email(email: str) -> str:
    """Return message for duplicate member email."""
    return f"Member with email '{email}' already exists"


def duplicate_cost_kind(cost_kind: str) -> str:
    """Return message when one submission carries the same kind twice."""
    return f"Cost kind '{cost_kind}' appears more than once in this submission"


def admin_required(member_id: int) -> str:
    """Return message when a non-admin attempts moderation."""
    return f"Member {member_id} is not an administrator"


NO_VALID_ENTRIES = "Please enter at least one cost amount"
ADDRESS_REQUIRED = "Please add your address on your profile to submit costs"
AUTHENTICATION_REQUIRED = "Please sign in to add cost information"
