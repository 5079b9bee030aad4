"""Member domain service."""

from typing import Optional
from vendorcosts.database.base import Database
from vendorcosts.domain import errors
from vendorcosts.domain.entities import Member as MemberEntity


class MemberService:
    """Service for managing community members."""

    def __init__(self, db: Database):
        """Initialize member service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_member(
        self, name: str, email: str, address: Optional[str] = None, is_admin: bool = False
    ) -> int:
        """Create a member.

        Args:
            name: Display name
            email: Email address, unique per member
            address: Optional household address
            is_admin: Grant moderation rights

        Returns:
            Member ID

        Raises:
            ValidationError: If the email is empty
            ConflictError: If the email is already registered
        """
        email = email.strip().lower()
        if not email:
            raise errors.ValidationError("Member email cannot be empty")
        if self.db.get_member_by_email(email) is not None:
            raise errors.ConflictError(errors.duplicate_member_email(email))

        address = (address or "").strip() or None
        return self.db.create_member(name=name, email=email, address=address, is_admin=is_admin)

    def get_member(self, member_id: int) -> Optional[MemberEntity]:
        """Get member by ID."""
        return self.db.get_member(member_id)

    def require_member(self, member_id: int) -> MemberEntity:
        """Get member by ID or raise NotFoundError."""
        member = self.db.get_member(member_id)
        if member is None:
            raise errors.NotFoundError(errors.member_not_found(member_id))
        return member

    def require_admin(self, member_id: int) -> MemberEntity:
        """Get an admin member or raise PermissionDeniedError."""
        member = self.require_member(member_id)
        if not member.is_admin:
            raise errors.PermissionDeniedError(errors.admin_required(member_id))
        return member

    def update_address(self, member_id: int, address: Optional[str]) -> None:
        """Set or clear a member's household address.

        Raises:
            NotFoundError: If the member doesn't exist
        """
        self.require_member(member_id)
        self.db.update_member_address(member_id, (address or "").strip() or None)
