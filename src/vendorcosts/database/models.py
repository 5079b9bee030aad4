"""SQLAlchemy models for vendorcosts database."""

from datetime import datetime, UTC
from typing import Optional
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Vendor(Base):
    """Service provider model."""

    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    costs = relationship("Cost", back_populates="vendor", cascade="all, delete-orphan")


class Member(Base):
    """Community member model."""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    address = Column(String, nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Cost(Base):
    """Cost entry model.

    Rows are keyed by the submitting member, or by the preview session for
    unauthenticated submissions. Admin removal is a soft delete.
    """

    __tablename__ = "costs"

    id = Column(Integer, primary_key=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String, default="USD", nullable=False)
    cost_kind = Column(String, nullable=False)
    unit = Column(String, nullable=True)
    period = Column(String, nullable=True)
    quantity = Column(Numeric(10, 2), nullable=True)
    notes = Column(String, nullable=True)
    household_address = Column(String, nullable=True)
    created_by = Column(Integer, ForeignKey("members.id"), nullable=True)
    session_id = Column(String, nullable=True)
    anonymous = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)
    deleted_by = Column(Integer, ForeignKey("members.id"), nullable=True)
    admin_modified = Column(Boolean, default=False, nullable=False)
    admin_modified_by = Column(Integer, ForeignKey("members.id"), nullable=True)
    admin_modified_at = Column(DateTime, nullable=True)

    # One row per identity, vendor and cost kind
    __table_args__ = (
        UniqueConstraint("created_by", "vendor_id", "cost_kind", name="uq_member_vendor_kind"),
        UniqueConstraint("session_id", "vendor_id", "cost_kind", name="uq_session_vendor_kind"),
    )

    # Relationships
    vendor = relationship("Vendor", back_populates="costs")


def create_session_factory(database_url: str, timeout: Optional[float] = None) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    Args:
        database_url: SQLAlchemy database URL
        timeout: Seconds to wait on a locked SQLite database before failing
    """
    connect_args = {}
    if timeout is not None and database_url.startswith("sqlite"):
        connect_args["timeout"] = timeout
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
