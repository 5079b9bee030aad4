"""Shared pytest fixtures for vendorcosts tests."""

import tempfile
import os
import pytest

from vendorcosts.database.factories import create_sqlite_database
from vendorcosts.domain.cost import CostService
from vendorcosts.domain.member import MemberService
from vendorcosts.domain.vendor import VendorService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path, timeout=1.0)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def vendor_service(temp_db):
    """Create a VendorService with a temporary database."""
    return VendorService(temp_db)


@pytest.fixture
def member_service(temp_db):
    """Create a MemberService with a temporary database."""
    return MemberService(temp_db)


@pytest.fixture
def cost_service(temp_db):
    """Create a CostService with a temporary database."""
    return CostService(temp_db)


@pytest.fixture
def sample_vendors(vendor_service):
    """Create one vendor per commonly used category, keyed by category."""
    vendors = {}
    for name, category in [
        ("Blue Wave Pools", "Pool Service"),
        ("Green Acres", "Landscaping"),
        ("CoolAir", "HVAC"),
        ("Top Roofing", "Roofing"),
        ("Fix It Felix", "Handyman"),
    ]:
        vendor_id = vendor_service.create_vendor(name=name, category=category)
        vendors[category] = vendor_service.get_vendor(vendor_id)
    return vendors


@pytest.fixture
def sample_member(member_service):
    """Create a member with a household address."""
    member_id = member_service.create_member(
        name="Dana", email="dana@example.com", address="12 Palm Ct"
    )
    return member_service.get_member(member_id)


@pytest.fixture
def admin_member(member_service):
    """Create an admin member."""
    member_id = member_service.create_member(
        name="Admin", email="admin@example.com", address="1 HOA Way", is_admin=True
    )
    return member_service.get_member(member_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
