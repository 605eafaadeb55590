"""
Tests for database models.
Covers enum values, model validation, the owned location relationship and row versioning.
"""

import pytest
import uuid
from sqlalchemy import select, func

from listings.models import (
    ApprovalStatus,
    ListingStatus,
    Location,
    Property,
    PropertyType,
    State
)
from listings.models.enums import enum_values


def build_location(**overrides) -> Location:
    data = {
        "address": "Baneshwor-10",
        "city": "Kathmandu",
        "state": State.BAGMATI,
        "country": "Nepal",
        "zipcode": 44600
    }
    data.update(overrides)
    return Location(**data)


def build_property(location: Location = None, **overrides) -> Property:
    data = {
        "title": "2 Bigha Land",
        "description": "Flat land near the ring road",
        "type": PropertyType.LAND,
        "status": ListingStatus.AVAILABLE,
        "approval_status": ApprovalStatus.DRAFT,
        "owner_id": uuid.uuid4(),
        "location": location or build_location()
    }
    data.update(overrides)
    return Property(**data)


class TestEnums:
    """Test enumeration values stored and exposed by the API."""

    def test_approval_status_values(self):
        assert enum_values(ApprovalStatus) == [
            "draft", "pending_approval", "approved", "rejected", "archived"
        ]

    def test_listing_enums_use_capitalized_values(self):
        assert enum_values(PropertyType) == ["House", "Land"]
        assert enum_values(ListingStatus) == ["Available", "Rented", "Sold"]

    def test_state_values(self):
        assert enum_values(State) == [
            "Koshi", "Madhesh", "Bagmati", "Gandaki", "Lumbini", "Karnali", "Sudurpashchim"
        ]


class TestLocationModel:
    """Test Location model validation."""

    def test_valid_location(self):
        location = build_location()
        location.validate_all()

    @pytest.mark.parametrize("overrides,message", [
        ({"address": "  "}, "Address cannot be empty"),
        ({"address": "a" * 256}, "Address cannot exceed 255 characters"),
        ({"city": ""}, "City cannot be empty"),
        ({"city": "c" * 101}, "City cannot exceed 100 characters"),
        ({"zipcode": -1}, "Zipcode cannot be negative"),
    ])
    def test_invalid_location(self, overrides, message):
        location = build_location(**overrides)
        with pytest.raises(ValueError, match=message):
            location.validate_all()

    def test_to_dict(self):
        location = build_location(latitude=27.7, longitude=85.3)
        data = location.to_dict()

        assert data["city"] == "Kathmandu"
        assert data["state"] == "Bagmati"
        assert data["latitude"] == 27.7

    @pytest.mark.asyncio
    async def test_defaults_applied_on_flush(self, db_session):
        """Test column defaults for state, country and zipcode."""
        location = Location(address="Main Road", city="Janakpur")
        db_session.add(location)
        await db_session.flush()

        assert location.id is not None
        assert location.state == State.MADHESH
        assert location.country == "Nepal"
        assert location.zipcode == 44200
        assert location.created_at is not None


class TestPropertyModel:
    """Test Property model validation and persistence behaviour."""

    def test_valid_property(self):
        build_property().validate_all()

    @pytest.mark.parametrize("overrides,message", [
        ({"title": " "}, "Title cannot be empty"),
        ({"title": "t" * 151}, "Title cannot exceed 150 characters"),
        ({"description": "d" * 501}, "Description cannot exceed 500 characters"),
        ({"owner_id": None}, "Owner id is required"),
    ])
    def test_invalid_property(self, overrides, message):
        property_obj = build_property(**overrides)
        with pytest.raises(ValueError, match=message):
            property_obj.validate_all()

    def test_missing_location(self):
        property_obj = Property(title="No location", owner_id=uuid.uuid4())
        with pytest.raises(ValueError, match="Location is required"):
            property_obj.validate_all()

    @pytest.mark.asyncio
    async def test_defaults_and_identity(self, db_session):
        """Test UUID identity and enum defaults."""
        property_obj = Property(title="Defaults", owner_id=uuid.uuid4(), location=build_location())
        db_session.add(property_obj)
        await db_session.flush()

        assert isinstance(property_obj.id, uuid.UUID)
        assert property_obj.type == PropertyType.LAND
        assert property_obj.status == ListingStatus.AVAILABLE
        assert property_obj.approval_status == ApprovalStatus.DRAFT
        assert property_obj.location_id == property_obj.location.id
        assert property_obj.version_id == 1

    @pytest.mark.asyncio
    async def test_version_increments_on_update(self, db_session):
        property_obj = build_property()
        db_session.add(property_obj)
        await db_session.commit()

        property_obj.title = "Renamed"
        await db_session.commit()

        assert property_obj.version_id == 2

    @pytest.mark.asyncio
    async def test_delete_cascades_to_location(self, db_session):
        """Test a location never outlives its property."""
        property_obj = build_property()
        db_session.add(property_obj)
        await db_session.commit()

        await db_session.delete(property_obj)
        await db_session.commit()

        location_count = await db_session.scalar(select(func.count()).select_from(Location))
        assert location_count == 0

    def test_to_dict_includes_location(self):
        property_obj = build_property(id=uuid.uuid4())
        data = property_obj.to_dict()

        assert data["id"] == str(property_obj.id)
        assert data["type"] == "Land"
        assert data["approval_status"] == "draft"
        assert data["location"]["city"] == "Kathmandu"
