"""
Pydantic schemas for property requests and responses.
Handles property create/update payloads and responses.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
import uuid
from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType
from listings.schemas.location import LocationCreate, LocationResponse, LocationUpdate


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=150,
        description="Property listing title",
        examples=["2 Bigha Land"]
    )

    description: Optional[str] = Field(
        None,
        max_length=500,
        description="Property description",
        examples=["Flat land near the ring road"]
    )

    type: PropertyType = Field(
        PropertyType.LAND,
        description="Property type",
        examples=["Land"]
    )

    status: ListingStatus = Field(
        ListingStatus.AVAILABLE,
        description="Listing availability",
        examples=["Available"]
    )

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate and clean title."""
        if not v or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for creating a new property together with its location."""

    location: LocationCreate = Field(..., description="Property location")

    owner_id: uuid.UUID = Field(
        ...,
        description="Identifier of the submitting party",
        examples=["123e4567-e89b-12d3-a456-426614174001"]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "2 Bigha Land",
                "description": "Flat land near the ring road",
                "type": "Land",
                "status": "Available",
                "location": {
                    "address": "Baneshwor-10",
                    "city": "Kathmandu",
                    "state": "Bagmati",
                    "country": "Nepal",
                    "zipcode": 44600
                },
                "owner_id": "123e4567-e89b-12d3-a456-426614174001"
            }
        }
    )


class PropertyUpdate(BaseModel):
    """Schema for partially updating a property; absent fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = Field(None, max_length=500)
    type: Optional[PropertyType] = None
    status: Optional[ListingStatus] = None
    owner_id: Optional[uuid.UUID] = Field(
        None,
        description="Must match the stored owner if supplied"
    )
    location: Optional[LocationUpdate] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate and clean title."""
        if v is not None:
            if not v.strip():
                raise ValueError("Title cannot be empty")
            return v.strip()
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "3 Bigha Land",
                "status": "Sold",
                "location": {"city": "Lalitpur"}
            }
        }
    )


class PropertyResponse(PropertyBase):
    """Schema for property response including its owned location."""

    id: uuid.UUID = Field(..., description="Property unique identifier")
    approval_status: ApprovalStatus = Field(..., description="Approval workflow state")
    owner_id: uuid.UUID = Field(..., description="Identifier of the submitting party")
    location: LocationResponse = Field(..., description="Property location")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)
