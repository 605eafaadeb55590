"""
Pydantic schemas for the location owned by a property.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from listings.models.enums import State


def _strip_required(v: Optional[str], name: str) -> Optional[str]:
    if v is None:
        return v
    if not v.strip():
        raise ValueError(f"{name} cannot be empty")
    return v.strip()


class LocationBase(BaseModel):
    """Base location schema with common fields."""

    address: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Street address",
        examples=["Baneshwor-10"]
    )

    city: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="City",
        examples=["Kathmandu"]
    )

    state: State = Field(
        ...,
        description="Administrative region",
        examples=["Bagmati"]
    )

    country: str = Field(
        "Nepal",
        max_length=100,
        description="Country"
    )

    zipcode: int = Field(
        44200,
        ge=0,
        description="Postal code"
    )

    latitude: Optional[float] = Field(
        None,
        ge=-90,
        le=90,
        description="Latitude coordinate"
    )

    longitude: Optional[float] = Field(
        None,
        ge=-180,
        le=180,
        description="Longitude coordinate"
    )

    @field_validator('address')
    @classmethod
    def validate_address(cls, v):
        return _strip_required(v, "Address")

    @field_validator('city')
    @classmethod
    def validate_city(cls, v):
        return _strip_required(v, "City")


class LocationCreate(LocationBase):
    """Schema for the location supplied when a property is created."""


class LocationUpdate(BaseModel):
    """Partial location update; absent fields are left unchanged."""

    address: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    state: Optional[State] = None
    country: Optional[str] = Field(None, max_length=100)
    zipcode: Optional[int] = Field(None, ge=0)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator('address')
    @classmethod
    def validate_address(cls, v):
        return _strip_required(v, "Address")

    @field_validator('city')
    @classmethod
    def validate_city(cls, v):
        return _strip_required(v, "City")


class LocationResponse(LocationBase):
    """Location as returned inside a property response."""

    id: int = Field(..., description="Location identifier")

    model_config = ConfigDict(from_attributes=True)
