"""
Location model for the address owned by a property listing.
A location is created, updated and deleted only through its owning property.
"""

from sqlalchemy import String, Integer, Float, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from listings.database import Base
from listings.models.enums import State, enum_values
from typing import Optional


class Location(Base):
    """
    Address record owned 1:1 by a property.
    Uses a store-native sequential identity since it is never referenced externally.
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Street address"
    )

    city: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="City name"
    )

    state: Mapped[State] = mapped_column(
        SQLEnum(State, name="state_enum", values_callable=enum_values),
        nullable=False,
        default=State.MADHESH,
        index=True,
        comment="Administrative region"
    )

    country: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="Nepal"
    )

    zipcode: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=44200
    )

    latitude: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True
    )

    longitude: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True
    )

    def __repr__(self) -> str:
        """String representation of the location."""
        return f"<Location(id={self.id}, city={self.city}, state={self.state})>"

    def validate_all(self) -> None:
        """
        Validate the location before it is persisted.

        Raises:
            ValueError: If any field is invalid
        """
        if not self.address or not self.address.strip():
            raise ValueError("Address cannot be empty")
        if len(self.address) > 255:
            raise ValueError("Address cannot exceed 255 characters")
        if not self.city or not self.city.strip():
            raise ValueError("City cannot be empty")
        if len(self.city) > 100:
            raise ValueError("City cannot exceed 100 characters")
        if self.zipcode is not None and self.zipcode < 0:
            raise ValueError("Zipcode cannot be negative")

    def to_dict(self) -> dict:
        """Convert location to dictionary."""
        return {
            "id": self.id,
            "address": self.address,
            "city": self.city,
            "state": self.state.value if self.state else None,
            "country": self.country,
            "zipcode": self.zipcode,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
