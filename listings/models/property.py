"""
Property model for listings going through the approval workflow.
Handles listing data, the owned location and the approval state.
"""

from sqlalchemy import String, Integer, Uuid, Enum as SQLEnum, Index, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from listings.database import Base
from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType, enum_values
from listings.models.location import Location
import uuid
from typing import Optional


class Property(Base):
    """
    Aggregate root for a property listing.
    Owns exactly one location and carries the approval workflow state.
    """

    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )

    title: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        comment="Property listing title"
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Property description"
    )

    type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType, name="property_type_enum", values_callable=enum_values),
        nullable=False,
        default=PropertyType.LAND,
        index=True
    )

    status: Mapped[ListingStatus] = mapped_column(
        SQLEnum(ListingStatus, name="listing_status_enum", values_callable=enum_values),
        nullable=False,
        default=ListingStatus.AVAILABLE,
        index=True,
        comment="Listing availability, independent of approval"
    )

    approval_status: Mapped[ApprovalStatus] = mapped_column(
        SQLEnum(ApprovalStatus, name="approval_status_enum", values_callable=enum_values),
        nullable=False,
        default=ApprovalStatus.DRAFT,
        index=True,
        comment="Approval workflow state"
    )

    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        nullable=False,
        index=True,
        comment="Identifier of the submitting party"
    )

    location_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.id"),
        nullable=False,
        unique=True
    )

    # Row version for optimistic concurrency control
    version_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False
    )

    location: Mapped[Location] = relationship(
        Location,
        cascade="all, delete-orphan",
        single_parent=True,
        lazy="selectin"
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, approval_status={self.approval_status})>"

    def validate_all(self) -> None:
        """
        Run all validation checks on the property.

        Raises:
            ValueError: If any validation fails
        """
        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")
        if len(self.title) > 150:
            raise ValueError("Title cannot exceed 150 characters")
        if self.description is not None and len(self.description) > 500:
            raise ValueError("Description cannot exceed 500 characters")
        if self.owner_id is None:
            raise ValueError("Owner id is required")
        if self.location is None:
            raise ValueError("Location is required")

    def to_dict(self) -> dict:
        """
        Convert property to dictionary, including its owned location.

        Returns:
            Dictionary representation of property
        """
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "status": self.status.value,
            "approval_status": self.approval_status.value,
            "owner_id": str(self.owner_id),
            "location": self.location.to_dict() if self.location else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


# Listing queries filter on one column and sort by most recent update
approval_updated_index = Index(
    'idx_properties_approval_updated',
    Property.approval_status,
    Property.updated_at.desc()
)

owner_updated_index = Index(
    'idx_properties_owner_updated',
    Property.owner_id,
    Property.updated_at.desc()
)
