"""
Database models for the Property Listing Service.
Includes Property and its owned Location plus the shared enumerations.
"""

from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType, State
from listings.models.location import Location
from listings.models.property import Property

# Export all models for easy importing
__all__ = [
    "ApprovalStatus",
    "ListingStatus",
    "PropertyType",
    "State",
    "Location",
    "Property",
]
