"""
API route handlers for the Property Listing Service.
Routers are grouped by audience: buyers, sellers and admins.
"""

from .properties import admin_router, buyer_router, seller_router

__all__ = ["buyer_router", "seller_router", "admin_router"]
