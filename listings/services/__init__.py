"""
Service layer for business logic implementation.
Contains the approval state machine, location and property workflow services, and error handling.
"""

from .location import LocationService
from .property import PropertyWorkflowService
from .error_handler import ErrorHandlerService

__all__ = [
    "LocationService",
    "PropertyWorkflowService",
    "ErrorHandlerService"
]
