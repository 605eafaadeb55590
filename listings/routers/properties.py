"""
Property listing API endpoints grouped by audience.
Buyers browse approved listings, sellers draft and submit them, admins review them.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import Optional, List
from uuid import UUID

from listings.schemas.common import ApiResponse
from listings.schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from listings.schemas.error import get_crud_error_responses, get_error_responses, get_list_error_responses
from listings.services.property import PropertyWorkflowService
from listings.utils.dependencies import get_property_service


buyer_router = APIRouter(prefix="/properties", tags=["Buyer"])
seller_router = APIRouter(prefix="/properties", tags=["Seller"])
admin_router = APIRouter(prefix="/admin/properties", tags=["Admin"])

PAGE_QUERY = Query(1, description="Page number (starts from 1, values below 1 are treated as 1)")
SIZE_QUERY = Query(10, description="Page size (clamped to 1..100)")


# Buyer endpoints

@buyer_router.get(
    "/approved",
    response_model=ApiResponse[List[PropertyResponse]],
    summary="List approved properties",
    description="Approved listings, most recently updated first",
    responses=get_list_error_responses()
)
async def list_approved_properties(
    page: int = PAGE_QUERY,
    size: int = SIZE_QUERY,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[List[PropertyResponse]]:
    items, meta = await property_service.list_approved(page, size)
    return ApiResponse(message="Approved properties fetched successfully", data=items, meta=meta)


@buyer_router.get(
    "/filter",
    response_model=ApiResponse[List[PropertyResponse]],
    summary="Filter approved properties",
    description="Filter approved listings by status, type and location state. Values are case-insensitive.",
    responses=get_list_error_responses()
)
async def filter_properties(
    status: Optional[str] = Query(None, description="Listing status (Available, Rented, Sold)"),
    type: Optional[str] = Query(None, description="Property type (House, Land)"),
    state: Optional[str] = Query(None, description="Location state, e.g. Bagmati"),
    page: int = PAGE_QUERY,
    size: int = SIZE_QUERY,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[List[PropertyResponse]]:
    """
    Search approved properties.

    Raises:
        InvalidArgumentError: If a filter value is not recognised
    """
    items, meta = await property_service.filter_properties(
        status=status,
        type=type,
        state=state,
        page=page,
        size=size
    )
    return ApiResponse(message="Filtered properties fetched successfully", data=items, meta=meta)


@buyer_router.get(
    "/{property_id}",
    response_model=ApiResponse[PropertyResponse],
    summary="Get property details",
    responses=get_error_responses(404, 500)
)
async def get_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[PropertyResponse]:
    property_response = await property_service.get_property(property_id)
    return ApiResponse(message="Property fetched successfully", data=property_response)


# Seller endpoints

@seller_router.post(
    "",
    response_model=ApiResponse[PropertyResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create draft property",
    description="Create a new listing in draft state together with its location",
    responses=get_crud_error_responses()
)
async def create_property(
    property_data: PropertyCreate,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[PropertyResponse]:
    """
    Create a new draft listing.

    Raises:
        LocationCreationError: If the location cannot be created
        SaveError: If the listing cannot be saved
    """
    property_response = await property_service.create_property(property_data)
    return ApiResponse(message="Property created successfully", data=property_response)


@seller_router.get(
    "/owner/{owner_id}",
    response_model=ApiResponse[List[PropertyResponse]],
    summary="List owner properties",
    description="All listings of one owner in any approval state",
    responses=get_error_responses(404, 500)
)
async def list_owner_properties(
    owner_id: UUID = Path(..., description="Owner ID"),
    page: int = PAGE_QUERY,
    size: int = SIZE_QUERY,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[List[PropertyResponse]]:
    items, meta = await property_service.list_owner_properties(owner_id, page, size)
    return ApiResponse(message="Owner properties fetched successfully", data=items, meta=meta)


@seller_router.put(
    "/{property_id}",
    response_model=ApiResponse[PropertyResponse],
    summary="Update property",
    description="Partial update; absent fields are left unchanged",
    responses=get_crud_error_responses()
)
async def update_property(
    property_data: PropertyUpdate,
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[PropertyResponse]:
    property_response = await property_service.update_property(property_id, property_data)
    return ApiResponse(message="Property updated successfully", data=property_response)


@seller_router.patch(
    "/{property_id}/submit",
    response_model=ApiResponse[None],
    summary="Submit property for approval",
    responses=get_error_responses(404, 409, 500)
)
async def submit_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[None]:
    await property_service.submit_for_approval(property_id)
    return ApiResponse(message="Property submitted for approval")


# Admin endpoints

@admin_router.post(
    "",
    response_model=ApiResponse[PropertyResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create approved property",
    description="Trusted direct entry; the listing starts out approved",
    responses=get_crud_error_responses()
)
async def create_admin_approved_property(
    property_data: PropertyCreate,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[PropertyResponse]:
    property_response = await property_service.create_admin_approved_property(property_data)
    return ApiResponse(message="Property created and approved successfully", data=property_response)


@admin_router.get(
    "",
    response_model=ApiResponse[List[PropertyResponse]],
    summary="List all properties",
    description="Every listing regardless of approval state",
    responses=get_list_error_responses()
)
async def list_all_properties(
    page: int = PAGE_QUERY,
    size: int = SIZE_QUERY,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[List[PropertyResponse]]:
    items, meta = await property_service.list_all(page, size)
    return ApiResponse(message="Properties fetched successfully", data=items, meta=meta)


@admin_router.get(
    "/pending",
    response_model=ApiResponse[List[PropertyResponse]],
    summary="List properties pending approval",
    responses=get_list_error_responses()
)
async def list_pending_properties(
    page: int = PAGE_QUERY,
    size: int = SIZE_QUERY,
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[List[PropertyResponse]]:
    items, meta = await property_service.list_pending_approval(page, size)
    return ApiResponse(message="Pending properties fetched successfully", data=items, meta=meta)


@admin_router.patch(
    "/{property_id}/approve",
    response_model=ApiResponse[None],
    summary="Approve property",
    responses=get_error_responses(404, 409, 500)
)
async def approve_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[None]:
    await property_service.approve_property(property_id)
    return ApiResponse(message="Property approved")


@admin_router.patch(
    "/{property_id}/reject",
    response_model=ApiResponse[None],
    summary="Reject property",
    responses=get_error_responses(404, 409, 500)
)
async def reject_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[None]:
    await property_service.reject_property(property_id)
    return ApiResponse(message="Property rejected")


@admin_router.patch(
    "/{property_id}/archive",
    response_model=ApiResponse[None],
    summary="Archive property",
    responses=get_error_responses(404, 409, 500)
)
async def archive_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[None]:
    await property_service.archive_property(property_id)
    return ApiResponse(message="Property archived")


@admin_router.delete(
    "/{property_id}",
    response_model=ApiResponse[None],
    summary="Delete property",
    description="Permanently remove a listing and its location from any approval state",
    responses=get_error_responses(404, 409, 500)
)
async def delete_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyWorkflowService = Depends(get_property_service)
) -> ApiResponse[None]:
    await property_service.delete_property(property_id)
    return ApiResponse(message="Property deleted successfully")
