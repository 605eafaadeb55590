"""
Turns exceptions into the structured error envelope and logs them.
Maps every failure to a stable error code, a transport status and a structured payload.
"""

from typing import Dict, Any, Optional, List, Sequence
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from listings.utils.exceptions import APIException, ValidationError
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Builds error responses for every exception handler registered on the app.
    Unclassified failures still produce a structured payload without leaking internals.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Build the error envelope dictionary.

        Args:
            error_code: Error code identifier
            message: Human-readable error message
            details: Optional list of detailed error information
            request_id: Optional request identifier for tracking

        Returns:
            Formatted error response dictionary
        """
        response = {
            "error": {
                "code": error_code,
                "message": message,
                "timestamp": ErrorHandlerService._get_current_timestamp(),
            }
        }

        if details:
            response["error"]["details"] = details

        if request_id:
            response["error"]["request_id"] = request_id

        return response

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle application exceptions with their own code and status.

        Server-side failures are logged at error level with the chained cause;
        client errors are logged as warnings.
        """
        request_id = ErrorHandlerService._generate_request_id()

        log_extra = {
            "error_code": exception.error_code,
            "status_code": exception.status_code,
            "request_id": request_id,
            "path": request.url.path if request else None
        }
        if exception.status_code >= 500:
            logger.error(
                f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
                extra=log_extra,
                exc_info=exception.cause
            )
        else:
            logger.warning(
                f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
                extra=log_extra
            )

        details = None
        if isinstance(exception, ValidationError) and exception.field_errors:
            details = exception.field_errors

        error_response = ErrorHandlerService.format_error_response(
            error_code=exception.error_code or "API_ERROR",
            message=exception.detail,
            details=details,
            request_id=request_id
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=exception.headers
        )

    @staticmethod
    def handle_validation_error(
        errors: Sequence[Dict[str, Any]],
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle request validation errors with detailed field information.

        Args:
            errors: Error entries as produced by ``exc.errors()``
            request: Optional FastAPI request object

        Returns:
            JSON response with validation error details
        """
        request_id = ErrorHandlerService._generate_request_id()

        validation_details = []
        for error in errors:
            field_path = " -> ".join(str(loc) for loc in error.get("loc", ()))
            validation_details.append({
                "field": field_path,
                "message": error.get("msg"),
                "type": error.get("type"),
                "input": error.get("input")
            })

        logger.warning(
            f"Validation Error [{request_id}]: {len(validation_details)} field errors",
            extra={
                "error_count": len(validation_details),
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            details=validation_details,
            request_id=request_id
        )

        return JSONResponse(
            status_code=422,
            content=jsonable_encoder(error_response)
        )

    @staticmethod
    def handle_database_error(
        exception: SQLAlchemyError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Fallback for store errors raised outside the workflow service."""
        request_id = ErrorHandlerService._generate_request_id()

        if isinstance(exception, IntegrityError):
            error_code, message, status_code = "CONFLICT", "Property data conflicts with a stored record", 409
        else:
            error_code, message, status_code = "DATABASE_ERROR", "Property store is unavailable", 500

        logger.error(
            f"Database Error [{request_id}]: {type(exception).__name__}",
            extra={"request_id": request_id, "path": request.url.path if request else None},
            exc_info=exception
        )

        return JSONResponse(
            status_code=status_code,
            content=ErrorHandlerService.format_error_response(
                error_code=error_code,
                message=message,
                request_id=request_id
            )
        )

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle framework HTTP exceptions such as unknown routes."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.warning(
            f"HTTP Exception [{request_id}]: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code=f"HTTP_{exception.status_code}",
            message=str(exception.detail),
            request_id=request_id
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=getattr(exception, "headers", None)
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Catch-all for unclassified failures.

        Args:
            exception: Unexpected exception
            request: Optional FastAPI request object

        Returns:
            JSON response with a generic error message
        """
        request_id = ErrorHandlerService._generate_request_id()

        logger.error(
            f"Unexpected Error [{request_id}]: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=exception
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again later.",
            request_id=request_id
        )

        return JSONResponse(
            status_code=500,
            content=error_response
        )

    @staticmethod
    def _generate_request_id() -> str:
        """Short random id echoed back to clients for log correlation."""
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_current_timestamp() -> str:
        """Get current UTC timestamp in ISO format."""
        return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
