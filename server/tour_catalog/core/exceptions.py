"""Custom exceptions following RFC 9457 Problem Details for HTTP APIs."""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ProblemDetailsException(HTTPException):
    """
    Base exception class following RFC 9457 Problem Details for HTTP APIs.

    https://tools.ietf.org/rfc/rfc9457.txt
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        instance: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize Problem Details exception.

        Args:
            status_code: HTTP status code
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            type_uri: URI reference that identifies the problem type
            instance: URI reference that identifies the specific occurrence
            extensions: Additional problem-specific information
            headers: HTTP headers to include in response
        """
        self.status_code = status_code
        self.title = title
        self.type_uri = type_uri or f"about:blank#{status_code}"
        self.instance = instance
        self.extensions = extensions or {}

        self.problem_details = {
            "type": self.type_uri,
            "title": self.title,
            "status": self.status_code,
        }

        if detail:
            self.problem_details["detail"] = detail

        if self.instance:
            self.problem_details["instance"] = self.instance

        self.problem_details.update(self.extensions)

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers
        )

    def __str__(self) -> str:
        return self.detail or self.title


class NotFoundError(ProblemDetailsException):
    """Raised when a lookup by identifier or exact title yields nothing."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions = {
            "resource_type": resource_type,
        }
        if resource_id:
            extensions["resource_id"] = resource_id

        super().__init__(
            status_code=404,
            title="Resource Not Found",
            detail=detail,
            type_uri="https://example.com/problems/resource-not-found",
            instance=instance,
            extensions=extensions,
        )


class OperationFailedError(ProblemDetailsException):
    """
    Raised for every failure other than a missing resource.

    The detail embeds the underlying cause, prefixed with the operation
    that was attempted.
    """

    def __init__(
        self,
        detail: str = "An unexpected error occurred while processing the request",
        operation: Optional[str] = None,
        error_id: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not error_id:
            error_id = str(uuid.uuid4())

        extensions = {
            "error_id": error_id,
            "timestamp": datetime.utcnow().isoformat() + "Z",
        }
        if operation:
            extensions["operation"] = operation

        super().__init__(
            status_code=500,
            title="Operation Failed",
            detail=detail,
            type_uri="https://example.com/problems/operation-failed",
            instance=instance,
            extensions=extensions,
        )


def _violations(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error entries into path/message pairs."""
    violations = []
    for error in errors:
        # Drop the leading "body"/"query"/"path" marker from the location
        location = [str(part) for part in error.get("loc", ())[1:]]
        violations.append({
            "path": ".".join(location) or "$",
            "message": error.get("msg", "Invalid value"),
        })
    return violations


async def problem_details_handler(request: Request, exc: ProblemDetailsException) -> JSONResponse:
    """
    Exception handler for Problem Details exceptions.

    Args:
        request: FastAPI request object
        exc: Problem Details exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    content = dict(exc.problem_details)
    content.setdefault("instance", str(request.url))
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a 422 problem with violations."""
    violations = _violations(exc.errors())

    logger.info(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "violation_count": len(violations)
        }
    )

    return JSONResponse(
        status_code=422,
        content={
            "type": "https://example.com/problems/validation-error",
            "title": "Validation Error",
            "status": 422,
            "detail": "The request data failed validation",
            "instance": str(request.url),
            "violations": violations,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Generic exception handler that converts unhandled exceptions to Problem Details format.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "error_id": error_id,
            "error": str(exc)
        },
        exc_info=exc
    )

    problem_details = {
        "type": "https://example.com/problems/internal-server-error",
        "title": "Internal Server Error",
        "status": 500,
        "detail": "An unexpected error occurred while processing the request",
        "instance": str(request.url),
        "error_id": error_id,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }

    return JSONResponse(
        status_code=500,
        content=problem_details,
    )
