"""
Vehicle API - Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the two failure tiers of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the matching HTTP response.
Who:   Raised by the service and store layers; caught by global handlers.

Exception Hierarchy:
    VehicleAPIError (base)
    ├── NotFoundError   → 404 Not Found, empty body
    └── StorageError    → 500 Internal Server Error, raw error text in body

No validation tier: malformed bodies and path
ids are rejected by FastAPI itself (422) before any handler runs.
"""

from typing import Any, Dict, Optional


class VehicleAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description
        context:  Additional debug info (logged server-side)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(VehicleAPIError):
    """
    Raised when an id-addressed operation finds no entity.

    When:    show/update/destroy with an id that has no row.
    HTTP:    404 Not Found with an empty body.

    The ORM returns None for a missing row; the service converts that None
    into this exception so routes never branch on it themselves.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StorageError(VehicleAPIError):
    """
    Raised when any DataStore call fails.

    When:    Connection lost, constraint violation, driver error, or any other
             failure surfaced while reading or writing vehicles.
    HTTP:    500 Internal Server Error

    `message` is the text of the underlying failure and is returned to the
    client as-is. `operation` names the controller action that failed.
    """

    def __init__(
        self,
        message: str = "A storage error occurred",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation

    @classmethod
    def wrap(cls, exc: Exception, operation: str) -> "StorageError":
        """Builds a StorageError carrying the text of `exc`."""
        if isinstance(exc, StorageError):
            return exc
        return cls(
            message=str(exc) or type(exc).__name__,
            operation=operation,
            context={"error_type": type(exc).__name__},
        )
