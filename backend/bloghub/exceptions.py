"""
BlogHub Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the failure modes of a request.
Why:   Each class maps to one HTTP status code, so services stay free of HTTP
       concerns while routes and global handlers produce consistent bodies.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses.
Who:   Raised by services and middleware; caught by global handlers.

Exception Hierarchy:
    BlogHubError (base)
    ├── ValidationError    → 400 Bad Request   {"message"}
    ├── UnauthorizedError  → 401 Unauthorized  {"message"}
    ├── NotFoundError      → 404 Not Found     {"message": "<Resource> not found!"}
    └── OperationError     → 500 Server Error  {"message", "detail"}

Note on OperationError:
    The `detail` field echoes the underlying error text to the client
    verbatim (e.g. the unique constraint that rejected a duplicate username).
"""

from typing import Any, Dict, Optional


class BlogHubError(Exception):
    """
    Base exception for all BlogHub application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogHubError):
    """
    Raised when client input is malformed in a way the route reports as 400.

    When: Invalid user id on user routes, empty title/description on PATCH.
    HTTP: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(BlogHubError):
    """
    Raised when a request to the API carries no acceptable bearer token.

    HTTP: 401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BlogHubError):
    """
    Raised when a requested entity, or its ownership chain, does not exist.

    What:    The lookup scoped to the owning user (and category) matched nothing.
    When:    Unknown id, malformed id on category/blog routes, or a document
             owned by someone else.
    HTTP:    404 Not Found

    The message follows the API's wording: NotFoundError("blog") renders as
    "Blog not found!". Pass `message` to override it entirely.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(
            message=message or f"{resource.capitalize()} not found!",
            context=ctx,
        )
        self.resource = resource


class OperationError(BlogHubError):
    """
    Raised when a handler's store operation or body parsing fails unexpectedly.

    What:    Wraps any non-application exception raised while serving a route.
    When:    Unique constraint violations, schema validation of the body,
             malformed JSON, lost connections.
    HTTP:    500 Internal Server Error

    Attributes:
        detail: The original error text, returned to the caller as `detail`.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.detail = detail

    @classmethod
    def wrap(cls, message: str, error: Exception) -> "OperationError":
        """Builds an OperationError carrying `error`'s text as detail."""
        return cls(
            message=message,
            detail=str(error),
            context={"error_type": type(error).__name__},
        )
