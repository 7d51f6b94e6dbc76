"""
Domain exceptions for the Prediction Diary application.

This module defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns.
"""

from typing import Any


class DiaryException(Exception):
    """
    Base exception for all Prediction Diary errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DiaryException):
    """Raised when domain input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(DiaryException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str, error_code: str = "RESOURCE_NOT_FOUND"):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            error_code,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNotFoundException(ResourceNotFoundException):
    """Raised when a post is requested for a user that does not exist."""

    def __init__(self, user_id: str):
        super().__init__("User", user_id, "USER_NOT_FOUND")


class PostNotFoundException(ResourceNotFoundException):
    """Raised when editing a post that does not exist."""

    def __init__(self, post_id: str):
        super().__init__("Post", post_id, "POST_NOT_FOUND")
