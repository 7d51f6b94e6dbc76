"""
Infrastructure exceptions for the Prediction Diary application.

Storage failures are surfaced to the caller as-is; nothing here retries.
"""

from prediction_diary.domain.exceptions import DiaryException


class RepositoryException(DiaryException):
    """
    A storage operation failed (connection lost, constraint violated, ...).

    ``reason`` holds the driver message for logs; it is kept out of
    ``details`` so it never reaches a response body.
    """

    def __init__(self, operation: str, entity_type: str, reason: str):
        super().__init__(
            f"Repository operation '{operation}' failed for {entity_type}",
            "REPOSITORY_ERROR",
            {"operation": operation, "entity_type": entity_type},
        )
        self.reason = reason
