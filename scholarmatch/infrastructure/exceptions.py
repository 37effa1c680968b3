"""
Custom Exceptions for ScholarMatch

Hierarchical exception classes for proper error handling across layers.
The scoring engine itself never raises for bad data (it clamps); these
cover configuration and payload problems at the edges.
"""

from typing import Optional, Dict, Any


class ScholarMatchError(Exception):
    """Base exception for all ScholarMatch errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(ScholarMatchError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if field:
            details["field"] = field
        super().__init__(message, details, original_error)


class CriteriaParseError(ValidationError):
    """Raised when stored eligibility criteria cannot be decoded."""
    pass


class BatchTooLargeError(ValidationError):
    """Raised when a batch request exceeds the configured limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Batch of {size} scholarships exceeds the limit of {limit}",
            field="scholarships",
        )
        self.details["size"] = size
        self.details["limit"] = limit


class ConfigurationError(ScholarMatchError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        invalid_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if invalid_keys:
            details["invalid_keys"] = invalid_keys
        super().__init__(message, details, original_error)
