"""
Custom Exceptions for Voice Admin

Hierarchical exception classes for proper error handling across layers.
Services raise these; the API layer maps each class to an HTTP status.
"""

from typing import Optional, Dict, Any


class VoiceAdminError(Exception):
    """Base exception for all Voice Admin errors."""

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


class ValidationError(VoiceAdminError):
    """Raised when input validation fails."""
    pass


class DatabaseError(VoiceAdminError):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, details, original_error)


class NotFoundError(DatabaseError):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(DatabaseError):
    """Raised when a uniqueness constraint would be violated."""
    pass


class InvalidStateError(VoiceAdminError):
    """Raised when an entity's lifecycle state forbids the operation."""

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        entity_id: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {}
        if entity:
            details["entity"] = entity
        if entity_id is not None:
            details["id"] = entity_id
        super().__init__(message, details, original_error)


class QuotaExceededError(VoiceAdminError):
    """Raised when a subscription plan limit has been reached."""

    def __init__(
        self,
        message: str,
        limit: Optional[int] = None,
        current: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {}
        if limit is not None:
            details["limit"] = limit
        if current is not None:
            details["current"] = current
        super().__init__(message, details, original_error)


class ConfigurationError(VoiceAdminError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)
