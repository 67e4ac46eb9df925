# services/pirep-service/src/apps/core/services/exceptions.py
"""
PIREP Service Exceptions

Custom exceptions for report lifecycle operations. Each carries the HTTP
status the API answers with.
"""

from typing import Optional, Dict, Any


class PirepServiceError(Exception):
    """Base exception for PIREP service errors."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: str = "PIREP_SERVICE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PirepServiceError):
    """Raised when input data is missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details=error_details
        )


class NotFoundError(PirepServiceError):
    """Raised when a referenced record does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str,
        resource_id: Any = None,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"{resource} not found: {resource_id}"
        super().__init__(
            message=msg,
            code="NOT_FOUND",
            details=details or {"resource": resource, "id": str(resource_id)}
        )


class StateTransitionError(PirepServiceError):
    """Raised when a report state transition is not allowed."""

    def __init__(
        self,
        current_state: str,
        target_state: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Cannot transition from {current_state} to {target_state}"
        error_details = details or {}
        error_details.update({
            "current_state": current_state,
            "target_state": target_state,
        })
        super().__init__(
            message=msg,
            code="STATE_TRANSITION_ERROR",
            details=error_details
        )


class InactiveReportError(PirepServiceError):
    """Raised when in-flight data is posted to a report that is closed."""

    def __init__(
        self,
        pirep_id: Any,
        state: str,
        message: str = None
    ):
        super().__init__(
            message=message or f"PIREP {pirep_id} is {state} and no longer accepts updates",
            code="INACTIVE_REPORT",
            details={"pirep_id": str(pirep_id), "state": state}
        )


class ConfigurationError(PirepServiceError):
    """Raised when VA_SETTINGS holds an invalid value."""

    status_code = 500

    def __init__(
        self,
        message: str,
        key: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if key:
            error_details["key"] = key
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details=error_details
        )
