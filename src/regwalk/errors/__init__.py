"""regwalk error handling module.

Provides the exception hierarchy with error codes:

- Walk errors raised by bounded generation (recoverable by retrying)
- Validation errors for length bounds, configuration and definitions
"""

from regwalk.errors.base import (
    AutomatonDefinitionError,
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    InsufficientLengthError,
    InvalidLengthRangeError,
    MaxLengthExceededError,
    RegwalkError,
    ValidationError,
    WalkError,
)

__all__ = [
    # Base exceptions
    "RegwalkError",
    "ErrorCode",
    "ErrorContext",
    # Walk errors
    "WalkError",
    "InsufficientLengthError",
    "MaxLengthExceededError",
    # Validation errors
    "ValidationError",
    "InvalidLengthRangeError",
    "ConfigValidationError",
    "AutomatonDefinitionError",
]
