"""Custom exception hierarchy for regwalk.

regwalk errors carry:
- Structured error codes for programmatic handling
- Context describing the walk that failed
- Actionable suggestions for recovery

All regwalk errors inherit from RegwalkError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with walk bounds and partial output
- suggestions: List of actionable steps to resolve the issue
- recoverable: Whether a fresh walk may succeed

Example:
    try:
        value = walker.generate(5, 7)
    except WalkError as e:
        print(f"Error: {e}")
        print(f"Suggestions: {e.suggestions}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for regwalk.

    Error codes are organized by category:
    - W1xx: Walk errors (recoverable by retrying with new random draws)
    - E2xx: Validation errors (caller input, configuration, definitions)
    - E9xx: Unknown/internal errors
    """

    # Walk errors (W1xx)
    INSUFFICIENT_LENGTH = "W101"
    MAX_LENGTH_EXCEEDED = "W102"

    # Validation errors (E2xx)
    INVALID_LENGTH_RANGE = "E201"
    INVALID_CONFIG = "E202"
    INVALID_AUTOMATON = "E203"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        if self.value.startswith("W"):
            return "walk"
        code_num = int(self.value[1:])
        if 200 <= code_num < 300:
            return "validation"
        return "unknown"


@dataclass
class ErrorContext:
    """Structured context for error logging and debugging.

    Attributes:
        min_length: Lower length bound requested by the caller
        max_length: Upper length bound requested by the caller
        target_length: Length sampled for the first walk phase
        walk_length: Number of characters emitted when the walk stopped
        partial: Characters emitted before the walk stopped
        source: File the offending definition or config came from
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    min_length: int | None = None
    max_length: int | None = None
    target_length: int | None = None
    walk_length: int | None = None
    partial: str | None = None
    source: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "min_length": self.min_length,
            "max_length": self.max_length,
            "target_length": self.target_length,
            "walk_length": self.walk_length,
            "partial": self.partial,
            "source": self.source,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the walk position as a readable string."""
        parts = []
        if self.source:
            parts.append(f"source={self.source}")
        if self.min_length is not None and self.max_length is not None:
            parts.append(f"bounds=[{self.min_length}, {self.max_length}]")
        if self.target_length is not None:
            parts.append(f"target={self.target_length}")
        if self.walk_length is not None:
            parts.append(f"walked={self.walk_length}")
        return " > ".join(parts) if parts else "unknown location"


class RegwalkError(Exception):
    """Base exception for all regwalk errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with walk details
        suggestions: List of actionable steps to resolve the issue
        recoverable: Whether a new walk may succeed
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        recoverable: bool | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        if recoverable is not None:
            self.recoverable = recoverable
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        """Format error as a readable string with context."""
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
            "",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.context.partial:
            lines.append(f"Partial output: {self.context.partial!r}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class WalkError(RegwalkError):
    """A bounded random walk could not produce a string.

    Walk errors depend only on the random draws of one walk, so a new
    walk over the same automaton may succeed. The generator never
    retries on its own.
    """

    default_message = "Random walk failed"
    default_suggestions = [
        "Retry the call; a new walk uses different random draws",
        "Widen the [min_length, max_length] range",
    ]


class InsufficientLengthError(WalkError):
    """The walk hit a state with no outgoing transitions before min_length."""

    error_code = ErrorCode.INSUFFICIENT_LENGTH
    default_message = "Reached accept state before minimum length"
    default_suggestions = [
        "Retry the call; a new walk uses different random draws",
        "Lower min_length; the automaton may not accept strings that long",
    ]


class MaxLengthExceededError(WalkError):
    """The walk used up max_length characters without reaching an accept state."""

    error_code = ErrorCode.MAX_LENGTH_EXCEEDED
    default_message = "Exceeded maximum walk length before reaching an accept state"
    default_suggestions = [
        "Retry the call; a new walk uses different random draws",
        "Raise max_length; the shortest accepted suffix may be longer",
    ]


class ValidationError(RegwalkError):
    """Validation failed.

    Check the 'field' and 'value' attributes for specific details about
    what failed validation.
    """

    error_code = ErrorCode.INVALID_LENGTH_RANGE
    default_message = "Validation failed"
    recoverable = False
    default_suggestions = [
        "Check the field name and value mentioned in the error",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = repr(self.value)
        if self.expected:
            result["expected"] = self.expected
        return result


class InvalidLengthRangeError(ValidationError):
    """Length bounds passed to bounded generation are not 0 <= min <= max."""

    error_code = ErrorCode.INVALID_LENGTH_RANGE
    default_message = "Invalid length range"
    default_suggestions = [
        "Pass both min_length and max_length, or neither",
        "Use bounds satisfying 0 <= min_length <= max_length",
    ]


class ConfigValidationError(ValidationError):
    """Configuration validation failed.

    The YAML config file or a REGWALK_* environment variable holds an
    invalid value.
    """

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check the config file syntax with a YAML linter",
        "Check REGWALK_* environment variables for stray values",
    ]


class AutomatonDefinitionError(ValidationError):
    """An automaton definition document is malformed."""

    error_code = ErrorCode.INVALID_AUTOMATON
    default_message = "Invalid automaton definition"
    default_suggestions = [
        "Every transition must point at a declared state id",
        "Ranges must satisfy 0 <= min <= max <= 0x10FFFF",
        "States without transitions must be marked accept: true",
    ]
