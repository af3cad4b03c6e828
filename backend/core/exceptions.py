"""
Exception hierarchy for the ConceptViz backend.

Provides a small layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Model output problems are deliberately absent: the sanitizer absorbs them
into the fallback diagram instead of raising.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ConceptVizException(Exception):
    """Base exception for all ConceptViz application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ConceptVizException):
    """Raised when caller-supplied input fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class DiagramGenerationError(ConceptVizException):
    """Raised when the language model call fails or returns nothing usable."""

    def __init__(
        self,
        message: str,
        topic: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize diagram generation error.

        Args:
            message: Error message
            topic: Topic the diagram was requested for
            details: Additional context (model id, upstream error type)
        """
        details = details or {}
        if topic is not None:
            details["topic"] = topic
        self.topic = topic
        super().__init__(message, details)
