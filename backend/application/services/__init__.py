"""Service orchestrators."""

from .diagram_service import (
    DiagramService,
    build_diagram_response,
    get_diagram_service,
    validate_topic,
)

__all__ = [
    "DiagramService",
    "build_diagram_response",
    "get_diagram_service",
    "validate_topic",
]
