"""
Core business logic module.

Contains the Mermaid sanitation pipeline, the model collaborator, and the
exception hierarchy. Nothing in here performs HTTP routing or persistence.
"""

from backend.core.exceptions import (
    ConceptVizException,
    DiagramGenerationError,
    ValidationError,
)

__all__ = [
    "ConceptVizException",
    "DiagramGenerationError",
    "ValidationError",
]
