"""
Mermaid sanitation package.

Exposes the diagram type vocabulary and the sanitizer pipeline.
"""

from backend.core.mermaid.diagram_types import (
    DIAGRAM_KEYWORDS,
    DiagramType,
    canonical_type,
    is_diagram_start,
)
from backend.core.mermaid.sanitizer import (
    DiagramSanitizer,
    SanitizedDiagram,
    extract_diagram,
    fallback_diagram,
    is_valid_mermaid,
    sanitize,
    strip_fences,
)

__all__ = [
    "DIAGRAM_KEYWORDS",
    "DiagramSanitizer",
    "DiagramType",
    "SanitizedDiagram",
    "canonical_type",
    "extract_diagram",
    "fallback_diagram",
    "is_diagram_start",
    "is_valid_mermaid",
    "sanitize",
    "strip_fences",
]
