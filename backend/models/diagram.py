"""
Diagram domain models and schemas.

Request/response schemas for topic-to-Mermaid diagram generation.

Dependencies: pydantic, backend.core.mermaid
System role: Diagram data contracts
"""

from pydantic import BaseModel, Field, field_validator

from backend.core.mermaid.diagram_types import DiagramType

TOPIC_MAX_LENGTH = 500


class DiagramRequest(BaseModel):
    """Request schema for diagram generation."""

    topic: str = Field(
        min_length=1,
        max_length=TOPIC_MAX_LENGTH,
        description="Concept or process to visualize",
    )

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, value: str) -> str:
        """Reject topics made only of whitespace."""
        if not value.strip():
            raise ValueError("Topic is required")
        return value


class DiagramResponse(BaseModel):
    """Response schema for diagram generation."""

    topic: str = Field(description="Topic the diagram was generated for")
    mermaid_code: str = Field(description="Renderable Mermaid diagram source")
    diagram_type: DiagramType = Field(
        default=DiagramType.GRAPH,
        description="Canonical diagram type of mermaid_code",
    )
    used_fallback: bool = Field(
        default=False,
        description="True when model output was unusable and the placeholder was returned",
    )
