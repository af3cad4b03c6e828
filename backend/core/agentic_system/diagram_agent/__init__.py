"""Diagram agent: prompt template and Gemini-backed generation."""

from backend.core.agentic_system.diagram_agent.diagram_agent import DiagramAgent
from backend.core.agentic_system.diagram_agent.diagram_prompt import (
    DIAGRAM_PROMPT,
    get_diagram_prompt,
)

__all__ = ["DIAGRAM_PROMPT", "DiagramAgent", "get_diagram_prompt"]
