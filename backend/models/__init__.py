"""Request/response models."""

from backend.models.diagram import DiagramRequest, DiagramResponse, TOPIC_MAX_LENGTH

__all__ = ["DiagramRequest", "DiagramResponse", "TOPIC_MAX_LENGTH"]
