"""Tests for diagram request/response models."""

import pytest
from pydantic import ValidationError

from backend.core.mermaid.diagram_types import DiagramType
from backend.models.diagram import DiagramRequest, DiagramResponse, TOPIC_MAX_LENGTH


class TestDiagramRequest:
    """Tests for DiagramRequest Pydantic schema."""

    def test_topic_required(self) -> None:
        """Topic field is required."""
        with pytest.raises(ValidationError):
            DiagramRequest()  # type: ignore[call-arg]

    def test_valid_topic(self) -> None:
        """A normal topic is stored unchanged."""
        # Act
        request = DiagramRequest(topic=" Binary search ")

        # Assert
        assert request.topic == " Binary search "

    @pytest.mark.parametrize("topic", ["", "   ", "\n"])
    def test_blank_topic_rejected(self, topic: str) -> None:
        """Empty and whitespace-only topics are rejected."""
        with pytest.raises(ValidationError):
            DiagramRequest(topic=topic)

    def test_topic_length_limit(self) -> None:
        """Topics may be up to 500 characters long."""
        # Arrange
        longest = "a" * TOPIC_MAX_LENGTH

        # Act
        request = DiagramRequest(topic=longest)

        # Assert
        assert TOPIC_MAX_LENGTH == 500
        assert request.topic == longest
        with pytest.raises(ValidationError):
            DiagramRequest(topic=longest + "a")


class TestDiagramResponse:
    """Tests for DiagramResponse Pydantic schema."""

    def test_defaults(self) -> None:
        """diagram_type defaults to graph and used_fallback to False."""
        # Act
        response = DiagramResponse(topic="t", mermaid_code="graph TD\n  A-->B")

        # Assert
        assert response.diagram_type is DiagramType.GRAPH
        assert response.used_fallback is False

    def test_serializes_diagram_type_as_keyword(self) -> None:
        """The diagram type is dumped as its Mermaid keyword."""
        # Arrange
        response = DiagramResponse(
            topic="t",
            mermaid_code="sequenceDiagram\n  A->>B: hi",
            diagram_type=DiagramType.SEQUENCE,
        )

        # Act
        data = response.model_dump(mode="json")

        # Assert
        assert data["diagram_type"] == "sequenceDiagram"
        assert data["mermaid_code"] == "sequenceDiagram\n  A->>B: hi"
