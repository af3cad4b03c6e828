"""
Test suite for the generate_diagram command-line script.

Tests offline sanitation of saved replies, the model-backed path with a
patched service, and exit codes.

System role: Verification of the developer CLI
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from backend.core.exceptions import ValidationError
from backend.core.mermaid.sanitizer import fallback_diagram
from backend.models.diagram import DiagramResponse
from backend.scripts.generate_diagram import main


@pytest.fixture(autouse=True)
def no_logging_reconfiguration():
    """Keep the CLI from replacing pytest's log handlers."""
    with patch("backend.scripts.generate_diagram.configure_logging"):
        yield


class TestGenerateDiagramCli:
    """Test suite for main()."""

    def test_raw_file_is_sanitized_offline(self, tmp_path, capsys, fenced_reply: str) -> None:
        """--raw-file cleans a saved reply and prints Mermaid source."""
        # Arrange
        raw_file = tmp_path / "reply.txt"
        raw_file.write_text(fenced_reply, encoding="utf-8")

        # Act
        exit_code = main(["DNS", "--raw-file", str(raw_file)])

        # Assert
        assert exit_code == 0
        out = capsys.readouterr().out
        assert out == "graph TD\n    Client --> Resolver\n    Resolver --> RootServer\n"

    def test_raw_file_json_output_reports_fallback(self, tmp_path, capsys) -> None:
        """--json prints the full response including the fallback flag."""
        # Arrange
        raw_file = tmp_path / "reply.txt"
        raw_file.write_text("Sorry, I can't help with that.", encoding="utf-8")

        # Act
        exit_code = main(["Quantum tunnelling", "--raw-file", str(raw_file), "--json"])

        # Assert
        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["used_fallback"] is True
        assert data["mermaid_code"] == fallback_diagram("Quantum tunnelling")

    def test_model_path_uses_diagram_service(self, capsys) -> None:
        """Without --raw-file the cached service generates the diagram."""
        # Arrange
        service = MagicMock()
        service.generate_diagram_sync.return_value = DiagramResponse(
            topic="Git", mermaid_code="gitGraph\n  commit"
        )

        with patch(
            "backend.application.services.diagram_service.get_diagram_service",
            return_value=service,
        ):
            # Act
            exit_code = main(["Git"])

        # Assert
        assert exit_code == 0
        assert capsys.readouterr().out == "gitGraph\n  commit\n"
        service.generate_diagram_sync.assert_called_once_with("Git")

    def test_invalid_topic_exits_with_code_two(self) -> None:
        """A ValidationError from the service maps to exit code 2."""
        # Arrange
        service = MagicMock()
        service.generate_diagram_sync.side_effect = ValidationError("Topic is required", field="topic")

        with patch(
            "backend.application.services.diagram_service.get_diagram_service",
            return_value=service,
        ):
            # Act / Assert
            assert main([" "]) == 2


class TestGenerateDiagramCliRawFileErrors:
    """Test suite for topic and file errors on the --raw-file path."""

    @pytest.mark.parametrize("topic", ["", "   ", "x" * 501])
    def test_invalid_topic_with_raw_file_exits_with_code_two(
        self, tmp_path, capsys, fenced_reply: str, topic: str
    ) -> None:
        """A saved reply does not bypass topic validation."""
        # Arrange
        raw_file = tmp_path / "reply.txt"
        raw_file.write_text(fenced_reply, encoding="utf-8")

        # Act
        exit_code = main([topic, "--raw-file", str(raw_file)])

        # Assert
        assert exit_code == 2
        assert capsys.readouterr().out == ""

    def test_topic_validated_before_file_is_read(self, tmp_path) -> None:
        """An invalid topic is reported even when the file is also missing."""
        # Act
        exit_code = main(["   ", "--raw-file", str(tmp_path / "missing.txt")])

        # Assert
        assert exit_code == 2

    def test_missing_raw_file_exits_with_code_one(self, tmp_path, capsys) -> None:
        """An unreadable reply file is reported without a traceback."""
        # Arrange
        missing = tmp_path / "nope.txt"

        # Act
        exit_code = main(["DNS", "--raw-file", str(missing)])

        # Assert
        assert exit_code == 1
        assert capsys.readouterr().out == ""
