"""
Command-line diagram generation.

Usage:
    python -m backend.scripts.generate_diagram "How TCP handshakes work"
    python -m backend.scripts.generate_diagram "OAuth flow" --raw-file reply.txt
    python -m backend.scripts.generate_diagram "Git branching" --json

Purpose:
- Generate a Mermaid diagram for a topic through the configured Gemini model
- Re-run sanitation offline on a saved model reply (--raw-file), no model call
- Print Mermaid source, or the full response as JSON

Dependencies: backend.application.services, backend.configs, backend.observability
System role: Developer tool for inspecting the generation pipeline
"""

import argparse
import sys
from pathlib import Path

from backend.application.services import diagram_service
from backend.configs import get_settings
from backend.core.exceptions import ValidationError
from backend.core.mermaid.sanitizer import DiagramSanitizer
from backend.models.diagram import DiagramResponse
from backend.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="generate_diagram",
        description="Generate a sanitized Mermaid diagram for a topic",
    )
    parser.add_argument("topic", help="Concept or process to visualize")
    parser.add_argument(
        "--raw-file",
        type=Path,
        help="Sanitize a saved model reply instead of calling the model",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full response as JSON",
    )
    return parser


def sanitize_saved_reply(topic: str, raw_file: Path) -> DiagramResponse:
    """
    Sanitize a model reply stored on disk.

    The topic is validated exactly as it is before a model call.

    Args:
        topic: Topic the reply was generated for
        raw_file: File holding the raw model text

    Returns:
        DiagramResponse: Sanitized or fallback diagram

    Raises:
        ValidationError: If the topic is blank or too long
        OSError: If the file cannot be read
    """
    request = diagram_service.validate_topic(topic)
    raw_text = raw_file.read_text(encoding="utf-8")
    return diagram_service.build_diagram_response(
        request.topic, raw_text, DiagramSanitizer()
    )


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        int: Process exit code (2 for an invalid topic, 1 for an unreadable
            --raw-file)
    """
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        if args.raw_file is not None:
            response = sanitize_saved_reply(args.topic, args.raw_file)
        else:
            response = diagram_service.get_diagram_service().generate_diagram_sync(args.topic)
    except ValidationError as e:
        logger.error(f"{__name__}:main - {e}")
        return 2
    except OSError as e:
        logger.error(f"{__name__}:main - cannot read {args.raw_file}: {e}")
        return 1

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print(response.mermaid_code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
