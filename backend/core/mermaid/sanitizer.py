"""
Mermaid sanitizer for untrusted model output.

Turns whatever text a language model returned into a single renderable
Mermaid diagram:

1. Strip markdown code fences
2. Locate the first recognised diagram declaration
3. Collect that diagram's body, stopping at a conflicting declaration
4. Validate the candidate
5. Substitute a topic-labelled fallback diagram when validation fails

The pipeline is pure and stateless; a single DiagramSanitizer can be shared
across threads and requests.

Dependencies: re, dataclasses, backend.core.mermaid.diagram_types
System role: Text-shaping contract between raw model text and renderable source
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from backend.core.mermaid.diagram_types import (
    DiagramType,
    canonical_type,
    is_diagram_start,
)
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r"```mermaid\s*", re.ASCII)
_FENCE_CLOSE_RE = re.compile(r"```\s*", re.ASCII)

# Space and ASCII control characters. Other Unicode whitespace (NBSP,
# U+2028) is line content and is never trimmed.
_TRIM_CHARS = "".join(map(chr, range(0x21)))

FENCE_TOKEN = "```"

# Residue that means the extraction picked up conversational text.
FILLER_ARTIFACTS: tuple[str, ...] = (FENCE_TOKEN, "Here is", "Here's")

FALLBACK_TOPIC_MAX_LENGTH = 50
FALLBACK_ELLIPSIS = "..."

FALLBACK_TEMPLATE = (
    "graph TD\n"
    "    A[{topic}] --> B[Understanding]\n"
    "    B --> C[Analysis]\n"
    "    C --> D[Implementation]\n"
    "    D --> E[Results]\n"
    "    E --> F[Evaluation]\n"
)


class _ScanState(Enum):
    SEEKING_START = "seeking_start"
    IN_BODY = "in_body"


@dataclass(frozen=True)
class SanitizedDiagram:
    """Result of sanitizing one model response."""

    mermaid_code: str
    diagram_type: DiagramType
    is_valid: bool
    used_fallback: bool


def strip_fences(raw: str | None) -> str:
    """
    Remove every Mermaid code fence marker from the text.

    Both the tagged opener and bare closing fences are removed wherever they
    occur, together with any whitespace directly after them.

    Args:
        raw: Raw model output (may be None)

    Returns:
        str: Fence-free text, trimmed
    """
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raw = str(raw)
    if not raw.strip(_TRIM_CHARS):
        return ""

    cleaned = _FENCE_OPEN_RE.sub("", raw)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned)
    return cleaned.strip(_TRIM_CHARS)


def extract_diagram(text: str) -> tuple[str, DiagramType | None]:
    """
    Extract the first diagram from fence-free text.

    Lines before the first recognised declaration are dropped, which discards
    any explanation the model put in front of the diagram. Once a declaration
    is found its canonical type is locked; a later declaration of a different
    type ends extraction. Blank lines are dropped, body lines keep their
    original indentation.

    Args:
        text: Output of strip_fences

    Returns:
        tuple: (diagram source or "", locked type or None)
    """
    state = _ScanState.SEEKING_START
    locked_type: DiagramType | None = None
    collected: list[str] = []

    for line in text.split("\n"):
        trimmed = line.strip(_TRIM_CHARS)
        if not trimmed:
            continue

        if state is _ScanState.SEEKING_START:
            if is_diagram_start(trimmed):
                locked_type = canonical_type(trimmed)
                collected.append(trimmed)
                state = _ScanState.IN_BODY
            continue

        if is_diagram_start(trimmed) and not trimmed.startswith(locked_type.value):
            break
        collected.append(line)

    return "\n".join(collected).rstrip(_TRIM_CHARS), locked_type


def is_valid_mermaid(code: str | None) -> bool:
    """
    Check that a candidate looks like a single clean Mermaid diagram.

    The candidate must be non-empty, open with a recognised declaration, have
    at least one body line, and carry no fence or conversational residue.

    Args:
        code: Candidate diagram source

    Returns:
        bool: True when the candidate can be handed to the renderer
    """
    if not code or not code.strip(_TRIM_CHARS):
        return False

    # Trailing newlines do not count as lines
    lines = code.rstrip("\n").split("\n")

    if not is_diagram_start(lines[0].strip(_TRIM_CHARS)):
        return False

    if len(lines) < 2:
        return False

    return not any(artifact in code for artifact in FILLER_ARTIFACTS)


def _fallback_label(topic: str) -> str:
    if len(topic) > FALLBACK_TOPIC_MAX_LENGTH:
        topic = topic[:FALLBACK_TOPIC_MAX_LENGTH] + FALLBACK_ELLIPSIS

    # Keep the label on one line and free of tokens is_valid_mermaid rejects.
    # Mermaid renders #NN; entity codes as the original character.
    label = " ".join(topic.splitlines())
    label = label.replace("`", "#96;")
    return label.replace("Here is", "Here#32;is").replace("Here's", "Here#39;s")


def fallback_diagram(topic: str | None) -> str:
    """
    Build the placeholder diagram used when model output is unusable.

    Topics longer than 50 characters are cut to 50 and suffixed with "...".

    Args:
        topic: Topic the user asked about

    Returns:
        str: Top-down flowchart that always passes is_valid_mermaid
    """
    return FALLBACK_TEMPLATE.format(topic=_fallback_label(topic or ""))


class DiagramSanitizer:
    """Stateless sanitation pipeline for model-generated Mermaid."""

    def clean(self, raw_text: str | None, topic: str | None) -> SanitizedDiagram:
        """
        Run the full pipeline and report whether the model output was usable.

        Args:
            raw_text: Raw model output
            topic: Topic used to label the fallback diagram

        Returns:
            SanitizedDiagram: Renderable source plus the validity verdict
        """
        candidate, diagram_type = extract_diagram(strip_fences(raw_text))

        if is_valid_mermaid(candidate):
            line_count = len(candidate.split("\n"))
            logger.info(
                f"{__name__}:clean - extracted {diagram_type.value} diagram "
                f"lines={line_count}"
            )
            return SanitizedDiagram(
                mermaid_code=candidate,
                diagram_type=diagram_type,
                is_valid=True,
                used_fallback=False,
            )

        log_with_context(
            logger,
            logging.WARNING,
            f"{__name__}:clean - invalid Mermaid candidate, using fallback",
            topic=topic,
            candidate=candidate,
            raw_length=len(raw_text) if isinstance(raw_text, str) else 0,
        )
        return SanitizedDiagram(
            mermaid_code=fallback_diagram(topic),
            diagram_type=DiagramType.GRAPH,
            is_valid=False,
            used_fallback=True,
        )

    def sanitize(self, raw_text: str | None, topic: str | None) -> str:
        """
        Return renderable Mermaid source for the given model output.

        Never raises; unusable output is replaced by fallback_diagram(topic).

        Args:
            raw_text: Raw model output
            topic: Topic used to label the fallback diagram

        Returns:
            str: Mermaid source
        """
        return self.clean(raw_text, topic).mermaid_code


_default_sanitizer = DiagramSanitizer()


def sanitize(raw_text: str | None, topic: str | None) -> str:
    """Sanitize model output with the shared stateless sanitizer."""
    return _default_sanitizer.sanitize(raw_text, topic)
