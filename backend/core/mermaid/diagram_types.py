"""
Mermaid diagram type vocabulary.

Defines the closed set of diagram grammars the backend accepts and the
rules for recognising and canonicalising a declaration line.

Dependencies: re, enum
System role: Shared vocabulary for the sanitizer and the generation prompt
"""

import re
from enum import Enum


class DiagramType(str, Enum):
    """Canonical diagram type, used to lock a response to a single grammar."""

    GRAPH = "graph"
    SEQUENCE = "sequenceDiagram"
    CLASS = "classDiagram"
    STATE = "stateDiagram"
    ER = "erDiagram"
    JOURNEY = "journey"
    GANTT = "gantt"
    GIT_GRAPH = "gitGraph"


# Declaration keywords accepted on the first line of a diagram.
DIAGRAM_KEYWORDS: tuple[str, ...] = (
    "graph",
    "flowchart",
    "sequenceDiagram",
    "classDiagram",
    "stateDiagram-v2",
    "erDiagram",
    "journey",
    "gantt",
    "gitGraph",
)

DIAGRAM_START_RE = re.compile(
    r"^(?:" + "|".join(re.escape(k) for k in DIAGRAM_KEYWORDS) + r")"
)

# Prefix -> canonical type, first match wins.
_CANONICAL_PREFIXES: tuple[tuple[str, DiagramType], ...] = (
    ("graph", DiagramType.GRAPH),
    ("flowchart", DiagramType.GRAPH),
    ("sequenceDiagram", DiagramType.SEQUENCE),
    ("classDiagram", DiagramType.CLASS),
    ("stateDiagram", DiagramType.STATE),
    ("erDiagram", DiagramType.ER),
    ("journey", DiagramType.JOURNEY),
    ("gantt", DiagramType.GANTT),
    ("gitGraph", DiagramType.GIT_GRAPH),
)


def is_diagram_start(line: str) -> bool:
    """Return True if the line opens with a recognised declaration keyword."""
    return DIAGRAM_START_RE.match(line) is not None


def canonical_type(line: str) -> DiagramType:
    """
    Map a declaration line to its canonical diagram type.

    `flowchart` folds into `graph`, `stateDiagram-v2` into `stateDiagram`.
    Lines matching no known prefix default to `graph`.

    Args:
        line: Trimmed declaration line

    Returns:
        DiagramType: Canonical type for the line
    """
    for prefix, diagram_type in _CANONICAL_PREFIXES:
        if line.startswith(prefix):
            return diagram_type
    return DiagramType.GRAPH
