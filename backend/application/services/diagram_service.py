"""
Diagram service orchestrator.

Coordinates topic validation, the model call, and Mermaid sanitation.
Model unpredictability never reaches the caller: failed calls and unusable
output both end in the fallback diagram.

Dependencies: pydantic, backend.core.agentic_system.diagram_agent,
    backend.core.mermaid, backend.models.diagram
System role: Diagram generation orchestration
"""

import logging
from functools import lru_cache

from pydantic import ValidationError as PydanticValidationError

from backend.configs import get_settings
from backend.core.agentic_system.diagram_agent.diagram_agent import DiagramAgent
from backend.core.exceptions import ValidationError
from backend.core.mermaid.sanitizer import DiagramSanitizer, SanitizedDiagram
from backend.models.diagram import DiagramRequest, DiagramResponse
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def validate_topic(topic: str) -> DiagramRequest:
    """
    Validate a topic before any model call.

    Args:
        topic: Raw topic from the caller

    Returns:
        DiagramRequest: Validated request

    Raises:
        ValidationError: If the topic is blank or longer than 500 characters
    """
    try:
        return DiagramRequest(topic=topic)
    except PydanticValidationError as e:
        error = e.errors()[0]
        raise ValidationError(
            str(error.get("msg", "Invalid topic")),
            field="topic",
            details={"error_type": error.get("type")},
        ) from e


def build_diagram_response(
    topic: str,
    raw_text: str | None,
    sanitizer: DiagramSanitizer,
) -> DiagramResponse:
    """Sanitize a raw model reply into the response returned to callers."""
    result: SanitizedDiagram = sanitizer.clean(raw_text, topic)
    return DiagramResponse(
        topic=topic,
        mermaid_code=result.mermaid_code,
        diagram_type=result.diagram_type,
        used_fallback=result.used_fallback,
    )


class DiagramService:
    """Diagram service orchestrator."""

    def __init__(
        self,
        agent: DiagramAgent,
        sanitizer: DiagramSanitizer | None = None,
    ) -> None:
        """
        Initialize diagram service.

        Args:
            agent: Model collaborator producing raw Mermaid text
            sanitizer: Sanitation pipeline (a fresh stateless one if None)
        """
        self.agent = agent
        self.sanitizer = sanitizer or DiagramSanitizer()

    async def generate_diagram(self, topic: str) -> DiagramResponse:
        """
        Generate a renderable Mermaid diagram for a topic.

        Args:
            topic: Concept or process to visualize (1-500 characters, not blank)

        Returns:
            DiagramResponse: Sanitized diagram, or the fallback diagram when
                the model failed or produced unusable output

        Raises:
            ValidationError: If the topic is blank or too long
        """
        request = validate_topic(topic)
        logger.info(f"{__name__}:generate_diagram - START topic_len={len(request.topic)}")

        try:
            raw_text = await self.agent.ainvoke(request.topic)
        except Exception as e:
            # DiagramGenerationError and anything else a collaborator raises
            log_exception_with_context(
                logger,
                f"{__name__}:generate_diagram - model call failed, using fallback",
                e,
                topic=request.topic,
            )
            raw_text = ""

        response = build_diagram_response(request.topic, raw_text, self.sanitizer)
        logger.info(
            f"{__name__}:generate_diagram - END "
            f"type={response.diagram_type.value}, used_fallback={response.used_fallback}"
        )
        return response

    def generate_diagram_sync(self, topic: str) -> DiagramResponse:
        """
        Synchronous version of generate_diagram.

        Args:
            topic: Concept or process to visualize

        Returns:
            DiagramResponse: Sanitized or fallback diagram

        Raises:
            ValidationError: If the topic is blank or too long
        """
        request = validate_topic(topic)

        try:
            raw_text = self.agent.invoke(request.topic)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:generate_diagram_sync - model call failed, using fallback",
                e,
                topic=request.topic,
            )
            raw_text = ""

        return build_diagram_response(request.topic, raw_text, self.sanitizer)


@lru_cache
def get_diagram_service() -> DiagramService:
    """
    Get diagram service singleton built from settings.

    Returns:
        DiagramService: Service with a Gemini-backed DiagramAgent
    """
    settings = get_settings()
    return DiagramService(agent=DiagramAgent.from_settings(settings.llm))
