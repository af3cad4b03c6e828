"""
Diagram agent backed by Google Gemini.

Wraps a `prompt | model | parser` chain that turns a topic into raw model
text. The text is untrusted; callers pass it through the Mermaid sanitizer.

Dependencies: langchain_core, langchain_google_genai, backend.configs
System role: Text-generation collaborator for diagram generation
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.configs import LLMSettings
from backend.core.agentic_system.diagram_agent.diagram_prompt import (
    get_diagram_prompt,
)
from backend.core.exceptions import DiagramGenerationError

logger = logging.getLogger(__name__)


class DiagramAgent:
    """
    Topic-to-Mermaid generation agent.

    The agent only talks to the model. It does not clean or validate the
    response; any model failure is raised as DiagramGenerationError.
    """

    def __init__(
        self,
        model: BaseChatModel | None = None,
        model_id: str = "gemini-3-flash-preview",
        temperature: float = 0.0,
        google_api_key: str | None = None,
        max_retries: int = 2,
        timeout: float | None = 60.0,
    ) -> None:
        """
        Initialize the agent with a chat model.

        Args:
            model: Pre-built chat model. When None a ChatGoogleGenerativeAI
                is created from the remaining arguments.
            model_id: Gemini model identifier
            temperature: Model temperature (0.0 for deterministic)
            google_api_key: API key; None lets the client read GOOGLE_API_KEY
            max_retries: Client-side retries on transient errors
            timeout: Per-request timeout in seconds
        """
        if model is None:
            model_kwargs = {
                "model": model_id,
                "temperature": temperature,
                "max_retries": max_retries,
                "timeout": timeout,
            }
            if google_api_key:
                model_kwargs["google_api_key"] = google_api_key
            model = ChatGoogleGenerativeAI(**model_kwargs)

        self._model_id = model_id
        self._model = model
        self._chain = get_diagram_prompt() | model | StrOutputParser()

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "DiagramAgent":
        """
        Build an agent from LLM settings.

        Args:
            settings: Gemini configuration

        Returns:
            DiagramAgent: Configured agent
        """
        api_key = settings.api_key.get_secret_value() if settings.api_key else None
        return cls(
            model_id=settings.model_id,
            temperature=settings.temperature,
            google_api_key=api_key,
            max_retries=settings.max_retries,
            timeout=settings.timeout_seconds,
        )

    def invoke(self, topic: str) -> str:
        """
        Ask the model for a Mermaid diagram about the topic.

        Args:
            topic: User topic, passed to the prompt unmodified

        Returns:
            str: Raw model text ("" when the model returned nothing)

        Raises:
            DiagramGenerationError: If the model call fails
        """
        logger.info(f"{__name__}:invoke - START model={self._model_id}, topic_len={len(topic)}")
        try:
            raw_text = self._chain.invoke({"topic": topic})
        except Exception as e:
            logger.error(f"{__name__}:invoke - {type(e).__name__}: {e}")
            raise DiagramGenerationError(
                f"Diagram generation failed: {type(e).__name__}",
                topic=topic,
                details={"model_id": self._model_id, "error": str(e)},
            ) from e

        raw_text = raw_text or ""
        logger.info(f"{__name__}:invoke - END response_len={len(raw_text)}")
        return raw_text

    async def ainvoke(self, topic: str) -> str:
        """
        Async version of invoke.

        Args:
            topic: User topic, passed to the prompt unmodified

        Returns:
            str: Raw model text ("" when the model returned nothing)

        Raises:
            DiagramGenerationError: If the model call fails
        """
        logger.info(f"{__name__}:ainvoke - START model={self._model_id}, topic_len={len(topic)}")
        try:
            raw_text = await self._chain.ainvoke({"topic": topic})
        except Exception as e:
            logger.error(f"{__name__}:ainvoke - {type(e).__name__}: {e}")
            raise DiagramGenerationError(
                f"Diagram generation failed: {type(e).__name__}",
                topic=topic,
                details={"model_id": self._model_id, "error": str(e)},
            ) from e

        raw_text = raw_text or ""
        logger.info(f"{__name__}:ainvoke - END response_len={len(raw_text)}")
        return raw_text
