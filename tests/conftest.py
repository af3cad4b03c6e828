"""
Shared test fixtures and configuration for entire test suite.

Provides: sample model replies, fake chat models, agent and service mocks
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from backend.core.mermaid.sanitizer import DiagramSanitizer


@pytest.fixture
def sanitizer() -> DiagramSanitizer:
    """Provide a stateless sanitizer."""
    return DiagramSanitizer()


@pytest.fixture
def topic() -> str:
    """Provide a short topic that fits the fallback label unchanged."""
    return "How DNS resolution works"


@pytest.fixture
def long_topic() -> str:
    """Provide a topic longer than the 50 character fallback label limit."""
    return "The complete lifecycle of an HTTP request through a load balanced cluster"


@pytest.fixture
def fenced_reply() -> str:
    """Provide a typical fenced model reply with leading prose."""
    return (
        "Sure! Here is your diagram:\n"
        "```mermaid\n"
        "graph TD\n"
        "    Client --> Resolver\n"
        "\n"
        "    Resolver --> RootServer\n"
        "```"
    )


@pytest.fixture
def fake_chat_model_factory():
    """
    Build fake chat models that answer with canned replies.

    Returns:
        Callable: factory taking a list of reply strings
    """
    def _factory(responses: list[str]) -> FakeListChatModel:
        return FakeListChatModel(responses=responses)

    return _factory


@pytest.fixture
def mock_diagram_agent() -> MagicMock:
    """
    Create mock DiagramAgent for testing.

    Returns:
        MagicMock: Agent with sync invoke and async ainvoke
    """
    agent = MagicMock()
    agent.invoke = MagicMock(return_value="")
    agent.ainvoke = AsyncMock(return_value="")
    return agent
