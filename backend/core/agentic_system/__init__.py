"""Agentic system: LLM-backed collaborators."""
