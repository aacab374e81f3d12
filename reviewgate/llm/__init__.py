"""LLM package for review classification prompts and transport."""

from reviewgate.llm.client import ClassifierClient, ClassifierResponse

__all__ = ["ClassifierClient", "ClassifierResponse"]
