"""Recognizer backends."""

from .keyword_provider import KeywordRecognizer
from .openai_provider import OpenAIRecognizer

__all__ = ["KeywordRecognizer", "OpenAIRecognizer"]
