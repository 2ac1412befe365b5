"""
Factory for creating recognizer instances.

This module provides a factory function that instantiates the configured
recognizer, enabling zero-friction NLU backend swapping.
"""

import logging
from typing import Any, Dict

from ..catalog import Catalog
from .postback import PostbackRecognizer
from .providers import KeywordRecognizer, OpenAIRecognizer
from .recognizer_interface import Recognizer

logger = logging.getLogger(__name__)


def get_recognizer(
    provider_name: str,
    catalog: Catalog,
    config: Dict[str, Any] | None = None,
) -> Recognizer:
    """
    Factory function to get the appropriate recognizer instance.

    The returned recognizer always decodes card postbacks itself and only
    hands other text to the configured backend.

    Args:
        provider_name: Name of the backend ("openai" or "keyword")
        catalog: Catalog providing the entity vocabulary
        config: Optional provider-specific settings. If None, uses defaults.

    Returns:
        Recognizer: Instance of the requested backend wrapped for postbacks

    Raises:
        ValueError: If provider_name is not recognized

    Example:
        >>> recognizer = get_recognizer("keyword", default_catalog())
        >>> recognizer.recognize("select model 3").top_intent
        'SelectModel'
    """
    config = config or {}

    provider_name_lower = provider_name.lower()

    if provider_name_lower == "openai":
        logger.info("Initializing OpenAI recognizer")
        inner = OpenAIRecognizer(
            catalog=catalog,
            model=config.get("model", "gpt-4o-mini"),
            temperature=config.get("temperature", 0.0),
            max_tokens=config.get("max_tokens", 300),
            max_retries=config.get("max_retries", 3),
            retry_delay=config.get("retry_delay", 1.0),
        )
    elif provider_name_lower == "keyword":
        logger.info("Initializing keyword recognizer")
        inner = KeywordRecognizer(catalog=catalog)
    else:
        raise ValueError(
            f"Unknown recognizer provider: {provider_name}. "
            f"Supported providers: openai, keyword"
        )

    return PostbackRecognizer(inner)
