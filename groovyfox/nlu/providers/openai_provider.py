"""
OpenAI-backed intent recognizer.

This module implements the Recognizer interface on top of OpenAI chat
completions in JSON mode, standing in for a hosted NLU service.
"""

import json
import logging
import os
import time
from typing import Any, Dict, Optional

from openai import OpenAI
from openai.types.chat import ChatCompletion
from pydantic import ValidationError

from ...catalog import Catalog
from ...errors import RecognizerError
from ..models import RecognizerResult
from ..prompts import get_recognition_prompt
from ..recognizer_interface import Recognizer

logger = logging.getLogger(__name__)


class OpenAIRecognizer(Recognizer):
    """
    Recognizer that asks an OpenAI chat model for intent and entities.

    Implements retry logic with exponential backoff for transient API
    failures. Once retries are exhausted the failure is raised as a
    RecognizerError; no intent is guessed.
    """

    def __init__(
        self,
        catalog: Catalog,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        max_tokens: int = 300,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        client: Optional[OpenAI] = None,
    ):
        """
        Initialize the OpenAI recognizer.

        Args:
            catalog: Catalog used to list known entity values in the prompt
            model: OpenAI model name (e.g., 'gpt-4o-mini')
            temperature: Sampling temperature, low for consistent classification
            max_tokens: Maximum tokens in the response
            max_retries: Number of attempts for failed requests
            retry_delay: Initial delay in seconds between retries (exponential backoff)
            client: Preconfigured OpenAI client, mainly for tests

        Raises:
            ValueError: If no client is given and OPENAI_API_KEY is not set
        """
        if client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError(
                    "OPENAI_API_KEY environment variable must be set. "
                    "Get your API key from https://platform.openai.com/api-keys"
                )
            client = OpenAI(api_key=api_key)

        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.system_prompt = get_recognition_prompt(catalog)

        logger.info(f"Initialized OpenAI recognizer with model: {model}")

    def recognize(self, text: str) -> RecognizerResult:
        """
        Classify a message with the chat model.

        Args:
            text: Raw user message text

        Returns:
            RecognizerResult parsed from the model's JSON answer

        Raises:
            RecognizerError: On API errors after all retries, or unparseable output
        """
        logger.debug(f"Recognizing message: {text}")

        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": text},
        ]

        for attempt in range(self.max_retries):
            try:
                response: ChatCompletion = self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    response_format={"type": "json_object"},
                )
                content = response.choices[0].message.content or "{}"

            except Exception as e:
                logger.warning(
                    f"Attempt {attempt + 1}/{self.max_retries} failed: {str(e)}"
                )

                if attempt < self.max_retries - 1:
                    delay = self.retry_delay * (2 ** attempt)
                    logger.info(f"Retrying in {delay} seconds...")
                    time.sleep(delay)
                    continue

                logger.error(f"All retry attempts exhausted: {str(e)}")
                raise RecognizerError(f"Recognizer unavailable: {e}") from e

            return self._parse(content)

        raise RecognizerError("Recognizer unavailable: no attempts made")

    def _parse(self, content: str) -> RecognizerResult:
        try:
            data: Dict[str, Any] = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON response: {str(e)}")
            logger.error(f"Raw content: {content}")
            raise RecognizerError(f"Recognizer returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise RecognizerError(f"Recognizer returned unexpected payload: {content}")

        try:
            result = RecognizerResult(
                top_intent=data.get("topIntent") or data.get("top_intent") or "None",
                entities=data.get("entities") or {},
            )
        except ValidationError as e:
            logger.error(f"Unexpected recognizer payload shape: {content}")
            raise RecognizerError(f"Recognizer returned malformed result: {e}") from e

        logger.debug(f"Recognized {result.top_intent} with entities {result.entities}")
        return result
