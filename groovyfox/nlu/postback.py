"""Fast path for card postbacks such as "select model 3"."""

import logging
import re
from typing import Optional

from .models import RecognizerResult
from .recognizer_interface import Recognizer

logger = logging.getLogger(__name__)

_POSTBACK = re.compile(r"^\s*select\s+(model|festival)\s+(\d+)\s*$", re.IGNORECASE)

_POSTBACK_INTENTS = {
    "model": "SelectModel",
    "festival": "SelectFestival",
}


def parse_postback(text: str) -> Optional[RecognizerResult]:
    """Recognize a card postback command, None for any other text."""
    match = _POSTBACK.match(text or "")
    if match is None:
        return None
    target, number = match.groups()
    try:
        entities = {"number": [int(number)]}
    except ValueError:
        # past the interpreter's int digit limit; no catalog id is that long
        entities = {}
    return RecognizerResult(
        top_intent=_POSTBACK_INTENTS[target.lower()],
        entities=entities,
    )


class PostbackRecognizer(Recognizer):
    """
    Answers postback commands directly and delegates everything else.

    Card buttons send their payload back as if typed by the user; decoding
    them locally keeps selections exact and saves a round trip to the NLU
    backend.
    """

    def __init__(self, inner: Recognizer):
        self.inner = inner

    def recognize(self, text: str) -> RecognizerResult:
        result = parse_postback(text)
        if result is not None:
            logger.debug(f"Postback recognized: {text!r} -> {result.top_intent}")
            return result
        return self.inner.recognize(text)
