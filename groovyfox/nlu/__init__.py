"""NLU module - Intent recognition backends."""

from .models import RecognizerResult
from .postback import PostbackRecognizer, parse_postback
from .recognizer_factory import get_recognizer
from .recognizer_interface import Recognizer

__all__ = [
    "Recognizer",
    "RecognizerResult",
    "PostbackRecognizer",
    "parse_postback",
    "get_recognizer",
]
