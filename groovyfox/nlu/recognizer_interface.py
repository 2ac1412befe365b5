"""
Abstract base class for intent recognizers.

This module defines the interface that every recognizer must implement,
so the NLU backend can be swapped through configuration only.
"""

from abc import ABC, abstractmethod

from .models import RecognizerResult


class Recognizer(ABC):
    """
    Abstract base class for intent recognizers.

    Implementations classify raw message text into one of Foxy's intents and
    extract entities such as colours, shoe types, ids and place names.
    """

    @abstractmethod
    def recognize(self, text: str) -> RecognizerResult:
        """
        Classify a message.

        Args:
            text: Raw user message text

        Returns:
            RecognizerResult with the top intent name and entities

        Raises:
            RecognizerError: If the backend cannot classify the message.
                Implementations must not fall back to the None intent on
                failure.
        """
        pass
