"""Offline keyword-based recognizer for demos and tests."""

import logging
import re

from ...catalog import Catalog
from ..models import RecognizerResult
from ..recognizer_interface import Recognizer

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[a-z0-9']+")


class KeywordRecognizer(Recognizer):
    """
    Simple keyword matching against the catalog vocabulary.

    Good enough to click through the demo without an NLU service: it knows
    the catalog's colours, shoe types and festival cities plus a handful of
    small-talk words.
    """

    GREET_KEYWORDS = {"hi", "hello", "hey", "greetings", "howdy"}
    THANK_KEYWORDS = {"thanks", "thank", "thx", "cheers"}
    BYE_KEYWORDS = {"bye", "goodbye", "farewell", "ciao"}
    CHITCHAT_KEYWORDS = {"fine", "good", "great", "ok", "okay", "cool", "nice"}
    SHOE_KEYWORDS = {"shoe", "shoes", "models", "model"}
    LOCATION_KEYWORDS = {"festival", "festivals", "where", "when", "location", "locations"}
    HISTORY_KEYWORDS = {"history"}

    def __init__(self, catalog: Catalog):
        self.colours = {m.colour for m in catalog.models}
        self.shoe_types = [t.value for t in catalog.shoe_types]
        self.cities = {f.city.lower(): f.city for f in catalog.festivals}

    def recognize(self, text: str) -> RecognizerResult:
        tokens = _TOKEN.findall(text.lower())
        words = set(tokens)

        colours = [t for t in tokens if t in self.colours]
        shoe_types = [
            shoe_type for shoe_type in self.shoe_types
            if shoe_type in words or shoe_type.rstrip("s") in words
        ]
        cities = [self.cities[t] for t in tokens if t in self.cities]
        # left as text; the router converts ids when it needs them
        numbers = [t for t in tokens if t.isdigit()]

        entities = {}
        if colours:
            entities["colours"] = colours
        if shoe_types:
            entities["shoeTypes"] = shoe_types
        if cities:
            entities["availableLocations"] = cities
        if numbers:
            entities["number"] = numbers

        if words & self.HISTORY_KEYWORDS:
            intent = "ShowHistory"
        elif colours or shoe_types or words & self.SHOE_KEYWORDS:
            intent = "FindShoes"
        elif cities or words & self.LOCATION_KEYWORDS:
            intent = "FindLocations"
        elif words & self.GREET_KEYWORDS:
            intent = "SmallTalk_Greet"
        elif words & self.THANK_KEYWORDS:
            intent = "SmallTalk_Thank"
        elif words & self.BYE_KEYWORDS or "see you" in text.lower():
            intent = "SmallTalk_EndConversation"
        elif words & self.CHITCHAT_KEYWORDS:
            intent = "SmallTalk_ChitChat"
        else:
            intent = "None"

        logger.debug(f"Keyword recognizer: {text!r} -> {intent} {entities}")
        return RecognizerResult(top_intent=intent, entities=entities)
