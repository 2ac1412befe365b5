"""System prompts for LLM-backed intent recognition."""

from typing import List

from ..catalog import Catalog


def get_recognition_prompt(catalog: Catalog) -> str:
    """
    Get the system prompt for intent and entity recognition.

    Args:
        catalog: Catalog whose colours, shoe types and cities are listed as
                 the known entity values

    Returns:
        System prompt for the recognition task
    """
    colours = _join(sorted({m.colour for m in catalog.models}))
    shoe_types = _join([t.value for t in catalog.shoe_types])
    cities = _join([f.city for f in catalog.festivals])

    return f"""You are the language understanding component of Foxy, a chatbot that sells
groovy shoes at dance festivals. Classify the user message into exactly one intent
and extract entities.

INTENTS:
- SmallTalk_Greet: greetings ("hi", "hello there")
- SmallTalk_ChitChat: casual chat ("how are you?", "I'm fine")
- SmallTalk_Thank: thanks ("thank you", "cheers")
- SmallTalk_EndConversation: goodbyes ("bye", "see you")
- FindShoes: the user wants to see shoes, optionally by colour or type ("show me red heels")
- SelectModel: the user picks a shoe model by number ("select model 3")
- SelectFestival: the user picks a festival by number ("select festival 2")
- FindLocations: the user asks where or when Foxy will be ("which festivals?", "are you in Sofia?")
- ShowHistory: the user asks to see the conversation so far
- None: anything else

ENTITIES (omit kinds that are not present):
- colours: colour words, lower case. Known colours: {colours}
- shoeTypes: shoe types, lower case. Known types: {shoe_types}
- number: numeric ids mentioned with SelectModel or SelectFestival
- availableLocations: cities Foxy visits, exactly as spelled here: {cities}
- geographyV2_city, geographyV2_continent, geographyV2_countryRegion, geographyV2_state:
  other place names, by kind

OUTPUT FORMAT (JSON only, no explanations):
{{
  "topIntent": "FindShoes",
  "entities": {{"colours": ["red"], "shoeTypes": ["heels"]}}
}}"""


def _join(values: List[str]) -> str:
    return ", ".join(values) if values else "(none)"
