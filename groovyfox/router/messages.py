"""Fixed reply texts used by the Turn Router."""

from datetime import date
from typing import List

GREETING = "Hello, Foxy at your service here"
CAPABILITIES = "Here`s what I can do for you:"
CAPABILITY_OPTIONS = ["Show shoes", "Find festivals"]

CHITCHAT = "Awesome, how may I help you today?"
THANKS = "No problem! Anything else I can do for you?"
FAREWELL = "See you soon!"
FALLBACK = "Sorry, I'm only a fox. Could you please rephrase that?"

SHOE_TYPES_PROMPT = "I have the following types of shoes:"
EXACT_MATCH = "I have exactly what you're looking for!"
SUGGESTION = "Hmm, may I interest you in one of these?"
NO_MATCH_SAMPLE = "Sorry, I don't have any of these. Here's a small sample of what I have in my den:"

MODEL_NOT_FOUND = "Sorry, I cannot find such a model in my den"
FESTIVAL_NOT_FOUND = "Sorry, I cannot find such a festival in my den"
MODEL_LOCATIONS = "Click on the location to see all groovy models that I'm bringing with me!"

FULL_CALENDAR = "You can find me at the following festivals:"
LOCATIONS_FOUND = "Click on the location to see all groovy models that I`m bringing with me!"

HISTORY_HEADER = "Here's our history so far"

# Card button titles
SHOW_LOCATIONS = "Show locations"
SHOW_STOCK = "Show stock"
SHOW_ALL_LOCATIONS = "Show all locations"
SHOW_ALL_SHOES = "Show all shoes"


def festival_dates(start: date, end: date) -> str:
    return f"I'll be here {start.isoformat()} - {end.isoformat()}, with those groovy foxes:"


def not_on_calendar(locations: List[str]) -> str:
    names = "/".join(capitalize(loc) for loc in locations)
    return f"Ahh, {names} is not on my calendar yet but you can check me out at:"


def price_label(price: float) -> str:
    if float(price).is_integer():
        return f"€{int(price)}"
    return f"€{price:.2f}"


def capitalize(value: str) -> str:
    """First letter upper case, the rest lower case."""
    value = str(value)
    return value[:1].upper() + value[1:].lower()
