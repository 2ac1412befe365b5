"""Pydantic models for the Turn Router."""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Intent(str, Enum):
    """Intents the router can dispatch on."""

    SMALLTALK_GREET = "SmallTalk_Greet"
    SMALLTALK_CHITCHAT = "SmallTalk_ChitChat"
    SMALLTALK_THANK = "SmallTalk_Thank"
    SMALLTALK_END_CONVERSATION = "SmallTalk_EndConversation"
    FIND_SHOES = "FindShoes"
    SELECT_MODEL = "SelectModel"
    SELECT_FESTIVAL = "SelectFestival"
    FIND_LOCATIONS = "FindLocations"
    SHOW_HISTORY = "ShowHistory"
    NONE = "None"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Intent":
        """Map a recognizer intent name to an Intent, falling back to NONE."""
        try:
            return cls(name)
        except ValueError:
            return cls.NONE


class DialogState(str, Enum):
    """Status of the multi-turn sub-dialog for a conversation."""

    NONE = "none"
    WAITING = "waiting"
    COMPLETE = "complete"


class EntityKind:
    """Entity names produced by the recognizer."""

    COLOURS = "colours"
    SHOE_TYPES = "shoeTypes"
    NUMBER = "number"
    AVAILABLE_LOCATIONS = "availableLocations"
    CITY = "geographyV2_city"
    CONTINENT = "geographyV2_continent"
    COUNTRY_REGION = "geographyV2_countryRegion"
    STATE = "geographyV2_state"

    GEOGRAPHY = (CITY, CONTINENT, COUNTRY_REGION, STATE)


class RecognizedTurn(BaseModel):
    """One inbound message together with its recognized intent and entities."""

    top_intent: Intent = Intent.NONE
    entities: dict[str, list[Any]] = Field(default_factory=dict)
    text: str = ""
    conversation_id: str
    sender_id: str = "user"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def entity(self, kind: str) -> list[Any]:
        """
        Values extracted for an entity kind, in recognition order.

        Missing kinds give an empty list. List-style entities arrive nested
        one level deep ([["red"], ["blue"]]); those are flattened.
        """
        values = []
        for value in self.entities.get(kind) or []:
            if isinstance(value, (list, tuple)):
                values.extend(value)
            else:
                values.append(value)
        return values


class CardAction(BaseModel):
    """Postback button attached to a card."""

    model_config = ConfigDict(frozen=True)

    title: str
    value: str


class Card(BaseModel):
    """A hero card shown inside a carousel."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: Optional[str] = None
    image_url: str
    action: CardAction


class TextReply(BaseModel):
    kind: Literal["text"] = "text"
    text: str

    def transcript_text(self) -> str:
        return self.text


class SuggestedActionsReply(BaseModel):
    """Prompt with quick-reply options."""

    kind: Literal["suggested_actions"] = "suggested_actions"
    text: Optional[str] = None
    options: list[str]

    def transcript_text(self) -> str:
        options = ", ".join(self.options)
        if self.text:
            return f"{self.text} {options}"
        return options


class CarouselReply(BaseModel):
    """Ordered set of selectable cards."""

    kind: Literal["carousel"] = "carousel"
    cards: list[Card] = Field(default_factory=list)

    def transcript_text(self) -> str:
        return ", ".join(card.title for card in self.cards)

    @property
    def postbacks(self) -> list[str]:
        return [card.action.value for card in self.cards]


ReplyUnit = Annotated[
    Union[TextReply, SuggestedActionsReply, CarouselReply],
    Field(discriminator="kind"),
]


class ReplyPlan(BaseModel):
    """
    Ordered replies the router wants emitted for one turn.

    An empty plan means the router deferred to an active sub-dialog.
    """

    replies: list[ReplyUnit] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.replies

    def carousels(self) -> list[CarouselReply]:
        return [r for r in self.replies if isinstance(r, CarouselReply)]

    def transcript_texts(self) -> list[str]:
        return [r.transcript_text() for r in self.replies]
