"""Turn Router: picks Foxy's replies for one recognized message."""

import logging
import random
from typing import Iterable, Optional

from ..catalog import Catalog, FestivalLocation, ShoeModel
from ..errors import TranscriptStoreError
from ..transcripts import TranscriptStore
from . import messages
from .models import (
    Card,
    CardAction,
    CarouselReply,
    DialogState,
    EntityKind,
    Intent,
    RecognizedTurn,
    ReplyPlan,
    SuggestedActionsReply,
    TextReply,
)

logger = logging.getLogger(__name__)

FALLBACK_SAMPLE_SIZE = 3


def select_model_command(model_id: int) -> str:
    return f"select model {model_id}"


def select_festival_command(festival_id: int) -> str:
    return f"select festival {festival_id}"


class TurnRouter:
    """
    Dispatches a recognized turn to one of Foxy's hardcoded reply branches.

    The router never mutates the catalog. Its only I/O is the transcript
    lookup for ShowHistory; persisting the turn itself is left to the caller.
    """

    def __init__(
        self,
        catalog: Catalog,
        transcript_store: Optional[TranscriptStore] = None,
        rng: Optional[random.Random] = None,
        fallback_sample_size: int = FALLBACK_SAMPLE_SIZE,
    ):
        """
        Initialize the Router.

        Args:
            catalog: Shoe and festival reference data
            transcript_store: Store consulted for ShowHistory; None disables lookups
            rng: Random source for the no-match sample, seedable for tests
            fallback_sample_size: How many models to show when nothing matches
        """
        self.catalog = catalog
        self.transcript_store = transcript_store
        self.rng = rng or random.Random()
        self.fallback_sample_size = fallback_sample_size

        logger.info("Turn router initialized")

    def route(
        self,
        turn: RecognizedTurn,
        dialog_state: DialogState = DialogState.NONE,
    ) -> ReplyPlan:
        """
        Decide which replies to emit for a turn.

        Args:
            turn: Recognized message with top intent and entities
            dialog_state: State of any active sub-dialog; only NONE dispatches

        Returns:
            ReplyPlan, empty when a sub-dialog owns the turn
        """
        if DialogState(dialog_state) != DialogState.NONE:
            logger.debug(f"Dialog state is {dialog_state}, deferring turn")
            return ReplyPlan()

        intent = Intent.from_name(turn.top_intent)
        logger.info(f"Routing intent {intent.value} for conversation {turn.conversation_id}")

        if intent == Intent.SMALLTALK_GREET:
            replies = [
                TextReply(text=messages.GREETING),
                TextReply(text=messages.CAPABILITIES),
                SuggestedActionsReply(options=list(messages.CAPABILITY_OPTIONS)),
            ]
        elif intent == Intent.SMALLTALK_CHITCHAT:
            replies = [TextReply(text=messages.CHITCHAT)]
        elif intent == Intent.SMALLTALK_THANK:
            replies = [TextReply(text=messages.THANKS)]
        elif intent == Intent.SMALLTALK_END_CONVERSATION:
            replies = [TextReply(text=messages.FAREWELL)]
        elif intent == Intent.FIND_SHOES:
            replies = self._find_shoes(turn)
        elif intent == Intent.SELECT_MODEL:
            replies = self._select_model(turn)
        elif intent == Intent.SELECT_FESTIVAL:
            replies = self._select_festival(turn)
        elif intent == Intent.FIND_LOCATIONS:
            replies = self._find_locations(turn)
        elif intent == Intent.SHOW_HISTORY:
            replies = self._show_history(turn)
        else:
            replies = [TextReply(text=messages.FALLBACK)]

        return ReplyPlan(replies=replies)

    def _find_shoes(self, turn: RecognizedTurn) -> list:
        colours = [str(c).lower() for c in turn.entity(EntityKind.COLOURS)]
        shoe_types = [str(t).lower() for t in turn.entity(EntityKind.SHOE_TYPES)]

        if not colours and not shoe_types:
            options = []
            for shoe_type in self.catalog.shoe_types:
                label = messages.capitalize(shoe_type.value)
                if label not in options:
                    options.append(label)
            return [SuggestedActionsReply(text=messages.SHOE_TYPES_PROMPT, options=options)]

        models = self.catalog.models
        colour_matches = [m for m in models if m.colour in colours]
        type_matches = [m for m in models if m.type.value in shoe_types]
        type_ids = {m.id for m in type_matches}
        intersection = [m for m in colour_matches if m.id in type_ids]

        if intersection:
            selected = intersection
            message = messages.EXACT_MATCH
        else:
            matched_ids = {m.id for m in colour_matches} | type_ids
            selected = [m for m in models if m.id in matched_ids]
            if selected:
                message = messages.SUGGESTION
            else:
                sample_size = min(self.fallback_sample_size, len(models))
                selected = self.rng.sample(list(models), sample_size)
                message = messages.NO_MATCH_SAMPLE

        logger.debug(
            f"FindShoes colours={colours} types={shoe_types} -> "
            f"{[m.id for m in selected]}"
        )
        return [TextReply(text=message), self._model_carousel(selected, with_price=True)]

    def _select_model(self, turn: RecognizedTurn) -> list:
        model_id = _first_id(turn)
        model = self.catalog.get_model(model_id) if model_id is not None else None
        if model is None:
            logger.info(f"Model {model_id} not found")
            return [TextReply(text=messages.MODEL_NOT_FOUND)]

        festivals = self.catalog.festivals_for_model(model.id)
        return [
            TextReply(text=messages.MODEL_LOCATIONS),
            self._festival_carousel(festivals, messages.SHOW_STOCK),
        ]

    def _select_festival(self, turn: RecognizedTurn) -> list:
        festival_id = _first_id(turn)
        festival = self.catalog.get_festival(festival_id) if festival_id is not None else None
        if festival is None:
            logger.info(f"Festival {festival_id} not found")
            return [TextReply(text=messages.FESTIVAL_NOT_FOUND)]

        models = self.catalog.models_for_festival(festival.id)
        return [
            TextReply(
                text=messages.festival_dates(
                    festival.period.start_date, festival.period.end_date
                )
            ),
            self._model_carousel(models, action_title=messages.SHOW_ALL_LOCATIONS),
        ]

    def _find_locations(self, turn: RecognizedTurn) -> list:
        available = [_location_name(v) for v in turn.entity(EntityKind.AVAILABLE_LOCATIONS)]
        recognized = []
        for kind in EntityKind.GEOGRAPHY:
            recognized.extend(_location_name(v) for v in turn.entity(kind))

        if not available:
            festivals = list(self.catalog.festivals)
            if recognized:
                message = messages.not_on_calendar(recognized)
            else:
                message = messages.FULL_CALENDAR
        else:
            festivals = [f for f in self.catalog.festivals if f.city in available]
            message = messages.LOCATIONS_FOUND

        return [
            TextReply(text=message),
            self._festival_carousel(festivals, messages.SHOW_ALL_SHOES),
        ]

    def _show_history(self, turn: RecognizedTurn) -> list:
        replies = [TextReply(text=messages.HISTORY_HEADER)]
        if self.transcript_store is None:
            return replies

        try:
            transcript = self.transcript_store.find(turn.conversation_id)
        except TranscriptStoreError as e:
            logger.error(f"Failed to load history: {e}")
            return replies

        if transcript is not None and transcript.lines:
            replies.append(TextReply(text="\n".join(transcript.lines)))
        return replies

    def _model_carousel(
        self,
        models: Iterable[ShoeModel],
        action_title: str = messages.SHOW_LOCATIONS,
        with_price: bool = False,
    ) -> CarouselReply:
        return CarouselReply(
            cards=[
                Card(
                    title=model.name,
                    subtitle=messages.price_label(model.price) if with_price else None,
                    image_url=model.image_url,
                    action=CardAction(
                        title=action_title,
                        value=select_model_command(model.id),
                    ),
                )
                for model in models
            ]
        )

    def _festival_carousel(
        self,
        festivals: Iterable[FestivalLocation],
        action_title: str,
    ) -> CarouselReply:
        return CarouselReply(
            cards=[
                Card(
                    title=festival.name,
                    image_url=festival.image_url,
                    action=CardAction(
                        title=action_title,
                        value=select_festival_command(festival.id),
                    ),
                )
                for festival in festivals
            ]
        )


def _first_id(turn: RecognizedTurn) -> Optional[int]:
    """First "number" entity as an integer id, None if absent or not whole."""
    values = turn.entity(EntityKind.NUMBER)
    if not values:
        return None
    value = values[0]
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        return int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return None


def _location_name(value) -> str:
    # geography entities may come back as {"value": ..., "type": ...}
    if isinstance(value, dict):
        return str(value.get("value", ""))
    return str(value)
