"""Router module - Intent dispatch to Foxy's reply branches."""

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
from .router import TurnRouter, select_festival_command, select_model_command

__all__ = [
    "TurnRouter",
    "Card",
    "CardAction",
    "CarouselReply",
    "DialogState",
    "EntityKind",
    "Intent",
    "RecognizedTurn",
    "ReplyPlan",
    "SuggestedActionsReply",
    "TextReply",
    "select_festival_command",
    "select_model_command",
]
