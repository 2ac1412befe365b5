"""Reply emission sinks that deliver Foxy's replies to a channel."""

import logging
import sys
from abc import ABC, abstractmethod
from typing import List, TextIO

from .router.models import CarouselReply, ReplyUnit, SuggestedActionsReply, TextReply

logger = logging.getLogger(__name__)


class ReplySink(ABC):
    """Destination for the reply units of a turn, in order."""

    @abstractmethod
    def send(self, reply: ReplyUnit) -> None:
        pass


class CollectingReplySink(ReplySink):
    """Keeps every reply in memory."""

    def __init__(self):
        self.sent: List[ReplyUnit] = []

    def send(self, reply: ReplyUnit) -> None:
        self.sent.append(reply)


class ConsoleReplySink(ReplySink):
    """Renders replies as plain text on a terminal."""

    def __init__(self, name: str = "Foxy", stream: TextIO | None = None):
        self.name = name
        self.stream = stream or sys.stdout

    def send(self, reply: ReplyUnit) -> None:
        for line in render_reply(reply):
            print(f"[{self.name}] {line}", file=self.stream)


def render_reply(reply: ReplyUnit) -> List[str]:
    """Text lines for a reply unit, as shown on a console."""
    if isinstance(reply, TextReply):
        return reply.text.splitlines() or [""]

    if isinstance(reply, SuggestedActionsReply):
        lines = [reply.text] if reply.text else []
        lines.append(" | ".join(f"[{option}]" for option in reply.options))
        return lines

    if isinstance(reply, CarouselReply):
        if not reply.cards:
            return ["(nothing to show)"]
        lines = []
        for card in reply.cards:
            title = f"{card.title} ({card.subtitle})" if card.subtitle else card.title
            lines.append(f"  * {title}: {card.action.title} -> type '{card.action.value}'")
        return lines

    logger.warning(f"Unknown reply type: {type(reply).__name__}")
    return []
