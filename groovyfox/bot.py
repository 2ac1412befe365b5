"""
Turn driver for the Foxy bot.

FoxyBot ties the pieces of one turn together:

1. Intent recognition (external NLU)
2. Reply selection (TurnRouter)
3. Reply emission (ReplySink)
4. Transcript recording (TranscriptStore, best effort)

Recognition failures abort the turn. Transcript failures are logged and
never keep replies from reaching the user.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from .catalog import Catalog, default_catalog, load_catalog
from .channels import CollectingReplySink, ReplySink
from .config import GroovyFoxConfig
from .errors import TranscriptStoreError
from .nlu import Recognizer, get_recognizer
from .router import DialogState, Intent, RecognizedTurn, ReplyPlan, TurnRouter
from .transcripts import TranscriptStore, format_bot_line, format_user_line

logger = logging.getLogger(__name__)


class InboundMessage(BaseModel):
    """A message as received from the channel."""

    text: str = ""
    conversation_id: str
    sender_id: str = "user"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class FoxyBot:
    """
    Runs one turn at a time for any number of conversations.

    Conversations share nothing but the transcript store, keyed by
    conversation id.
    """

    def __init__(
        self,
        recognizer: Recognizer,
        router: TurnRouter,
        transcript_store: Optional[TranscriptStore] = None,
        reply_sink: Optional[ReplySink] = None,
        bot_name: str = "Foxy",
    ):
        """
        Initialize the bot.

        Args:
            recognizer: NLU backend used to classify every message
            router: Turn router that picks the replies
            transcript_store: Where transcripts are appended; None disables recording
            reply_sink: Channel the replies are sent to
            bot_name: Label used for bot lines in transcripts
        """
        self.recognizer = recognizer
        self.router = router
        self.transcript_store = transcript_store
        self.reply_sink = reply_sink or CollectingReplySink()
        self.bot_name = bot_name

    @classmethod
    def from_config(
        cls,
        config: GroovyFoxConfig,
        reply_sink: Optional[ReplySink] = None,
        catalog: Optional[Catalog] = None,
        rng: Optional[random.Random] = None,
    ) -> "FoxyBot":
        """Build a bot with all collaborators wired from configuration."""
        if catalog is None:
            if config.catalog.path:
                catalog = load_catalog(config.catalog.path)
            else:
                catalog = default_catalog()
        logger.info(
            f"Catalog ready: {len(catalog.models)} models, {len(catalog.festivals)} festivals"
        )

        logger.info(f"Initializing transcript store at {config.transcripts.database_path}")
        transcript_store = TranscriptStore(
            config.transcripts.database_path,
            timeout=config.transcripts.timeout,
        )
        transcript_store.initialize()

        logger.info(f"Initializing recognizer: {config.recognizer.provider}")
        recognizer = get_recognizer(
            config.recognizer.provider,
            catalog,
            config=config.recognizer.model_dump(),
        )

        router = TurnRouter(
            catalog=catalog,
            transcript_store=transcript_store,
            rng=rng,
            fallback_sample_size=config.catalog.fallback_sample_size,
        )

        return cls(
            recognizer=recognizer,
            router=router,
            transcript_store=transcript_store,
            reply_sink=reply_sink,
            bot_name=config.bot.name,
        )

    def handle_message(
        self,
        message: InboundMessage,
        dialog_state: DialogState = DialogState.NONE,
    ) -> ReplyPlan:
        """
        Process one inbound message end to end.

        Args:
            message: The user's message
            dialog_state: State of any active sub-dialog for the conversation

        Returns:
            The ReplyPlan that was emitted

        Raises:
            RecognizerError: If the message could not be classified
        """
        logger.info(f"Message from {message.sender_id} in {message.conversation_id}: {message.text}")

        result = self.recognizer.recognize(message.text)
        turn = RecognizedTurn(
            top_intent=Intent.from_name(result.top_intent),
            entities=result.entities,
            text=message.text,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            timestamp=message.timestamp,
        )

        plan = self.router.route(turn, dialog_state)

        for reply in plan.replies:
            self.reply_sink.send(reply)

        self._record_transcript(message, plan)
        return plan

    def _record_transcript(self, message: InboundMessage, plan: ReplyPlan) -> None:
        if self.transcript_store is None or plan.is_empty or not message.text:
            return

        lines = [format_user_line(message.sender_id, message.timestamp, message.text)]
        lines.extend(format_bot_line(text, self.bot_name) for text in plan.transcript_texts())

        try:
            self.transcript_store.append(message.conversation_id, lines)
        except TranscriptStoreError as e:
            logger.error(f"Failed to record transcript: {e}")
