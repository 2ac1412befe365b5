"""
Console entry point for the Foxy bot.

Runs a single conversation on the terminal:

1. Read a line typed by the user
2. Recognize, route and print Foxy's replies
3. Record the turn in the transcript store
4. Loop back to reading

Card buttons are "clicked" by typing their command, e.g. "select model 3".
"""

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from typing import Optional

from .bot import FoxyBot, InboundMessage
from .channels import ConsoleReplySink
from .config import GroovyFoxConfig, LoggingConfig, load_config
from .errors import CatalogError, RecognizerError, TranscriptStoreError

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"quit", "exit"}


def setup_logging(log_config: LoggingConfig) -> None:
    """Configure logging based on config settings."""
    # Create logs directory if needed
    log_file = Path(log_config.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_config.level)
    root_logger.handlers.clear()

    # File handler with rotation
    file_handler = RotatingFileHandler(
        log_config.file,
        maxBytes=log_config.max_bytes,
        backupCount=log_config.backup_count,
        encoding="utf-8"
    )
    file_handler.setLevel(log_config.level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    root_logger.addHandler(file_handler)

    if log_config.console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_config.level)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)

    # Suppress noisy third-party libraries
    third_party_level = getattr(logging, log_config.third_party_level)
    for logger_name in ("openai", "httpx", "httpcore", "urllib3"):
        logging.getLogger(logger_name).setLevel(third_party_level)

    logger.info(
        f"Logging configured: level={log_config.level}, file={log_config.file}, "
        f"max_size={log_config.max_bytes / 1_048_576:.1f}MB, "
        f"backups={log_config.backup_count}, third_party_level={log_config.third_party_level}"
    )


class ConsoleChat:
    """Interactive terminal conversation with Foxy."""

    def __init__(self, config: GroovyFoxConfig, bot: Optional[FoxyBot] = None):
        self.config = config
        self.bot = bot or FoxyBot.from_config(
            config, reply_sink=ConsoleReplySink(name=config.bot.name)
        )
        self.running = False

    def handle_line(self, text: str) -> None:
        """Run one turn for a line typed by the user."""
        message = InboundMessage(
            text=text,
            conversation_id=self.config.bot.conversation_id,
            sender_id=self.config.bot.sender_id,
        )
        try:
            self.bot.handle_message(message)
        except RecognizerError as e:
            logger.error(f"Turn failed: {e}")
            print(f"[!] I couldn't understand that right now ({e}). Please try again.")

    def run(self, stream=None) -> None:
        """Read lines until EOF, an exit command or Ctrl+C."""
        stream = stream or sys.stdin
        self.running = True
        print(f"*** Chatting with {self.config.bot.name}. Type 'quit' to leave. ***")

        try:
            while self.running:
                print("> ", end="", flush=True)
                line = stream.readline()
                if not line:
                    break

                text = line.strip()
                if not text:
                    continue
                if text.lower() in EXIT_COMMANDS:
                    break

                self.handle_line(text)
        except KeyboardInterrupt:
            logger.info("Keyboard interrupt received")
        finally:
            self.running = False
            logger.info("Console chat stopped")
            print("\n[+] Bye!")


def main(config_path: Optional[str] = None):
    """CLI entry point for groovyfox."""
    try:
        config = load_config(config_path)
        setup_logging(config.logging)
        ConsoleChat(config).run()

    except FileNotFoundError as e:
        print(f"\n[!] Configuration Error: {str(e)}")
        sys.exit(1)

    except (ValueError, CatalogError) as e:
        print(f"\n[!] Configuration Error: {str(e)}")
        sys.exit(1)

    except TranscriptStoreError as e:
        print(f"\n[!] Storage Error: {str(e)}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Fatal error: {str(e)}", exc_info=True)
        print(f"\n[!] Fatal Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
