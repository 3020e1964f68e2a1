"""Local storage and interactive entry of the service bearer token."""

import logging
import os

from .exceptions import FileSystemError
from .lyrics_client import LyricsClient
from .prompter import Prompter

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_SONG_ID = "dummy-check"


class TokenStore:
    """
    Keeps the bearer token in a single-line plain-text file.

    The token is offered for reuse when present, prompted for otherwise, and
    checked once against the service with a request for a song id that does
    not exist: only a 401 on that check triggers a re-prompt.
    """

    def __init__(
        self,
        token_path: str,
        prompter: Prompter,
        client: LyricsClient,
        validation_song_id: str = DEFAULT_VALIDATION_SONG_ID,
        preview_chars: int = 15,
    ):
        """
        Args:
            token_path: Path of the token file.
            prompter: Source of operator answers.
            client: Client used for the validation request.
            validation_song_id: Sentinel song id requested to validate the token.
            preview_chars: Number of leading characters of a saved token to display.
        """
        self.token_path = token_path
        self.prompter = prompter
        self.client = client
        self.validation_song_id = validation_song_id
        self.preview_chars = preview_chars

    def ensure_exists(self) -> None:
        """Creates an empty token file if none exists yet."""
        if os.path.exists(self.token_path):
            return
        try:
            parent = os.path.dirname(self.token_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.token_path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise FileSystemError(f"Could not create token file {self.token_path}: {e}") from e
        logger.info(f"Created empty token file: {self.token_path}")

    def read(self) -> str:
        """Returns the stored token, trimmed. Empty string when the file is missing or blank."""
        if not os.path.isfile(self.token_path):
            return ""
        try:
            with open(self.token_path, "r", encoding="utf-8") as f:
                return f.read().strip()
        except OSError as e:
            raise FileSystemError(f"Could not read token file {self.token_path}: {e}") from e

    def save(self, token: str) -> str:
        """Writes the trimmed token to the file and returns it."""
        token = token.strip()
        try:
            with open(self.token_path, "w", encoding="utf-8") as f:
                f.write(token)
        except OSError as e:
            raise FileSystemError(f"Could not write token file {self.token_path}: {e}") from e
        return token

    def _prompt_new(self, question: str = "Enter Bearer token: ") -> str:
        return self.save(self.prompter.ask(question))

    def load(self) -> str:
        """
        Obtains a token from the file or the operator and validates it once.

        Returns:
            The trimmed token.

        Raises:
            FileSystemError: If the token file cannot be read or written.
        """
        token = ""
        saved = self.read()
        if saved:
            # Preview goes to the console only, never to the log file
            self.prompter.tell(f"Found saved token: {saved[:self.preview_chars]}...")
            choice = self.prompter.ask("Use this token? (Y/n): ")
            if choice.strip().lower() == "n":
                token = self._prompt_new("Enter new Bearer token: ")
                logger.info("New token saved.")
            else:
                token = saved
                logger.info("Using saved token.")

        if not token:
            token = self._prompt_new()
            logger.info("Token saved for future runs.")

        check = self.client.fetch_aligned_words(self.validation_song_id, token)
        if check.is_auth_failure:
            logger.warning("Token expired or invalid. Please enter a new one.")
            token = self._prompt_new()
            logger.info("Token saved.")

        return token
