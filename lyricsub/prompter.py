"""Blocking console prompts used by the interactive export."""

from abc import ABC, abstractmethod

from tqdm import tqdm


class Prompter(ABC):
    """Asks the operator a question and waits for the answer."""

    @abstractmethod
    def ask(self, question: str) -> str:
        pass

    @abstractmethod
    def tell(self, message: str) -> None:
        """Shows a message to the operator only, independent of the log level."""
        pass


class ConsolePrompter(Prompter):
    """Reads answers from standard input, one prompt at a time."""

    def ask(self, question: str) -> str:
        # EOFError / KeyboardInterrupt propagate to the CLI handler
        return input(question)

    def tell(self, message: str) -> None:
        # tqdm.write keeps an active progress bar intact
        tqdm.write(message)
