"""Command-Line Interface handler for LyricSub."""

import argparse
import logging
import sys
from typing import List, Optional

from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .lyrics_client import LyricsClient
from .prompter import ConsolePrompter
from .subtitle_writer import SubtitleWriter
from .token_store import TokenStore
from .exporter import LyricsExporter
from .exceptions import LyricSubError, ConfigurationError

logger = logging.getLogger(__name__) # Get logger for this module

DEFAULT_CONFIG_PATH = "config.yaml"

class CLIHandler:
    """Parses arguments, bootstraps logging and config, and runs the interactive export."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            description="LyricSub: Export word-aligned song lyrics as SRT or LRC subtitle files.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "-c", "--config",
            default=DEFAULT_CONFIG_PATH,
            help="Path to the configuration YAML file. Built-in defaults are used if the default file is missing."
        )
        parser.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parses arguments, sets up logging, loads config, and runs the exporter. Always exits."""
        args = self.parser.parse_args(argv)

        # --- Setup Logging ---
        log_level = getattr(logging, args.log_level.upper(), logging.INFO)
        setup_logging(log_level=log_level, log_dir='logs', log_file='lyricsub_init.log')

        # --- Load Configuration ---
        try:
            config_loader = ConfigLoader()
            config = config_loader.load_or_default(args.config, required=args.config != DEFAULT_CONFIG_PATH)
        except ConfigurationError as e:
            logger.critical(f"Failed to load configuration from {args.config}: {e}")
            sys.exit(1)
        except FileNotFoundError:
            logger.critical(f"Configuration file not found: {args.config}")
            sys.exit(1)

        # --- Re-configure Logging with settings from Config ---
        setup_logging(log_level=log_level, log_dir=config['log_dir'], log_file=config['log_file'])
        logger.debug("Logging re-configured with settings from config file.")

        try:
            with LyricsClient(base_url=config['api_base_url'], timeout=config['request_timeout']) as client:
                prompter = ConsolePrompter()
                token_store = TokenStore(
                    token_path=config['token_file'],
                    prompter=prompter,
                    client=client,
                    validation_song_id=config['validation_song_id'],
                    preview_chars=config['token_preview_chars'],
                )
                exporter = LyricsExporter(
                    prompter=prompter,
                    client=client,
                    token_store=token_store,
                    writer=SubtitleWriter(output_dir=config['output_dir']),
                    show_progress=bool(config['show_progress']),
                )
                exporter.run()
            sys.exit(0)

        except LyricSubError as e:
            logger.error(f"A LyricSub error occurred: {e}")
            sys.exit(1)
        except (KeyboardInterrupt, EOFError):
            logger.warning("Input closed or interrupted by user. Exiting.")
            sys.exit(1)
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            sys.exit(2) # Use a different exit code for unexpected crashes


def main() -> None:
    CLIHandler().run()
