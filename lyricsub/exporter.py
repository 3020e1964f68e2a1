"""Orchestrates the interactive aligned-lyrics export."""

import logging
import os
import time
from typing import List

from tqdm import tqdm

from .lyrics_client import LyricsClient
from .models import ExportSummary, FetchStatus
from .prompter import Prompter
from .subtitle_formatter import get_formatter, normalize_format
from .subtitle_writer import SubtitleWriter
from .token_store import TokenStore
from .exceptions import FileSystemError

logger = logging.getLogger(__name__)


def parse_song_ids(raw: str) -> List[str]:
    """Splits a comma-separated answer into trimmed, non-empty song ids, keeping their order."""
    return [part.strip() for part in raw.split(",") if part.strip()]


class LyricsExporter:
    """
    Runs one interactive session: asks for song ids and a format, obtains a
    token, then fetches, converts and saves each song in the order given.
    """

    def __init__(
        self,
        prompter: Prompter,
        client: LyricsClient,
        token_store: TokenStore,
        writer: SubtitleWriter,
        show_progress: bool = True,
    ):
        self.prompter = prompter
        self.client = client
        self.token_store = token_store
        self.writer = writer
        self.show_progress = show_progress

    def run(self) -> ExportSummary:
        """
        Executes the session.

        Returns:
            ExportSummary with the saved paths, skipped ids and whether an
            authentication failure cut the run short.

        Raises:
            FileSystemError: If the token file cannot be created, read or written.
        """
        self.token_store.ensure_exists()

        song_ids = parse_song_ids(self.prompter.ask("Enter song IDs (comma-separated): "))
        file_type = normalize_format(self.prompter.ask("Enter file type (lrc or srt, default lrc): "))
        formatter = get_formatter(file_type)

        token = self.token_store.load()

        summary = ExportSummary()
        start_time = time.time()
        logger.info(f"--- Exporting {len(song_ids)} song(s) as {file_type.upper()} ---")

        with tqdm(total=len(song_ids), unit="song", desc="Exporting", disable=not self.show_progress) as pbar:
            for song_id in song_ids:
                pbar.set_description(f"Fetching: {song_id[:30]}")
                logger.info(f"Fetching aligned words for {song_id}...")
                result = self.client.fetch_aligned_words(song_id, token)

                if result.status is FetchStatus.AUTH_FAILED:
                    logger.error("Your token is invalid. Please run the program again to refresh.")
                    summary.aborted = True
                    break

                if result.status is FetchStatus.SOFT_FAILED:
                    logger.warning(f"No words for {song_id}")
                    summary.skipped_ids.append(song_id)
                    pbar.update(1)
                    continue

                content = formatter.format_words(result.words)
                try:
                    path = self.writer.save(content, formatter.extension, song_id)
                except FileSystemError as e:
                    logger.error(f"Could not save subtitles for {song_id}: {e}")
                    summary.skipped_ids.append(song_id)
                else:
                    summary.saved_paths.append(path)
                    self.prompter.tell(f"Saved: {os.path.abspath(path)}")
                finally:
                    pbar.update(1)

        logger.info(f"Saved {len(summary.saved_paths)}/{len(song_ids)} song(s), skipped {len(summary.skipped_ids)} "
                    f"in {time.time() - start_time:.2f} seconds.")
        logger.info("All done!")
        self.prompter.tell("All done!")
        return summary
