"""HTTP client for the aligned-lyrics endpoint of the music generation service."""

import logging
import math
from typing import List, Optional
from urllib.parse import quote

import httpx

from .exceptions import AuthenticationError, FetchError
from .models import AlignedWord, FetchResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://studio-api.prod.suno.com"
ALIGNED_LYRICS_PATH = "/api/gen/{song_id}/aligned_lyrics/v2/"


class LyricsClient:
    """
    Fetches word-level aligned lyrics for a song.

    A 401 response is reported as an authentication failure; every other
    problem (transport error, unexpected status, malformed body, missing
    ``aligned_words``) is reported as a soft failure so the caller can skip
    the song.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: Root URL of the service.
            timeout: Request timeout in seconds.
            client: Optional pre-built httpx.Client (e.g. with a mock transport).
                    When given, the caller keeps ownership of it.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.Client(
            headers={"Accept": "application/json"},
            timeout=timeout,
        )

    def __enter__(self) -> "LyricsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def build_url(self, song_id: str) -> str:
        return self.base_url + ALIGNED_LYRICS_PATH.format(song_id=quote(song_id, safe=""))

    def _make_request(self, song_id: str, token: str) -> dict:
        url = self.build_url(song_id)
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        try:
            resp = self.client.get(url, headers=headers)
        except httpx.HTTPError as e:
            raise FetchError(f"request failed: {e}") from e

        if resp.status_code == 401:
            raise AuthenticationError("token rejected (HTTP 401)")
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"unexpected HTTP status {resp.status_code}") from e

        try:
            data = resp.json()
        except ValueError as e: # JSONDecodeError or undecodable bytes
            raise FetchError("response body is not valid JSON") from e
        if not isinstance(data, dict):
            raise FetchError("response body is not a JSON object")
        return data

    @staticmethod
    def _parse_words(raw_words: list) -> List[AlignedWord]:
        words = []
        for i, item in enumerate(raw_words):
            try:
                word = AlignedWord(
                    word=str(item["word"]),
                    start_s=float(item["start_s"]),
                    end_s=float(item["end_s"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise FetchError(f"malformed aligned word at index {i}: {e!r}") from e
            # json accepts NaN / Infinity literals
            if not (math.isfinite(word.start_s) and math.isfinite(word.end_s)):
                raise FetchError(f"non-finite time in aligned word at index {i}")
            words.append(word)
        return words

    def fetch_aligned_words(self, song_id: str, token: str) -> FetchResult:
        """
        Fetches the aligned words for one song.

        Args:
            song_id: Identifier of the song on the service.
            token: Bearer token.

        Returns:
            FetchResult tagged OK (with words), AUTH_FAILED or SOFT_FAILED.
        """
        logger.debug(f"Requesting aligned lyrics: {self.build_url(song_id)}")
        try:
            data = self._make_request(song_id, token)
            raw_words = data.get("aligned_words")
            if raw_words is None:
                raise FetchError("response has no 'aligned_words'")
            if not isinstance(raw_words, list):
                raise FetchError("'aligned_words' is not a list")
            words = self._parse_words(raw_words)
        except AuthenticationError as e:
            logger.debug(f"Authentication failed for song {song_id}: {e}")
            return FetchResult.auth_failed(str(e))
        except FetchError as e:
            logger.error(f"Error fetching song {song_id}: {e}")
            return FetchResult.soft_failed(str(e))

        logger.debug(f"Received {len(words)} aligned words for song {song_id}")
        return FetchResult.ok(words)
