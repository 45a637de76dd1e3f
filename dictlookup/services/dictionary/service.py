"""Dictionary lookup service combining Cambridge entries with Wiktionary verb forms."""

import asyncio
import copy
import logging

import httpx

from dictlookup.config import settings
from dictlookup.services.dictionary.base import Language, LookupResult, VerbForm
from dictlookup.services.dictionary.cache import CacheManager, make_cache_key
from dictlookup.services.dictionary.cambridge import parse_dictionary
from dictlookup.services.dictionary.errors import (
    DictionaryServiceError,
    InvalidArgumentError,
    UpstreamUnavailableError,
    WordNotFoundError,
)
from dictlookup.services.dictionary.normalizer import normalize
from dictlookup.services.dictionary.urls import build_conjugation_url, build_url
from dictlookup.services.dictionary.wiktionary import parse_conjugations

logger = logging.getLogger(__name__)


class DictionaryService:
    """
    Facade for dictionary lookups with caching.

    The dictionary page and the conjugation page are fetched concurrently.
    The dictionary page is required; the conjugation page is best-effort and
    only contributes verb forms when it can be fetched and parsed.
    """

    def __init__(
        self,
        cache_manager: CacheManager | None = None,
        cambridge_base_url: str | None = None,
        wiktionary_base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        """
        Initialize the dictionary service.

        Args:
            cache_manager: Cache shared by all lookups. Defaults to CacheManager()
            cambridge_base_url: Dictionary site root. Defaults to settings
            wiktionary_base_url: Conjugation site root. Defaults to settings
            timeout: Per-request timeout in seconds. Defaults to settings
            user_agent: User-Agent header sent upstream. Defaults to settings
        """
        self.cache_manager = cache_manager if cache_manager is not None else CacheManager()
        self.cambridge_base_url = cambridge_base_url or settings.cambridge_base_url
        self.wiktionary_base_url = wiktionary_base_url or settings.wiktionary_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.user_agent = user_agent or settings.user_agent

    def _client(self) -> httpx.AsyncClient:
        # Redirects to a canonical entry or the search page are followed;
        # the search page holds no entry and parses as not found
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
        )

    async def lookup(self, word: str, language: str) -> LookupResult:
        """
        Look up a word.

        Args:
            word: The word to look up
            language: One of "en", "uk", "en-tw", "en-cn"

        Returns:
            Normalized LookupResult (possibly served from cache)

        Raises:
            InvalidArgumentError: Unsupported language or blank word
            WordNotFoundError: The dictionary has no entry for the word
            UpstreamUnavailableError: The dictionary site could not be reached
            DictionaryServiceError: Any other failure while building the result
        """
        if language not in Language.values():
            raise InvalidArgumentError(f"Unsupported language: {language}")
        word = word.strip()
        if not word:
            raise InvalidArgumentError("Word must not be empty")

        target = build_url(word, language, self.cambridge_base_url)
        conjugation_url = build_conjugation_url(word, self.wiktionary_base_url)

        cache_key = make_cache_key(target.url)
        cached = self.cache_manager.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for: {word}")
            return copy.deepcopy(cached)

        async with self._client() as client:
            page, verbs = await asyncio.gather(
                client.get(target.url),
                self.fetch_conjugations(client, conjugation_url),
                return_exceptions=True,
            )

        if isinstance(page, httpx.TransportError):
            logger.error(f"Error fetching dictionary for '{word}': {page!r}")
            raise UpstreamUnavailableError("Dictionary site unavailable") from page
        if isinstance(page, BaseException):
            logger.error(f"Error fetching dictionary for '{word}': {page!r}")
            raise DictionaryServiceError("Failed to fetch dictionary") from page
        if page.status_code != 200:
            logger.info(f"Dictionary returned HTTP {page.status_code} for '{word}'")
            raise WordNotFoundError("Word not found")

        try:
            result = parse_dictionary(page.text, word, self.cambridge_base_url)
        except DictionaryServiceError:
            raise
        except Exception as e:
            logger.error(f"Error parsing dictionary page for '{word}': {e}")
            raise DictionaryServiceError("Failed to parse dictionary") from e

        if isinstance(verbs, list):
            result.verbs = list(verbs)

        normalize(result)
        # The cached entry itself is never handed out
        self.cache_manager.set(cache_key, copy.deepcopy(result))
        return result

    async def fetch_conjugations(self, client: httpx.AsyncClient, url: str) -> list[VerbForm]:
        """
        Fetch verb forms from a Wiktionary page.

        Never raises; returns an empty list when the page cannot be fetched
        or parsed.
        """
        cache_key = make_cache_key(url)
        cached = self.cache_manager.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for verbs: {url}")
            return cached

        try:
            response = await client.get(url)
            response.raise_for_status()
            verbs = parse_conjugations(response.text)
        except Exception as e:
            logger.warning(f"Failed to fetch verbs from {url}: {e}")
            return []

        self.cache_manager.set(cache_key, verbs)
        return verbs
