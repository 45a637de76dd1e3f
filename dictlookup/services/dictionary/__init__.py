"""Dictionary lookup: scraping, normalization and caching."""

from dictlookup.services.dictionary.base import (
    Definition,
    Example,
    Language,
    LookupResult,
    Pronunciation,
    VerbForm,
)
from dictlookup.services.dictionary.cache import CacheManager, make_cache_key
from dictlookup.services.dictionary.errors import (
    DictionaryServiceError,
    InvalidArgumentError,
    UpstreamUnavailableError,
    WordNotFoundError,
)
from dictlookup.services.dictionary.service import DictionaryService

__all__ = [
    "CacheManager",
    "Definition",
    "DictionaryService",
    "DictionaryServiceError",
    "Example",
    "InvalidArgumentError",
    "Language",
    "LookupResult",
    "Pronunciation",
    "UpstreamUnavailableError",
    "VerbForm",
    "WordNotFoundError",
    "make_cache_key",
]
