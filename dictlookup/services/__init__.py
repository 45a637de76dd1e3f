"""Services for dictionary lookups."""

from dictlookup.services.dictionary import DictionaryService

__all__ = ["DictionaryService"]
