"""Route handlers for dictlookup."""

from dictlookup.routes.dictionary import router as dictionary_router

__all__ = ["dictionary_router"]
