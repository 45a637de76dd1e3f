"""Exceptions raised by the dictionary lookup service."""


class DictionaryServiceError(Exception):
    """Unexpected failure while building a lookup result."""

    status_code = 500


class InvalidArgumentError(DictionaryServiceError):
    """Unsupported language or empty word."""

    status_code = 400


class WordNotFoundError(DictionaryServiceError):
    """The dictionary has no page for the word."""

    status_code = 404


class UpstreamUnavailableError(DictionaryServiceError):
    """The dictionary site could not be reached."""

    status_code = 503
