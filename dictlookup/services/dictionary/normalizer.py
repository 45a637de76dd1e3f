"""Deduplication and ordering of an assembled LookupResult."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

from dictlookup.services.dictionary.base import LookupResult

T = TypeVar("T")


def text_sort_key(value: str) -> tuple[str, str]:
    """Case-insensitive ordering with a deterministic tie-break on case."""
    return (value.casefold(), value)


def dedupe(items: Iterable[T], key: Callable[[T], Hashable]) -> list[T]:
    """Drop items whose key was already seen, keeping the first occurrence."""
    seen: set[Hashable] = set()
    unique: list[T] = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        unique.append(item)
    return unique


def normalize(result: LookupResult) -> LookupResult:
    """
    Normalize a lookup result in place and return it.

    - parts of speech: unique, sorted
    - verbs: unique by (form type, text), stable-sorted by form type
    - pronunciations: unique by (part of speech, region, phonetic), order kept
    - definitions: stable-sorted by part of speech
    """
    result.parts_of_speech = sorted(set(result.parts_of_speech))

    result.verbs = sorted(
        dedupe(result.verbs, key=lambda verb: verb.key),
        key=lambda verb: text_sort_key(verb.form_type),
    )

    result.pronunciations = dedupe(result.pronunciations, key=lambda pron: pron.key)

    result.definitions.sort(key=lambda definition: text_sort_key(definition.part_of_speech))

    return result
