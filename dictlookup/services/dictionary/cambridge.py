"""Extraction of entries from Cambridge Dictionary pages."""

import logging

from dictlookup.services.dictionary.base import (
    Definition,
    Example,
    LookupResult,
    Pronunciation,
)
from dictlookup.services.dictionary.document import Node, parse_html
from dictlookup.services.dictionary.errors import WordNotFoundError

logger = logging.getLogger(__name__)

HEADWORD = ".hw.dhw"
POS = ".pos.dpos"
POS_HEADER = ".pos-header.dpos-h"
POS_LABEL = ".dpos-g"
PRON_ITEM = ".dpron-i"
PRON_REGION = ".region.dreg"
PRON_AUDIO = "audio source"
PRON_TEXT = ".pron.dpron"
DEF_BLOCK = ".def-block.ddef_block"
ENTRY_BODY = ".pr.entry-body__el"
DICTIONARY_SECTION = ".pr.dictionary"
DEF_TEXT = ".def.ddef_d.db"
DEF_TRANSLATION = ".def-body.ddef_b > span.trans.dtrans"
DEF_EXAMPLE = ".def-body.ddef_b > .examp.dexamp"
EXAMPLE_TEXT = ".eg.deg"
EXAMPLE_TRANSLATION = ".trans.dtrans"


def parse_dictionary(html: str, word: str, site_url: str) -> LookupResult:
    """
    Parse a Cambridge Dictionary page into a LookupResult.

    Args:
        html: Page HTML
        word: The word that was looked up, used when the page has no headword
        site_url: Base URL that relative audio paths are resolved against

    Returns:
        LookupResult with verbs left empty

    Raises:
        WordNotFoundError: If the page holds no dictionary entry
    """
    doc = parse_html(html)

    headword = doc.select_one(HEADWORD)
    pos = _extract_parts_of_speech(doc)
    blocks = doc.select(DEF_BLOCK)

    if headword is None and not pos and not blocks:
        raise WordNotFoundError(f"No dictionary entry for '{word}'")

    word_text = (headword.text() if headword else "") or word.strip()
    if not word_text:
        raise WordNotFoundError("No headword on page")

    logger.debug(
        f"Parsed '{word_text}': {len(pos)} parts of speech, {len(blocks)} definitions"
    )

    return LookupResult(
        word=word_text,
        parts_of_speech=pos,
        verbs=[],
        pronunciations=_extract_pronunciations(doc, site_url),
        definitions=[_extract_definition(index, block) for index, block in enumerate(blocks)],
    )


def _extract_parts_of_speech(doc: Node) -> list[str]:
    """Collect part-of-speech labels in first-seen order."""
    seen: dict[str, None] = {}
    for node in doc.select(POS):
        label = node.text()
        if label:
            seen.setdefault(label, None)
    return list(seen)


def _extract_pronunciations(doc: Node, site_url: str) -> list[Pronunciation]:
    pronunciations: list[Pronunciation] = []

    for header in doc.select(POS_HEADER):
        label = header.select_one(POS_LABEL)
        if label is None:
            continue
        pos = label.text()

        for item in header.select(PRON_ITEM):
            audio = item.select_one(PRON_AUDIO)
            src = audio.attr("src") if audio else ""
            phonetic = item.select_text(PRON_TEXT)

            # Entries without audio or phonetic text are not usable
            if not src or not phonetic:
                continue

            pronunciations.append(
                Pronunciation(
                    part_of_speech=pos,
                    region=item.select_text(PRON_REGION),
                    audio_url=_absolute_url(site_url, src),
                    phonetic=phonetic,
                )
            )

    return pronunciations


def _extract_definition(index: int, block: Node) -> Definition:
    entry = block.closest(ENTRY_BODY)
    pos_node = entry.select_one(POS) if entry else None
    section = block.closest(DICTIONARY_SECTION)

    examples = [
        Example(
            id=i,
            text=example.select_text(EXAMPLE_TEXT),
            translation=example.select_text(EXAMPLE_TRANSLATION),
        )
        for i, example in enumerate(block.select(DEF_EXAMPLE))
    ]

    return Definition(
        id=index,
        part_of_speech=pos_node.text() if pos_node else "",
        source=section.attr("data-id") if section else "",
        text=block.select_text(DEF_TEXT),
        translation=block.select_text(DEF_TRANSLATION),
        examples=examples,
    )


def _absolute_url(site_url: str, src: str) -> str:
    if src.startswith(("http://", "https://")):
        return src
    return site_url.rstrip("/") + src
