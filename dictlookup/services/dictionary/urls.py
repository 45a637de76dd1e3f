"""URL construction for the dictionary and conjugation pages."""

from dataclasses import dataclass
from urllib.parse import quote

from dictlookup.config import settings

# language tag -> (dictionary slug, region)
LANGUAGE_MAP: dict[str, tuple[str, str]] = {
    "en": ("english", "us"),
    "uk": ("english", "uk"),
    "en-tw": ("english-chinese-traditional", "us"),
    "en-cn": ("english-chinese-simplified", "us"),
}
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class DictionaryUrl:
    url: str
    slug: str
    region: str


def build_url(word: str, language: str, base_url: str | None = None) -> DictionaryUrl:
    """Build the Cambridge Dictionary URL for a word.

    Unknown language tags fall back to the US English dictionary.
    """
    base = (base_url or settings.cambridge_base_url).rstrip("/")
    slug, region = LANGUAGE_MAP.get(language, LANGUAGE_MAP[DEFAULT_LANGUAGE])
    url = f"{base}/{region}/dictionary/{slug}/{quote(word, safe='')}"
    return DictionaryUrl(url=url, slug=slug, region=region)


def build_conjugation_url(word: str, base_url: str | None = None) -> str:
    """Build the Wiktionary page URL holding the word's inflection table."""
    base = (base_url or settings.wiktionary_base_url).rstrip("/")
    return f"{base}/wiki/{quote(word, safe='')}"
