"""Dataclasses describing a dictionary lookup result."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Language(str, Enum):
    """Supported lookup languages."""

    EN = "en"
    UK = "uk"
    EN_TW = "en-tw"
    EN_CN = "en-cn"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass
class Example:
    """Example sentence attached to a definition."""

    id: int
    text: str = ""
    translation: str = ""


@dataclass
class Definition:
    """A single sense scraped from a definition block."""

    id: int
    part_of_speech: str = ""
    source: str = ""  # dictionary data-id, e.g. "cald4"
    text: str = ""
    translation: str = ""
    examples: list[Example] = field(default_factory=list)


@dataclass
class Pronunciation:
    """Pronunciation with audio for one part of speech and region."""

    part_of_speech: str = ""
    region: str = ""  # "us", "uk"
    audio_url: str = ""
    phonetic: str = ""

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.part_of_speech, self.region, self.phonetic)


@dataclass
class VerbForm:
    """Conjugated verb form, e.g. ("past tense", "classed")."""

    id: int
    form_type: str = ""
    text: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.form_type, self.text)


@dataclass
class LookupResult:
    """Unified dictionary lookup result."""

    word: str
    parts_of_speech: list[str] = field(default_factory=list)
    verbs: list[VerbForm] = field(default_factory=list)
    pronunciations: list[Pronunciation] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
