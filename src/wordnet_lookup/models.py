"""Domain model dataclasses and enums for wordnet-lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from wordnet_lookup.exceptions import InvalidCodeError, MalformedRecordError

if TYPE_CHECKING:
    from wordnet_lookup.relations import LexicalRelation, SemanticRelation
    from wordnet_lookup.wordnet import WordNet

    Relation = Union[SemanticRelation, LexicalRelation]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PartOfSpeech(str, Enum):
    """The four parts of speech a WordNet database is split into."""

    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @classmethod
    def from_code(cls, code: str) -> PartOfSpeech:
        """Parse a single-letter code; ``s`` (adjective satellite) is an adjective."""
        if code == "s":
            return cls.ADJECTIVE
        try:
            return cls(code)
        except ValueError:
            raise InvalidCodeError(code) from None

    @property
    def file_suffix(self) -> str:
        """Suffix of the ``index.*``, ``data.*`` and ``*.exc`` files."""
        return _FILE_SUFFIXES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_FILE_SUFFIXES: dict[PartOfSpeech, str] = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB: "adv",
}

_LABELS: dict[PartOfSpeech, str] = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adjective",
    PartOfSpeech.ADVERB: "adverb",
}


# ---------------------------------------------------------------------------
# Lemma helpers
# ---------------------------------------------------------------------------

def normalize_lemma(word: str) -> str:
    """Fold a query word into the form the index files are keyed by."""
    return "_".join(word.strip().lower().split())


def display_form(lemma: str) -> str:
    """Render a collocation such as ``ice_cream`` as ``ice cream``."""
    return lemma.replace("_", " ")


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IndexEntry:
    """One line of an ``index.<suffix>`` file."""

    lemma: str
    part_of_speech: PartOfSpeech
    offsets: tuple[int, ...]
    pointer_symbols: tuple[str, ...] = ()
    sense_count: int = 0
    tagsense_count: int = 0


@dataclass(frozen=True, slots=True)
class Relationship:
    """An outbound pointer from a synset to another synset."""

    relation: Relation
    offset: int
    part_of_speech: PartOfSpeech

    def resolve(self, wordnet: WordNet) -> SynSet:
        """Read the target synset from the database."""
        return wordnet.resolve(self.part_of_speech, self.offset)


_EXAMPLE_RE = re.compile(r'"([^"]*)"')


@dataclass(frozen=True, slots=True)
class SynSet:
    """A parsed ``data.<suffix>`` record.

    ``part_of_speech`` is the part of speech of the file the record was
    read from; ``ss_type`` is the raw synset-type code stored in the
    record itself.
    """

    offset: int
    part_of_speech: PartOfSpeech
    words: tuple[str, ...]
    gloss: str
    relationships: tuple[Relationship, ...] = ()
    lex_filenum: int = 0
    ss_type: str = ""

    @property
    def pos_mismatch(self) -> bool:
        """True when the record's ``ss_type`` disagrees with its file."""
        try:
            return PartOfSpeech.from_code(self.ss_type) is not self.part_of_speech
        except MalformedRecordError:
            return True

    @property
    def definition(self) -> str:
        head = self.gloss.split('"', 1)[0]
        return head.strip().rstrip(";").strip()

    @property
    def examples(self) -> tuple[str, ...]:
        return tuple(m.strip() for m in _EXAMPLE_RE.findall(self.gloss))

    def synonyms(self) -> list[str]:
        return list(self.words)

    def with_relation(self, relation: Relation) -> list[Relationship]:
        """Relationships of exactly this kind, in record order."""
        return [r for r in self.relationships if r.relation is relation]


@dataclass(frozen=True, slots=True)
class Definition:
    """A gloss together with the part of speech of its synset."""

    part_of_speech: PartOfSpeech
    gloss: str


@dataclass(frozen=True, slots=True)
class WordGroup:
    """Sorted, deduplicated words collected for one part of speech."""

    part_of_speech: PartOfSpeech
    words: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RelatedWords:
    """Member words of every target of one relation, sorted."""

    label: str
    words: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Sense:
    """One synset of a described lemma with its resolved relation targets."""

    synset: SynSet
    related: tuple[RelatedWords, ...] = ()

    @property
    def definition(self) -> str:
        return self.synset.definition

    @property
    def examples(self) -> tuple[str, ...]:
        return self.synset.examples


@dataclass(frozen=True, slots=True)
class Description:
    """Everything known about one base form in one part of speech.

    ``synonyms`` leaves out the lemma itself; ``antonyms`` collects the
    words of every antonym target across the senses.
    """

    lemma: str
    part_of_speech: PartOfSpeech
    senses: tuple[Sense, ...]
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()


@dataclass
class LookupResult:
    """Synsets read for a word, plus the offsets that failed to parse."""

    word: str
    synsets: list[SynSet] = field(default_factory=list)
    errors: list[MalformedRecordError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)
