"""Pointer-symbol enums and inverse mapping for wordnet-lookup."""

from __future__ import annotations

from enum import Enum
from typing import Union

from wordnet_lookup.exceptions import UnknownRelationCodeError
from wordnet_lookup.models import PartOfSpeech

# ---------------------------------------------------------------------------
# Enums (values are the pointer symbols used in data files)
# ---------------------------------------------------------------------------

class SemanticRelation(Enum):
    """Relations that hold between whole synsets."""

    HYPERNYM = "@"
    INSTANCE_HYPERNYM = "@i"
    HYPONYM = "~"
    INSTANCE_HYPONYM = "~i"
    MEMBER_HOLONYM = "#m"
    SUBSTANCE_HOLONYM = "#s"
    PART_HOLONYM = "#p"
    MEMBER_MERONYM = "%m"
    SUBSTANCE_MERONYM = "%s"
    PART_MERONYM = "%p"
    ATTRIBUTE = "="
    DOMAIN_OF_SYNSET_TOPIC = ";c"
    MEMBER_OF_DOMAIN_TOPIC = "-c"
    DOMAIN_OF_SYNSET_REGION = ";r"
    MEMBER_OF_DOMAIN_REGION = "-r"
    DOMAIN_OF_SYNSET_USAGE = ";u"
    MEMBER_OF_DOMAIN_USAGE = "-u"
    ENTAILMENT = "*"
    CAUSE = ">"
    VERB_GROUP = "$"
    SIMILAR_TO = "&"
    ALSO_SEE = "^"
    DERIVED_FROM_ADJECTIVE = "\\"

    @classmethod
    def from_code(cls, code: str) -> SemanticRelation:
        try:
            return cls(code)
        except ValueError:
            raise UnknownRelationCodeError(code) from None

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


class LexicalRelation(Enum):
    """Relations that hold between particular words of two synsets."""

    ANTONYM = "!"
    DERIVATIONALLY_RELATED_FORM = "+"
    ALSO_SEE = "^"
    PARTICIPLE_OF_VERB = "<"
    PERTAINYM = "\\"
    DOMAIN_OF_SYNSET_TOPIC = ";c"
    MEMBER_OF_DOMAIN_TOPIC = "-c"
    DOMAIN_OF_SYNSET_REGION = ";r"
    MEMBER_OF_DOMAIN_REGION = "-r"
    DOMAIN_OF_SYNSET_USAGE = ";u"
    MEMBER_OF_DOMAIN_USAGE = "-u"

    @classmethod
    def from_code(cls, code: str) -> LexicalRelation:
        try:
            return cls(code)
        except ValueError:
            raise UnknownRelationCodeError(code) from None

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


Relation = Union[SemanticRelation, LexicalRelation]

_LEXICAL_CODES = frozenset(member.value for member in LexicalRelation)


def relation_from_code(
    code: str,
    pos: PartOfSpeech | None = None,
    *,
    word_specific: bool = False,
) -> Relation:
    """Resolve a pointer symbol read from the data file of ``pos``.

    A symbol shared by both enums resolves to the lexical relation when
    the pointer is ``word_specific`` (non-zero source/target field) and
    to the semantic relation otherwise. ``\\`` means "derived from
    adjective" in the adverb file and "pertainym" everywhere else.
    """
    if code == "\\":
        if pos is PartOfSpeech.ADVERB:
            return SemanticRelation.DERIVED_FROM_ADJECTIVE
        return LexicalRelation.PERTAINYM
    if word_specific and code in _LEXICAL_CODES:
        return LexicalRelation(code)
    try:
        return SemanticRelation(code)
    except ValueError:
        return LexicalRelation.from_code(code)


def relation_by_name(name: str) -> Relation:
    """Look a relation up by label ("part meronym"), member name or symbol."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    for enum in (SemanticRelation, LexicalRelation):
        for member in enum:
            if member.name.lower() == key:
                return member
    return relation_from_code(name.strip())


# ---------------------------------------------------------------------------
# Inverses
# ---------------------------------------------------------------------------

_S = SemanticRelation
_L = LexicalRelation

_ASYMMETRIC_PAIRS: list[tuple[Relation, Relation]] = [
    (_S.HYPERNYM, _S.HYPONYM),
    (_S.INSTANCE_HYPERNYM, _S.INSTANCE_HYPONYM),
    (_S.MEMBER_HOLONYM, _S.MEMBER_MERONYM),
    (_S.SUBSTANCE_HOLONYM, _S.SUBSTANCE_MERONYM),
    (_S.PART_HOLONYM, _S.PART_MERONYM),
    (_S.DOMAIN_OF_SYNSET_TOPIC, _S.MEMBER_OF_DOMAIN_TOPIC),
    (_S.DOMAIN_OF_SYNSET_REGION, _S.MEMBER_OF_DOMAIN_REGION),
    (_S.DOMAIN_OF_SYNSET_USAGE, _S.MEMBER_OF_DOMAIN_USAGE),
    (_L.DOMAIN_OF_SYNSET_TOPIC, _L.MEMBER_OF_DOMAIN_TOPIC),
    (_L.DOMAIN_OF_SYNSET_REGION, _L.MEMBER_OF_DOMAIN_REGION),
    (_L.DOMAIN_OF_SYNSET_USAGE, _L.MEMBER_OF_DOMAIN_USAGE),
]

_SYMMETRIC: list[Relation] = [
    _S.ATTRIBUTE,
    _S.VERB_GROUP,
    _S.SIMILAR_TO,
    _S.ALSO_SEE,
    _L.ANTONYM,
    _L.DERIVATIONALLY_RELATED_FORM,
    _L.ALSO_SEE,
]

RELATION_INVERSES: dict[Relation, Relation] = {
    **{a: b for a, b in _ASYMMETRIC_PAIRS},
    **{b: a for a, b in _ASYMMETRIC_PAIRS},
    **{r: r for r in _SYMMETRIC},
}


def inverse(relation: Relation) -> Relation | None:
    """Get the inverse of a relation, or None if it has none."""
    return RELATION_INVERSES.get(relation)


def is_symmetric(relation: Relation) -> bool:
    """Check if a relation is its own inverse."""
    return RELATION_INVERSES.get(relation) is relation
