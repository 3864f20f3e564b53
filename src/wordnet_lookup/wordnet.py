"""WordNet facade, the main entry point of wordnet-lookup."""

from __future__ import annotations

import bisect
import logging
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wordnet_lookup.data import Data
from wordnet_lookup.exceptions import MalformedRecordError
from wordnet_lookup.index import Index
from wordnet_lookup.lemmatizer import Lemmatizer
from wordnet_lookup.models import (
    Definition,
    Description,
    LookupResult,
    PartOfSpeech,
    RelatedWords,
    Relationship,
    Sense,
    SynSet,
    WordGroup,
    normalize_lemma,
)
from wordnet_lookup.relations import LexicalRelation

if TYPE_CHECKING:
    from wordnet_lookup.config import WordnetConfig
    from wordnet_lookup.relations import Relation

logger = logging.getLogger(__name__)


def _grouped(groups: dict[PartOfSpeech, set[str]]) -> list[WordGroup]:
    return [
        WordGroup(pos, tuple(sorted(groups[pos])))
        for pos in PartOfSpeech
        if pos in groups
    ]


class WordNet:
    """Read-only queries against a WordNet database directory.

    The directory must hold ``index.*``, ``data.*`` and ``*.exc`` files for
    noun, verb, adj and adv. The exception lists stay mapped until
    ``close``; index and data files are opened per query.
    """

    def __init__(
        self,
        database_dir: str | Path,
        *,
        cache_size: int | None = None,
    ) -> None:
        self.database_dir = Path(database_dir)
        self.index = Index(self.database_dir, cache_size=cache_size)
        self.data = Data(self.database_dir)
        self.lemmatizer = Lemmatizer(self.database_dir)
        self._all_words: list[str] | None = None

    @classmethod
    def from_config(cls, config: WordnetConfig) -> WordNet:
        return cls(config.database_dir, cache_size=config.cache_size)

    def close(self) -> None:
        """Release the mapped exception lists."""
        self.lemmatizer.close()

    def __enter__(self) -> WordNet:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Synsets
    # ------------------------------------------------------------------

    def lookup(self, word: str) -> LookupResult:
        """Read every synset of ``word``, collecting per-offset failures.

        A malformed record is reported in ``errors`` and does not stop the
        other offsets from being read. Missing files still raise.
        """
        result = LookupResult(word=normalize_lemma(word))
        for entry in self.index.lookup(word):
            for offset in entry.offsets:
                try:
                    result.synsets.append(self.data.read(offset, entry.part_of_speech))
                except MalformedRecordError as e:
                    logger.warning("Skipping synset for %r: %s", result.word, e)
                    result.errors.append(e)
        return result

    def synsets(self, word: str) -> list[SynSet]:
        return self.lookup(word).synsets

    def synsets_for(self, lemma: str, pos: PartOfSpeech) -> list[SynSet]:
        """Synsets of ``lemma`` in one part of speech; bad records are skipped."""
        return [ss for ss in self.synsets(lemma) if ss.part_of_speech is pos]

    def resolve(self, pos: PartOfSpeech, offset: int) -> SynSet:
        """Read the synset a relationship points at."""
        return self.data.read(offset, pos)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def definitions(self, word: str) -> list[Definition]:
        """Glosses of every synset of ``word``, by part of speech then offset."""
        return [
            Definition(ss.part_of_speech, ss.gloss) for ss in self.synsets(word)
        ]

    def synonyms(self, word: str) -> list[WordGroup]:
        """Member words of all synsets of ``word``, merged per part of speech."""
        groups: dict[PartOfSpeech, set[str]] = defaultdict(set)
        for ss in self.synsets(word):
            groups[ss.part_of_speech].update(ss.words)
        return _grouped(groups)

    def related(self, word: str, relation: Relation) -> list[WordGroup]:
        """Words of the synsets linked to ``word``'s synsets by ``relation``.

        Grouped by the part of speech of the queried synset.
        """
        groups: dict[PartOfSpeech, set[str]] = defaultdict(set)
        for ss in self.synsets(word):
            for rel in ss.with_relation(relation):
                target = self._target(ss, rel)
                if target is not None:
                    groups[ss.part_of_speech].update(target.words)
        return _grouped(groups)

    def antonyms(self, word: str) -> list[WordGroup]:
        return self.related(word, LexicalRelation.ANTONYM)

    def _target(self, ss: SynSet, rel: Relationship) -> SynSet | None:
        try:
            return self.resolve(rel.part_of_speech, rel.offset)
        except MalformedRecordError as e:
            logger.warning(
                "Skipping %s target of %08d: %s", rel.relation.label, ss.offset, e,
            )
            return None

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------

    def describe(self, word: str) -> list[Description]:
        """Describe every base form of a possibly inflected ``word``.

        The word is lemmatized for each part of speech in turn; each base
        form gets its numbered senses (definition, examples and relation
        targets), its synonyms without the base form itself, and its
        antonyms.
        """
        descriptions = []
        for pos, lemmas in self.lemmatize_all(word).items():
            for lemma in lemmas:
                description = self._describe_lemma(lemma, pos)
                if description.senses:
                    descriptions.append(description)
        return descriptions

    def _describe_lemma(self, lemma: str, pos: PartOfSpeech) -> Description:
        senses = []
        synonyms: set[str] = set()
        antonyms: set[str] = set()
        for ss in self.synsets_for(lemma, pos):
            related: dict[str, set[str]] = defaultdict(set)
            for rel in ss.relationships:
                target = self._target(ss, rel)
                if target is None:
                    continue
                related[rel.relation.label].update(target.words)
                if rel.relation is LexicalRelation.ANTONYM:
                    antonyms.update(target.words)
            senses.append(Sense(
                ss,
                tuple(
                    RelatedWords(label, tuple(sorted(related[label])))
                    for label in sorted(related)
                ),
            ))
            synonyms.update(w for w in ss.words if normalize_lemma(w) != lemma)
        return Description(
            lemma=lemma,
            part_of_speech=pos,
            senses=tuple(senses),
            synonyms=tuple(sorted(synonyms)),
            antonyms=tuple(sorted(antonyms)),
        )

    # ------------------------------------------------------------------
    # Lemmatization
    # ------------------------------------------------------------------

    def lemmatize(self, word: str, pos: PartOfSpeech) -> list[str]:
        return self.lemmatizer.lemmatize(word, pos, self.index)

    def lemmatize_all(self, word: str) -> dict[PartOfSpeech, list[str]]:
        """Base forms of ``word`` for each of the four parts of speech."""
        return {pos: self.lemmatize(word, pos) for pos in PartOfSpeech}

    # ------------------------------------------------------------------
    # Word lists
    # ------------------------------------------------------------------

    def words(self, pos: PartOfSpeech) -> list[str]:
        return self.index.words(pos)

    def all_words(self) -> list[str]:
        """Every lemma in the database, sorted and deduplicated.

        Computed once per instance.
        """
        if self._all_words is None:
            words: set[str] = set()
            for pos in PartOfSpeech:
                words.update(self.index.words(pos))
            self._all_words = sorted(words)
        return list(self._all_words)

    def complete(self, prefix: str, limit: int = 10) -> list[str]:
        """Up to ``limit`` lemmas that start with ``prefix``."""
        prefix = normalize_lemma(prefix)
        if not prefix or limit <= 0:
            return []
        words = self.all_words()
        matches = []
        for word in words[bisect.bisect_left(words, prefix):]:
            if not word.startswith(prefix) or len(matches) >= limit:
                break
            matches.append(word)
        return matches
