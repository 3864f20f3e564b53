"""Reduce inflected forms to base forms found in the database.

Follows the morphy algorithm: irregular forms come from the
``<suffix>.exc`` exception lists, regular ones from per part of speech
suffix-substitution rules. Every candidate is checked against the index
before it is returned.
"""

from __future__ import annotations

import logging
import mmap
from pathlib import Path
from typing import Any

from wordnet_lookup.exceptions import WordnetLookupError
from wordnet_lookup.index import Index
from wordnet_lookup.models import PartOfSpeech, normalize_lemma
from wordnet_lookup.search import Buffer, binary_search, map_file

logger = logging.getLogger(__name__)

# (suffix to strip, ending to append), all tried in order
SUFFIX_RULES: dict[PartOfSpeech, tuple[tuple[str, str], ...]] = {
    PartOfSpeech.NOUN: (
        ("s", ""),
        ("ses", "s"),
        ("xes", "x"),
        ("zes", "z"),
        ("ches", "ch"),
        ("shes", "sh"),
        ("men", "man"),
        ("ies", "y"),
    ),
    PartOfSpeech.VERB: (
        ("s", ""),
        ("ies", "y"),
        ("es", "e"),
        ("es", ""),
        ("ed", "e"),
        ("ed", ""),
        ("ing", "e"),
        ("ing", ""),
    ),
    PartOfSpeech.ADJECTIVE: (
        ("er", ""),
        ("est", ""),
        ("er", "e"),
        ("est", "e"),
    ),
    PartOfSpeech.ADVERB: (),
}

# nouns like "boxesful" are reduced on the part before this suffix
FUL = "ful"


class Lemmatizer:
    """Holds the four exception lists mapped read-only until ``close``."""

    def __init__(self, database_dir: str | Path) -> None:
        self.database_dir = Path(database_dir)
        self._exceptions: dict[PartOfSpeech, Buffer] = {}
        try:
            for pos in PartOfSpeech:
                path = self.path_for(pos)
                logger.debug("Mapping exception list %s", path)
                self._exceptions[pos] = map_file(path)
        except BaseException:
            self.close()
            raise

    def path_for(self, pos: PartOfSpeech) -> Path:
        return self.database_dir / f"{pos.file_suffix}.exc"

    def close(self) -> None:
        """Release the mapped exception lists."""
        for buf in self._exceptions.values():
            if isinstance(buf, mmap.mmap):
                buf.close()
        self._exceptions.clear()

    def __enter__(self) -> Lemmatizer:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def exceptions_for(self, word: str, pos: PartOfSpeech, index: Index) -> list[str]:
        """Base forms the exception list gives for ``word``, if in the index."""
        key = normalize_lemma(word)
        if not key:
            return []
        if not self._exceptions:
            raise WordnetLookupError("Lemmatizer is closed")
        line = binary_search(self._exceptions[pos], key.encode("utf-8"))
        if line is None:
            return []
        candidates = line.decode("utf-8").split()[1:]
        return [c for c in candidates if index.contains(c, pos)]

    def lemmatize(self, word: str, pos: PartOfSpeech, index: Index) -> list[str]:
        """Sorted, deduplicated base forms of ``word`` for one part of speech."""
        word = normalize_lemma(word)
        if not word:
            return []

        found = set(self.exceptions_for(word, pos, index))
        if index.contains(word, pos):
            found.add(word)

        stem, suffix = word, ""
        if pos is PartOfSpeech.NOUN and word.endswith(FUL):
            stem, suffix = word[: -len(FUL)], FUL

        for strip, ending in SUFFIX_RULES[pos]:
            if not stem.endswith(strip):
                continue
            candidate = stem[: -len(strip)] + ending + suffix
            if candidate and index.contains(candidate, pos):
                found.add(candidate)

        return sorted(found)
