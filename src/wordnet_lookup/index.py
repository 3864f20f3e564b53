"""Lemma lookup in the ``index.<suffix>`` files."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from pathlib import Path

from wordnet_lookup.exceptions import MalformedRecordError, MissingDatabaseFileError
from wordnet_lookup.models import IndexEntry, PartOfSpeech, normalize_lemma
from wordnet_lookup.search import search_file

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

class LemmaCache:
    """Lemma -> index entries, shared by every lookup of one ``Index``.

    With ``capacity=None`` the cache grows without bound, which is fine
    for the finite vocabulary of a single database. With a capacity the
    least recently used lemma is evicted first.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, tuple[IndexEntry, ...]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, lemma: str) -> tuple[IndexEntry, ...] | None:
        with self._lock:
            entries = self._entries.get(lemma)
            if entries is None:
                self.misses += 1
                return None
            self.hits += 1
            self._entries.move_to_end(lemma)
            return entries

    def put(self, lemma: str, entries: tuple[IndexEntry, ...]) -> None:
        with self._lock:
            self._entries[lemma] = entries
            self._entries.move_to_end(lemma)
            if self.capacity is not None:
                while len(self._entries) > self.capacity:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, lemma: object) -> bool:
        with self._lock:
            return lemma in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# ---------------------------------------------------------------------------
# Record parsing
# ---------------------------------------------------------------------------

def _count(token: str, what: str, line: str, pos: PartOfSpeech) -> int:
    # plain ASCII digits only; int() would also take signs and "_"
    if not (token.isascii() and token.isdigit()):
        raise MalformedRecordError(
            f"non-numeric {what}: {token!r}", part_of_speech=pos, line=line,
        )
    return int(token)


def parse_index_line(line: str, pos: PartOfSpeech) -> IndexEntry:
    """Parse one index line read from the index file of ``pos``.

    Grammar::

        lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt tagsense_cnt offset...
    """
    tokens = line.split()
    if len(tokens) < 4:
        raise MalformedRecordError(
            "index line too short", part_of_speech=pos, line=line,
        )
    lemma, pos_code, synset_cnt, p_cnt = tokens[:4]
    try:
        line_pos = PartOfSpeech.from_code(pos_code)
    except MalformedRecordError as e:
        raise e.attach(part_of_speech=pos, line=line)
    if line_pos is not pos:
        logger.warning(
            "Index line for %r says %s but was read from the %s index",
            lemma, line_pos.label, pos.label,
        )
    synset_cnt = _count(synset_cnt, "synset_cnt", line, pos)
    p_cnt = _count(p_cnt, "p_cnt", line, pos)

    rest = tokens[4:]
    if len(rest) < p_cnt + 2:
        raise MalformedRecordError(
            f"index line too short for {p_cnt} pointer symbols",
            part_of_speech=pos, line=line,
        )
    pointer_symbols = tuple(rest[:p_cnt])
    sense_cnt = _count(rest[p_cnt], "sense_cnt", line, pos)
    tagsense_cnt = _count(rest[p_cnt + 1], "tagsense_cnt", line, pos)
    offsets = tuple(
        _count(t, "synset offset", line, pos) for t in rest[p_cnt + 2:]
    )
    if not offsets:
        raise MalformedRecordError(
            "index line lists no synset offsets", part_of_speech=pos, line=line,
        )
    if len(offsets) != synset_cnt:
        logger.warning(
            "Index line for %r declares %d synsets but lists %d offsets",
            lemma, synset_cnt, len(offsets),
        )

    return IndexEntry(
        lemma=lemma,
        part_of_speech=pos,
        offsets=offsets,
        pointer_symbols=pointer_symbols,
        sense_count=sense_cnt,
        tagsense_count=tagsense_cnt,
    )


# ---------------------------------------------------------------------------
# Index reader
# ---------------------------------------------------------------------------

class Index:
    """Resolve lemmas to their synset offsets, one entry per part of speech.

    Every lookup opens and maps the index file it needs and releases it
    before returning; only the lemma cache outlives a call.
    """

    def __init__(
        self,
        database_dir: str | Path,
        *,
        cache_size: int | None = None,
    ) -> None:
        self.database_dir = Path(database_dir)
        self.cache = LemmaCache(cache_size)

    def path_for(self, pos: PartOfSpeech) -> Path:
        return self.database_dir / f"index.{pos.file_suffix}"

    def lookup(self, lemma: str) -> list[IndexEntry]:
        """Entries for ``lemma`` in noun, verb, adjective, adverb order.

        An absent lemma gives an empty list. Raises
        MissingDatabaseFileError if an index file cannot be opened.
        """
        key = normalize_lemma(lemma)
        if not key:
            return []

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r", key)
            return list(cached)
        logger.debug("Cache miss for %r", key)

        entries = []
        for pos in PartOfSpeech:
            entry = self._search(key, pos)
            if entry is not None:
                entries.append(entry)
        self.cache.put(key, tuple(entries))
        return entries

    def lookup_pos(self, lemma: str, pos: PartOfSpeech) -> IndexEntry | None:
        for entry in self.lookup(lemma):
            if entry.part_of_speech is pos:
                return entry
        return None

    def contains(self, word: str, pos: PartOfSpeech) -> bool:
        """True iff ``lookup(word)`` has an entry for ``pos``."""
        return self.lookup_pos(word, pos) is not None

    def words(self, pos: PartOfSpeech) -> list[str]:
        """Every lemma of one part of speech, sorted."""
        path = self.path_for(pos)
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = [
                    line.split(" ", 1)[0].rstrip("\n")
                    for line in f
                    if line.strip() and not line.startswith(" ")
                ]
        except OSError as e:
            raise MissingDatabaseFileError(path) from e
        words.sort()
        return words

    def _search(self, key: str, pos: PartOfSpeech) -> IndexEntry | None:
        path = self.path_for(pos)
        logger.debug("Searching %s for %r", path, key)
        line = search_file(path, key.encode("utf-8"))
        if line is None:
            logger.debug("%r not found in %s", key, path)
            return None
        return parse_index_line(line.decode("utf-8"), pos)
