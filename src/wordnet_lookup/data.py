"""Synset records in the ``data.<suffix>`` files."""

from __future__ import annotations

import logging
from pathlib import Path

from wordnet_lookup.exceptions import MalformedRecordError, MissingDatabaseFileError
from wordnet_lookup.models import PartOfSpeech, Relationship, SynSet
from wordnet_lookup.relations import relation_from_code

logger = logging.getLogger(__name__)

GLOSS_SEPARATOR = "|"


class _RecordParser:
    """Walks the tokens of one data line, failing with full context."""

    def __init__(self, line: str, offset: int, pos: PartOfSpeech) -> None:
        self.line = line
        self.offset = offset
        self.pos = pos
        self.tokens = line.split()
        self.i = 0

    def fail(self, message: str) -> MalformedRecordError:
        return MalformedRecordError(
            message, offset=self.offset, part_of_speech=self.pos, line=self.line,
        )

    def take(self, what: str) -> str:
        if self.i >= len(self.tokens):
            raise self.fail(f"record ends before {what}")
        token = self.tokens[self.i]
        self.i += 1
        return token

    def take_int(self, what: str, base: int = 10) -> int:
        token = self.take(what)
        # int() alone would accept signs, "_" separators and non-ASCII digits
        if not (token.isascii() and token.isalnum()):
            raise self.fail(f"non-numeric {what}: {token!r}")
        try:
            return int(token, base)
        except ValueError:
            raise self.fail(f"non-numeric {what}: {token!r}") from None

    def parse(self) -> SynSet:
        record_offset = self.take_int("synset_offset")
        if record_offset != self.offset:
            raise self.fail(f"record starts with offset {record_offset:08d}")
        lex_filenum = self.take_int("lex_filenum")
        ss_type = self.take("ss_type")
        try:
            record_pos = PartOfSpeech.from_code(ss_type)
        except MalformedRecordError as e:
            raise e.attach(offset=self.offset, part_of_speech=self.pos, line=self.line)
        if record_pos is not self.pos:
            logger.warning(
                "Synset %08d has ss_type %r but was read from the %s data file",
                self.offset, ss_type, self.pos.label,
            )

        w_cnt = self.take_int("w_cnt", base=16)
        words = []
        for _ in range(w_cnt):
            words.append(self.take("word"))
            self.take("lex_id")

        p_cnt = self.take_int("p_cnt")
        relationships = []
        for _ in range(p_cnt):
            symbol = self.take("pointer_symbol")
            target_offset = self.take_int("pointer synset_offset")
            target_code = self.take("pointer pos")
            # source/target word numbers; zero means the whole synset
            word_specific = self.take_int("pointer source/target", base=16) != 0
            try:
                relation = relation_from_code(
                    symbol, self.pos, word_specific=word_specific,
                )
                target_pos = PartOfSpeech.from_code(target_code)
            except MalformedRecordError as e:
                raise e.attach(offset=self.offset, part_of_speech=self.pos, line=self.line)
            relationships.append(Relationship(relation, target_offset, target_pos))

        # verb frames (if any) sit between the pointers and the gloss
        rest = self.tokens[self.i:]
        try:
            sep = rest.index(GLOSS_SEPARATOR)
        except ValueError:
            raise self.fail("record has no gloss separator") from None
        gloss = " ".join(rest[sep + 1:]).strip()

        return SynSet(
            offset=self.offset,
            part_of_speech=self.pos,
            words=tuple(words),
            gloss=gloss,
            relationships=tuple(relationships),
            lex_filenum=lex_filenum,
            ss_type=ss_type,
        )


def parse_data_line(line: str, offset: int, pos: PartOfSpeech) -> SynSet:
    """Parse a data line found at ``offset`` in the data file of ``pos``.

    Grammar::

        synset_offset lex_filenum ss_type w_cnt (word lex_id)*w_cnt
        p_cnt (pointer_symbol synset_offset pos source_target)*p_cnt
        [frames] | gloss

    ``w_cnt`` is hexadecimal. ``pos`` is authoritative: a disagreeing
    ``ss_type`` is logged and kept on the synset for inspection.
    """
    return _RecordParser(line, offset, pos).parse()


class Data:
    """Reads single synset records by byte offset.

    Each ``read`` opens the data file, seeks and reads one line.
    """

    def __init__(self, database_dir: str | Path) -> None:
        self.database_dir = Path(database_dir)

    def path_for(self, pos: PartOfSpeech) -> Path:
        return self.database_dir / f"data.{pos.file_suffix}"

    def read(self, offset: int, pos: PartOfSpeech) -> SynSet:
        """Read the synset at ``offset``.

        Raises MissingDatabaseFileError or MalformedRecordError.
        """
        if offset < 0:
            raise MalformedRecordError(
                f"negative offset {offset}", part_of_speech=pos,
            )
        path = self.path_for(pos)
        try:
            with open(path, "rb") as f:
                f.seek(offset)
                raw = f.readline()
        except OSError as e:
            raise MissingDatabaseFileError(path) from e

        if not raw:
            raise MalformedRecordError(
                "offset is past the end of the data file",
                offset=offset, part_of_speech=pos,
            )
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedRecordError(
                f"record is not valid UTF-8: {e}", offset=offset, part_of_speech=pos,
            ) from e
        return parse_data_line(line.rstrip("\r\n"), offset, pos)
