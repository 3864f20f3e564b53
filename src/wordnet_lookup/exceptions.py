"""Custom exception hierarchy for wordnet-lookup."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordnet_lookup.models import PartOfSpeech


class WordnetLookupError(Exception):
    """Base exception for all wordnet-lookup errors."""


class MissingDatabaseFileError(WordnetLookupError):
    """An index, data or exception-list file cannot be opened."""

    def __init__(self, path: str | Path, message: str | None = None):
        self.path = Path(path)
        super().__init__(message or f"Database file not found: {self.path}")


class MalformedRecordError(WordnetLookupError):
    """A database line does not follow the record grammar."""

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        part_of_speech: PartOfSpeech | None = None,
        line: str | None = None,
    ):
        self.reason = message
        self.offset = offset
        self.part_of_speech = part_of_speech
        self.line = line
        super().__init__(self._describe())

    def attach(
        self,
        *,
        offset: int | None = None,
        part_of_speech: PartOfSpeech | None = None,
        line: str | None = None,
    ) -> MalformedRecordError:
        """Fill in record context that was unknown where the error was raised."""
        if self.offset is None:
            self.offset = offset
        if self.part_of_speech is None:
            self.part_of_speech = part_of_speech
        if self.line is None:
            self.line = line
        self.args = (self._describe(),)
        return self

    def _describe(self) -> str:
        where = []
        if self.part_of_speech is not None:
            where.append(f"pos={self.part_of_speech.label}")
        if self.offset is not None:
            where.append(f"offset={self.offset:08d}")
        if not where:
            return self.reason
        return f"{self.reason} ({', '.join(where)})"


class InvalidCodeError(MalformedRecordError):
    """Unrecognised single-letter part-of-speech code."""

    def __init__(self, code: str, message: str | None = None, **context):
        self.code = code
        super().__init__(message or f"Invalid code: {code!r}", **context)


class UnknownRelationCodeError(InvalidCodeError):
    """Unrecognised pointer symbol."""

    def __init__(self, code: str, **context):
        super().__init__(code, f"Unknown relation code: {code!r}", **context)


class ConfigError(WordnetLookupError):
    """Invalid or incomplete configuration."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)
