"""Shared test fixtures for wordnet-lookup.

The fixtures lay out a miniature database in the WordNet dict format:
data files are written first so the byte offset of every record is
known, then the index files list those offsets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from wordnet_lookup import Data, Index, Lemmatizer, WordNet

LICENSE_HEADER = [
    "  1 This software and database is being provided to you, the LICENSEE, by  ",
    "  2 Princeton University under the following license.  By obtaining, using  ",
    "  3 and/or copying this software and database, you agree that you have  ",
]

SUFFIXES = {"n": "noun", "v": "verb", "a": "adj", "r": "adv"}


@dataclass
class FixtureSynset:
    key: str
    pos: str
    words: list[str]
    gloss: str
    pointers: list[tuple[str, str, str]] = field(default_factory=list)
    ss_type: str | None = None
    frames: str = ""
    lex_filenum: int = 0


SYNSETS = [
    # nouns
    FixtureSynset(
        "dog", "n", ["dog", "domestic_dog", "Canis_familiaris"],
        'a member of the genus Canis that has been domesticated by man since '
        'prehistoric times; "the dog barked all night"',
        [("@", "canine", "0000"), ("~", "puppy", "0000"), ("#m", "pack", "0000")],
        lex_filenum=5,
    ),
    FixtureSynset(
        "frump", "n", ["frump", "dog"],
        'a dull unattractive unpleasant girl or woman; '
        '"she got a reputation as a frump"; "she\'s a real dog"',
        lex_filenum=18,
    ),
    FixtureSynset(
        "canine", "n", ["canine", "canid"],
        "any of various fissiped mammals with nonretractile claws",
        [("~", "dog", "0000")],
    ),
    FixtureSynset(
        "puppy", "n", ["puppy"], "a young dog",
        [("@", "dog", "0000")],
    ),
    FixtureSynset(
        "pack", "n", ["pack"], "a group of hunting animals",
        [("%m", "dog", "0000")],
    ),
    FixtureSynset(
        "class", "n", ["class", "category", "family"],
        'a collection of things sharing a common attribute; '
        '"there are two classes of detergents"',
    ),
    FixtureSynset(
        "household", "n", ["family", "household", "house"],
        "a social unit living together",
    ),
    FixtureSynset("ax", "n", ["ax", "axe"], "an edge tool with a heavy bladed head"),
    FixtureSynset(
        "axis", "n", ["axis"],
        "a straight line through a body or figure that satisfies certain conditions",
    ),
    FixtureSynset(
        "box", "n", ["box"], "a (usually rectangular) container; may have a lid",
    ),
    FixtureSynset(
        "boxful", "n", ["boxful", "box"], "the quantity contained in a box",
    ),
    FixtureSynset("man", "n", ["man", "adult_male"], "an adult person who is male"),
    FixtureSynset(
        "goose", "n", ["goose"], "web-footed long-necked typically gregarious migratory",
    ),
    FixtureSynset(
        "ice_cream", "n", ["ice_cream", "icecream"],
        "frozen dessert containing cream and sugar and flavoring",
    ),
    FixtureSynset(
        "run_score", "n", ["run", "tally"],
        'a score in baseball made by a runner touching all four bases safely; '
        '"the Yankees scored 3 runs in the bottom of the 9th"; '
        '"their first tally came in the 3rd inning"',
        [("+", "run_verb_go", "0101")],
    ),
    FixtureSynset(
        "run_streak", "n", ["streak", "run"],
        'an unbroken series of events; "had a streak of bad luck"; '
        '"Nicklaus had a run of birdies"',
    ),
    FixtureSynset(
        "rivulet", "n", ["rivulet", "rill", "run", "runnel", "streamlet"],
        "a small stream",
    ),
    # verbs
    FixtureSynset(
        "run_verb_go", "v", ["run"],
        'move fast by using one\'s feet, with one foot off the ground at any '
        'given time; "Don\'t run--you\'ll be out of breath"',
        [("+", "run_score", "0101"), ("@", "travel", "0000")],
        frames="02 + 01 00 + 02 00",
    ),
    FixtureSynset(
        "run_verb_flow", "v", ["run", "flow", "feed", "course"],
        'cover or traverse by flowing; "Tears ran down her face"',
        frames="01 + 01 00",
    ),
    FixtureSynset(
        "run_verb_operate", "v", ["operate", "run"],
        'direct or control; projects, businesses, etc.; "She is running a relief operation"',
    ),
    FixtureSynset(
        "run_verb_execute", "v", ["run", "execute"],
        'carry out a process or program, as on a computer or a machine; '
        '"Run the dishwasher"; "run a new program on the Mac"',
    ),
    FixtureSynset(
        "travel", "v", ["travel", "go", "move"], "change location; move, travel, or proceed",
        [("~", "run_verb_go", "0000")],
    ),
    FixtureSynset("walk", "v", ["walk"], "use one's feet to advance"),
    FixtureSynset("hope", "v", ["hope"], "expect and wish"),
    FixtureSynset("cry", "v", ["cry", "weep"], "shed tears because of sadness"),
    FixtureSynset("make", "v", ["make", "create"], "make or cause to be or to become"),
    FixtureSynset("be", "v", ["be"], "have the quality of being"),
    FixtureSynset(
        "kill", "v", ["kill"], "cause to die",
        [(">", "die", "0000")],
    ),
    FixtureSynset("die", "v", ["die", "decease", "perish"], "pass from physical life"),
    # adjectives
    FixtureSynset(
        "good", "a", ["good"], 'having desirable or positive qualities; "a good report card"',
        [("!", "bad", "0101"), ("=", "goodness", "0000")],
    ),
    FixtureSynset(
        "bad", "a", ["bad"], 'having undesirable or negative qualities; "a bad report card"',
        [("!", "good", "0101")],
    ),
    FixtureSynset(
        "goodness", "n", ["good", "goodness"], "moral excellence or admirableness",
        [("=", "good", "0000")],
    ),
    FixtureSynset("large", "a", ["large", "big"], "above average in size or number"),
    FixtureSynset("fast", "a", ["fast"], "acting or moving or capable of acting or moving quickly"),
    FixtureSynset(
        "quick", "a", ["quick", "speedy"], "accomplished rapidly",
    ),
    FixtureSynset(
        "red", "a", ["red", "reddish"], "of a color at the end of the color spectrum",
        ss_type="s",
    ),
    # adverbs
    FixtureSynset(
        "quickly", "r", ["quickly", "rapidly"], 'with rapid movements; "he works quickly"',
        [("\\", "quick", "0101")],
    ),
    FixtureSynset("well", "r", ["well", "good"], 'in a good or proper manner; "did well"'),
]

EXCEPTIONS = {
    "n": {"axes": ["ax", "axis"], "geese": ["goose"], "mice": ["mouse"]},
    "v": {"made": ["make"], "ran": ["run"], "was": ["be"]},
    "a": {"better": ["good", "well"], "best": ["good", "well"]},
    "r": {"best": ["well"], "better": ["well"]},
}


def _render(ss: FixtureSynset, offsets: dict[str, int], by_key: dict) -> str:
    parts = [
        f"{offsets[ss.key]:08d}",
        f"{ss.lex_filenum:02d}",
        ss.ss_type or ss.pos,
        f"{len(ss.words):02x}",
    ]
    for word in ss.words:
        parts += [word, "0"]
    parts.append(f"{len(ss.pointers):03d}")
    for symbol, target, source_target in ss.pointers:
        parts += [symbol, f"{offsets[target]:08d}", by_key[target].pos, source_target]
    if ss.frames:
        parts.append(ss.frames)
    parts += ["|", ss.gloss]
    return " ".join(parts) + "  \n"


def write_database(
    root: Path,
    synsets: list[FixtureSynset] = SYNSETS,
    exceptions: dict[str, dict[str, list[str]]] = EXCEPTIONS,
    header: bool = True,
) -> Path:
    """Write index, data and exception files for ``synsets`` into ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    by_key = {ss.key: ss for ss in synsets}
    header_text = "".join(line + "\n" for line in LICENSE_HEADER) if header else ""

    # every offset field is 8 digits wide, so record lengths do not
    # depend on the offsets themselves
    placeholder = {key: 0 for key in by_key}
    offsets: dict[str, int] = {}
    for pos in SUFFIXES:
        position = len(header_text.encode("utf-8"))
        for ss in synsets:
            if ss.pos == pos:
                offsets[ss.key] = position
                position += len(_render(ss, placeholder, by_key).encode("utf-8"))

    for pos, suffix in SUFFIXES.items():
        records = [_render(ss, offsets, by_key) for ss in synsets if ss.pos == pos]
        (root / f"data.{suffix}").write_bytes(
            (header_text + "".join(records)).encode("utf-8")
        )

        lemmas: dict[str, list[FixtureSynset]] = {}
        for ss in synsets:
            if ss.pos != pos:
                continue
            for word in ss.words:
                lemmas.setdefault(word.lower(), []).append(ss)
        lines = []
        for lemma in sorted(lemmas):
            members = lemmas[lemma]
            symbols = sorted({p[0] for ss in members for p in ss.pointers})
            parts = [lemma, pos, str(len(members)), str(len(symbols)), *symbols,
                     str(len(members)), "0", *(f"{offsets[ss.key]:08d}" for ss in members)]
            lines.append(" ".join(parts) + "  \n")
        (root / f"index.{suffix}").write_bytes((header_text + "".join(lines)).encode("utf-8"))

        exc_lines = [
            f"{word} {' '.join(bases)}\n"
            for word, bases in sorted(exceptions.get(pos, {}).items())
        ]
        (root / f"{suffix}.exc").write_text("".join(exc_lines), encoding="utf-8")

    return root


@pytest.fixture
def database_dir(tmp_path):
    """A freshly written miniature database."""
    return write_database(tmp_path / "dict")


@pytest.fixture
def index(database_dir):
    return Index(database_dir)


@pytest.fixture
def data(database_dir):
    return Data(database_dir)


@pytest.fixture
def lemmatizer(database_dir):
    with Lemmatizer(database_dir) as lem:
        yield lem


@pytest.fixture
def wordnet(database_dir):
    """An open WordNet facade over the miniature database."""
    with WordNet(database_dir) as wn:
        yield wn


@pytest.fixture
def make_database(tmp_path):
    """Factory writing custom databases under ``tmp_path``."""
    counter = iter(range(1000))

    def _make(synsets=SYNSETS, exceptions=EXCEPTIONS, header=True) -> Path:
        return write_database(tmp_path / f"custom{next(counter)}", synsets, exceptions, header)

    return _make
