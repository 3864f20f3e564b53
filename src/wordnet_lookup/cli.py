"""
Command-line interface for querying a WordNet database.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import load_config
from .exceptions import ConfigError, WordnetLookupError
from .models import PartOfSpeech, WordGroup, display_form
from .relations import relation_by_name
from .wordnet import WordNet


def main(argv: Optional[list] = None) -> int:
    """Main entry point for wn-lookup CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        config = load_config(
            args.config,
            overrides={"database_dir": args.database, "cache_size": args.cache_size},
        )
    except (ConfigError, FileNotFoundError) as e:
        line_info = f" (line {e.line})" if getattr(e, "line", None) else ""
        print(f"[CONFIG ERROR] {e}{line_info}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose > 1 else (
        logging.INFO if args.verbose == 1 else config.log_level_number
    )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with WordNet.from_config(config) as wordnet:
            return args.func(wordnet, args)
    except WordnetLookupError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wn-lookup",
        description="Look up words in a WordNet database",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--database", "-d",
        type=str,
        help="WordNet dict directory (default: $WNSEARCHDIR)",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        help="Maximum number of cached lemmas (default: unbounded)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log more (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # define command
    define_parser = subparsers.add_parser(
        "define",
        help="Show the definitions of a word",
    )
    define_parser.add_argument("word", help="Word to define")
    define_parser.set_defaults(func=cmd_define)

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Describe every base form of a (possibly inflected) word",
    )
    info_parser.add_argument("word", help="Word to describe")
    info_parser.set_defaults(func=cmd_info)

    # synonyms command
    synonyms_parser = subparsers.add_parser(
        "synonyms",
        help="Show the synonyms of a word",
    )
    synonyms_parser.add_argument("word", help="Word to look up")
    synonyms_parser.set_defaults(func=cmd_synonyms)

    # lemmatize command
    lemmatize_parser = subparsers.add_parser(
        "lemmatize",
        help="Reduce an inflected word to its base forms",
    )
    lemmatize_parser.add_argument("word", help="Inflected word")
    lemmatize_parser.add_argument(
        "--pos",
        choices=[pos.value for pos in PartOfSpeech],
        help="Restrict to one part of speech (n, v, a, r)",
    )
    lemmatize_parser.set_defaults(func=cmd_lemmatize)

    # related command
    related_parser = subparsers.add_parser(
        "related",
        help="Show words linked to a word by a relation",
    )
    related_parser.add_argument("word", help="Word to look up")
    related_parser.add_argument(
        "relation",
        help="Relation name (e.g. hypernym, 'part meronym') or pointer symbol",
    )
    related_parser.set_defaults(func=cmd_related)

    # complete command
    complete_parser = subparsers.add_parser(
        "complete",
        help="List words starting with a prefix",
    )
    complete_parser.add_argument("prefix", help="Word prefix")
    complete_parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of completions (default: 10)",
    )
    complete_parser.set_defaults(func=cmd_complete)

    return parser


def cmd_define(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle define command."""
    definitions = wordnet.definitions(args.word)
    if not definitions:
        print(f"No definitions found for {args.word!r}.")
        return 0

    current = None
    number = 0
    for definition in definitions:
        if definition.part_of_speech is not current:
            current = definition.part_of_speech
            number = 0
            print(f"\n{display_form(args.word)} ({current.label})")
        number += 1
        print(f"  {number}. {definition.gloss}")
    return 0


def cmd_info(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle info command."""
    descriptions = wordnet.describe(args.word)
    if not descriptions:
        print(f"No information found for {args.word!r}.")
        return 0

    for description in descriptions:
        print(f"\n{display_form(description.lemma)} ({description.part_of_speech.label})")
        for number, sense in enumerate(description.senses, 1):
            line = f"  {number}. {sense.definition}."
            if sense.examples:
                line += f" e.g. {'; '.join(sense.examples)}."
            print(line)
            for related in sense.related:
                words = ", ".join(display_form(w) for w in related.words)
                print(f"     {related.label}: {words}")
        if description.synonyms:
            print(f"  synonyms: {', '.join(display_form(w) for w in description.synonyms)}")
        if description.antonyms:
            print(f"  antonyms: {', '.join(display_form(w) for w in description.antonyms)}")
    return 0


def cmd_synonyms(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle synonyms command."""
    groups = wordnet.synonyms(args.word)
    if not groups:
        print(f"No synonyms found for {args.word!r}.")
        return 0
    _print_groups(groups)
    return 0


def cmd_lemmatize(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle lemmatize command."""
    if args.pos:
        lemmas = {PartOfSpeech(args.pos): wordnet.lemmatize(args.word, PartOfSpeech(args.pos))}
    else:
        lemmas = wordnet.lemmatize_all(args.word)

    found = False
    for pos, forms in lemmas.items():
        if forms:
            found = True
            print(f"  {pos.label:<10} {', '.join(forms)}")
    if not found:
        print(f"No base forms found for {args.word!r}.")
    return 0


def cmd_related(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle related command."""
    relation = relation_by_name(args.relation)
    groups = wordnet.related(args.word, relation)
    if not groups:
        print(f"No {relation.label} relations found for {args.word!r}.")
        return 0
    _print_groups(groups)
    return 0


def cmd_complete(wordnet: WordNet, args: argparse.Namespace) -> int:
    """Handle complete command."""
    for word in wordnet.complete(args.prefix, limit=args.limit):
        print(display_form(word))
    return 0


def _print_groups(groups: list[WordGroup]) -> None:
    """Print word groups, one part of speech per line."""
    for group in groups:
        words = ", ".join(display_form(w) for w in group.words)
        print(f"  {group.part_of_speech.label:<10} {words}")


if __name__ == "__main__":
    sys.exit(main())
