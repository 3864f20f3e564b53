"""Read-only lookups and lemmatization over WordNet database files."""

__version__ = "0.1.0"

from .exceptions import (
    WordnetLookupError as WordnetLookupError,
    MissingDatabaseFileError as MissingDatabaseFileError,
    MalformedRecordError as MalformedRecordError,
    InvalidCodeError as InvalidCodeError,
    UnknownRelationCodeError as UnknownRelationCodeError,
    ConfigError as ConfigError,
)

from .models import (
    PartOfSpeech as PartOfSpeech,
    IndexEntry as IndexEntry,
    SynSet as SynSet,
    Relationship as Relationship,
    Definition as Definition,
    WordGroup as WordGroup,
    RelatedWords as RelatedWords,
    Sense as Sense,
    Description as Description,
    LookupResult as LookupResult,
    normalize_lemma as normalize_lemma,
    display_form as display_form,
)

from .relations import (
    SemanticRelation as SemanticRelation,
    LexicalRelation as LexicalRelation,
    relation_from_code as relation_from_code,
    relation_by_name as relation_by_name,
    inverse as inverse,
)

from .index import Index as Index, LemmaCache as LemmaCache
from .data import Data as Data
from .lemmatizer import Lemmatizer as Lemmatizer
from .wordnet import WordNet as WordNet
from .config import WordnetConfig as WordnetConfig, load_config as load_config

__all__ = [
    # Facade
    "WordNet",
    # Readers
    "Index",
    "LemmaCache",
    "Data",
    "Lemmatizer",
    # Models
    "PartOfSpeech",
    "IndexEntry",
    "SynSet",
    "Relationship",
    "Definition",
    "WordGroup",
    "RelatedWords",
    "Sense",
    "Description",
    "LookupResult",
    "normalize_lemma",
    "display_form",
    # Relations
    "SemanticRelation",
    "LexicalRelation",
    "relation_from_code",
    "relation_by_name",
    "inverse",
    # Configuration
    "WordnetConfig",
    "load_config",
    # Exceptions
    "WordnetLookupError",
    "MissingDatabaseFileError",
    "MalformedRecordError",
    "InvalidCodeError",
    "UnknownRelationCodeError",
    "ConfigError",
]
