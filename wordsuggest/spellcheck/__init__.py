from .engine import (
    DEFAULT_LIMIT,
    DEFAULT_WINDOW,
    DictionaryIndex,
    SuggestionEngine,
    WordRecord,
    extract_word,
    length_window,
    levenshtein,
    match_words,
    normalize_lines,
    normalize_word,
)
from .errors import CacheWriteError, NoActiveDictionary, SourceUnreadable, SuggestError
from .folding import ACCENT_CLASSES, fold, fold_string

__all__ = [
    "ACCENT_CLASSES",
    "CacheWriteError",
    "DEFAULT_LIMIT",
    "DEFAULT_WINDOW",
    "DictionaryIndex",
    "NoActiveDictionary",
    "SourceUnreadable",
    "SuggestError",
    "SuggestionEngine",
    "WordRecord",
    "extract_word",
    "fold",
    "fold_string",
    "length_window",
    "levenshtein",
    "match_words",
    "normalize_lines",
    "normalize_word",
]
