from .core import filter_word_list, convert_patterns
from .records import (
    LetterData, WordData, PatternDataError,
    convert_letter_state, convert_word_data, parse_word_data, parse_patterns,
)
from .io import write_patterns_csv, write_manifest

__all__ = [
    "filter_word_list", "convert_patterns",
    "LetterData", "WordData", "PatternDataError",
    "convert_letter_state", "convert_word_data", "parse_word_data", "parse_patterns",
    "write_patterns_csv", "write_manifest",
]
