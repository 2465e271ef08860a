from .word import (
    WORD_LENGTH, Letter, LetterState, Word, WordError, InvalidLength, InvalidCharacter,
)
from .patterns import create_pattern, pattern_from_feedback, pattern_to_feedback
from .matching import matches, letter_bounds
from .constraints import filter_words, filter_words_parallel
from .scoring import score
from .validation import parse_candidate, validate_guess

__all__ = [
    "WORD_LENGTH", "Letter", "LetterState", "Word",
    "WordError", "InvalidLength", "InvalidCharacter",
    "create_pattern", "pattern_from_feedback", "pattern_to_feedback",
    "matches", "letter_bounds", "filter_words", "filter_words_parallel",
    "score", "parse_candidate", "validate_guess",
]
