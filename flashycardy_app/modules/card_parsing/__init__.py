"""
Flashcard text parsing and normalization.

Pure functions shared by deck creation, bulk import, AI generation and study
answer checking.
"""

from .schemas import CardCandidate
from .logics.dedup import card_key, remove_duplicate_cards
from .logics.line_splitter import CardLines, iter_card_lines, split_on_separators, strip_numbering
from .logics.normalizer import normalize_card_text, texts_match
from .logics.parsers import (
    META_WORDS,
    is_meta_word,
    parse_and_normalize_flashcards,
    parse_cards_preserving_case,
    parse_flashcards,
    parse_lenient_line,
    parse_pipe_line,
    split_on_punctuation,
    split_on_word_boundary,
)

__all__ = [
    'CardCandidate',
    'CardLines',
    'META_WORDS',
    'card_key',
    'is_meta_word',
    'iter_card_lines',
    'normalize_card_text',
    'parse_and_normalize_flashcards',
    'parse_cards_preserving_case',
    'parse_flashcards',
    'parse_lenient_line',
    'parse_pipe_line',
    'remove_duplicate_cards',
    'split_on_punctuation',
    'split_on_separators',
    'split_on_word_boundary',
    'strip_numbering',
    'texts_match',
]
