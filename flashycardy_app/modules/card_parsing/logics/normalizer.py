"""
Card text normalization.

The normalized form is only used for comparisons (answer checking, duplicate
detection) and, optionally, for storing manually typed cards. It is never
meant for display of imported content.
"""
import re
import unicodedata

# Punctuation that carries meaning in vocabulary terms and short answers.
ALLOWED_PUNCTUATION = frozenset(".,;:!?'’\"()-/&")

WHITESPACE_PATTERN = re.compile(r'\s+')


def _is_allowed(char: str) -> bool:
    if char.isalnum() or char.isspace() or char in ALLOWED_PUNCTUATION:
        return True
    # Combining marks (accents in scripts without precomposed letters)
    return unicodedata.category(char).startswith('M')


def normalize_card_text(text) -> str:
    """
    Lowercase, filter and collapse ``text`` into its comparison form.

    Letters (including accented ones), digits, whitespace and a small set of
    punctuation survive; everything else (emoji, symbols, markup characters)
    is dropped. Runs of whitespace become a single space and the result is
    trimmed. The function is idempotent.

    Examples:
        >>> normalize_card_text("  Café  au Lait ")
        'café au lait'
    """
    if not text:
        return ""

    lowered = unicodedata.normalize('NFC', str(text).lower())
    kept = ''.join(char for char in lowered if _is_allowed(char))
    # Removing characters can leave a base letter next to its accent again.
    kept = unicodedata.normalize('NFC', kept)
    return WHITESPACE_PATTERN.sub(' ', kept).strip()


def texts_match(first, second) -> bool:
    """Compare two card texts by their normalized form."""
    return normalize_card_text(first) == normalize_card_text(second)
