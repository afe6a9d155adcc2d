"""
Line splitting and separator detection for pasted or generated card text.

Pure functions only: no Flask, no database.
"""
import re
from typing import Iterator, Optional, Sequence, Tuple

# "12", "12.", "12)" optionally followed by whitespace
NUMBERING_PATTERN = re.compile(r'^\d+[.)]?\s*')

# Tried in this order; the first one yielding two non-empty parts wins.
STRUCTURED_SEPARATORS = ('|', ';', '\t', ':', '-', '=')

PIPE = '|'


def strip_numbering(line: str) -> str:
    """Remove a leading list number such as ``"3. "`` or ``"3)"``."""
    return NUMBERING_PATTERN.sub('', line, count=1).strip()


class CardLines:
    """
    Lazy, restartable view over the non-empty trimmed lines of ``text``.

    Every iteration re-reads the source text, so the same instance can be
    walked by the structured pass and again by the fallback pass.

    Args:
        text: Raw multi-line text.
        strip_numbers: Remove list numbering from each yielded line.
        min_length: Skip lines shorter than this (measured after trimming,
            before numbering is removed).
    """

    def __init__(self, text: Optional[str], strip_numbers: bool = True, min_length: int = 1):
        self.text = text or ''
        self.strip_numbers = strip_numbers
        self.min_length = min_length

    def __iter__(self) -> Iterator[str]:
        for raw_line in self.text.splitlines():
            line = raw_line.strip()
            if not line or len(line) < self.min_length:
                continue
            if self.strip_numbers:
                line = strip_numbering(line)
                if not line:
                    continue
            yield line


def iter_card_lines(text: Optional[str], min_length: int = 1) -> CardLines:
    """Return the cleaned (numbering stripped) lines of ``text``."""
    return CardLines(text, strip_numbers=True, min_length=min_length)


def split_on_separators(
    line: str,
    separators: Sequence[str] = STRUCTURED_SEPARATORS
) -> Optional[Tuple[str, str]]:
    """
    Split ``line`` on the first separator that produces two non-empty parts.

    Only the first two parts are used, anything after a second separator is
    ignored.

    Examples:
        >>> split_on_separators("huis; house")
        ('huis', 'house')
        >>> split_on_separators("no separator here") is None
        True
    """
    for separator in separators:
        if separator not in line:
            continue
        parts = [part.strip() for part in line.split(separator)]
        if len(parts) >= 2 and parts[0] and parts[1]:
            return parts[0], parts[1]
    return None
