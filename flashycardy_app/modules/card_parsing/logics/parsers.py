"""
Flashcard text parsers - pure functions turning free text into card pairs.

NO database, NO Flask dependencies allowed.

Two passes are run over the text:

1. The structured pass handles one card per line: pipe separated lines
   first, then the generic separators, then a split on sentence
   punctuation and, when enabled, a split where English text seems to start.
2. The lenient pass only runs when the structured pass found nothing (for
   instance when the AI answered in prose). It is stricter about what it
   accepts and filters label words such as "word" or "translation".

The heuristics are best effort. A period inside the front (abbreviations)
or a French/Spanish phrase containing "a" or "is" can be split in the wrong
place; lines that none of the heuristics accept are dropped silently.
"""
import re
from typing import Iterator, List, Optional, Tuple

from ..schemas import CardCandidate
from .dedup import remove_duplicate_cards
from .line_splitter import CardLines, PIPE, iter_card_lines, split_on_separators, strip_numbering
from .normalizer import normalize_card_text

Pair = Tuple[str, str]

# "<text ending in . ? or !><whitespace><text>", shortest front first
PUNCTUATION_SPLIT_PATTERN = re.compile(r'^(.+?[.?!])\s+(.+)$')
SENTENCE_PUNCTUATION = frozenset('.?!')

# Whitespace followed by a word that typically opens an English sentence.
ENGLISH_START_WORDS = (
    "hello", "hi", "how", "what", "where", "when", "why", "i'll", "i'm", "i've", "i",
    "you", "we", "they", "it", "this", "that", "a", "an", "the", "do", "does", "did",
    "can", "could", "will", "would", "is", "are", "was", "were",
)
WORD_BOUNDARY_PATTERN = re.compile(
    r"\s+(?=(?:%s)(?:\s|$))" % '|'.join(re.escape(word) for word in ENGLISH_START_WORDS),
    re.IGNORECASE,
)
MIN_WORD_BOUNDARY_OFFSET = 5

MIN_STRUCTURED_LINE_LENGTH = 3
MIN_LENIENT_LINE_LENGTH = 5
MIN_PUNCTUATION_SIDE_LENGTH = 4

LENIENT_SEPARATORS = ('|', ':', '-', '=', '\t')
PARENTHETICAL_PATTERN = re.compile(r'\([^)]*\)')
BULLET_PATTERN = re.compile(r'^(?:[-*•>]+\s*)+')
EMPHASIS_PATTERN = re.compile(r'(\*\*|__|`)')

# Labels an AI tends to echo instead of real card content.
META_WORDS = frozenset({
    'word', 'words', 'translation', 'translations', 'text', 'front', 'back',
    'term', 'definition', 'question', 'answer', 'meaning', 'example',
    'card', 'flashcard', 'flashcards',
})


def is_meta_word(text: str) -> bool:
    """True when ``text`` is only a label such as "Word" or "Translation:"."""
    return normalize_card_text(text).strip(' .:;-') in META_WORDS


def split_on_punctuation(text: str, min_side_length: int = 0) -> Optional[Pair]:
    """
    Split ``text`` after the first ``.``, ``?`` or ``!`` followed by whitespace.

    A trailing period on the front is a separator and is dropped; ``?`` and
    ``!`` belong to the content and are kept. ``min_side_length`` is checked
    against the matched sides before the period is removed.

    Examples:
        >>> split_on_punctuation("dutch. english")
        ('dutch', 'english')
        >>> split_on_punctuation("Hoe heet je? What is your name")
        ('Hoe heet je?', 'What is your name')
    """
    match = PUNCTUATION_SPLIT_PATTERN.match(text)
    if not match:
        return None

    front, back = match.group(1).strip(), match.group(2).strip()
    if len(front) < min_side_length or len(back) < min_side_length:
        return None
    if front.endswith('.'):
        front = front[:-1].rstrip()
    return front, back


def split_on_word_boundary(text: str) -> Optional[Pair]:
    """
    Split a combined "foreign phrase English phrase" field.

    Looks for the first common English opening word (pronouns, articles,
    question words, auxiliaries) preceded by whitespace and splits there,
    but only when the match starts beyond the first few characters.

    Examples:
        >>> split_on_word_boundary("Comment ça va how are you")
        ('Comment ça va', 'how are you')
    """
    match = WORD_BOUNDARY_PATTERN.search(text)
    if not match or match.start() <= MIN_WORD_BOUNDARY_OFFSET:
        return None
    return text[:match.start()].strip(), text[match.start():].strip()


def parse_pipe_line(line: str) -> Optional[Pair]:
    """
    Parse a (numbering stripped) line containing ``|``.

    - one token: the token holds both sides, split on punctuation or, when
      there is no punctuation, on an English word boundary
    - two tokens: "front | front. back" shapes are split on the punctuation
      of the second token, otherwise the tokens are front and back
    - three or more tokens: the first two are used
    """
    tokens = [token.strip() for token in line.split(PIPE)]
    tokens = [token for token in tokens if token]

    if len(tokens) == 1:
        combined = tokens[0]
        if PUNCTUATION_SPLIT_PATTERN.match(combined):
            return split_on_punctuation(combined)
        return split_on_word_boundary(combined)

    if len(tokens) == 2:
        if PUNCTUATION_SPLIT_PATTERN.match(tokens[1]):
            return split_on_punctuation(tokens[1])
        return tokens[0], tokens[1]

    if len(tokens) >= 3:
        return tokens[0], tokens[1]

    return None


def _structured_pairs(line: str, detect_word_boundary: bool) -> Iterator[Pair]:
    """Yield candidate pairs for one line, most specific heuristic first."""
    has_pipe = PIPE in line

    if has_pipe:
        pair = parse_pipe_line(line)
        if pair:
            yield pair

    pair = split_on_separators(line)
    if pair:
        yield pair

    if has_pipe:
        return

    if SENTENCE_PUNCTUATION.intersection(line):
        pair = split_on_punctuation(line, min_side_length=MIN_PUNCTUATION_SIDE_LENGTH)
        if pair:
            yield pair

    if detect_word_boundary:
        pair = split_on_word_boundary(line)
        if pair:
            yield pair


def _clean_lenient_side(text: str) -> str:
    text = EMPHASIS_PATTERN.sub('', text)
    text = PARENTHETICAL_PATTERN.sub('', text)
    return ' '.join(text.split()).strip(' "\'')


def parse_lenient_line(line: str) -> Optional[Pair]:
    """
    Fallback parser for a single raw line.

    The line is split at the first occurrence of the first separator found
    (``|``, ``:``, ``-``, ``=``, tab). Numbering, list bullets, markdown
    emphasis and parenthetical notes are removed; label words and identical
    sides are rejected.

    Examples:
        >>> parse_lenient_line("1. huis (het) - house")
        ('huis', 'house')
        >>> parse_lenient_line("Word: Translation") is None
        True
    """
    line = line.strip()
    if len(line) < MIN_LENIENT_LINE_LENGTH:
        return None
    line = BULLET_PATTERN.sub('', strip_numbering(line))

    for separator in LENIENT_SEPARATORS:
        if separator not in line:
            continue

        raw_front, raw_back = line.split(separator, 1)
        front = _clean_lenient_side(raw_front)
        back = _clean_lenient_side(raw_back)

        if not front or not back:
            return None
        if is_meta_word(front) or is_meta_word(back):
            return None
        if front.lower() == back.lower():
            return None
        return front, back

    return None


def _accept(pair: Optional[Pair], preserve_case: bool, filter_meta_words: bool) -> Optional[CardCandidate]:
    if not pair:
        return None

    front, back = pair[0].strip(), pair[1].strip()
    if not preserve_case:
        front, back = normalize_card_text(front), normalize_card_text(back)

    if not front or not back:
        return None
    if normalize_card_text(front) == normalize_card_text(back):
        return None
    if filter_meta_words and (is_meta_word(front) or is_meta_word(back)):
        return None
    return CardCandidate(front=front, back=back)


def parse_flashcards(
    text: Optional[str],
    preserve_case: bool = False,
    filter_meta_words: bool = False,
    detect_word_boundary: Optional[bool] = None,
) -> List[CardCandidate]:
    """
    Parse free text into an ordered, deduplicated list of cards.

    Args:
        text: Pasted or generated text, one card per line.
        preserve_case: Keep the source casing instead of storing the
            normalized form of each side.
        filter_meta_words: Also reject label words in the structured pass
            (the lenient pass always rejects them).
        detect_word_boundary: Split separator-less lines where English text
            seems to start. Defaults to ``preserve_case``.

    Returns:
        Cards in order of first appearance. Never raises on malformed input;
        unparseable lines are skipped and the list may be empty.
    """
    if detect_word_boundary is None:
        detect_word_boundary = preserve_case

    cards: List[CardCandidate] = []
    for line in iter_card_lines(text, min_length=MIN_STRUCTURED_LINE_LENGTH):
        for pair in _structured_pairs(line, detect_word_boundary):
            card = _accept(pair, preserve_case, filter_meta_words)
            if card:
                cards.append(card)
                break

    if not cards:
        for line in CardLines(text, strip_numbers=False, min_length=MIN_LENIENT_LINE_LENGTH):
            card = _accept(parse_lenient_line(line), preserve_case, True)
            if card:
                cards.append(card)

    return remove_duplicate_cards(cards)


def parse_and_normalize_flashcards(text: Optional[str]) -> List[CardCandidate]:
    """Parse AI output or typed text into normalized, deduplicated cards."""
    return parse_flashcards(text, preserve_case=False)


def parse_cards_preserving_case(text: Optional[str]) -> List[CardCandidate]:
    """
    Parse pasted language-learning text keeping the original capitalization.

    Handles "french | english", "1 | french | english", "1 | french. english",
    "1 | french ? english" and "1 | french english" shapes.
    """
    return parse_flashcards(text, preserve_case=True, detect_word_boundary=True)
