"""Duplicate removal for parsed or submitted cards."""
from typing import Any, Iterable, List, Mapping, Tuple, TypeVar

from .normalizer import normalize_card_text

CardT = TypeVar('CardT')


def _sides(card: Any) -> Tuple[str, str]:
    if isinstance(card, Mapping):
        return card.get('front', ''), card.get('back', '')
    return card.front, card.back


def card_key(card: Any) -> Tuple[str, str]:
    """Duplicate key: the normalized (front, back) pair."""
    front, back = _sides(card)
    return normalize_card_text(front), normalize_card_text(back)


def remove_duplicate_cards(cards: Iterable[CardT]) -> List[CardT]:
    """
    Drop cards whose normalized front and back were already seen.

    The first occurrence wins and the original order is kept. Accepts
    CardCandidate-like objects or ``{'front', 'back'}`` mappings.
    """
    seen = set()
    unique = []
    for card in cards:
        key = card_key(card)
        if key in seen:
            continue
        seen.add(key)
        unique.append(card)
    return unique
