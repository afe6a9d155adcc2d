"""
Multiple choice helpers - pure functions, no database access.

Cards are anything with ``front``/``back`` attributes.
"""
import random
from typing import List, Optional, Sequence

from ...card_parsing import normalize_card_text

MIN_TEST_MODE_CARDS = 4
DEFAULT_OPTION_COUNT = 4


def is_answer_correct(answer: Optional[str], expected: Optional[str]) -> bool:
    """Compare answers on their normalized form, so case and stray symbols do not count."""
    if answer is None or expected is None:
        return False
    normalized = normalize_card_text(answer)
    return bool(normalized) and normalized == normalize_card_text(expected)


def build_multiple_choice_options(
    card,
    cards: Sequence,
    option_count: int = DEFAULT_OPTION_COUNT,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Return the correct back of ``card`` mixed with distractor backs.

    Distractors come from the other cards, are distinct from each other and
    from the correct answer after normalization, and are sampled at random.
    Fewer than ``option_count`` options are returned when the deck does not
    hold enough distinct answers.
    """
    rng = rng or random.Random()
    correct = card.back
    seen = {normalize_card_text(correct)}

    distractors = []
    for other in cards:
        if other is card:
            continue
        key = normalize_card_text(other.back)
        if not key or key in seen:
            continue
        seen.add(key)
        distractors.append(other.back)

    picked = rng.sample(distractors, min(len(distractors), max(option_count - 1, 0)))
    options = [correct] + picked
    rng.shuffle(options)
    return options
