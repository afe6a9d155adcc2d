"""AI card generation service."""

from flask import current_app

from ...core.error_handlers import AIServiceError
from ..card_parsing import parse_and_normalize_flashcards
from .client import AIProviderClient
from .prompts import build_card_generation_prompt


class AIGenerationService:
    """Generate flashcards from a topic description."""

    @staticmethod
    def get_client() -> AIProviderClient:
        return AIProviderClient.from_config(current_app.config)

    @staticmethod
    def generate_cards_with_ai(description: str, card_count: int = 20, client: AIProviderClient = None) -> dict:
        """
        Ask the provider for ``card_count`` cards and parse the answer.

        Returns:
            dict with the raw ``text``, the parsed ``cards`` (at most
            ``card_count``) and their ``count``.
        Raises:
            AIServiceError: provider failure or no parseable card in the answer.
        """
        client = client or AIGenerationService.get_client()
        prompt = build_card_generation_prompt(description, card_count)

        current_app.logger.info(f"Generating {card_count} cards with {client.model}")
        text = client.generate(prompt)

        cards = parse_and_normalize_flashcards(text)[:card_count]
        if not cards:
            current_app.logger.warning(f"AI answer contained no parseable cards ({len(text)} chars)")
            raise AIServiceError('AI failed to generate cards', reason='no_cards')

        current_app.logger.info(f"AI generated {len(cards)} cards")
        return {
            'text': text,
            'cards': [card.to_dict() for card in cards],
            'count': len(cards),
        }


def generate_cards_with_ai(description: str, card_count: int = 20) -> dict:
    return AIGenerationService.generate_cards_with_ai(description, card_count)
