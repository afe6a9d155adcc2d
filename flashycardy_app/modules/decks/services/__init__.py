from .card_service import CardService
from .deck_service import DeckService, NO_CARDS_PARSED_MESSAGE

__all__ = ['CardService', 'DeckService', 'NO_CARDS_PARSED_MESSAGE']
