"""Card Service - single card edits and bulk import into an existing deck."""
from flask import current_app

from ....core.error_handlers import NotFoundError, ValidationError
from ....extensions import db
from ....models import Card
from ...card_parsing import normalize_card_text, parse_cards_preserving_case
from .deck_service import NO_CARDS_PARSED_MESSAGE, DeckService, commit_or_rollback


class CardService:

    @staticmethod
    def prepare_sides(front, back):
        """Normalize manual input when enabled; reject sides that end up empty."""
        if current_app.config.get('NORMALIZE_MANUAL_CARDS', True):
            front, back = normalize_card_text(front), normalize_card_text(back)
        else:
            front, back = front.strip(), back.strip()

        if not front or not back:
            raise ValidationError('Card text cannot be empty after normalization')
        if normalize_card_text(front) == normalize_card_text(back):
            raise ValidationError('Front and back of a card must be different')
        return front, back

    @staticmethod
    def get_owned_card(deck_id, card_id, user_id):
        deck = DeckService.get_owned_deck(deck_id, user_id)
        card = Card.query.filter_by(card_id=card_id, deck_id=deck.deck_id).first()
        if card is None:
            raise NotFoundError('Card not found or unauthorized', resource='card')
        return card

    @staticmethod
    def create_card(deck_id, user_id, front, back):
        deck = DeckService.get_owned_deck(deck_id, user_id)
        front, back = CardService.prepare_sides(front, back)

        card = Card(deck_id=deck.deck_id, front=front, back=back)
        db.session.add(card)
        commit_or_rollback()
        return card

    @staticmethod
    def update_card(deck_id, card_id, user_id, front, back):
        card = CardService.get_owned_card(deck_id, card_id, user_id)
        card.front, card.back = CardService.prepare_sides(front, back)
        commit_or_rollback()
        return card

    @staticmethod
    def delete_card(deck_id, card_id, user_id):
        card = CardService.get_owned_card(deck_id, card_id, user_id)
        db.session.delete(card)
        commit_or_rollback()

    @staticmethod
    def bulk_create_cards(deck_id, user_id, cards_text):
        """
        Parse pasted text keeping its capitalization and add every card.

        Returns:
            The created Card objects, in input order.
        """
        deck = DeckService.get_owned_deck(deck_id, user_id)

        candidates = parse_cards_preserving_case(cards_text)
        if not candidates:
            raise ValidationError(NO_CARDS_PARSED_MESSAGE, errors={'cards_text': [NO_CARDS_PARSED_MESSAGE]})

        cards = [Card(deck_id=deck.deck_id, front=c.front, back=c.back) for c in candidates]
        db.session.add_all(cards)
        commit_or_rollback()
        current_app.logger.info(f"Bulk import added {len(cards)} cards to deck {deck_id}")
        return cards
