"""
Deck Service - deck CRUD and deck creation from pasted text.

Every lookup is scoped to the requesting user; decks owned by someone else
are reported exactly like missing ones.
"""
from flask import current_app

from ....core.error_handlers import NotFoundError, ValidationError
from ....extensions import db
from ....models import Card, Deck
from ...card_parsing import parse_and_normalize_flashcards, remove_duplicate_cards

NO_CARDS_PARSED_MESSAGE = (
    'No valid cards could be parsed from the text. '
    'Expected format: "front | back" on separate lines.'
)


def commit_or_rollback():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


class DeckService:

    @staticmethod
    def list_decks(user_id):
        return (
            Deck.query.filter_by(user_id=user_id)
            .order_by(Deck.updated_at.desc(), Deck.deck_id.desc())
            .all()
        )

    @staticmethod
    def get_owned_deck(deck_id, user_id):
        """Return the deck or raise NotFoundError when missing or not owned."""
        deck = Deck.query.filter_by(deck_id=deck_id, user_id=user_id).first()
        if deck is None:
            raise NotFoundError('Deck not found or unauthorized', resource='deck')
        return deck

    @staticmethod
    def create_deck(user_id, name, description=None, cards=None, cards_text=None):
        """
        Create a deck with its initial cards.

        ``cards`` is a list of front/back mappings stored as given after
        deduplication. ``cards_text`` is parsed and normalized; when it is
        supplied but yields nothing the deck is not created.
        """
        candidates = []
        if cards_text is not None and cards_text.strip():
            candidates = parse_and_normalize_flashcards(cards_text)
            if not candidates:
                raise ValidationError(NO_CARDS_PARSED_MESSAGE, errors={'cards_text': [NO_CARDS_PARSED_MESSAGE]})
        elif cards:
            candidates = remove_duplicate_cards(cards)

        deck = Deck(user_id=user_id, name=name, description=description)
        for candidate in candidates:
            front, back = _sides(candidate)
            deck.cards.append(Card(front=front, back=back))

        db.session.add(deck)
        commit_or_rollback()
        current_app.logger.info(f"Deck {deck.deck_id} created by user {user_id} with {len(deck.cards)} cards")
        return deck

    @staticmethod
    def update_deck(deck_id, user_id, name, description=None):
        deck = DeckService.get_owned_deck(deck_id, user_id)
        deck.name = name
        deck.description = description
        commit_or_rollback()
        return deck

    @staticmethod
    def delete_deck(deck_id, user_id):
        deck = DeckService.get_owned_deck(deck_id, user_id)
        db.session.delete(deck)
        commit_or_rollback()
        current_app.logger.info(f"Deck {deck_id} deleted by user {user_id}")


def _sides(candidate):
    if isinstance(candidate, dict):
        return candidate['front'], candidate['back']
    return candidate.front, candidate.back
