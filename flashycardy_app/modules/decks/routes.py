from flask import request
from flask_login import current_user, login_required

from ...core.error_handlers import success_response
from ...schemas import BulkCardsInput, CreateCardInput, CreateDeckInput, UpdateCardInput, UpdateDeckInput
from . import decks_bp as blueprint
from .services import CardService, DeckService


def _json():
    return request.get_json(silent=True) or {}


@blueprint.route('', methods=['GET'])
@login_required
def list_decks():
    decks = DeckService.list_decks(current_user.user_id)
    return success_response([deck.to_dict() for deck in decks])


@blueprint.route('', methods=['POST'])
@login_required
def create_deck():
    payload = CreateDeckInput.model_validate(_json())
    deck = DeckService.create_deck(
        current_user.user_id,
        payload.name,
        description=payload.description,
        cards=[card.model_dump() for card in payload.cards or []],
        cards_text=payload.cards_text,
    )
    return success_response(deck.to_dict(include_cards=True), message='Deck created', status_code=201)


@blueprint.route('/<int:deck_id>', methods=['GET'])
@login_required
def get_deck(deck_id):
    deck = DeckService.get_owned_deck(deck_id, current_user.user_id)
    data = deck.to_dict()
    data['cards'] = [card.to_dict() for card in sorted(deck.cards, key=lambda c: c.card_id, reverse=True)]
    return success_response(data)


@blueprint.route('/<int:deck_id>', methods=['PUT'])
@login_required
def update_deck(deck_id):
    payload = UpdateDeckInput.model_validate(_json())
    deck = DeckService.update_deck(deck_id, current_user.user_id, payload.name, payload.description)
    return success_response(deck.to_dict(), message='Deck updated')


@blueprint.route('/<int:deck_id>', methods=['DELETE'])
@login_required
def delete_deck(deck_id):
    DeckService.delete_deck(deck_id, current_user.user_id)
    return success_response(message='Deck deleted')


@blueprint.route('/<int:deck_id>/cards', methods=['POST'])
@login_required
def create_card(deck_id):
    payload = CreateCardInput.model_validate(_json())
    card = CardService.create_card(deck_id, current_user.user_id, payload.front, payload.back)
    return success_response(card.to_dict(), message='Card created', status_code=201)


@blueprint.route('/<int:deck_id>/cards/<int:card_id>', methods=['PUT'])
@login_required
def update_card(deck_id, card_id):
    payload = UpdateCardInput.model_validate(_json())
    card = CardService.update_card(deck_id, card_id, current_user.user_id, payload.front, payload.back)
    return success_response(card.to_dict(), message='Card updated')


@blueprint.route('/<int:deck_id>/cards/<int:card_id>', methods=['DELETE'])
@login_required
def delete_card(deck_id, card_id):
    CardService.delete_card(deck_id, card_id, current_user.user_id)
    return success_response(message='Card deleted')


@blueprint.route('/<int:deck_id>/cards/bulk', methods=['POST'])
@login_required
def bulk_create_cards(deck_id):
    payload = BulkCardsInput.model_validate(_json())
    cards = CardService.bulk_create_cards(deck_id, current_user.user_id, payload.cards_text)
    return success_response(
        [card.to_dict() for card in cards],
        message=f'Created {len(cards)} cards',
        status_code=201,
        count=len(cards),
    )
