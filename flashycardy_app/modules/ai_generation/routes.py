from flask import current_app, request
from flask_login import login_required

from ...core.error_handlers import ValidationError, success_response
from ...schemas import GenerateCardsInput
from . import ai_generation_bp as blueprint
from .services import AIGenerationService


@blueprint.route('/generate', methods=['POST'])
@login_required
def generate_cards():
    """Generate cards for a description; the cards are returned, not saved."""
    payload = GenerateCardsInput.model_validate(request.get_json(silent=True) or {})

    card_count = payload.card_count or current_app.config['DEFAULT_AI_CARDS']
    max_cards = current_app.config['MAX_AI_CARDS']
    if card_count > max_cards:
        raise ValidationError(
            f'Card count must be between 1 and {max_cards}',
            errors={'card_count': [f'Must be at most {max_cards}']},
        )

    result = AIGenerationService.generate_cards_with_ai(payload.description, card_count)
    return success_response(result)
