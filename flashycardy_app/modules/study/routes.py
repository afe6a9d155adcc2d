from flask import request
from flask_login import current_user, login_required

from ...core.error_handlers import success_response
from ...schemas import AnswerInput, StudySessionInput
from ..decks.services import DeckService
from . import study_bp as blueprint
from .services import StudyService

MAX_HISTORY_LIMIT = 100


def _flag(name):
    return request.args.get(name, '').strip().lower() in {'1', 'true', 'yes', 'on'}


@blueprint.route('/decks/<int:deck_id>/study', methods=['GET'])
@login_required
def start_study(deck_id):
    deck = DeckService.get_owned_deck(deck_id, current_user.user_id)
    mode = request.args.get('mode') or None
    return success_response(StudyService.build_session(deck, mode=mode, shuffle=_flag('shuffle')))


@blueprint.route('/decks/<int:deck_id>/study/answer', methods=['POST'])
@login_required
def check_answer(deck_id):
    payload = AnswerInput.model_validate(request.get_json(silent=True) or {})
    deck = DeckService.get_owned_deck(deck_id, current_user.user_id)
    return success_response(StudyService.check_answer(deck, payload.card_id, payload.answer))


@blueprint.route('/decks/<int:deck_id>/study/sessions', methods=['POST'])
@login_required
def save_session(deck_id):
    payload = StudySessionInput.model_validate(request.get_json(silent=True) or {})
    deck = DeckService.get_owned_deck(deck_id, current_user.user_id)
    session, rank = StudyService.save_session(
        current_user.user_id,
        deck,
        payload.mode,
        payload.total_cards,
        payload.correct_answers,
        payload.card_results,
    )
    return success_response(session.to_dict(), message='Study session saved', status_code=201, rank=rank)


@blueprint.route('/decks/<int:deck_id>/stats', methods=['GET'])
@login_required
def deck_stats(deck_id):
    DeckService.get_owned_deck(deck_id, current_user.user_id)
    return success_response(StudyService.deck_statistics(current_user.user_id, deck_id))


@blueprint.route('/study/sessions', methods=['GET'])
@login_required
def recent_sessions():
    limit = request.args.get('limit', 10, type=int) or 10
    limit = max(1, min(limit, MAX_HISTORY_LIMIT))
    return success_response(StudyService.recent_sessions(current_user.user_id, limit))
