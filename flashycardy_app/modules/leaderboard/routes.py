from flask import current_app, request
from flask_login import current_user, login_required

from ...core.error_handlers import NotFoundError, success_response
from ...extensions import db
from ...models import Deck
from . import leaderboard_bp as blueprint
from .services import (
    get_all_decks_leaderboards,
    get_deck_leaderboard,
    get_global_leaderboard,
    get_user_rank_for_deck,
)

MAX_LIMIT = 100


def _limit(default):
    limit = request.args.get('limit', default, type=int)
    return max(1, min(limit or default, MAX_LIMIT))


@blueprint.route('/global', methods=['GET'])
@login_required
def global_leaderboard():
    limit = _limit(current_app.config.get('LEADERBOARD_LIMIT', 10))
    return success_response(get_global_leaderboard(limit))


@blueprint.route('/decks', methods=['GET'])
@login_required
def all_decks_leaderboards():
    return success_response(get_all_decks_leaderboards(_limit(5)))


@blueprint.route('/decks/<int:deck_id>', methods=['GET'])
@login_required
def deck_leaderboard(deck_id):
    if db.session.get(Deck, deck_id) is None:
        raise NotFoundError('Deck not found', resource='deck')
    limit = _limit(current_app.config.get('LEADERBOARD_LIMIT', 10))
    return success_response(
        get_deck_leaderboard(deck_id, limit),
        user_rank=get_user_rank_for_deck(current_user.user_id, deck_id),
    )
