"""Leaderboard module: test mode rankings per deck and across decks."""

from flask import Blueprint

leaderboard_bp = Blueprint('leaderboard', __name__)

from . import routes  # noqa: E402,F401
