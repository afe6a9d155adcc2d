"""Decks module: deck and card management, text import."""

from flask import Blueprint

decks_bp = Blueprint('decks', __name__)

from . import routes  # noqa: E402,F401
