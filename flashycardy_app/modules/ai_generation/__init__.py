"""AI module: generate flashcards from a topic description."""

from flask import Blueprint

ai_generation_bp = Blueprint('ai_generation', __name__)

from . import routes  # noqa: E402,F401
