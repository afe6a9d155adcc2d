"""Study module: flip and multiple choice sessions, history and stats."""

from flask import Blueprint

study_bp = Blueprint('study', __name__)

from . import routes  # noqa: E402,F401
