"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from ..extensions import csrf_protect, db, login_manager
from .error_handlers import error_response, register_error_handlers as _register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the package logger and route ``app.logger`` through it."""

    logger = setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
        to_file=app.config.get("LOG_TO_FILE", True),
    )

    app.logger.setLevel(logger.level)
    app.logger.handlers.clear()
    for handler in logger.handlers:
        app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured (level %s).", logging.getLevelName(logger.level))


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)


def register_login_handlers(app: Flask) -> None:
    """Wire flask-login to the User model and answer API callers with JSON."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return error_response("Unauthorized", "UNAUTHENTICATED", 401)


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables if they do not exist yet."""

    from .. import models  # noqa: F401  (registers the mappers)

    db.create_all()
    app.logger.info("Database ready at %s", app.config.get("SQLALCHEMY_DATABASE_URI"))
