# File: flashycardy_app/config.py
"""Application configuration loaded from environment variables."""

import os

# The project root is one level above the package directory.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "flashycardy.db")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    raw = os.environ.get(name) or default
    return [part.strip() for part in raw.split(',') if part.strip()]


class Config:
    """
    Configuration for the Flask application.
    """
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'change-me-flashycardy-secret'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_TO_FILE = _env_bool('LOG_TO_FILE', True)
    LOG_JSON = _env_bool('LOG_JSON', False)

    # AI provider (Ollama compatible by default)
    AI_BASE_URLS = _env_list('AI_BASE_URLS', os.environ.get('OLLAMA_URL') or 'http://127.0.0.1:11434')
    AI_MODEL = os.environ.get('AI_MODEL', 'gemma3:270m')
    AI_API_KEY = os.environ.get('AI_API_KEY', '')
    AI_TIMEOUT_SECONDS = float(os.environ.get('AI_TIMEOUT_SECONDS', 600))
    AI_TEMPERATURE = float(os.environ.get('AI_TEMPERATURE', 0.8))
    AI_MAX_TOKENS = int(os.environ.get('AI_MAX_TOKENS', 4000))
    AI_ENDPOINT_PATHS = _env_list('AI_ENDPOINT_PATHS', '/api/generate,/v1/chat/completions')

    # Card limits
    MAX_AI_CARDS = int(os.environ.get('MAX_AI_CARDS', 100))
    DEFAULT_AI_CARDS = int(os.environ.get('DEFAULT_AI_CARDS', 20))
    NORMALIZE_MANUAL_CARDS = _env_bool('NORMALIZE_MANUAL_CARDS', True)

    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', 10))

    # Make sure the default SQLite directory exists
    db_dir = os.path.dirname(DATABASE_PATH)
    os.makedirs(db_dir, exist_ok=True)
