"""Database models package for FlashyCardy."""

from ..db_instance import db

from .user import User
from .deck import Card, Deck
from .study import StudyResult, StudySession

__all__ = [
    'db',
    'User',
    'Deck',
    'Card',
    'StudySession',
    'StudyResult',
]
