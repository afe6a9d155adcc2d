"""Deck and card models."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..db_instance import db


class Deck(db.Model):
    """A named collection of flashcards owned by one user."""

    __tablename__ = 'decks'

    deck_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.String(1000))
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    cards = db.relationship(
        'Card',
        backref='deck',
        lazy=True,
        cascade='all, delete',
        order_by='Card.card_id',
    )
    study_sessions = db.relationship(
        'StudySession', backref='deck', lazy='dynamic', cascade='all, delete'
    )

    def to_dict(self, include_cards: bool = False) -> dict[str, object]:
        data = {
            'deck_id': self.deck_id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'card_count': len(self.cards),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_cards:
            data['cards'] = [card.to_dict() for card in self.cards]
        return data


class Card(db.Model):
    """One front/back pair inside a deck."""

    __tablename__ = 'cards'

    card_id = db.Column(db.Integer, primary_key=True)
    deck_id = db.Column(db.Integer, db.ForeignKey('decks.deck_id'), nullable=False, index=True)
    front = db.Column(db.Text, nullable=False)
    back = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self) -> dict[str, object]:
        return {
            'card_id': self.card_id,
            'deck_id': self.deck_id,
            'front': self.front,
            'back': self.back,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
