"""Study session history models."""

from __future__ import annotations

from sqlalchemy.sql import func

from ..db_instance import db


class StudySession(db.Model):
    """A finished pass over a deck, in flip or test mode."""

    __tablename__ = 'study_sessions'

    MODE_FLIP = 'flip'
    MODE_TEST = 'test'
    MODES = (MODE_FLIP, MODE_TEST)

    session_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    deck_id = db.Column(db.Integer, db.ForeignKey('decks.deck_id'), nullable=False, index=True)
    mode = db.Column(db.String(10), nullable=False)
    total_cards = db.Column(db.Integer, nullable=False, default=0)
    correct_answers = db.Column(db.Integer, nullable=False, default=0)
    completed_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    results = db.relationship(
        'StudyResult', backref='session', lazy=True, cascade='all, delete'
    )

    __table_args__ = (
        db.CheckConstraint("mode IN ('flip', 'test')", name='ck_study_session_mode'),
        db.CheckConstraint('correct_answers <= total_cards', name='ck_study_session_correct'),
    )

    @property
    def score_percent(self) -> float | None:
        if not self.total_cards:
            return None
        return round(self.correct_answers * 100.0 / self.total_cards, 2)

    def to_dict(self) -> dict[str, object]:
        return {
            'session_id': self.session_id,
            'user_id': self.user_id,
            'deck_id': self.deck_id,
            'mode': self.mode,
            'total_cards': self.total_cards,
            'correct_answers': self.correct_answers,
            'score_percent': self.score_percent,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
        }


class StudyResult(db.Model):
    """Per-card outcome recorded with a study session."""

    __tablename__ = 'study_results'

    result_id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(
        db.Integer, db.ForeignKey('study_sessions.session_id'), nullable=False, index=True
    )
    card_id = db.Column(db.Integer, db.ForeignKey('cards.card_id', ondelete='CASCADE'), nullable=False)
    is_correct = db.Column(db.Boolean, nullable=False)

    card = db.relationship(
        'Card', backref=db.backref('study_results', cascade='all, delete', lazy=True)
    )

    def to_dict(self) -> dict[str, object]:
        return {
            'result_id': self.result_id,
            'session_id': self.session_id,
            'card_id': self.card_id,
            'is_correct': self.is_correct,
        }
