"""
Leaderboard queries.

Only test mode sessions are ranked; flip mode is self-graded and would make
scores incomparable. A session score is ``correct * 100.0 / total`` and
sessions with zero cards score NULL, which the aggregates skip.
"""
from sqlalchemy import distinct, func

from ...extensions import db
from ...models import Deck, StudySession, User

SCORE = (StudySession.correct_answers * 100.0) / func.nullif(StudySession.total_cards, 0)
MAX_ACTIVE_DECKS = 10


def _round(value):
    return round(float(value), 2) if value is not None else None


def _iso(value):
    return value.isoformat() if value is not None else None


def _best_scores_query(deck_id):
    best_score = func.max(SCORE)
    return (
        db.session.query(
            StudySession.user_id,
            User.username,
            best_score.label('best_score'),
            func.count(StudySession.session_id).label('total_sessions'),
            func.sum(StudySession.total_cards).label('total_cards'),
            func.max(StudySession.completed_at).label('last_studied'),
        )
        .join(User, User.user_id == StudySession.user_id)
        .filter(StudySession.deck_id == deck_id, StudySession.mode == StudySession.MODE_TEST)
        .group_by(StudySession.user_id, User.username)
        .order_by(best_score.desc(), func.max(StudySession.completed_at).asc())
    )


def get_deck_leaderboard(deck_id, limit=10):
    """Best score per user on one deck, best first."""
    rows = _best_scores_query(deck_id).limit(limit).all()
    return [
        {
            'rank': position,
            'user_id': row.user_id,
            'username': row.username,
            'best_score': _round(row.best_score),
            'total_sessions': row.total_sessions,
            'total_cards': int(row.total_cards or 0),
            'last_studied': _iso(row.last_studied),
        }
        for position, row in enumerate(rows, start=1)
    ]


def get_user_rank_for_deck(user_id, deck_id):
    """Position of ``user_id`` among everyone who took a test on the deck."""
    rows = _best_scores_query(deck_id).all()
    for position, row in enumerate(rows, start=1):
        if row.user_id == user_id:
            return {
                'rank': position,
                'total_users': len(rows),
                'user_score': round(row.best_score) if row.best_score is not None else None,
            }
    return {'rank': None, 'total_users': len(rows), 'user_score': None}


def get_global_leaderboard(limit=10):
    """Average test score per user across all decks."""
    average_score = func.avg(SCORE)
    rows = (
        db.session.query(
            StudySession.user_id,
            User.username,
            func.count(StudySession.session_id).label('total_sessions'),
            func.sum(StudySession.total_cards).label('total_cards'),
            func.sum(StudySession.correct_answers).label('total_correct'),
            average_score.label('average_score'),
            func.max(StudySession.completed_at).label('last_studied'),
        )
        .join(User, User.user_id == StudySession.user_id)
        .filter(StudySession.mode == StudySession.MODE_TEST)
        .group_by(StudySession.user_id, User.username)
        .order_by(average_score.desc())
        .limit(limit)
        .all()
    )
    return [
        {
            'rank': position,
            'user_id': row.user_id,
            'username': row.username,
            'total_sessions': row.total_sessions,
            'total_cards': int(row.total_cards or 0),
            'total_correct': int(row.total_correct or 0),
            'average_score': _round(row.average_score),
            'last_studied': _iso(row.last_studied),
        }
        for position, row in enumerate(rows, start=1)
    ]


def get_all_decks_leaderboards(limit=5):
    """Top scores for the most active decks (by test session count)."""
    session_count = func.count(StudySession.session_id)
    decks = (
        db.session.query(
            StudySession.deck_id,
            Deck.name,
            session_count.label('total_sessions'),
            func.count(distinct(StudySession.user_id)).label('unique_users'),
        )
        .join(Deck, Deck.deck_id == StudySession.deck_id)
        .filter(StudySession.mode == StudySession.MODE_TEST)
        .group_by(StudySession.deck_id, Deck.name)
        .order_by(session_count.desc(), StudySession.deck_id.asc())
        .limit(MAX_ACTIVE_DECKS)
        .all()
    )
    return [
        {
            'deck_id': deck.deck_id,
            'deck_name': deck.name,
            'total_sessions': deck.total_sessions,
            'unique_users': deck.unique_users,
            'top_scores': get_deck_leaderboard(deck.deck_id, limit),
        }
        for deck in decks
    ]
