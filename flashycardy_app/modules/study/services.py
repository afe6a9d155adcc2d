"""
Study Service - session payloads, answer checks and session history.
"""
import random

from flask import current_app

from ...core.error_handlers import NotFoundError, ValidationError
from ...extensions import db
from ...models import Card, Deck, StudyResult, StudySession
from ..leaderboard.services import get_user_rank_for_deck
from .logics.multiple_choice import MIN_TEST_MODE_CARDS, build_multiple_choice_options, is_answer_correct


class StudyService:

    @staticmethod
    def default_mode(card_count):
        return StudySession.MODE_TEST if card_count >= MIN_TEST_MODE_CARDS else StudySession.MODE_FLIP

    @staticmethod
    def build_session(deck, mode=None, shuffle=False, rng=None):
        """
        Cards to study, with options per card in test mode.

        Raises:
            ValidationError: unknown mode, or test mode on a deck that is too small.
        """
        rng = rng or random.Random()
        cards = list(deck.cards)
        mode = mode or StudyService.default_mode(len(cards))

        if mode not in StudySession.MODES:
            raise ValidationError(f"Unknown study mode '{mode}'", errors={'mode': ['Must be flip or test']})
        if mode == StudySession.MODE_TEST and len(cards) < MIN_TEST_MODE_CARDS:
            raise ValidationError(f'Test mode needs at least {MIN_TEST_MODE_CARDS} cards')

        if shuffle:
            rng.shuffle(cards)

        items = []
        for card in cards:
            item = {'card_id': card.card_id, 'front': card.front}
            if mode == StudySession.MODE_TEST:
                item['options'] = build_multiple_choice_options(card, cards, rng=rng)
            else:
                item['back'] = card.back
            items.append(item)

        return {
            'deck_id': deck.deck_id,
            'deck_name': deck.name,
            'mode': mode,
            'total_cards': len(items),
            'cards': items,
        }

    @staticmethod
    def check_answer(deck, card_id, answer):
        card = Card.query.filter_by(card_id=card_id, deck_id=deck.deck_id).first()
        if card is None:
            raise NotFoundError('Card not found or unauthorized', resource='card')
        return {
            'card_id': card.card_id,
            'correct': is_answer_correct(answer, card.back),
            'expected': card.back,
        }

    @staticmethod
    def save_session(user_id, deck, mode, total_cards, correct_answers, card_results=()):
        """
        Persist a finished session and its per-card results.

        Returns:
            (session, rank) where rank is None outside test mode.
        """
        deck_card_ids = {card.card_id for card in deck.cards}
        unknown = sorted({result.card_id for result in card_results} - deck_card_ids)
        if unknown:
            raise ValidationError(
                'Results reference cards that are not in this deck',
                errors={'card_results': [f'Unknown card ids: {unknown}']},
            )

        session = StudySession(
            user_id=user_id,
            deck_id=deck.deck_id,
            mode=mode,
            total_cards=total_cards,
            correct_answers=correct_answers,
        )
        for result in card_results:
            session.results.append(StudyResult(card_id=result.card_id, is_correct=result.is_correct))

        db.session.add(session)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(
            f"Study session {session.session_id} saved: user {user_id}, deck {deck.deck_id}, "
            f"{correct_answers}/{total_cards} ({mode})"
        )

        rank = None
        if mode == StudySession.MODE_TEST:
            rank = get_user_rank_for_deck(user_id, deck.deck_id)
        return session, rank

    @staticmethod
    def deck_statistics(user_id, deck_id):
        sessions = (
            StudySession.query.filter_by(user_id=user_id, deck_id=deck_id)
            .order_by(StudySession.completed_at.desc(), StudySession.session_id.desc())
            .all()
        )
        if not sessions:
            return {
                'total_sessions': 0,
                'total_cards': 0,
                'total_correct': 0,
                'average_score': 0,
                'last_studied': None,
            }

        total_cards = sum(s.total_cards for s in sessions)
        total_correct = sum(s.correct_answers for s in sessions)
        last = sessions[0].completed_at
        return {
            'total_sessions': len(sessions),
            'total_cards': total_cards,
            'total_correct': total_correct,
            'average_score': round(total_correct * 100 / total_cards) if total_cards else 0,
            'last_studied': last.isoformat() if last else None,
        }

    @staticmethod
    def recent_sessions(user_id, limit=10):
        rows = (
            db.session.query(StudySession, Deck.name)
            .join(Deck, Deck.deck_id == StudySession.deck_id)
            .filter(StudySession.user_id == user_id)
            .order_by(StudySession.completed_at.desc(), StudySession.session_id.desc())
            .limit(limit)
            .all()
        )
        sessions = []
        for session, deck_name in rows:
            data = session.to_dict()
            data['deck_name'] = deck_name
            sessions.append(data)
        return sessions
