import random
from types import SimpleNamespace

import pytest

from flashycardy_app import db
from flashycardy_app.models import Card, Deck, StudyResult, StudySession
from flashycardy_app.modules.card_parsing import normalize_card_text
from flashycardy_app.modules.study.logics.multiple_choice import (
    build_multiple_choice_options,
    is_answer_correct,
)

WORDS = [('huis', 'house'), ('kat', 'cat'), ('hond', 'dog'), ('boek', 'book'), ('vis', 'fish')]


def make_deck(user, words=WORDS, name='Dutch'):
    deck = Deck(user_id=user.user_id, name=name)
    deck.cards.extend(Card(front=front, back=back) for front, back in words)
    db.session.add(deck)
    db.session.commit()
    return deck


class TestMultipleChoice:
    def cards(self, backs):
        return [SimpleNamespace(front=f'front {i}', back=back) for i, back in enumerate(backs)]

    def test_four_distinct_options_with_correct_answer(self):
        cards = self.cards(['house', 'cat', 'dog', 'book', 'fish', 'tree'])
        options = build_multiple_choice_options(cards[0], cards, rng=random.Random(7))
        assert len(options) == 4
        assert 'house' in options
        assert len({normalize_card_text(o) for o in options}) == 4

    def test_duplicate_backs_are_not_offered_twice(self):
        cards = self.cards(['house', 'Cat', 'cat ', 'House', 'dog'])
        options = build_multiple_choice_options(cards[0], cards, rng=random.Random(1))
        assert sorted(options) == ['Cat', 'dog', 'house']

    def test_small_deck_gives_fewer_options(self):
        cards = self.cards(['house', 'cat'])
        options = build_multiple_choice_options(cards[1], cards, rng=random.Random(0))
        assert sorted(options) == ['cat', 'house']

    @pytest.mark.parametrize('answer, expected, result', [
        ('  HOUSE ', 'house', True),
        ('Café!', 'café!', True),
        ('huis', 'house', False),
        ('', '', False),
        (None, 'house', False),
    ])
    def test_is_answer_correct(self, answer, expected, result):
        assert is_answer_correct(answer, expected) is result


class TestStudyRoutes:
    def test_test_mode_has_options_and_hides_back(self, auth_client, user):
        deck = make_deck(user)
        response = auth_client.get(f'/api/decks/{deck.deck_id}/study?mode=test')
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['mode'] == 'test'
        assert data['total_cards'] == 5
        first = data['cards'][0]
        assert 'back' not in first
        assert 'house' in first['options']
        assert len(first['options']) == 4

    def test_default_mode_depends_on_deck_size(self, auth_client, user):
        big = make_deck(user)
        small = make_deck(user, WORDS[:3], name='Small')
        assert auth_client.get(f'/api/decks/{big.deck_id}/study').get_json()['data']['mode'] == 'test'
        small_data = auth_client.get(f'/api/decks/{small.deck_id}/study').get_json()['data']
        assert small_data['mode'] == 'flip'
        assert small_data['cards'][0]['back'] == 'house'

    def test_test_mode_needs_four_cards(self, auth_client, user):
        deck = make_deck(user, WORDS[:3])
        response = auth_client.get(f'/api/decks/{deck.deck_id}/study?mode=test')
        assert response.status_code == 400

    def test_unknown_mode(self, auth_client, user):
        deck = make_deck(user)
        assert auth_client.get(f'/api/decks/{deck.deck_id}/study?mode=cram').status_code == 400

    def test_shuffle_keeps_all_cards(self, auth_client, user):
        deck = make_deck(user)
        data = auth_client.get(f'/api/decks/{deck.deck_id}/study?mode=flip&shuffle=true').get_json()['data']
        assert sorted(c['front'] for c in data['cards']) == sorted(front for front, _ in WORDS)

    def test_check_answer(self, auth_client, user):
        deck = make_deck(user)
        card = deck.cards[0]
        url = f'/api/decks/{deck.deck_id}/study/answer'

        response = auth_client.post(url, json={'card_id': card.card_id, 'answer': ' House '})
        assert response.get_json()['data']['correct'] is True

        response = auth_client.post(url, json={'card_id': card.card_id, 'answer': 'cat'})
        assert response.get_json()['data'] == {'card_id': card.card_id, 'correct': False, 'expected': 'house'}

    def test_save_test_session_returns_rank(self, auth_client, user):
        deck = make_deck(user)
        results = [{'card_id': c.card_id, 'is_correct': i < 3} for i, c in enumerate(deck.cards)]
        response = auth_client.post(f'/api/decks/{deck.deck_id}/study/sessions', json={
            'mode': 'test',
            'total_cards': 5,
            'correct_answers': 3,
            'card_results': results,
        })
        assert response.status_code == 201
        body = response.get_json()
        assert body['data']['score_percent'] == 60.0
        assert body['rank'] == {'rank': 1, 'total_users': 1, 'user_score': 60}
        assert StudyResult.query.count() == 5

    def test_flip_session_has_no_rank(self, auth_client, user):
        deck = make_deck(user)
        response = auth_client.post(f'/api/decks/{deck.deck_id}/study/sessions', json={
            'mode': 'flip', 'total_cards': 5, 'correct_answers': 5,
        })
        assert response.status_code == 201
        assert response.get_json()['rank'] is None

    def test_session_rejects_foreign_cards(self, auth_client, user):
        deck = make_deck(user)
        other = make_deck(user, WORDS[:1], name='Other')
        response = auth_client.post(f'/api/decks/{deck.deck_id}/study/sessions', json={
            'mode': 'test',
            'total_cards': 1,
            'correct_answers': 1,
            'card_results': [{'card_id': other.cards[0].card_id, 'is_correct': True}],
        })
        assert response.status_code == 400
        assert StudySession.query.count() == 0

    def test_session_validation(self, auth_client, user):
        deck = make_deck(user)
        url = f'/api/decks/{deck.deck_id}/study/sessions'
        assert auth_client.post(url, json={'mode': 'test', 'total_cards': 2, 'correct_answers': 3}).status_code == 400
        assert auth_client.post(url, json={'mode': 'exam', 'total_cards': 2, 'correct_answers': 1}).status_code == 400

    def test_stats_and_history(self, auth_client, user):
        deck = make_deck(user)
        url = f'/api/decks/{deck.deck_id}/study/sessions'
        auth_client.post(url, json={'mode': 'test', 'total_cards': 5, 'correct_answers': 4})
        auth_client.post(url, json={'mode': 'flip', 'total_cards': 5, 'correct_answers': 2})

        stats = auth_client.get(f'/api/decks/{deck.deck_id}/stats').get_json()['data']
        assert stats['total_sessions'] == 2
        assert stats['total_cards'] == 10
        assert stats['total_correct'] == 6
        assert stats['average_score'] == 60
        assert stats['last_studied'] is not None

        history = auth_client.get('/api/study/sessions?limit=1').get_json()['data']
        assert len(history) == 1
        assert history[0]['deck_name'] == 'Dutch'
        assert history[0]['mode'] == 'flip'

    def test_stats_without_sessions(self, auth_client, user):
        deck = make_deck(user)
        stats = auth_client.get(f'/api/decks/{deck.deck_id}/stats').get_json()['data']
        assert stats == {
            'total_sessions': 0,
            'total_cards': 0,
            'total_correct': 0,
            'average_score': 0,
            'last_studied': None,
        }

    def test_deleting_deck_removes_sessions(self, auth_client, user):
        deck = make_deck(user)
        deck_id = deck.deck_id
        auth_client.post(f'/api/decks/{deck_id}/study/sessions', json={
            'mode': 'test', 'total_cards': 1, 'correct_answers': 1,
            'card_results': [{'card_id': deck.cards[0].card_id, 'is_correct': True}],
        })
        assert auth_client.delete(f'/api/decks/{deck_id}').status_code == 200
        assert StudySession.query.count() == 0
        assert StudyResult.query.count() == 0
