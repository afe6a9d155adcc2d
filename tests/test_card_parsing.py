import pytest

from flashycardy_app.modules.card_parsing import (
    CardCandidate,
    CardLines,
    iter_card_lines,
    normalize_card_text,
    parse_and_normalize_flashcards,
    parse_cards_preserving_case,
    parse_flashcards,
    parse_lenient_line,
    parse_pipe_line,
    remove_duplicate_cards,
    split_on_punctuation,
    split_on_separators,
    split_on_word_boundary,
    strip_numbering,
    texts_match,
)


def pairs(cards):
    return [(card.front, card.back) for card in cards]


class TestNormalizeCardText:
    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_card_text("  Café  au Lait ") == 'café au lait'

    def test_drops_symbols_keeps_allowed_punctuation(self):
        assert normalize_card_text("Hello 👋 World!") == 'hello world!'
        assert normalize_card_text("rock & roll (music)") == 'rock & roll (music)'

    def test_empty_values(self):
        assert normalize_card_text('') == ''
        assert normalize_card_text(None) == ''
        assert normalize_card_text('🎉✨') == ''

    @pytest.mark.parametrize('text', ['  Ça VA?  ', 'Naïve – test', 'école', 'Straße\t\tweg'])
    def test_idempotent(self, text):
        once = normalize_card_text(text)
        assert normalize_card_text(once) == once

    def test_decomposed_accents_compare_equal(self):
        assert texts_match('e\u0301cole', 'École')


class TestLineHelpers:
    def test_strip_numbering(self):
        assert strip_numbering('12. huis | house') == 'huis | house'
        assert strip_numbering('3) kat') == 'kat'
        assert strip_numbering('huis') == 'huis'

    def test_card_lines_is_restartable_and_skips_short_lines(self):
        lines = CardLines("1. huis | house\n\n  ab \nkat | cat", min_length=3)
        assert list(lines) == ['huis | house', 'kat | cat']
        assert list(lines) == ['huis | house', 'kat | cat']

    def test_iter_card_lines_strips_numbering(self):
        assert list(iter_card_lines("1) huis | house\n  \n2. kat | cat")) == ['huis | house', 'kat | cat']

    def test_split_on_separators_uses_first_working_separator(self):
        assert split_on_separators('huis; house') == ('huis', 'house')
        assert split_on_separators('a: b; c') == ('a: b', 'c')
        assert split_on_separators('no separator here') is None
        assert split_on_separators('| only back') is None


class TestHeuristics:
    def test_split_on_punctuation(self):
        assert split_on_punctuation('dutch. english') == ('dutch', 'english')
        assert split_on_punctuation('Hoe heet je? What is your name') == ('Hoe heet je?', 'What is your name')
        assert split_on_punctuation('no punctuation') is None

    def test_split_on_punctuation_minimum_side_length(self):
        assert split_on_punctuation('Hi. there', min_side_length=4) is None

    def test_split_on_word_boundary(self):
        assert split_on_word_boundary('Comment ça va how are you') == ('Comment ça va', 'how are you')
        assert split_on_word_boundary('Guten Tag how are you') == ('Guten Tag', 'how are you')

    def test_word_boundary_too_close_to_start(self):
        assert split_on_word_boundary('Hallo how are you') is None

    def test_parse_pipe_line_shapes(self):
        assert parse_pipe_line('Bonjour | Hello') == ('Bonjour', 'Hello')
        assert parse_pipe_line('| Merci. Thank you') == ('Merci', 'Thank you')
        assert parse_pipe_line('a | b | c') == ('a', 'b')
        assert parse_pipe_line('|  |') is None

    def test_parse_lenient_line(self):
        assert parse_lenient_line('1. huis (het) - house') == ('huis', 'house')
        assert parse_lenient_line('- **kat** : cat') == ('kat', 'cat')
        assert parse_lenient_line('Word: Translation') is None
        assert parse_lenient_line('abc') is None
        assert parse_lenient_line('Water - water') is None


class TestParseAndNormalize:
    def test_pipe_lines(self):
        text = "Apple | Appel\nBread | Brood\nCheese | Kaas"
        assert pairs(parse_and_normalize_flashcards(text)) == [
            ('apple', 'appel'),
            ('bread', 'brood'),
            ('cheese', 'kaas'),
        ]

    def test_returns_card_candidates(self):
        cards = parse_and_normalize_flashcards('huis | house')
        assert cards == [CardCandidate(front='huis', back='house')]
        assert cards[0].to_dict() == {'front': 'huis', 'back': 'house'}

    def test_numbered_lines(self):
        text = "1. huis | house\n2) kat | cat"
        assert pairs(parse_and_normalize_flashcards(text)) == [('huis', 'house'), ('kat', 'cat')]

    def test_generic_separators(self):
        text = "huis; house\nkat: cat\nhond - dog\nboek = book\nvis\tfish"
        assert pairs(parse_and_normalize_flashcards(text)) == [
            ('huis', 'house'),
            ('kat', 'cat'),
            ('hond', 'dog'),
            ('boek', 'book'),
            ('vis', 'fish'),
        ]

    def test_numbered_punctuation_line(self):
        assert pairs(parse_and_normalize_flashcards("1. dutch. english")) == [("dutch", "english")]

    def test_punctuation_split(self):
        cards = parse_and_normalize_flashcards('Hoe heet je? What is your name')
        assert pairs(cards) == [('hoe heet je?', 'what is your name')]

    def test_duplicates_removed_first_wins(self):
        text = "Huis | House\nkat | cat\nhuis | house"
        assert pairs(parse_and_normalize_flashcards(text)) == [('huis', 'house'), ('kat', 'cat')]

    def test_identical_sides_rejected(self):
        assert parse_and_normalize_flashcards('water | Water') == []

    def test_unparseable_lines_are_skipped(self):
        text = "huis | house\nthis line has nothing\nkat | cat"
        assert pairs(parse_and_normalize_flashcards(text)) == [('huis', 'house'), ('kat', 'cat')]

    @pytest.mark.parametrize('text', [None, '', '   \n\n  ', 'no separators at all'])
    def test_nothing_to_parse(self, text):
        assert parse_and_normalize_flashcards(text) == []

    def test_label_words_pass_structured_parser(self):
        assert pairs(parse_and_normalize_flashcards('word | translation')) == [('word', 'translation')]

    def test_label_words_filtered_when_requested(self):
        assert parse_flashcards('word | translation', filter_meta_words=True) == []


class TestLenientFallback:
    def test_runs_when_structured_pass_finds_nothing(self):
        text = "- huis - house\n- kat - cat"
        assert pairs(parse_and_normalize_flashcards(text)) == [('huis', 'house'), ('kat', 'cat')]

    def test_filters_label_words(self):
        text = "- Word - Translation\n- huis - house"
        assert pairs(parse_and_normalize_flashcards(text)) == [('huis', 'house')]

    def test_numeric_answers_survive(self):
        text = (
            "- Year of the French revolution - 1789\n"
            "- Boiling point of water - 100 degrees\n"
            "- Capital of France - Paris"
        )
        assert pairs(parse_and_normalize_flashcards(text)) == [
            ('year of the french revolution', '1789'),
            ('boiling point of water', '100 degrees'),
            ('capital of france', 'paris'),
        ]

    def test_identical_sides_rejected(self):
        assert parse_and_normalize_flashcards("- same - Same") == []


class TestParsePreservingCase:
    def test_language_learning_shapes(self):
        text = (
            "1 | Bonjour | Hello\n"
            "2 | Merci. Thank you\n"
            "3 | Comment ça va how are you\n"
            "4 | Ça va ? Fine"
        )
        assert pairs(parse_cards_preserving_case(text)) == [
            ('Bonjour', 'Hello'),
            ('Merci', 'Thank you'),
            ('Comment ça va', 'how are you'),
            ('Ça va ?', 'Fine'),
        ]

    def test_keeps_case_but_dedups_on_normalized_form(self):
        text = "Huis | House\nhuis | house"
        assert pairs(parse_cards_preserving_case(text)) == [('Huis', 'House')]


class TestRemoveDuplicateCards:
    def test_mappings_keep_first_occurrence(self):
        cards = [
            {'front': 'Huis', 'back': 'House'},
            {'front': 'huis ', 'back': 'house'},
            {'front': 'kat', 'back': 'cat'},
        ]
        assert remove_duplicate_cards(cards) == [cards[0], cards[2]]

    def test_idempotent(self):
        cards = [
            CardCandidate('Huis', 'House'),
            CardCandidate('kat', 'cat'),
            CardCandidate('huis', 'house '),
            CardCandidate('Kat!', 'cat'),
        ]
        once = remove_duplicate_cards(cards)
        assert remove_duplicate_cards(once) == once
        assert once == [cards[0], cards[1], cards[3]]

    def test_same_front_different_back_kept(self):
        cards = [CardCandidate('bank', 'bench'), CardCandidate('bank', 'couch')]
        assert remove_duplicate_cards(cards) == cards
