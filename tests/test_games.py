"""Tests for the hosted mini-games."""

import random

import pytest

from data.word_bank import get_emoji_pool, get_random_word, get_word_by_id, get_words_by_category
from games.base import choice_count, resolve_rounds
from games.letter_hunt import LetterHuntGame
from games.registry import create_game
from games.sound_match import SoundMatchGame
from game.session_store import MiniGameStore
from game.telemetry import Telemetry


@pytest.mark.parametrize("options, expected", [
    ({}, 3),
    ({'difficulty': 'medium'}, 3),
    ({'difficulty': 'hard'}, 4),
    ({'difficulty': 'hard', 'age_group': '3-5'}, 3),
    ({'difficulty': 'impossible'}, 3),
])
def test_choice_count(options, expected):
    assert choice_count(options) == expected


def test_resolve_rounds():
    assert resolve_rounds({}) == 5
    assert resolve_rounds({'rounds': 10}) == 10
    assert resolve_rounds({'rounds': 500}) == 20
    assert resolve_rounds({'rounds': 'many'}) == 5


def test_sound_match_round_contains_target_once():
    game = SoundMatchGame({'difficulty': 'hard', 'age_group': '9-12'}, rng=random.Random(3))
    game_round = game.next_round()

    assert len(game_round.choices) == 4
    assert game_round.choices.count(game_round.answer) == 1
    assert game_round.answer == game_round.word['emoji']
    assert len(set(game_round.choices)) == 4


def test_sound_match_uses_given_word():
    word = {'id': 99, 'word': 'zebra', 'emoji': '🦓'}
    game = SoundMatchGame({'word': word}, rng=random.Random(1))
    game_round = game.next_round()

    assert game_round.answer == '🦓'
    assert 'zebra' in game_round.prompt


def test_letter_hunt_answer_is_first_letter():
    game = LetterHuntGame({'word': {'word': 'banana', 'emoji': '🍌'}}, rng=random.Random(5))
    game_round = game.next_round()

    assert game_round.answer == 'B'
    assert 'B' in game_round.choices
    assert len(game_round.choices) == 3


def test_answer_reports_through_store():
    store = MiniGameStore(telemetry=Telemetry(enabled=False))
    game = LetterHuntGame({'rounds': 2, 'word': {'word': 'cat'}}, rng=random.Random(2))
    store.start_game(game.kind, game.options)

    game_round = game.next_round()
    wrong = next(c for c in game_round.choices if c != game_round.answer)

    assert game.answer(game_round, wrong, store) is False
    assert game.is_finished(store) is False
    assert game.answer(game_round, game_round.answer, store) is True
    assert game.is_finished(store) is True
    assert store.score == 1
    assert store.attempts == 2


def test_registry():
    assert isinstance(create_game('sound-match'), SoundMatchGame)
    assert isinstance(create_game('letter-hunt', {'rounds': 3}), LetterHuntGame)
    assert create_game('emoji-builder') is None


def test_word_bank_lookups():
    assert get_word_by_id(1)['word'] == 'dog'
    assert get_word_by_id(999) is None
    assert all(w['category'] == 'food' for w in get_words_by_category('FOOD'))
    assert get_random_word('no-such-category', rng=random.Random(0)) is not None
    assert len(set(get_emoji_pool())) == len(get_emoji_pool())
