"""Starter vocabulary for the mini-games."""

from typing import List, Dict, Optional
import random

# Starter words with picture emoji
WORDS = [
    {'id': 1, 'word': 'dog', 'emoji': '🐶', 'category': 'animals'},
    {'id': 2, 'word': 'cat', 'emoji': '🐱', 'category': 'animals'},
    {'id': 3, 'word': 'lion', 'emoji': '🦁', 'category': 'animals'},
    {'id': 4, 'word': 'elephant', 'emoji': '🐘', 'category': 'animals'},
    {'id': 5, 'word': 'monkey', 'emoji': '🐵', 'category': 'animals'},
    {'id': 6, 'word': 'frog', 'emoji': '🐸', 'category': 'animals'},
    {'id': 7, 'word': 'panda', 'emoji': '🐼', 'category': 'animals'},
    {'id': 8, 'word': 'pig', 'emoji': '🐷', 'category': 'animals'},
    {'id': 9, 'word': 'fox', 'emoji': '🦊', 'category': 'animals'},
    {'id': 10, 'word': 'unicorn', 'emoji': '🦄', 'category': 'animals'},
    {'id': 11, 'word': 'chick', 'emoji': '🐤', 'category': 'animals'},
    {'id': 12, 'word': 'octopus', 'emoji': '🐙', 'category': 'animals'},
    {'id': 13, 'word': 'apple', 'emoji': '🍎', 'category': 'food'},
    {'id': 14, 'word': 'banana', 'emoji': '🍌', 'category': 'food'},
    {'id': 15, 'word': 'grapes', 'emoji': '🍇', 'category': 'food'},
    {'id': 16, 'word': 'carrot', 'emoji': '🥕', 'category': 'food'},
    {'id': 17, 'word': 'sun', 'emoji': '☀️', 'category': 'nature'},
    {'id': 18, 'word': 'tree', 'emoji': '🌳', 'category': 'nature'},
    {'id': 19, 'word': 'flower', 'emoji': '🌸', 'category': 'nature'},
    {'id': 20, 'word': 'rainbow', 'emoji': '🌈', 'category': 'nature'},
]


def get_word_by_id(word_id: int) -> Optional[Dict]:
    """Get a word by its ID."""
    for word in WORDS:
        if word['id'] == word_id:
            return word
    return None


def get_words_by_category(category: str) -> List[Dict]:
    """Get all words in a category."""
    return [w for w in WORDS if w['category'].lower() == category.lower()]


def get_random_word(category: Optional[str] = None, rng: Optional[random.Random] = None) -> Dict:
    """Get a random word, optionally filtered by category."""
    rng = rng or random
    if category:
        words = get_words_by_category(category)
        if not words:
            # Fallback to all words if category not found
            words = WORDS
    else:
        words = WORDS

    return rng.choice(words)


def get_emoji_pool() -> List[str]:
    """All picture emoji, used for distractors."""
    return [w['emoji'] for w in WORDS]
