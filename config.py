"""Configuration constants for the Word Jungle mini-games bot."""

import os
from dotenv import load_dotenv

load_dotenv()

# Mini-game kinds the bot can host
GAME_KINDS = {
    'sound-match': 'Sound Match',
    'letter-hunt': 'Letter Hunt',
}

# Rounds per game when the caller does not ask for a number
DEFAULT_ROUNDS = 5
MAX_ROUNDS = 20

# Choices shown per round
CHOICES_PER_ROUND = {
    'easy': 3,
    'medium': 3,
    'hard': 4,
}
YOUNGEST_AGE_GROUP = '3-5'  # always gets the easy grid
YOUNGEST_CHOICE_COUNT = 3

DIFFICULTIES = ['easy', 'medium', 'hard']
AGE_GROUPS = ['3-5', '6-8', '9-12']
DEFAULT_DIFFICULTY = 'easy'
DEFAULT_AGE_GROUP = '6-8'

# Reward feedback
REWARD_DURATION_SECONDS = 0.8
REWARD_SUCCESS_TITLE = "Great job!"
REWARD_SUCCESS_MESSAGE = "You got it right!"
REWARD_FAIL_MESSAGE = "Try again!"
MAX_REWARD_MULTIPLIER = 3

# Telemetry
TELEMETRY_ENABLED = os.getenv("TELEMETRY_ENABLED", "true").lower() != "false"
TELEMETRY_MAX_EVENTS = 100

# Discord
ROUND_VIEW_TIMEOUT = 120  # seconds before an unanswered round times out
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
