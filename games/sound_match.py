"""Sound match: pick the picture that matches the word."""

from data.word_bank import get_emoji_pool
from games.base import MiniGame, Round, choice_count


class SoundMatchGame(MiniGame):
    kind = 'sound-match'
    instructions = "Tap the matching picture!"

    def next_round(self) -> Round:
        word = self.pick_word()
        target = word.get('emoji') or '🦁'

        # Target emoji plus random distractors
        pool = [e for e in get_emoji_pool() if e != target]
        self.rng.shuffle(pool)
        distractors = pool[:max(0, choice_count(self.options) - 1)]
        choices = [target] + distractors
        self.rng.shuffle(choices)

        return Round(
            prompt=f"🔊 **{word['word']}**",
            choices=choices,
            answer=target,
            word=word
        )
