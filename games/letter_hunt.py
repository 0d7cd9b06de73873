"""Letter hunt: find the letter the word starts with."""

import string

from games.base import MiniGame, Round, choice_count


class LetterHuntGame(MiniGame):
    kind = 'letter-hunt'
    instructions = "Which letter does this word start with?"

    def next_round(self) -> Round:
        word = self.pick_word()
        target = word['word'][0].upper()

        pool = [c for c in string.ascii_uppercase if c != target]
        distractors = self.rng.sample(pool, max(0, choice_count(self.options) - 1))
        choices = [target] + distractors
        self.rng.shuffle(choices)

        picture = word.get('emoji', '')
        return Round(
            prompt=f"{picture} **{word['word']}**".strip(),
            choices=choices,
            answer=target,
            word=word
        )
