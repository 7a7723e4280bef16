"""
Generator of lorem ipsum text for `lorem` and `loremN` tags.
"""

import random as _random


WORDS = """
    lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod tempor incididunt ut labore et dolore
    magna aliqua. ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo
    consequat. duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur.
    excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum.
    sed ut perspiciatis, unde omnis iste natus error sit voluptatem accusantium doloremque laudantium, totam rem
    aperiam eaque ipsa, quae ab illo inventore veritatis et quasi architecto beatae vitae dicta sunt, explicabo.
    nemo enim ipsam voluptatem, quia voluptas sit, aspernatur aut odit aut fugit, sed quia consequuntur magni
    dolores eos, qui ratione voluptatem sequi nesciunt, neque porro quisquam est, qui dolorem ipsum, quia dolor sit,
    amet, consectetur, adipisci velit, sed quia non numquam eius modi tempora incidunt, ut labore et dolore magnam
    aliquam quaerat voluptatem.
""".replace('.', '').split()

TERMINATORS = {0: '!', 1: '?', 2: '.', 3: '.'}


class LoremGenerator:
    """
    Lorem ipsum sentences of 5 to 30 words, drawn from WORDS starting at a random offset.
    """

    MIN_WORDS = 5           # min. and max. length of a sentence
    MAX_WORDS = 30

    def __init__(self, random = None, words = WORDS):
        """
        :param random: source of randomness, an object with randrange() and randint() methods like random.Random;
                       the `random` module itself is used if None
        :param words: corpus of words, some of them possibly with a trailing comma
        """
        self.random = random if random is not None else _random
        self.words  = list(words)

    def generate(self, count):
        """Text of exactly `count` words, or an empty string if count <= 0."""
        sentences = []
        while count > 0:
            length = self._length(count)
            sentences.append(self.sentence(length))
            count -= length
        return ' '.join(sentences)

    def sentence(self, length):
        """A single sentence of `length` words: capitalized, with a random terminator and no comma before it."""
        start = self.random.randrange(len(self.words))
        words = [self.words[(start + i) % len(self.words)] for i in range(length)]

        words[0]  = words[0].capitalize()
        words[-1] = words[-1].rstrip(',')
        return ' '.join(words) + TERMINATORS[self.random.randint(0, 3)]

    def _length(self, count):
        if count < self.MIN_WORDS: return count
        return self.random.randint(self.MIN_WORDS, min(count, self.MAX_WORDS))
