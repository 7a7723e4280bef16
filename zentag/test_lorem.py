"""
Tests of the lorem ipsum generator.
"""

import random, re

from zentag.lorem import LoremGenerator, WORDS


class FixedRandom:
    """Always draws the lowest value, or the value of `start` for the offset of a sentence."""

    def __init__(self, start = 0):
        self.start = start

    def randrange(self, stop):  return self.start
    def randint(self, a, b):    return a


def sentences(text):
    return re.split(r'(?<=[.!?]) ', text)


#####################################################################################################################################################
#####
#####  TESTS
#####

def test_001_fixed():
    lorem = LoremGenerator(FixedRandom())
    assert lorem.generate(7) == 'Lorem ipsum dolor sit amet! Lorem ipsum!'       # trailing comma of "amet," removed
    assert lorem.generate(3) == 'Lorem ipsum dolor!'
    assert lorem.generate(1) == 'Lorem!'

def test_002_empty():
    lorem = LoremGenerator(random.Random(0))
    assert lorem.generate(0) == ''
    assert lorem.generate(-5) == ''

def test_003_wrap_around():
    lorem = LoremGenerator(FixedRandom(start = len(WORDS) - 2))
    assert lorem.generate(4) == 'Quaerat voluptatem lorem ipsum!'

def test_004_custom_words():
    lorem = LoremGenerator(FixedRandom(), words = ['alpha,', 'beta', 'gamma,'])
    assert lorem.generate(3) == 'Alpha, beta gamma!'
    assert lorem.generate(6) == 'Alpha, beta gamma, alpha, beta! Alpha!'

def test_005_counts():
    rnd = random.Random(12345)
    lorem = LoremGenerator(rnd)
    for count in [1, 4, 5, 6, 29, 30, 31, 100, 250]:
        text = lorem.generate(count)
        assert len(text.split()) == count

        parts = sentences(text)
        for part in parts[:-1]:
            assert 5 <= len(part.split()) <= 30
        assert 1 <= len(parts[-1].split()) <= 30
        for part in parts:
            assert part[0].isupper()
            assert part[-1] in '.!?'
            assert not part[:-1].endswith(',')

def test_006_terminators():
    lorem = LoremGenerator(random.Random(7))
    ends = {lorem.generate(3)[-1] for _ in range(200)}
    assert ends == {'.', '!', '?'}

def test_007_default_random():
    assert len(LoremGenerator().generate(12).split()) == 12
