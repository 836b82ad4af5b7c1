import random

import pytest


class FirstPick:
    """Stand-in random source that always takes the head of the pool."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def first_pick():
    return FirstPick()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
