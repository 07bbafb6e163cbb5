"""
Shared test doubles
"""


class FixedRandom:
    """Random source that replays fixed values."""

    def __init__(self, base: int = 70, roll: float = 0.5):
        self.base = base
        self.roll = roll
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        assert a <= self.base <= b
        return self.base

    def random(self):
        self.calls += 1
        return self.roll


class ExplodingRandom:
    """Random source that fails mid-grading."""

    def randint(self, a, b):
        raise RuntimeError("secret internal detail")

    def random(self):
        raise RuntimeError("secret internal detail")
