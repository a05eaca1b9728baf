"""Process-wide random source for obstacle scheduling.

Spawner timing and obstacle selection draw from one seedable generator so a
run can be replayed by re-seeding. It never shares state with the global
``random`` module.
"""

import random
from typing import Any, Sequence

from dinorun.logger import get_logger

log = get_logger("rng")


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | str | None = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def initialize(cls, seed: int | str | None = None) -> "RNGService":
        cls._instance = cls(seed)
        return cls._instance

    @property
    def seed_value(self) -> int | str | None:
        return self._seed_val

    def seed(self, a: int | str | None = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._generator.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from the non-empty sequence seq."""
        return self._generator.choice(seq)
