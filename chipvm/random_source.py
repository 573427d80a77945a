import random
import itertools

from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    """
    Anything which can supply the random bytes used by the random number opcode.
    """
    def next_byte(self) -> int:
        ...


class SystemRandomSource:
    """
    Uniform random bytes from the random module, seeded from the operating system unless a seed is given.
    """
    def __init__(self, seed: Optional[int] = None):
        self.generator = random.Random(seed)

    def next_byte(self) -> int:
        return self.generator.randint(0, 255)


class SequenceRandomSource:
    """
    Replays the given bytes in order, starting over once they run out.
    """
    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("At least one value is required.")
        self.values = itertools.cycle(value & 0xFF for value in values)

    def next_byte(self) -> int:
        return next(self.values)
