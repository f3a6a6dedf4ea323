"""Deterministic pseudo-random sequence generator.

Implements mulberry32 with explicit 32-bit unsigned wraparound so the stream
is bit-exact regardless of host integer width. The generator is a plain
value owned by one layout call; there is no module-level instance.
"""

MASK_32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a * b."""
    return (a * b) & MASK_32


class SeededRandom:
    """Seedable stream of floats in [0, 1).

    Two generators constructed with the same seed produce identical,
    unbounded sequences.

    Example:
        rng = SeededRandom(7)
        rotation = rng.centered(10.0)
    """

    def __init__(self, seed: int) -> None:
        """Initialize the generator.

        Args:
            seed: Integer seed, masked to 32 bits
        """
        self._state = seed & MASK_32

    @property
    def state(self) -> int:
        """Current 32-bit internal state."""
        return self._state

    def next(self) -> float:
        """Advance the state and return a value in [0, 1)."""
        self._state = (self._state + _INCREMENT) & MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / _TWO_POW_32

    def uniform(self, low: float, high: float) -> float:
        """Value in [low, high)."""
        return low + (high - low) * self.next()

    def centered(self, span: float) -> float:
        """Value in [-span/2, span/2)."""
        return (self.next() - 0.5) * span
