"""Small helpers: time conversion, random choices and token reading."""

import random
from typing import IO, Sequence, Union

_rng = random.Random()


def to_seconds(milliseconds: int) -> float:
    """Convert milliseconds to seconds."""
    return milliseconds / 1000.0


def weighted_random(probabilities: Sequence[float]) -> int:
    """Return an index chosen with the given relative weights."""
    weights = list(probabilities)
    if not weights:
        raise ValueError("no probabilities given")
    if any(w < 0 for w in weights):
        raise ValueError("probabilities must be non-negative")
    if sum(weights) <= 0:
        raise ValueError("probabilities must not all be zero")
    return _rng.choices(range(len(weights)), weights=weights)[0]


def uniform_random(low: int, high: int) -> int:
    """Return an integer drawn uniformly from the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return _rng.randint(low, high)


class TokenReader:
    """Reads whitespace-separated numbers from text or a text stream."""

    def __init__(self, source: Union[str, IO[str]]):
        text = source if isinstance(source, str) else source.read()
        self._tokens = iter(text.split())

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more tokens") from None

    def next_int(self) -> int:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def next_float(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None