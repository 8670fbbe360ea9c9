from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from coord.VectorInt import VectorInt


@dataclass(frozen=True)
class CoordUtil:
    @staticmethod
    def sign(n: int) -> int:
        """Sign of an integer as -1, 0 or 1."""
        return (n > 0) - (n < 0)

    @staticmethod
    def trunc_div(a: int, b: int) -> int:
        """Integer division rounding toward zero."""
        if b == 0:
            raise ZeroDivisionError(f"integer division of {a} by zero")

        q = abs(a) // abs(b)

        # Floor and truncation agree on magnitudes, so only the sign is left
        return q if (a < 0) == (b < 0) else -q

    @staticmethod
    def trunc_rem(a: int, b: int) -> int:
        """Remainder of trunc_div, sign follows the dividend."""
        return a - b * CoordUtil.trunc_div(a, b)

    @staticmethod
    def bounds(vectors: Iterable[VectorInt]) -> Tuple[VectorInt, VectorInt]:
        """(min corner, max corner) of a collection of vectors"""
        it = iter(vectors)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("bounds of an empty collection") from None

        lo = hi = first
        for v in it:
            lo = lo.min(v)
            hi = hi.max(v)

        return lo, hi
