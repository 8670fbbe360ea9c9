import math
import operator
from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Iterator, List, Sequence, Tuple
from coord.CoordUtil import CoordUtil


@dataclass(frozen=True, slots=True)
class VectorInt:
    """Immutable integer coordinate of any dimension.

    Binary element-wise operations pair coordinates by position and stop at
    the shorter operand, so mixing dimensions silently truncates the result:
    VectorInt((1, 2, 3)) + VectorInt((1, 1)) == VectorInt((2, 3)).
    """
    coordinates: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(self.coordinates))

    @property
    def dimension(self) -> int:
        return len(self.coordinates)

    def as_index(self, dimension_sizes: Sequence[int]) -> int:
        """Flatten into an index of an array with the given axis extents.
        The first axis varies fastest.
        """
        multipliers = accumulate(dimension_sizes, operator.mul, initial=1)
        return sum(c * m for c, m in zip(self.coordinates, multipliers))

    def get(self, n: int) -> int:
        if not 0 <= n < len(self.coordinates):
            raise IndexError(f"coordinate {n} out of range for dimension {len(self.coordinates)}")
        return self.coordinates[n]

    def __getitem__(self, n: int) -> int:
        return self.get(n)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self.coordinates) + ")"

    def _pairwise(self, other: "VectorInt", op: Callable[[int, int], int]) -> "VectorInt":
        return VectorInt(op(a, b) for a, b in zip(self.coordinates, other.coordinates))

    def unary_minus(self) -> "VectorInt":
        return VectorInt(-c for c in self.coordinates)

    def plus(self, other: "VectorInt") -> "VectorInt":
        return self._pairwise(other, operator.add)

    def minus(self, other: "VectorInt") -> "VectorInt":
        return self._pairwise(other, operator.sub)

    def times(self, other: "VectorInt") -> "VectorInt":
        return self._pairwise(other, operator.mul)

    def div(self, other: "VectorInt") -> "VectorInt":
        """Element-wise division truncating toward zero."""
        return self._pairwise(other, CoordUtil.trunc_div)

    def rem(self, other: "VectorInt") -> "VectorInt":
        """Element-wise remainder of div, sign follows self."""
        return self._pairwise(other, CoordUtil.trunc_rem)

    def mod(self, other: "VectorInt") -> "VectorInt":
        """Element-wise modulo, sign follows other."""
        return self._pairwise(other, operator.mod)

    def max(self, other: "VectorInt") -> "VectorInt":
        return self._pairwise(other, max)

    def min(self, other: "VectorInt") -> "VectorInt":
        return self._pairwise(other, min)

    __neg__ = unary_minus
    __add__ = plus
    __sub__ = minus
    __mul__ = times
    # Integer division, not true division
    __truediv__ = div
    __mod__ = mod

    def measure(self) -> int:
        """Product of the coordinates, reading this vector as an extent
        (width, height, ...) rather than a position.
        """
        if not self.coordinates:
            raise ValueError("measure of an empty vector")
        return math.prod(self.coordinates)

    def manhattan_distance(self, other: "VectorInt") -> int:
        return sum(abs(a - b) for a, b in zip(self.coordinates, other.coordinates))

    def chebyshev_distance(self, other: "VectorInt") -> int:
        deltas = [abs(a - b) for a, b in zip(self.coordinates, other.coordinates)]
        if not deltas:
            raise ValueError(f"no common axes between {self} and {other}")
        return max(deltas)

    def line_to(self, other: "VectorInt") -> List["VectorInt"]:
        """Points from self to other inclusive, one unit step on every moving
        axis per point. Exact for axis-aligned and 45 degree segments only;
        other slopes run the short axes out early.
        """
        delta = VectorInt(CoordUtil.sign(b - a) for a, b in zip(self.coordinates, other.coordinates))
        steps = self.chebyshev_distance(other)

        line = [self]
        for _ in range(steps):
            line.append(line[-1] + delta)

        return line

    def _with_axis(self, axis: int, value: int) -> "VectorInt":
        coords = list(self.coordinates)
        coords[axis] = value
        return VectorInt(coords)

    def get_neighbors(self) -> List["VectorInt"]:
        """All 3**dimension - 1 adjacent vectors, diagonals included.

        Axes are expanded in order: every vector found so far is followed by
        its copies moved -1 on the axis, then its copies moved +1. In 2D this
        gives W, E, N, NW, NE, S, SW, SE.
        """
        acc: List[VectorInt] = [self]

        for axis in range(len(self.coordinates)):
            left = [v._with_axis(axis, v.coordinates[axis] - 1) for v in acc]
            right = [v._with_axis(axis, v.coordinates[axis] + 1) for v in acc]
            acc = acc + left + right

        # First entry is self
        return acc[1:]

    @staticmethod
    def of(*coordinates: int) -> "VectorInt":
        return VectorInt(coordinates)
