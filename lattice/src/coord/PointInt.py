from dataclasses import dataclass, field
from typing import Callable, ClassVar, List, Tuple, Union
from coord.CoordUtil import CoordUtil
from coord.VectorInt import VectorInt


@dataclass(frozen=True)
class PointInt:
    """2D integer point. Arithmetic is done by the owned VectorInt and the
    results are wrapped back into points.
    """
    x: int
    y: int
    _vector: VectorInt = field(init=False, repr=False, compare=False)

    ORIGIN: ClassVar["PointInt"]
    CROSS: ClassVar[Tuple["PointInt", ...]]
    NESW: ClassVar[Tuple["PointInt", ...]]
    ALL_ADJACENT: ClassVar[Tuple["PointInt", ...]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "_vector", VectorInt((self.x, self.y)))

    @property
    def vector(self) -> VectorInt:
        return self._vector

    @staticmethod
    def from_vector(v: VectorInt) -> "PointInt":
        if v.dimension != 2:
            raise ValueError(f"expected a 2 dimensional vector, got {v}")
        return PointInt(v.coordinates[0], v.coordinates[1])

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __iter__(self):
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return str(self._vector)

    def get(self, n: int) -> int:
        return self._vector.get(n)

    def __getitem__(self, n: int) -> int:
        return self._vector.get(n)

    def as_index(self, dimension_sizes) -> int:
        return self._vector.as_index(dimension_sizes)

    def unary_minus(self) -> "PointInt":
        return PointInt.from_vector(-self._vector)

    def plus(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.plus(other.vector))

    def minus(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.minus(other.vector))

    def times(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.times(other.vector))

    def div(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.div(other.vector))

    def rem(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.rem(other.vector))

    def mod(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.mod(other.vector))

    def max(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.max(other.vector))

    def min(self, other: "PointInt") -> "PointInt":
        return PointInt.from_vector(self._vector.min(other.vector))

    __neg__ = unary_minus
    __add__ = plus
    __sub__ = minus
    __mul__ = times
    __truediv__ = div
    __mod__ = mod

    def area(self) -> int:
        """width * height, for a point used as a size"""
        return self._vector.measure()

    def manhattan_distance(self, other: "PointInt") -> int:
        return self._vector.manhattan_distance(other.vector)

    def chebyshev_distance(self, other: "PointInt") -> int:
        return self._vector.chebyshev_distance(other.vector)

    def line_to(self, other: "PointInt") -> List["PointInt"]:
        return [PointInt.from_vector(v) for v in self._vector.line_to(other.vector)]

    def get_neighbors(self) -> List["PointInt"]:
        # W, E, N, NW, NE, S, SW, SE (not the ALL_ADJACENT order)
        return [PointInt.from_vector(v) for v in self._vector.get_neighbors()]

    @staticmethod
    def from_index(n: int, width: int) -> "PointInt":
        """Inverse of row-major flattening for a grid `width` cells wide."""
        return PointInt(CoordUtil.trunc_rem(n, width), CoordUtil.trunc_div(n, width))

    @staticmethod
    def for_rectangle(first: Union["PointInt", range],
                      second: Union["PointInt", range],
                      action: Callable[["PointInt"], None]) -> None:
        """Call action for every point of a rectangle, rows top to bottom.

        Either two corner points (both inclusive) or an x range and a y range.
        """
        if isinstance(first, PointInt) and isinstance(second, PointInt):
            x_range = range(first.x, second.x + 1)
            y_range = range(first.y, second.y + 1)
        elif isinstance(first, range) and isinstance(second, range):
            x_range, y_range = first, second
        else:
            raise TypeError(f"expected two points or two ranges, got {type(first).__name__} and {type(second).__name__}")

        for y in y_range:
            for x in x_range:
                action(PointInt(x, y))

    @staticmethod
    def for_rectangle_bounds(min_max_range: Tuple[range, range], action: Callable[["PointInt"], None]) -> None:
        x_range, y_range = min_max_range
        PointInt.for_rectangle(x_range, y_range, action)

    @staticmethod
    def rectangle_from(top_left: "PointInt", bottom_right: "PointInt") -> List["PointInt"]:
        out: List[PointInt] = []
        PointInt.for_rectangle(top_left, bottom_right, out.append)
        return out


PointInt.ORIGIN = PointInt(0, 0)

PointInt.CROSS = (
    PointInt(0, -1),
    PointInt(-1, 0),
    PointInt(0, 0),
    PointInt(1, 0),
    PointInt(0, 1),
)

# Above, right, below and left of origin
PointInt.NESW = (
    PointInt(0, -1),
    PointInt(1, 0),
    PointInt(0, 1),
    PointInt(-1, 0),
)

# Every position adjacent to origin, diagonals included
PointInt.ALL_ADJACENT = (
    PointInt(-1, -1),
    PointInt(0, -1),
    PointInt(1, -1),
    PointInt(1, 0),
    PointInt(-1, 0),
    PointInt(-1, 1),
    PointInt(0, 1),
    PointInt(1, 1),
)
