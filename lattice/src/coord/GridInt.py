import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Union

import numpy as np

from coord.PointInt import PointInt
from coord.VectorInt import VectorInt

logger = logging.getLogger(__name__)

Position = Union[VectorInt, PointInt]


def _as_vector(position: Position) -> VectorInt:
    return position.vector if isinstance(position, PointInt) else position


@dataclass
class GridInt:
    """Dense grid with one value per lattice cell.

    Cells are stored flat, the cell of position p being cells[p.as_index(shape)],
    so the first axis varies fastest (for 2D grids that is row-major, x inside y).
    """
    shape: VectorInt
    cells: np.ndarray

    def __post_init__(self) -> None:
        if self.cells.ndim != 1 or self.cells.size != self.shape.measure():
            raise ValueError(f"expected {self.shape.measure()} flat cells for shape {self.shape}, got array of shape {self.cells.shape}")

    @staticmethod
    def create(shape: Position, fill: Any = 0, dtype: Any = np.int64) -> "GridInt":
        shape = _as_vector(shape)
        if shape.dimension == 0 or any(s < 1 for s in shape):
            raise ValueError(f"grid extents must all be >= 1, got {shape}")

        cells = np.full(shape.measure(), fill, dtype=dtype)
        logger.debug("Allocated grid shape=%s cells=%d dtype=%s", shape, cells.size, cells.dtype)

        return GridInt(shape=shape, cells=cells)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Any]], dtype: Optional[Any] = None) -> "GridInt":
        """2D grid from rows[y][x]"""
        if not rows or not rows[0]:
            raise ValueError("rows must contain at least one cell")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")

        # C-order (height, width) flattens with x fastest, same as as_index
        cells = np.array(rows, dtype=dtype).reshape(-1)

        return GridInt(shape=VectorInt((width, len(rows))), cells=cells)

    @property
    def size(self) -> int:
        return int(self.cells.size)

    def contains(self, position: Position) -> bool:
        v = _as_vector(position)
        if v.dimension != self.shape.dimension:
            return False
        return all(0 <= c < s for c, s in zip(v, self.shape))

    def index_of(self, position: Position) -> int:
        if not self.contains(position):
            raise IndexError(f"{position} is outside grid of shape {self.shape}")
        return _as_vector(position).as_index(self.shape.coordinates)

    def position_of(self, index: int) -> VectorInt:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for grid of {self.size} cells")
        coords = np.unravel_index(index, self.shape.coordinates, order="F")
        return VectorInt(int(c) for c in coords)

    def __getitem__(self, position: Position) -> Any:
        return self.cells[self.index_of(position)]

    def __setitem__(self, position: Position, value: Any) -> None:
        self.cells[self.index_of(position)] = value

    def neighbors_of(self, position: Position) -> List[Position]:
        """Neighbours of position that lie inside the grid, in get_neighbors order."""
        return [n for n in position.get_neighbors() if self.contains(n)]

    def positions(self) -> Iterator[VectorInt]:
        for index in range(self.size):
            yield self.position_of(index)

    def find(self, value: Any) -> List[VectorInt]:
        """Positions of every cell equal to value, in flat index order."""
        return [self.position_of(int(i)) for i in np.flatnonzero(self.cells == value)]

    def to_array(self) -> np.ndarray:
        """Copy indexed as array[c0, c1, ...]"""
        return self.cells.reshape(self.shape.coordinates, order="F").copy()
