"""Read-only container for generated heights."""

from dataclasses import dataclass, field
from typing import Iterator, List, Union

import numpy as np


@dataclass(frozen=True, eq=False)
class HeightGrid:
    """
    Dense row-major grid of heights covering a rectangular window.

    Cell (x, y) in world coordinates lives at flat index
    ``(y - offset_y) * width + (x - offset_x)``. Grids compare equal when
    their windows and values match; like numpy arrays they are unhashable.
    """

    width: int
    height: int
    offset_x: int = 0
    offset_y: int = 0
    values: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        values = self.values
        if values is None:
            values = np.zeros(max(self.width, 0) * max(self.height, 0), dtype=np.float64)
        values = np.array(values, dtype=np.float64).ravel()
        expected = max(self.width, 0) * max(self.height, 0)
        if values.size != expected:
            raise ValueError(
                f"Expected {expected} values for a {self.width}x{self.height} grid, got {values.size}"
            )
        values.flags.writeable = False
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return int(self.values.size)

    __hash__ = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, HeightGrid):
            return NotImplemented
        return (
            (self.width, self.height, self.offset_x, self.offset_y)
            == (other.width, other.height, other.offset_x, other.offset_y)
            and np.array_equal(self.values, other.values)
        )

    def __getitem__(self, index: Union[int, slice]) -> Union[float, np.ndarray]:
        """Flat row-major access; slices return a read-only array."""
        if isinstance(index, slice):
            return self.values[index]
        return float(self.values[index])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self.values)

    def index_of(self, x: int, y: int) -> int:
        """Flat index of world cell (x, y)."""
        col = x - self.offset_x
        row = y - self.offset_y
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"Cell ({x}, {y}) is outside the grid window")
        return row * self.width + col

    def at(self, x: int, y: int) -> float:
        """Height of world cell (x, y)."""
        return float(self.values[self.index_of(x, y)])

    def as_array(self) -> np.ndarray:
        """Read-only (height, width) view of the values."""
        return self.values.reshape((max(self.height, 0), max(self.width, 0)))

    def to_list(self) -> List[float]:
        return self.values.tolist()
