from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .coords import index_to_coords
from .rotation import Rotation

# (coords[from], coords[to]) -> new (coords[from], coords[to]) for a quarter-turn.
TURN_TABLE: dict[tuple[int, int], tuple[int, int]] = {
    (0, 0): (2, 0),
    (0, 1): (1, 0),
    (0, 2): (0, 0),
    (1, 0): (2, 1),
    (1, 1): (1, 1),
    (1, 2): (0, 1),
    (2, 0): (2, 2),
    (2, 1): (1, 2),
    (2, 2): (0, 2),
}

ORIENTATION_PENALTY = 10


@dataclass(frozen=True, slots=True)
class PointView:
    coords: tuple[int, ...]
    orientation: tuple[int, ...]
    original_coords: tuple[int, ...]


@dataclass(slots=True)
class Point:
    original_coords: tuple[int, ...]
    coords: list[int]
    orientation: list[int]

    @classmethod
    def create(cls, coords: Sequence[int]) -> Point:
        return cls(
            original_coords=tuple(coords),
            coords=list(coords),
            orientation=list(range(len(coords))),
        )

    @classmethod
    def from_index(cls, i: int, dims: int) -> Point:
        return cls.create(index_to_coords(i, dims))

    @property
    def dims(self) -> int:
        return len(self.coords)

    def rotate(self, r: Rotation) -> None:
        if self.coords[r.axis] != r.side:
            return

        f, t = r.from_axis, r.to_axis
        self.orientation[f], self.orientation[t] = self.orientation[t], self.orientation[f]
        self.coords[f], self.coords[t] = TURN_TABLE[(self.coords[f], self.coords[t])]

    def is_in_original_position(self) -> bool:
        return tuple(self.coords) == self.original_coords

    def is_in_original_orientation(self) -> bool:
        o = self.orientation
        return all(o[i] <= o[i + 1] for i in range(len(o) - 1))

    def is_center(self) -> bool:
        """True for the single-axis-offset center of a face; its orientation never matters."""
        return self.coords.count(1) == self.dims - 1

    def is_solved(self) -> bool:
        return self.is_in_original_position() and (self.is_in_original_orientation() or self.is_center())

    def dist_from_original(self) -> int:
        return sum(abs(a - b) for a, b in zip(self.coords, self.original_coords))

    def incorrectness(self) -> int:
        penalty = 0 if self.is_in_original_orientation() else ORIENTATION_PENALTY
        return self.dist_from_original() + penalty

    def view(self) -> PointView:
        return PointView(
            coords=tuple(self.coords),
            orientation=tuple(self.orientation),
            original_coords=self.original_coords,
        )
