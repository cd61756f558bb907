from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from hypercube_engine.errors import InvalidDimension

MIN_DIMS = 3


def check_dims(dims: int) -> None:
    if isinstance(dims, bool) or not isinstance(dims, int) or dims < MIN_DIMS:
        raise InvalidDimension(f"dims must be an int >= {MIN_DIMS}, got {dims!r}")


def index_to_coords(i: int, dims: int) -> tuple[int, ...]:
    """Decode a linear index into its base-3 digits, least significant axis first."""
    if not (0 <= i < 3**dims):
        raise ValueError(f"index must be in [0..{3**dims - 1}]")
    return tuple((i // 3**d) % 3 for d in range(dims))


def coords_to_index(coords: Sequence[int]) -> int:
    i = 0
    for d, c in enumerate(coords):
        if c not in (0, 1, 2):
            raise ValueError(f"coordinate components must be in {{0, 1, 2}}, got {c!r}")
        i += c * 3**d
    return i


@dataclass(frozen=True, slots=True)
class Coords:
    dims: int
    size: int
    index_to_coord: list[tuple[int, ...]]
    coord_to_index: dict[tuple[int, ...], int]


def build_coords(dims: int) -> Coords:
    check_dims(dims)
    size = 3**dims
    index_to_coord = [index_to_coords(i, dims) for i in range(size)]
    coord_to_index = {c: i for i, c in enumerate(index_to_coord)}
    if len(coord_to_index) != size:
        raise AssertionError("coordinate indexing mismatch")
    return Coords(dims=dims, size=size, index_to_coord=index_to_coord, coord_to_index=coord_to_index)
