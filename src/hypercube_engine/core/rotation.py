from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from hypercube_engine.core.coords import check_dims
from hypercube_engine.errors import MalformedRotation


class Side(enum.IntEnum):
    """Slice selected along the rotation axis, equal to its coordinate value."""

    FRONT = 0
    BACK = 2


@dataclass(frozen=True, slots=True)
class Rotation:
    """One quarter-turn of the `side` slice along `axis`, turning `from_axis` toward `to_axis`."""

    axis: int
    from_axis: int
    to_axis: int
    side: Side

    @classmethod
    def create(cls, axis: int, from_axis: int, to_axis: int, side: int, dims: int) -> Rotation:
        """Validate raw integers coming from outside the engine."""
        check_dims(dims)
        parts = (axis, from_axis, to_axis, side)
        if any(isinstance(p, bool) or not isinstance(p, int) for p in parts):
            raise MalformedRotation(f"rotation components must be ints, got {parts!r}")
        if side not in (Side.FRONT, Side.BACK):
            raise MalformedRotation(f"side must be 0 (front) or 2 (back), got {side}")
        for a in (axis, from_axis, to_axis):
            if not (0 <= a < dims):
                raise MalformedRotation(f"axis index {a} out of range [0..{dims - 1}]")
        if len({axis, from_axis, to_axis}) != 3:
            raise MalformedRotation(f"axis, from and to must be pairwise distinct, got {axis}, {from_axis}, {to_axis}")
        return cls(axis=axis, from_axis=from_axis, to_axis=to_axis, side=Side(side))

    @classmethod
    def random(cls, dims: int, rng: random.Random) -> Rotation:
        check_dims(dims)
        side = (Side.FRONT, Side.BACK)[rng.randrange(2)]
        axis = rng.randrange(dims)
        others = [d for d in range(dims) if d != axis]
        from_axis = others[rng.randrange(len(others))]
        others.remove(from_axis)
        to_axis = others[rng.randrange(len(others))]
        return cls(axis=axis, from_axis=from_axis, to_axis=to_axis, side=side)

    def check(self, dims: int) -> None:
        if self.side not in (Side.FRONT, Side.BACK):
            raise AssertionError(f"rotation side must be FRONT or BACK: {self}")
        if not (self.axis != self.from_axis and self.from_axis != self.to_axis and self.to_axis != self.axis):
            raise AssertionError(f"rotation axes not pairwise distinct: {self}")
        if not (0 <= self.axis < dims and 0 <= self.from_axis < dims and 0 <= self.to_axis < dims):
            raise AssertionError(f"rotation axes out of range for dims={dims}: {self}")

    def inverse(self) -> Rotation:
        # Same slice, opposite direction.
        return Rotation(axis=self.axis, from_axis=self.to_axis, to_axis=self.from_axis, side=self.side)

    def digits(self) -> str:
        return f"{self.axis}{self.from_axis}{self.to_axis}{int(self.side)}"


def parse_rotation(text: str, dims: int) -> Rotation:
    """Parse four-digit notation `<axis><from><to><side>`, e.g. ``1202``."""
    token = text.strip()
    if len(token) != 4 or not token.isdigit():
        raise MalformedRotation(f"expected four digits like 1202, got {text!r}")
    axis, from_axis, to_axis, side = (int(ch) for ch in token)
    return Rotation.create(axis, from_axis, to_axis, side, dims)


def parse_rotations(text: str, dims: int) -> list[Rotation]:
    """Parse a comma separated sequence of four-digit rotations."""
    parts = text.split(",")
    if not text.strip():
        raise MalformedRotation("empty rotation sequence")
    return [parse_rotation(p, dims) for p in parts]
