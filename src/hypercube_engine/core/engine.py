from __future__ import annotations

import copy
import hashlib
import logging
import random
import struct
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .coords import Coords, build_coords
from .point import Point, PointView
from .rotation import Rotation

if TYPE_CHECKING:
    from hypercube_engine.explorer.solver import SolveResult, SolverConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Cube:
    dims: int
    coords: Coords
    points: list[Point]
    rng: random.Random = field(compare=False)
    last_rotation: Rotation | None

    def __init__(self, dims: int, *, seed: int | None = None):
        self.dims = dims
        self.coords = build_coords(dims)
        self.points = [Point.create(c) for c in self.coords.index_to_coord]
        self.rng = random.Random(seed)
        self.last_rotation = None

    def rotate(self, r: Rotation) -> None:
        r.check(self.dims)
        for p in self.points:
            p.rotate(r)
        self.last_rotation = r

    def rotate_n(self, r: Rotation, n: int) -> None:
        if n < 0:
            raise ValueError("n must be >= 0")
        for _ in range(n):
            self.rotate(r)

    def undo_rotation(self, r: Rotation) -> None:
        # A quarter-turn has order 4 on every slice.
        self.rotate_n(r, 3)

    def is_solved(self) -> bool:
        return all(p.is_solved() for p in self.points)

    def unsolvedness(self) -> int:
        # Centers are not exempt here, unlike is_solved().
        return sum(p.incorrectness() for p in self.points)

    def shuffle(self, times: int, rng: random.Random | None = None) -> list[Rotation]:
        if times < 0:
            raise ValueError("times must be >= 0")
        rng = self.rng if rng is None else rng
        applied: list[Rotation] = []
        for _ in range(times):
            r = Rotation.random(self.dims, rng)
            self.rotate(r)
            applied.append(r)
        logger.debug("shuffled dims=%d with %d rotations", self.dims, times)
        return applied

    def solve(
        self,
        rng: random.Random | None = None,
        *,
        max_steps: int | None = None,
        energy_fn: Callable[[Cube], float] | None = None,
        on_step: Callable[[int, float], None] | None = None,
        config: SolverConfig | None = None,
    ) -> SolveResult:
        """Run the randomized local search until solved or `max_steps` is exhausted."""
        from hypercube_engine.explorer.solver import solve_cube

        return solve_cube(
            self,
            self.rng if rng is None else rng,
            max_steps=max_steps,
            energy_fn=energy_fn,
            on_step=on_step,
            config=config,
        )

    def snapshot(self) -> tuple[PointView, ...]:
        return tuple(p.view() for p in self.points)

    def state(self) -> dict:
        return {
            "dims": self.dims,
            "points": [
                {
                    "coords": list(v.coords),
                    "orientation": list(v.orientation),
                    "original_coords": list(v.original_coords),
                }
                for v in self.snapshot()
            ],
            "last_rotation": self.last_rotation.digits() if self.last_rotation is not None else None,
        }

    def copy(self) -> Cube:
        return copy.deepcopy(self)

    def _canonical_bytes(self) -> bytes:
        # little-endian uint32 array: [dims] + (coords + orientation) per point
        values = [self.dims]
        for p in self.points:
            values.extend(p.coords)
            values.extend(p.orientation)
        return struct.pack("<" + "I" * len(values), *values)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before_points = [(list(p.coords), list(p.orientation)) for p in self.points]
        before_last = self.last_rotation
        before_hash = self.hash()

        try:
            self._audit_points()
            self._audit_bijection()
            self._audit_order_four()
        finally:
            # write back in place so held Point references stay live
            for p, (coords, orientation) in zip(self.points, before_points):
                p.coords[:] = coords
                p.orientation[:] = orientation
            self.last_rotation = before_last
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated cube state (hash mismatch)")

    def _audit_points(self) -> None:
        if len(self.points) != self.coords.size:
            raise AssertionError("point count mismatch")
        identity = list(range(self.dims))
        for i, p in enumerate(self.points):
            if p.original_coords != self.coords.index_to_coord[i]:
                raise AssertionError(f"point {i} has wrong original coordinates")
            if len(p.coords) != self.dims or any(c not in (0, 1, 2) for c in p.coords):
                raise AssertionError(f"point {i} has invalid coordinates {p.coords}")
            if sorted(p.orientation) != identity:
                raise AssertionError(f"point {i} orientation is not a permutation")

    def _audit_bijection(self) -> None:
        current = Counter(tuple(p.coords) for p in self.points)
        original = Counter(p.original_coords for p in self.points)
        if current != original:
            raise AssertionError("rotation did not permute the point set")

    def _audit_order_four(self) -> None:
        if self.last_rotation is None:
            return
        snap = self._canonical_bytes()
        self.rotate_n(self.last_rotation, 4)
        if self._canonical_bytes() != snap:
            raise AssertionError("four quarter-turns did not restore state")
