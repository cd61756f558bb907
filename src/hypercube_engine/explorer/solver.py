from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hypercube_engine.core.rotation import Rotation

if TYPE_CHECKING:
    from hypercube_engine.core.engine import Cube

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Acceptance policy, as percentages of a uniform draw in [0..99]."""

    worsen_accept_pct: int = 10
    neutral_reject_pct: int = 10

    def __post_init__(self) -> None:
        for name in ("worsen_accept_pct", "neutral_reject_pct"):
            v = getattr(self, name)
            if not (0 <= v <= 100):
                raise ValueError(f"{name} must be in [0..100]")


@dataclass(slots=True)
class SolveResult:
    solved: bool
    moves: list[Rotation]
    steps_run: int
    accepted: int
    rejected: int
    energies: list[float] = field(default_factory=list)

    @property
    def exceeded(self) -> bool:
        return not self.solved

    @property
    def move_count(self) -> int:
        return len(self.moves)


def accept_move(current: float, last: float, v: int, config: SolverConfig) -> bool:
    """Decide whether a proposed move is kept, given draw `v` in [0..99]."""
    if current > last:
        return v >= 100 - config.worsen_accept_pct
    return v >= config.neutral_reject_pct


def solve_cube(
    cube: Cube,
    rng: random.Random,
    *,
    max_steps: int | None = None,
    energy_fn: Callable[[Cube], float] | None = None,
    on_step: Callable[[int, float], None] | None = None,
    config: SolverConfig | None = None,
) -> SolveResult:
    """Randomized local search toward the solved state.

    Each step proposes a uniformly random rotation and keeps it or undoes it:
    - worsening moves are kept with probability 10%
    - non-worsening moves (including equal) are kept with probability 90%

    The walk is unbounded unless `max_steps` is given. When the bound is hit the
    cube is left in whatever state the walk reached and the result has
    `solved=False`.

    Tracking:
    - moves: accepted rotations not undone, in order
    - energies: E(t) after each step, E(0) first
    """

    if max_steps is not None and max_steps < 0:
        raise ValueError("max_steps must be >= 0")
    if energy_fn is None:
        energy_fn = type(cube).unsolvedness
    if config is None:
        config = SolverConfig()

    moves: list[Rotation] = []
    energies: list[float] = [energy_fn(cube)]
    accepted = 0
    rejected = 0
    step = 0

    while not cube.is_solved():
        if max_steps is not None and step >= max_steps:
            logger.info("solver exceeded %d steps with %d moves retained", max_steps, len(moves))
            return SolveResult(
                solved=False,
                moves=moves,
                steps_run=step,
                accepted=accepted,
                rejected=rejected,
                energies=energies,
            )

        step += 1
        last = energy_fn(cube)

        # propose
        r = Rotation.random(cube.dims, rng)
        cube.rotate(r)
        moves.append(r)

        v = rng.randrange(100)
        current = energy_fn(cube)

        if accept_move(current, last, v, config):
            accepted += 1
        else:
            # revert
            cube.undo_rotation(r)
            moves.pop()
            rejected += 1
            current = last

        energies.append(current)
        logger.debug("step %d: unsolvedness %s", step, current)
        if on_step is not None:
            on_step(step, current)

    logger.info("solved in %d rotations (%d steps)", len(moves), step)
    return SolveResult(
        solved=True,
        moves=moves,
        steps_run=step,
        accepted=accepted,
        rejected=rejected,
        energies=energies,
    )
