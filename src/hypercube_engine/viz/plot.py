from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt

from hypercube_engine.core.engine import Cube


def plot_points(
    cube: Cube,
    axes: tuple[int, int, int] = (0, 1, 2),
    *,
    ax=None,
    title: str | None = None,
):
    """3D scatter of current coordinates projected onto three axes.

    Points in their solved state are green, the rest red. With more than three
    dimensions several points share a projected position; they are drawn on
    top of each other.
    """
    if len(set(axes)) != 3 or any(not (0 <= a < cube.dims) for a in axes):
        raise ValueError(f"axes must be three distinct indices in [0..{cube.dims - 1}]")
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    a, b, c = axes
    xs = [p.coords[a] for p in cube.points]
    ys = [p.coords[b] for p in cube.points]
    zs = [p.coords[c] for p in cube.points]
    colors = ["tab:green" if p.is_solved() else "tab:red" for p in cube.points]

    ax.scatter(xs, ys, zs, c=colors, s=40)

    ax.set_xlabel(f"axis {a}")
    ax.set_ylabel(f"axis {b}")
    ax.set_zlabel(f"axis {c}")
    ax.set_title(title or f"Hypercube dims={cube.dims}  unsolvedness={cube.unsolvedness()}")
    ax.set_box_aspect((1, 1, 1))
    return ax


def plot_energy_trace(energies: Sequence[float], *, ax=None, label: str | None = None):
    """Line plot of a solver trace, E(t) per step."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(range(len(energies)), list(energies), linewidth=1.2, label=label)
    ax.set_xlabel("step")
    ax.set_ylabel("unsolvedness")
    if label is not None:
        ax.legend()
    return ax
