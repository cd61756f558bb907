from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from hypercube_engine.core.engine import Cube  # noqa: E402
from hypercube_engine.explorer.random_walk import explore_random  # noqa: E402
from hypercube_engine.viz.plot import plot_energy_trace, plot_points  # noqa: E402


@pytest.mark.parametrize("dims", [3, 4])
def test_explore_random_reports(dims: int):
    out = explore_random(dims, 200, seed=0)
    assert out["dims"] == dims
    assert len(out["energies"]) == 201
    assert out["energies"][0] == 0
    assert 1 <= out["unique_state_count"] <= 201
    assert out["solved_visits"] >= 1
    assert out["entropy_bits"] >= 0.0
    assert out["min_energy"] == 0


def test_explore_random_is_reproducible():
    a = explore_random(3, 100, seed=5, scramble=10)
    b = explore_random(3, 100, seed=5, scramble=10)
    assert a == b


def test_explore_random_zero_steps():
    out = explore_random(3, 0)
    assert out["unique_state_count"] == 1
    assert out["first_repeat_step"] is None
    assert out["entropy_bits"] == 0.0
    with pytest.raises(ValueError):
        explore_random(3, -1)


def test_plot_points_and_trace():
    cube = Cube(4, seed=2)
    cube.shuffle(3)
    ax = plot_points(cube, axes=(0, 2, 3))
    assert ax.get_xlabel() == "axis 0"
    ax2 = plot_energy_trace([40, 30, 30, 0], label="run")
    assert len(ax2.get_lines()) == 1
    plt.close("all")


def test_plot_points_rejects_bad_axes():
    with pytest.raises(ValueError):
        plot_points(Cube(3), axes=(0, 1, 1))
    with pytest.raises(ValueError):
        plot_points(Cube(3), axes=(0, 1, 3))
