from __future__ import annotations

import random

import pytest

from hypercube_engine.core.engine import Cube
from hypercube_engine.core.rotation import Rotation


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_non_mutating(dims: int):
    cube = Cube(dims, seed=42)
    cube.shuffle(10)
    h0 = cube.hash()
    last = cube.last_rotation
    cube.audit()
    assert cube.hash() == h0
    assert cube.last_rotation == last


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_detects_position_collision(dims: int):
    cube = Cube(dims)
    cube.points[0].coords = list(cube.points[1].coords)  # collision
    with pytest.raises(AssertionError):
        cube.audit()


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_detects_bad_orientation(dims: int):
    cube = Cube(dims)
    cube.points[3].orientation[0] = cube.points[3].orientation[1]
    with pytest.raises(AssertionError):
        cube.audit()


def test_audit_detects_out_of_range_coordinate():
    cube = Cube(3)
    cube.points[0].coords[0] = 3
    with pytest.raises(AssertionError):
        cube.audit()


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_order_four_check_when_last_rotation_present(dims: int):
    cube = Cube(dims)
    rng = random.Random(7)
    for _ in range(10):
        cube.rotate(Rotation.random(dims, rng))
        cube.audit()  # should pass


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_skips_order_four_check_when_no_last_rotation(dims: int):
    cube = Cube(dims)
    assert cube.last_rotation is None
    cube.audit()  # should pass


@pytest.mark.parametrize("dims", [3, 4])
def test_audit_keeps_point_identity(dims: int):
    cube = Cube(dims)
    r = Rotation.create(1, 2, 0, 2, dims=dims)
    held = cube.points[8]
    cube.rotate(r)
    before = list(cube.points)
    cube.audit()
    assert all(a is b for a, b in zip(cube.points, before))
    assert cube.points[8] is held

    cube.rotate(r)
    assert held.coords == cube.points[8].coords
    assert held.view() == cube.snapshot()[8]


def test_audit_restores_after_failure_in_place():
    cube = Cube(3)
    held = cube.points[0]
    held.orientation[0] = held.orientation[1]
    with pytest.raises(AssertionError):
        cube.audit()
    assert cube.points[0] is held
    assert held.orientation == [1, 1, 2]
