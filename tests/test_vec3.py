from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cubedesu.core.moves import FACES, TURNS, Face, Turn
from cubedesu.core.vec3 import Vec3

small = st.integers(min_value=-11, max_value=11)
vecs = st.builds(Vec3, small, small, small)


@given(vecs)
def test_neg_is_involution(v: Vec3):
    assert -(-v) == v
    assert (-v).as_tuple() == (-v.x, -v.y, -v.z)


@given(vecs, vecs)
def test_add_sub(a: Vec3, b: Vec3):
    assert a + b == b + a
    assert a + Vec3.zero() == a
    assert (a + b) - b == a
    assert a - b == Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


@given(vecs, vecs, small)
def test_mul(a: Vec3, b: Vec3, k: int):
    assert a * b == Vec3(a.x * b.x, a.y * b.y, a.z * b.z)
    assert a * k == Vec3(a.x * k, a.y * k, a.z * k)
    assert k * a == a * k
    assert a * 1 == a
    assert a * 0 == Vec3.zero()


@given(vecs, vecs)
def test_dot_and_cross(a: Vec3, b: Vec3):
    assert a.dot(b) == b.dot(a)
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0
    assert a.length_squared() == a.x * a.x + a.y * a.y + a.z * a.z


def test_indexing_iteration_and_str():
    v = Vec3(1, -2, 3)
    assert [v[0], v[1], v[2]] == [1, -2, 3]
    assert list(v) == [1, -2, 3]
    assert str(v) == "1 -2 3"


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "point, face, turn, expected",
    [
        # U turns the front of the top layer to the left
        (Vec3(0, 2, 3), Face.U, Turn.CLOCKWISE, Vec3(-3, 2, 0)),
        (Vec3(3, 2, 0), Face.U, Turn.CLOCKWISE, Vec3(0, 2, 3)),
        # R double: right edge of the top to the bottom, U centre to D centre
        (Vec3(3, 2, 0), Face.R, Turn.DOUBLE, Vec3(3, -2, 0)),
        (Vec3(0, 3, 0), Face.R, Turn.DOUBLE, Vec3(0, -3, 0)),
        (Vec3(0, -2, 3), Face.R, Turn.DOUBLE, Vec3(0, 2, -3)),
        # R takes the front face up
        (Vec3(2, 0, 3), Face.R, Turn.CLOCKWISE, Vec3(2, 3, 0)),
        # L takes the top face to the front
        (Vec3(0, 3, 0), Face.L, Turn.CLOCKWISE, Vec3(0, 0, 3)),
        (Vec3(0, -2, 3), Face.L, Turn.CLOCKWISE, Vec3(0, -3, -2)),
        # F takes the top face right, B takes it left
        (Vec3(0, 3, 2), Face.F, Turn.CLOCKWISE, Vec3(3, 0, 2)),
        (Vec3(0, 3, -2), Face.B, Turn.CLOCKWISE, Vec3(-3, 0, -2)),
        # D takes the front face right
        (Vec3(0, -2, 3), Face.D, Turn.CLOCKWISE, Vec3(3, -2, 0)),
        (Vec3(0, -2, 3), Face.D, Turn.COUNTER_CLOCKWISE, Vec3(-3, -2, 0)),
    ],
)
def test_rotate_known_points(point: Vec3, face: Face, turn: Turn, expected: Vec3):
    assert point.rotate(face, turn) == expected


@pytest.mark.parametrize("face", FACES)
@given(v=vecs)
def test_rotate_cycles_and_inverse(face: Face, v: Vec3):
    r = v
    for _ in range(4):
        r = r.rotate(face, Turn.CLOCKWISE)
    assert r == v
    assert v.rotate(face, Turn.DOUBLE).rotate(face, Turn.DOUBLE) == v
    assert v.rotate(face, Turn.CLOCKWISE).rotate(face, Turn.COUNTER_CLOCKWISE) == v
    assert v.rotate(face, Turn.CLOCKWISE).rotate(face, Turn.CLOCKWISE) == v.rotate(face, Turn.DOUBLE)


@pytest.mark.parametrize("face", FACES)
@pytest.mark.parametrize("turn", TURNS)
def test_rotate_fixes_axis_and_length(face: Face, turn: Turn):
    n = face.axis_normal()
    assert n.rotate(face, turn) == n
    v = Vec3(2, -3, 1)
    r = v.rotate(face, turn)
    assert r.length_squared() == v.length_squared()
    assert r.dot(n) == v.dot(n)


def test_rotate_many_times_stays_exact():
    v = Vec3(2, 3, -2)
    r = v
    for i in range(10_000):
        r = r.rotate(FACES[i % 6], Turn.CLOCKWISE)
        assert isinstance(r.x, int) and isinstance(r.y, int) and isinstance(r.z, int)
    assert r.length_squared() == v.length_squared()


def test_rotate_rejects_unknown_axis():
    with pytest.raises(AssertionError):
        Vec3(1, 0, 0).rotate("Q", Turn.CLOCKWISE)  # type: ignore[arg-type]
