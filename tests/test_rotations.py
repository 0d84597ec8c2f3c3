from __future__ import annotations

import pytest

from cubedesu.core import rotations
from cubedesu.core.moves import FACES, TURNS, Face, Turn
from cubedesu.core.rotations import (
    IDENTITY,
    QUARTER_TURNS,
    build_face_turn_matrices,
    det3,
    face_turn_matrix,
    mat_mul,
    transpose,
)


def test_face_turn_table_is_complete_and_proper():
    table = build_face_turn_matrices()
    assert len(table) == 18
    for face in FACES:
        for turn in TURNS:
            m = table[(face, turn)]
            assert det3(m) == 1
            assert mat_mul(m, transpose(m)) == IDENTITY
            assert face_turn_matrix(face, turn) == m


def test_inverse_turn_is_transpose():
    for face in FACES:
        cw = face_turn_matrix(face, Turn.CLOCKWISE)
        assert face_turn_matrix(face, Turn.COUNTER_CLOCKWISE) == transpose(cw)
        assert face_turn_matrix(face, Turn.DOUBLE) == mat_mul(cw, cw)


def test_rejects_improper_quarter_turn(monkeypatch):
    # a reflection has determinant -1
    monkeypatch.setitem(QUARTER_TURNS, "x", ((-1, 0, 0), (0, 1, 0), (0, 0, 1)))
    with pytest.raises(AssertionError):
        build_face_turn_matrices()


def test_rejects_non_orthogonal_quarter_turn(monkeypatch):
    # shear: determinant +1 but not orthogonal
    monkeypatch.setitem(QUARTER_TURNS, "y", ((1, 1, 0), (0, 1, 0), (0, 0, 1)))
    with pytest.raises(AssertionError):
        build_face_turn_matrices()


def test_rejects_turn_that_moves_its_axis(monkeypatch):
    monkeypatch.setitem(QUARTER_TURNS, "z", QUARTER_TURNS["x"])
    with pytest.raises(AssertionError):
        build_face_turn_matrices()


def test_rejects_unknown_axis():
    with pytest.raises(AssertionError):
        rotations.axis_quarter_turns("w", 1)
    with pytest.raises(AssertionError):
        face_turn_matrix("Q", Turn.CLOCKWISE)  # type: ignore[arg-type]


def test_cached_table_survives_rebuild_failure(monkeypatch):
    before = face_turn_matrix(Face.R, Turn.CLOCKWISE)
    monkeypatch.setitem(QUARTER_TURNS, "x", ((-1, 0, 0), (0, 1, 0), (0, 0, 1)))
    with pytest.raises(AssertionError):
        build_face_turn_matrices()
    assert face_turn_matrix(Face.R, Turn.CLOCKWISE) == before
