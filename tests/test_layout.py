import pytest

from rubikscube.cube import Color, Cube3
from rubikscube.layout import load_3x3, load_4x4

SCALER = 4


def _cells(placements, scaler=SCALER):
    return [tuple(round(c * scaler) for c in p.translation) for p in placements]


def test_3x3_has_26_distinct_pieces_without_core():
    placements = load_3x3(SCALER, "models")
    cells = _cells(placements)
    assert len(placements) == 26
    assert len(set(cells)) == 26
    assert (0, 0, 0) not in cells


def test_3x3_first_piece_is_corner_at_lowest_cell():
    first = load_3x3(SCALER, "models/blender")[0]
    assert first.model == "models/blender/corner_yellowOrangeBlue.obj"
    assert first.translation == (-1 / SCALER, -1 / SCALER, -1 / SCALER)


def test_3x3_every_model_lives_under_base_path():
    placements = load_3x3(2, "base")
    assert all(p.model.startswith("base/") and p.model.endswith(".obj") for p in placements)


@pytest.mark.parametrize("face", list("URFDLB"))
def test_3x3_face_pieces_carry_the_face_colour(face):
    placements = load_3x3(SCALER, "models")
    colour = Color(face).name.lower()
    ids = Cube3().face_ids(face)
    assert len(ids) == 9
    assert all(colour in placements[i].model.lower() for i in ids)


@pytest.mark.parametrize("face", list("URFDLB"))
def test_3x3_face_pieces_share_an_outer_layer(face):
    placements = load_3x3(SCALER, "models")
    cells = [_cells(placements)[i] for i in Cube3().face_ids(face)]
    shared = [
        axis
        for axis in range(3)
        if len({c[axis] for c in cells}) == 1 and abs(cells[0][axis]) == 1
    ]
    assert len(shared) == 1


def test_4x4_has_56_visible_pieces():
    placements = load_4x4(SCALER, "models")
    cells = _cells(placements)
    assert len(placements) == 56
    assert len(set(cells)) == 56
    inner = {(i, j, k) for i in (0, 1) for j in (0, 1) for k in (0, 1)}
    assert inner.isdisjoint(cells)


def test_4x4_uses_the_same_model_set_as_3x3():
    models_4 = {p.model for p in load_4x4(SCALER, "m")}
    models_3 = {p.model for p in load_3x3(SCALER, "m")}
    assert models_4 == models_3


def test_zero_scaler_fails():
    with pytest.raises(ZeroDivisionError):
        load_3x3(0, "models")