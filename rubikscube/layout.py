"""Where each piece of the cube sits and which model draws it."""

from __future__ import annotations

from typing import NamedTuple


class Placement(NamedTuple):
    """A model file and the position of the piece it draws."""

    model: str
    translation: tuple[float, float, float]


_MODELS_3X3 = (
    "corner_yellowOrangeBlue",
    "edge_yellowOrange",
    "corner_yellowGreenOrange",
    "edge_orangeBlue",
    "center_orange",
    "edge_greenOrange",
    "corner_whiteOrangeBlue",
    "edge_whiteOrange",
    "corner_whiteGreenOrange",
    "edge_yellowBlue",
    "center_yellow",
    "edge_yellowGreen",
    "center_blue",
    "center_green",
    "edge_whiteBlue",
    "center_white",
    "edge_whiteGreen",
    "corner_yellowBlueRed",
    "edge_yellowRed",
    "corner_yellowRedGreen",
    "edge_blueRed",
    "center_red",
    "edge_redGreen",
    "corner_whiteBlueRed",
    "edge_whiteRed",
    "corner_whiteRedGreen",
)

_ORANGE_LAYER_4X4 = (
    "corner_yellowOrangeBlue", "edge_yellowOrange", "edge_yellowOrange", "corner_yellowGreenOrange",
    "edge_orangeBlue", "center_orange", "center_orange", "edge_greenOrange",
    "edge_orangeBlue", "center_orange", "center_orange", "edge_greenOrange",
    "corner_whiteOrangeBlue", "edge_whiteOrange", "edge_whiteOrange", "corner_whiteGreenOrange",
)
_INNER_LAYER_4X4 = (
    "edge_yellowBlue", "center_yellow", "center_yellow", "edge_yellowGreen",
    "center_blue", "center_green",
    "center_blue", "center_green",
    "edge_whiteBlue", "center_white", "center_white", "edge_whiteGreen",
)
_RED_LAYER_4X4 = (
    "corner_yellowBlueRed", "edge_yellowRed", "edge_yellowRed", "corner_yellowRedGreen",
    "edge_blueRed", "center_red", "center_red", "edge_redGreen",
    "edge_blueRed", "center_red", "center_red", "edge_redGreen",
    "corner_whiteBlueRed", "edge_whiteRed", "edge_whiteRed", "corner_whiteRedGreen",
)
_MODELS_4X4 = _ORANGE_LAYER_4X4 + _INNER_LAYER_4X4 + _INNER_LAYER_4X4 + _RED_LAYER_4X4


def _placements(
    names: tuple[str, ...],
    cells: list[tuple[int, int, int]],
    scaler: int,
    base_path: str,
) -> list[Placement]:
    return [
        Placement(f"{base_path}/{name}.obj", (i / scaler, j / scaler, k / scaler))
        for name, (i, j, k) in zip(names, cells, strict=True)
    ]


def load_3x3(scaler: int, base_path: str) -> list[Placement]:
    """The 26 visible pieces of a 3x3x3 cube, indexed by piece id."""
    cells = [
        (i, j, k)
        for i in range(-1, 2)
        for j in range(-1, 2)
        for k in range(-1, 2)
        if (i, j, k) != (0, 0, 0)
    ]
    return _placements(_MODELS_3X3, cells, scaler, base_path)


def load_4x4(scaler: int, base_path: str) -> list[Placement]:
    """The 56 visible pieces of a 4x4x4 cube; the eight hidden inner ones are left out."""
    cells = [
        (i, j, k)
        for i in range(-1, 3)
        for j in range(-1, 3)
        for k in range(-1, 3)
        if not (k in (0, 1) and i in (0, 1) and j in (0, 1))
    ]
    return _placements(_MODELS_4X4, cells, scaler, base_path)