"""Placement and orientation of the pieces of the cube in 3D space."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

import numpy as np

_AXIS_NAMES = "xyz"
_AXES = {name: np.identity(3)[k] for k, name in enumerate(_AXIS_NAMES)}
_APPROX_EPSILON = 1e-6
_SIN_45 = math.sin(math.radians(45.0))


def _axis(plane: str) -> np.ndarray:
    try:
        return _AXES[plane]
    except KeyError:
        raise ValueError(f"unknown axis {plane!r}; expected one of x, y, z") from None


def _rotation_matrix(plane: str, angle: float) -> np.ndarray:
    """Right-handed rotation by ``angle`` radians about a coordinate axis."""
    a = _axis(plane)
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    return c * np.identity(3) + s * cross + (1.0 - c) * np.outer(a, a)


def _quat_mul(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Hamilton product of quaternions stored as (w, x, y, z)."""
    pw, px, py, pz = p
    qw, qx, qy, qz = q
    return np.array([
        pw * qw - px * qx - py * qy - pz * qz,
        pw * qx + px * qw + py * qz - pz * qy,
        pw * qy - px * qz + py * qw + pz * qx,
        pw * qz + px * qy - py * qx + pz * qw,
    ])


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def _snap(component: float) -> float:
    """Pull a quaternion component onto 0, +-0.5, +-sin(45 deg) or +-1."""
    sign = 1.0 if component > 0.0 else -1.0
    if abs(component) < 0.1:
        component = 0.0
    if abs(component) > 0.9:
        component = sign
    if abs(abs(component) - 0.5) < 0.1:
        component = sign * 0.5
    if abs(abs(component) - 0.7) < 0.1:
        component = sign * _SIN_45
    return component


@dataclass
class CoordSystem:
    """The local axes of a piece, expressed in world coordinates."""

    i: np.ndarray = field(default_factory=lambda: _AXES["x"].copy())
    j: np.ndarray = field(default_factory=lambda: _AXES["y"].copy())
    k: np.ndarray = field(default_factory=lambda: _AXES["z"].copy())

    def approximate(self, v: Sequence[float] | np.ndarray) -> np.ndarray:
        """Replace components closer to zero than 1e-6 with exact zeros."""
        values = np.asarray(v, dtype=float).copy()
        values[np.abs(values) < _APPROX_EPSILON] = 0.0
        return values

    def rotate(self, plane: str, angle: float) -> None:
        """Rotate all three local axes about a world axis."""
        matrix = _rotation_matrix(plane, angle)
        for name in ("i", "j", "k"):
            rotated = self.approximate(matrix @ getattr(self, name))
            setattr(self, name, rotated / np.linalg.norm(rotated))

    def get_axis(self, axis: str) -> tuple[str, int]:
        """The world axis a local axis points along, with its sign.

        Returns ``("", 0)`` when the local axis has no non-zero component.
        """
        vec = {"x": self.i, "y": self.j, "z": self.k}.get(axis)
        if vec is None:
            raise ValueError(f"unknown axis {axis!r}; expected one of x, y, z")
        result: tuple[str, int] = ("", 0)
        for name, component in zip(_AXIS_NAMES, vec):
            if component != 0.0:
                result = (name, int(component))
        return result


@dataclass
class Transform:
    """Translation, scale and orientation of an object."""

    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    coord_system: CoordSystem = field(default_factory=CoordSystem)
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    quat_rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))

    def matrix(self) -> np.ndarray:
        """Model matrix: translation * rotation (from the quaternion) * scale."""
        w, x, y, z = self.quat_rotation
        sx, sy, sz = self.scale
        model = np.identity(4)
        model[:3, 0] = sx * np.array([
            1 - 2 * y * y - 2 * z * z,
            2 * x * y + 2 * z * w,
            2 * x * z - 2 * y * w,
        ])
        model[:3, 1] = sy * np.array([
            2 * x * y - 2 * z * w,
            1 - 2 * x * x - 2 * z * z,
            2 * y * z + 2 * x * w,
        ])
        model[:3, 2] = sz * np.array([
            2 * x * z + 2 * y * w,
            2 * y * z - 2 * x * w,
            1 - 2 * x * x - 2 * y * y,
        ])
        model[:3, 3] = self.translation
        return model


@dataclass(eq=False)
class CubeObject:
    """One piece of the cube as placed in the scene."""

    id: int
    model: Any = None
    color: np.ndarray = field(default_factory=lambda: np.zeros(3))
    transform: Transform = field(default_factory=Transform)

    _ids: ClassVar[Iterator[int]] = itertools.count()

    @classmethod
    def create(cls) -> CubeObject:
        """A new object with the next free id."""
        return cls(next(cls._ids))

    def rotate(self, plane: str, angle: float, to_round: bool) -> None:
        """Turn the piece about a world axis through the origin.

        With ``to_round`` the translation is rounded to a thousandth and the
        orientation is snapped to the nearest quarter-turn values.
        """
        transform = self.transform
        transform.translation = _rotation_matrix(plane, angle) @ transform.translation

        local_plane: str | None = None
        sign = 0
        for name in _AXIS_NAMES:
            world_axis, axis_sign = transform.coord_system.get_axis(name)
            if world_axis == plane:
                local_plane, sign = name, axis_sign

        step = np.array([1.0, 0.0, 0.0, 0.0])
        if local_plane is not None:
            half = sign * angle * 0.5
            step = np.array([math.cos(half), 0.0, 0.0, 0.0])
            step[1 + _AXIS_NAMES.index(local_plane)] = math.sin(half)
        transform.quat_rotation = _quat_mul(transform.quat_rotation, step)

        if to_round:
            transform.translation = _round_half_away(transform.translation / 0.001) * 0.001
            transform.quat_rotation = np.array([_snap(c) for c in transform.quat_rotation])