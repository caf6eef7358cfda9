"""View and projection matrices for a camera looking at the cube.

Matrices are 4x4 numpy arrays that act on column vectors
(``matrix @ [x, y, z, 1]``). Depth is mapped to the range 0..1.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_DEFAULT_UP = (0.0, -1.0, 0.0)
_FLOAT32_EPSILON = float(np.finfo(np.float32).eps)


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(value: np.ndarray) -> np.ndarray:
    return value / np.linalg.norm(value)


def _view_from_basis(
    u: np.ndarray, v: np.ndarray, w: np.ndarray, position: np.ndarray
) -> np.ndarray:
    view = np.identity(4)
    view[0, :3] = u
    view[1, :3] = v
    view[2, :3] = w
    view[0, 3] = -np.dot(u, position)
    view[1, 3] = -np.dot(v, position)
    view[2, 3] = -np.dot(w, position)
    return view


class Camera:
    """Holds a projection matrix and a view matrix."""

    def __init__(self) -> None:
        self._projection = np.identity(4)
        self._view = np.identity(4)

    @property
    def projection(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    def set_orthographic_projection(
        self,
        left: float,
        right: float,
        top: float,
        bottom: float,
        near: float,
        far: float,
    ) -> None:
        projection = np.identity(4)
        projection[0, 0] = 2.0 / (right - left)
        projection[1, 1] = 2.0 / (bottom - top)
        projection[2, 2] = 1.0 / (far - near)
        projection[0, 3] = -(right + left) / (right - left)
        projection[1, 3] = -(bottom + top) / (bottom - top)
        projection[2, 3] = -near / (far - near)
        self._projection = projection

    def set_perspective_projection(
        self, fovy: float, aspect: float, near: float, far: float
    ) -> None:
        """Perspective projection; ``fovy`` is the vertical field of view in radians."""
        if not abs(aspect - _FLOAT32_EPSILON) > 0.0:
            raise ValueError(f"invalid aspect ratio {aspect!r}")
        tan_half_fovy = np.tan(fovy / 2.0)
        projection = np.zeros((4, 4))
        projection[0, 0] = 1.0 / (aspect * tan_half_fovy)
        projection[1, 1] = 1.0 / tan_half_fovy
        projection[2, 2] = far / (far - near)
        projection[3, 2] = 1.0
        projection[2, 3] = -(far * near) / (far - near)
        self._projection = projection

    def set_view_direction(
        self,
        position: Sequence[float],
        direction: Sequence[float],
        up: Sequence[float] = _DEFAULT_UP,
    ) -> None:
        position_v = _vec3(position)
        w = _normalize(_vec3(direction))
        u = _normalize(np.cross(w, _vec3(up)))
        v = np.cross(w, u)
        self._view = _view_from_basis(u, v, w, position_v)

    def set_view_target(
        self,
        position: Sequence[float],
        target: Sequence[float],
        up: Sequence[float] = _DEFAULT_UP,
    ) -> None:
        position_v = _vec3(position)
        self.set_view_direction(position_v, _vec3(target) - position_v, up)

    def set_view_yxz(self, position: Sequence[float], rotation: Sequence[float]) -> None:
        """View from Tait-Bryan angles applied in Y, X, Z order (radians)."""
        rx, ry, rz = _vec3(rotation)
        c3, s3 = np.cos(rz), np.sin(rz)
        c2, s2 = np.cos(rx), np.sin(rx)
        c1, s1 = np.cos(ry), np.sin(ry)
        u = np.array([c1 * c3 + s1 * s2 * s3, c2 * s3, c1 * s2 * s3 - c3 * s1])
        v = np.array([c3 * s1 * s2 - c1 * s3, c2 * c3, c1 * c3 * s2 + s1 * s3])
        w = np.array([c2 * s1, -s2, c1 * c2])
        self._view = _view_from_basis(u, v, w, _vec3(position))