"""Sticker-level model of a 3x3x3 Rubik's cube."""

from __future__ import annotations

import functools
import string
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Sticker colours, valued by the letter of the face they belong to when solved."""

    YELLOW = "U"
    RED = "R"
    BLUE = "F"
    WHITE = "D"
    ORANGE = "L"
    GREEN = "B"


class Direction(Enum):
    """Direction of a quarter turn, seen from outside the face."""

    CLOCKWISE = 1
    ANTICLOCKWISE = -1


@dataclass(frozen=True)
class Cubie:
    """One sticker: the id of the piece it sits on and its colour."""

    id: int
    color: Color

    @property
    def letter(self) -> str:
        return self.color.value


class Side:
    """A square face of stickers that can be rotated in place."""

    def __init__(
        self,
        name: str,
        size: int,
        color: Color,
        piece_ids: Sequence[int],
        on_turn: Callable[[Direction], None] | None = None,
    ) -> None:
        if len(piece_ids) != size * size:
            raise ValueError(
                f"side {name!r} needs {size * size} piece ids, got {len(piece_ids)}"
            )
        self.name = name
        self.size = size
        self.cubies: list[Cubie] = [Cubie(piece_id, color) for piece_id in piece_ids]
        self._on_turn = on_turn
        # Reading the grid column by column from the rightmost one gives the
        # anticlockwise rotation; read backwards it gives the clockwise one.
        self._index = [
            column + row * size
            for column in reversed(range(size))
            for row in range(size)
        ]

    def turn(self, direction: Direction) -> None:
        """Rotate this face's stickers, then let the owner move the adjacent strips."""
        old = list(self.cubies)
        order = reversed(self._index) if direction is Direction.CLOCKWISE else self._index
        self.cubies = [old[k] for k in order]
        if self._on_turn is not None:
            self._on_turn(direction)


_SOLVED = "UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB"

# Faces in state order: name, colour, piece ids of the nine stickers.
_FACES: tuple[tuple[str, Color, tuple[int, ...]], ...] = (
    ("U", Color.YELLOW, (2, 11, 19, 1, 10, 18, 0, 9, 17)),
    ("R", Color.RED, (17, 18, 19, 20, 21, 22, 23, 24, 25)),
    ("F", Color.BLUE, (0, 9, 17, 3, 12, 20, 6, 14, 23)),
    ("D", Color.WHITE, (6, 14, 23, 7, 15, 24, 8, 16, 25)),
    ("L", Color.ORANGE, (2, 1, 0, 5, 4, 3, 8, 7, 6)),
    ("B", Color.GREEN, (19, 11, 2, 22, 13, 5, 25, 16, 8)),
)

# For each face, the four strips of neighbouring stickers it drags along.
# On a clockwise turn each strip receives the stickers of the next one in
# the cycle; on an anticlockwise turn, those of the previous one.
_STRIPS: dict[str, tuple[tuple[str, tuple[int, int, int]], ...]] = {
    "U": (("F", (0, 1, 2)), ("R", (0, 1, 2)), ("B", (0, 1, 2)), ("L", (0, 1, 2))),
    "D": (("F", (6, 7, 8)), ("L", (6, 7, 8)), ("B", (6, 7, 8)), ("R", (6, 7, 8))),
    "F": (("U", (6, 7, 8)), ("L", (8, 5, 2)), ("D", (2, 1, 0)), ("R", (0, 3, 6))),
    "R": (("U", (2, 5, 8)), ("F", (2, 5, 8)), ("D", (2, 5, 8)), ("B", (6, 3, 0))),
    "B": (("U", (0, 1, 2)), ("R", (2, 5, 8)), ("D", (8, 7, 6)), ("L", (6, 3, 0))),
    "L": (("U", (0, 3, 6)), ("B", (8, 5, 2)), ("D", (0, 3, 6)), ("F", (0, 3, 6))),
}


def _parse_moves(moves: str) -> Iterator[tuple[str, Direction, int]]:
    """Yield (face, direction, repetitions) for each move in a move string."""
    position = 0
    while position < len(moves):
        face = moves[position]
        suffix = moves[position + 1] if position + 1 < len(moves) else ""
        direction = Direction.ANTICLOCKWISE if suffix == "'" else Direction.CLOCKWISE
        turns = int(suffix) if suffix and suffix in string.digits else 1
        yield face, direction, turns
        consumed_suffix = direction is Direction.ANTICLOCKWISE or turns > 1
        position += 2 if consumed_suffix else 1


class Cube3:
    """A 3x3x3 cube tracked sticker by sticker."""

    def __init__(self) -> None:
        self._sides: dict[str, Side] = {
            name: Side(name, 3, color, ids, functools.partial(self._cycle_strips, name))
            for name, color, ids in _FACES
        }

    def _cycle_strips(self, face: str, direction: Direction) -> None:
        strips = _STRIPS[face]
        taken = [[self._sides[name].cubies[k] for k in indices] for name, indices in strips]
        shift = 1 if direction is Direction.CLOCKWISE else -1
        for position, (name, indices) in enumerate(strips):
            incoming = taken[(position + shift) % len(strips)]
            cubies = self._sides[name].cubies
            for k, cubie in zip(indices, incoming):
                cubies[k] = cubie

    def turn(self, moves: str) -> None:
        """Apply a move string such as "RUR'U'F2".

        A face letter may be followed by ' for an anticlockwise turn or a digit
        for that many clockwise turns. Raises ValueError on an unknown face.
        """
        for face, direction, turns in _parse_moves(moves):
            side = self._sides.get(face)
            if side is None:
                raise ValueError(f"unknown face {face!r} in moves {moves!r}")
            for _ in range(turns):
                side.turn(direction)

    def state(self) -> str:
        """The 54 sticker letters, face by face in the order U R F D L B."""
        return "".join(
            cubie.letter for side in self._sides.values() for cubie in side.cubies
        )

    def is_solved(self) -> bool:
        return self.state() == _SOLVED

    def face_ids(self, side: str) -> list[int]:
        """Piece ids of the stickers on a face; empty for an unknown face."""
        found = self._sides.get(side)
        if found is None:
            return []
        return [cubie.id for cubie in found.cubies]