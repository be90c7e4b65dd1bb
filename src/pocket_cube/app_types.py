from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List

from .config import COLOR_BITS, COLOR_ORDER, MOVE_NOTATION


class Color(enum.IntEnum):
    R = 0
    G = 1
    B = 2
    C = 3
    M = 4
    Y = 5

    @property
    def letter(self) -> str:
        return COLOR_ORDER[self]


class Move(enum.IntEnum):
    """The six primitive turns, in the order the solver enumerates them."""
    FRONT_CW = 0
    FRONT_CCW = 1
    DOWN_CW = 2
    DOWN_CCW = 3
    LEFT_CW = 4
    LEFT_CCW = 5

    @property
    def inverse(self) -> "Move":
        # CW/CCW pairs differ only in the lowest bit
        return Move(self ^ 1)

    @property
    def clockwise(self) -> bool:
        return not self & 1

    @property
    def notation(self) -> str:
        return MOVE_NOTATION[self]


CLOCKWISE_MOVES = [Move.FRONT_CW, Move.LEFT_CW, Move.DOWN_CW]

_COLOR_MASK = (1 << COLOR_BITS) - 1


@dataclass(frozen=True)
class Facelet:
    # primary is the color showing; the neighbors tag the home cubelet
    primary: Color
    neighbor_a: Color
    neighbor_b: Color

    @classmethod
    def decode(cls, facelet_id: int) -> "Facelet":
        return cls(
            Color((facelet_id >> 2 * COLOR_BITS) & _COLOR_MASK),
            Color((facelet_id >> COLOR_BITS) & _COLOR_MASK),
            Color(facelet_id & _COLOR_MASK),
        )

    def encode(self) -> int:
        return (int(self.primary) << 2 * COLOR_BITS
                | int(self.neighbor_a) << COLOR_BITS
                | int(self.neighbor_b))

    def __str__(self) -> str:
        return self.primary.letter + self.neighbor_a.letter + self.neighbor_b.letter


@dataclass
class SolveResult:
    moves: List[Move] = field(default_factory=list)
    explored: int = 0     # states dequeued from the frontier
    visited: int = 0      # size of the predecessor map when the search stopped
    depth: int = 0
    elapsed: float = 0.0

    @property
    def notation(self) -> str:
        return " ".join(m.notation for m in self.moves)
