"""
cube_state.py — 2x2x2 cube state model and move tables
=======================================================

The cube is modelled as a fixed skeleton of 24 facelet *slots*: 8 corner
cubelet positions, each with an X-, Y- and Z-facing facelet. A slot index is
a pure function of the cubelet coordinates and the facing axis:

    slot = (x << 2 | y << 1 | z) * 3 + f

    x: Front = 0, Back = 1      f: X-facing = 0
    y: Left  = 0, Right = 1        Y-facing = 1
    z: Down  = 0, Up    = 1        Z-facing = 2

Each slot holds a *facelet identity*, a small integer packing three colors:
the primary color (the one showing) followed by the two colors of the other
facelets of the same cubelet. Moves only shuffle identities between slots,
so the multiset of identities never changes.

### Core pieces

* **MoveTable**: for each of the six moves, the permutation of slot indices
  (`targets[m][i]` is where the facelet in slot `i` goes) together with its
  inverse (`sources`). Built once per process by `get_move_table()`.

* **CubeState**: an immutable 24-slot array with element-wise equality and a
  cached rolling hash, so states can be used directly as dict keys by the
  solver.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .app_types import CLOCKWISE_MOVES, Color, Facelet, Move
from .config import AXIS_FACE_COLORS, AXIS_LETTERS, COLOR_BITS, HASH_BASE, MOVE_INDEX, NUM_SLOTS

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

MoveLike = Union[Move, int]


# ---------------- Slot / facelet helpers ----------------

def slot_index(x: int, y: int, z: int, f: int) -> int:
    return (x << 2 | y << 1 | z) * 3 + f


def slot_coords(slot: int) -> Tuple[int, int, int, int]:
    """Inverse of slot_index: returns (x, y, z, facing axis)."""
    cubelet, f = divmod(slot, 3)
    return (cubelet >> 2) & 1, (cubelet >> 1) & 1, cubelet & 1, f


def slot_label(slot: int) -> str:
    """
    Human readable slot name. The cubelet is named by its three sides and the
    facing side is bracketed, e.g. FR(U) is the upward facelet of the
    Front-Right-Up cubelet.
    """
    x, y, z, f = slot_coords(slot)
    parts = [AXIS_LETTERS[axis][v] for axis, v in enumerate((x, y, z))]
    parts[f] = "(%s)" % parts[f]
    return "".join(parts)


def facelet_id(primary: Color, neighbor_a: Color, neighbor_b: Color) -> int:
    return Facelet(primary, neighbor_a, neighbor_b).encode()


def facelet_label(fid: int) -> str:
    """Primary color letter followed by the two neighbor color letters."""
    return str(Facelet.decode(int(fid)))


def primary_color(fid: int) -> Color:
    return Facelet.decode(int(fid)).primary


# ---------------- Move tables ----------------

# Geometry of the clockwise turns: the cubelet at cycle[k] ends up at
# cycle[k + 1], and the facelet facing axis f ends up facing relabel[f].
_CLOCKWISE_GEOMETRY = {
    Move.FRONT_CW: ([(0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)], (0, 2, 1)),
    Move.LEFT_CW: ([(0, 0, 0), (0, 0, 1), (1, 0, 1), (1, 0, 0)], (2, 1, 0)),
    Move.DOWN_CW: ([(0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)], (1, 0, 2)),
}


class MoveTable:
    """
    Read-only slot permutations for all six moves.

    targets[m][i]: slot the facelet in slot i moves to under move m.
    sources[m][j]: slot whose facelet lands in slot j (inverse of targets[m]).
    """

    def __init__(self, targets: np.ndarray):
        targets = np.array(targets, dtype=np.intp)
        if targets.shape != (len(Move), NUM_SLOTS):
            raise ValueError(f"move table must have shape {(len(Move), NUM_SLOTS)}, got {targets.shape}")
        sources = np.empty_like(targets)
        slots = np.arange(NUM_SLOTS, dtype=np.intp)
        for m in range(len(Move)):
            sources[m, targets[m]] = slots
        targets.setflags(write=False)
        sources.setflags(write=False)
        self.targets = targets
        self.sources = sources

    def __len__(self) -> int:
        return len(self.targets)

    def is_valid(self, move) -> bool:
        if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
            return False
        return 0 <= move < len(self.targets)


def build_move_table() -> MoveTable:
    """
    Build the table from the geometry of the three clockwise turns; each
    counter-clockwise turn is the inverse permutation of its clockwise twin.
    """
    identity = np.arange(NUM_SLOTS, dtype=np.intp)
    targets = np.tile(identity, (len(Move), 1))
    for move in CLOCKWISE_MOVES:
        cycle, relabel = _CLOCKWISE_GEOMETRY[move]
        for k, src in enumerate(cycle):
            dst = cycle[(k + 1) % len(cycle)]
            for f in range(3):
                targets[move, slot_index(*src, f)] = slot_index(*dst, relabel[f])
        # CCW[CW[i]] = i
        targets[move.inverse, targets[move]] = identity
    return MoveTable(targets)


_MOVE_TABLE: Optional[MoveTable] = None
_MOVE_TABLE_LOCK = threading.Lock()


def get_move_table() -> MoveTable:
    """Process-wide move table, computed once under a lock."""
    global _MOVE_TABLE
    if _MOVE_TABLE is None:
        with _MOVE_TABLE_LOCK:
            if _MOVE_TABLE is None:
                _MOVE_TABLE = build_move_table()
                logger.debug("Move table built for %d moves", len(_MOVE_TABLE))
    return _MOVE_TABLE


# ---------------- Cube state ----------------

# _HASH_POWERS[i] = HASH_BASE ** (23 - i) mod 2**64, so that the dot product
# with the slots equals the rolling hash h = h * HASH_BASE + slot.
_HASH_POWERS = np.array(
    [pow(HASH_BASE, NUM_SLOTS - 1 - i, 1 << 64) for i in range(NUM_SLOTS)],
    dtype=np.uint64,
)

# For every slot, the slot on the same side used as the color reference:
# the facing coordinate is kept, the other two are forced to 0.
_REFERENCE_SLOTS = np.array([
    slot_index(x if f == 0 else 0, y if f == 1 else 0, z if f == 2 else 0, f)
    for x, y, z, f in map(slot_coords, range(NUM_SLOTS))
], dtype=np.intp)


class CubeState:
    """Immutable assignment of facelet identities to the 24 slots."""

    __slots__ = ("_slots", "_key", "_hash")

    def __init__(self, slots: np.ndarray):
        # takes ownership of `slots`; use from_slots() for external data
        slots.setflags(write=False)
        self._slots = slots
        self._key = slots.tobytes()
        # uint64 arithmetic wraps, matching a 64-bit rolling hash
        self._hash = int(_HASH_POWERS.dot(slots))

    @classmethod
    def from_slots(cls, slots: Iterable[int]) -> "CubeState":
        values = [int(fid) for fid in slots]
        if len(values) != NUM_SLOTS:
            raise ValueError(f"a cube state needs exactly {NUM_SLOTS} facelets, got {len(values)}")
        for slot, fid in enumerate(values):
            if not 0 <= fid < 1 << 3 * COLOR_BITS:
                raise ValueError(f"facelet id {fid} out of range in slot {slot_label(slot)}")
            try:
                Facelet.decode(fid)
            except ValueError as e:
                raise ValueError(f"invalid facelet id {fid} in slot {slot_label(slot)}: {e}") from e
        return cls(np.array(values, dtype=np.uint16))

    @classmethod
    def solved(cls) -> "CubeState":
        slots = np.empty(NUM_SLOTS, dtype=np.uint16)
        for x, y, z in itertools.product((0, 1), repeat=3):
            colors = [Color[AXIS_FACE_COLORS[axis][v]] for axis, v in enumerate((x, y, z))]
            for f in range(3):
                slots[slot_index(x, y, z, f)] = facelet_id(
                    colors[f], colors[(f + 1) % 3], colors[(f + 2) % 3])
        return cls(slots)

    @property
    def slots(self) -> np.ndarray:
        return self._slots

    def apply(self, move: MoveLike) -> "CubeState":
        table = get_move_table()
        if not table.is_valid(move):
            logger.debug("Ignoring out-of-range move %r", move)
            return self
        # result[targets[m][i]] = input[i]
        return CubeState(self._slots[table.sources[int(move)]])

    def apply_sequence(self, moves: Iterable[MoveLike]) -> "CubeState":
        state = self
        for move in moves:
            state = state.apply(move)
        return state

    def is_solved(self) -> bool:
        primary = self._slots >> (2 * COLOR_BITS)
        return bool(np.array_equal(primary, primary[_REFERENCE_SLOTS]))

    def facelets(self) -> List[Facelet]:
        return [Facelet.decode(int(fid)) for fid in self._slots]

    def primary_colors(self) -> List[Color]:
        return [f.primary for f in self.facelets()]

    def __eq__(self, other):
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return self._hash

    def __iter__(self):
        return (int(fid) for fid in self._slots)

    def __len__(self) -> int:
        return NUM_SLOTS

    def __repr__(self) -> str:
        return "CubeState(%s)" % " ".join(facelet_label(fid) for fid in self._slots)


# ---------------- Functional interface ----------------

def construct_solved() -> CubeState:
    return CubeState.solved()


def apply(state: CubeState, move: MoveLike) -> CubeState:
    """Apply one move; anything but the six valid move ids is a no-op."""
    return state.apply(move)


def apply_sequence(state: CubeState, moves: Iterable[MoveLike]) -> CubeState:
    return state.apply_sequence(moves)


def is_solved(state: CubeState) -> bool:
    return state.is_solved()


def parse_moves(text: Union[str, Sequence[str]]) -> List[Move]:
    """
    Parse whitespace separated move tokens ("F D' L") into Moves.
    Raises ValueError on unknown tokens.
    """
    if not isinstance(text, str):
        text = " ".join(text)
    moves = []
    for tok in text.split():
        key = tok[0].upper() + tok[1:]
        if key not in MOVE_INDEX:
            raise ValueError(f"Unknown move token: {tok!r}")
        moves.append(Move(MOVE_INDEX[key]))
    return moves


def format_moves(moves: Iterable[MoveLike]) -> str:
    return " ".join(Move(m).notation for m in moves)
