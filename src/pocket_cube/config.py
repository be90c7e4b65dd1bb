"""config.py — project configuration
------------------------------------

This file centralizes default runtime constants for the pocket cube solver.
These are *defaults*; the CLI flags in `main.py` override the ones that make
sense to change at runtime.

Notes / warnings
- The geometry constants (slot count, axis letters) describe the skeleton of
  the 2x2x2 cube and are not meant to be tuned.
- SCRAMBLE_MAX_MOVES trades scramble depth against solve time. The solver is
  a plain breadth-first search, so deep scrambles can visit millions of states.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from typing import Dict, List, Tuple

# ---------------- Cube geometry ----------------

# 8 corner cubelets, each with 3 mutually orthogonal outward facelets.
NUM_CUBELETS: int = 8
FACES_PER_CUBELET: int = 3
NUM_SLOTS: int = NUM_CUBELETS * FACES_PER_CUBELET

# Axis letters for the coordinate values 0 and 1.
# X axis: Front = 0, Back = 1
# Y axis: Left = 0, Right = 1
# Z axis: Down = 0, Up = 1
AXIS_LETTERS: List[Tuple[str, str]] = [('F', 'B'), ('L', 'R'), ('D', 'U')]

# ---------------- Colors ----------------

# One letter per color, in Color enum order.
COLOR_ORDER: List[str] = ['R', 'G', 'B', 'C', 'M', 'Y']

# Color shown by the two opposite sides of each axis on a brand new cube.
AXIS_FACE_COLORS: List[Tuple[str, str]] = [
    ('R', 'G'),  # X-facing: Front, Back
    ('B', 'C'),  # Y-facing: Left, Right
    ('M', 'Y'),  # Z-facing: Down, Up
]

# Bits used per color when packing a facelet identity.
COLOR_BITS: int = 3

# ---------------- Moves ----------------

# Notation token per move, in Move enum order.
MOVE_NOTATION: List[str] = ["F", "F'", "D", "D'", "L", "L'"]
MOVE_INDEX: Dict[str, int] = {tok: i for i, tok in enumerate(MOVE_NOTATION)}

# ---------------- Solver ----------------

# Multiplier of the rolling state hash (h = h * HASH_BASE + facelet_id).
HASH_BASE: int = 0xFFF

# ---------------- Scrambler / CLI ----------------

# Upper bound (exclusive) of random moves applied by the scrambler. Random
# walks of this length stay within a few hundred thousand BFS states.
SCRAMBLE_MAX_MOVES: int = 12

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
