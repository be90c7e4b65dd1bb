from typing import List, Sequence

from .app_types import Color
from .config import AXIS_LETTERS, NUM_SLOTS
from .cube_state import CubeState, facelet_label, slot_index, slot_label

# (axis, coordinate) of the sides in print order: U, D, F, B, L, R
_NET_ORDER = [(2, 1), (2, 0), (0, 0), (0, 1), (1, 0), (1, 1)]


def format_state(state: CubeState) -> str:
    """
    One line per slot, "[FL(D)] = MRB", then SOLVED/UNSOLVED.
    """
    lines = ["[%s] = %s" % (slot_label(slot), facelet_label(fid))
             for slot, fid in zip(range(NUM_SLOTS), state)]
    lines.append("SOLVED" if state.is_solved() else "UNSOLVED")
    return "\n".join(lines)


def _side_grid(colors: Sequence[Color], axis: int, value: int) -> List[str]:
    # the other two axes span the 2x2 grid of this side
    a, b = [ax for ax in range(3) if ax != axis]
    rows = []
    for i in (1, 0):
        row = []
        for j in (0, 1):
            coords = [0, 0, 0]
            coords[axis], coords[a], coords[b] = value, i, j
            row.append(colors[slot_index(*coords, axis)].letter)
        rows.append(" ".join(row))
    return rows


def format_net(state: CubeState) -> str:
    """
    Primary colors of every side as labelled 2x2 grids:

        U      D      F      B      L      R
        Y Y    M M    R R    G G    B B    C C
        Y Y    M M    R R    G G    B B    C C
    """
    colors = state.primary_colors()
    sides = [(AXIS_LETTERS[axis][value], _side_grid(colors, axis, value))
             for axis, value in _NET_ORDER]
    header = "    ".join("%-3s" % name for name, _ in sides).rstrip()
    lines = [header]
    for r in range(2):
        lines.append("    ".join(grid[r] for _, grid in sides))
    return "\n".join(lines)
