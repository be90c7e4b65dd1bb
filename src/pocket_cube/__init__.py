from .app_types import Color, Facelet, Move, SolveResult
from .cube_solver import CubeSolver, SolverInvariantError, search, solve
from .cube_state import (
    CubeState,
    MoveTable,
    apply,
    apply_sequence,
    construct_solved,
    facelet_label,
    format_moves,
    get_move_table,
    is_solved,
    parse_moves,
    slot_label,
)

__version__ = "0.1.0"
