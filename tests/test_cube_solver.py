import logging
import random

import pytest

from pocket_cube.app_types import Move
from pocket_cube.cube_solver import CubeSolver, SolverInvariantError, _backtrace, search, solve
from pocket_cube.cube_state import apply, apply_sequence, construct_solved, is_solved, parse_moves

F, Fi, D, Di, L, Li = list(Move)


def _assert_solves(start, moves):
    end = apply_sequence(start, moves)
    assert is_solved(end)
    assert end == construct_solved()


def test_solved_cube_needs_no_moves():
    assert solve(construct_solved()) == []


def test_single_front_turn():
    assert solve(apply(construct_solved(), Move.FRONT_CW)) == [Move.FRONT_CCW]


@pytest.mark.parametrize("move", list(Move))
def test_single_move_undone_by_inverse(move):
    assert solve(apply(construct_solved(), move)) == [move.inverse]


@pytest.mark.parametrize("scramble", [
    [F, D],
    [L, L],
    [Di, Fi],
    [F, D, L],
    [Li, Di, Fi],
])
def test_solution_is_minimal(scramble):
    start = apply_sequence(construct_solved(), scramble)
    moves = solve(start)
    assert len(moves) == len(scramble)
    _assert_solves(start, moves)


def test_cancelling_moves_need_no_solution():
    start = apply_sequence(construct_solved(), [F, Fi, D, D, D, D])
    assert solve(start) == []


def test_fixed_ten_move_scramble():
    # reduces to F' D D L
    scramble = [F, F, D, Li, L, Di, F, D, D, L]
    start = apply_sequence(construct_solved(), scramble)
    moves = solve(start)
    assert len(moves) <= 4
    assert len(moves) <= len(scramble)
    _assert_solves(start, moves)


def test_random_scramble_roundtrip():
    rng = random.Random(2024)
    scramble = [rng.choice(list(Move)) for _ in range(6)]
    start = apply_sequence(construct_solved(), scramble)
    moves = solve(start)
    assert len(moves) <= len(scramble)
    _assert_solves(start, moves)


def test_search_statistics():
    result = search(construct_solved())
    assert result.moves == []
    assert (result.explored, result.visited, result.depth) == (1, 1, 0)

    result = search(apply_sequence(construct_solved(), [F, D]))
    assert result.depth == 2
    assert result.notation == "D' F'"
    # depth 0 and 1 fully expanded: 1 + 6 states, children of all of them seen
    assert result.explored > 7
    assert result.visited >= 1 + 6 + 27
    assert result.elapsed >= 0


def test_search_logs_result(caplog):
    caplog.set_level(logging.INFO, logger="pocket_cube.cube_solver")
    search(apply(construct_solved(), Move.LEFT_CW))
    assert "Solved in 1 moves" in caplog.text


def test_backtrace_without_predecessor_is_fatal():
    start = construct_solved()
    destination = apply(start, Move.DOWN_CW)
    with pytest.raises(SolverInvariantError):
        _backtrace(start, destination, {start: (start, None)})


def test_backtrace_follows_links():
    start = apply_sequence(construct_solved(), parse_moves("F L"))
    mid = apply(start, Move.LEFT_CCW)
    end = apply(mid, Move.FRONT_CCW)
    parents = {start: (start, None), mid: (start, Move.LEFT_CCW), end: (mid, Move.FRONT_CCW)}
    assert _backtrace(start, end, parents) == [Move.LEFT_CCW, Move.FRONT_CCW]


# ---------------- CubeSolver ----------------

def test_cube_solver_caches_solutions():
    solver = CubeSolver()
    start = apply_sequence(construct_solved(), [D, L])
    first = solver.solve(start)
    assert solver.cache_size() == 1
    assert solver.last_result.moves == first

    first.append(Move.FRONT_CW)
    assert solver.solve(start) == [Li, Di]
    assert solver.cache_size() == 1

    solver.clear_cache()
    assert solver.cache_size() == 0


def test_cube_solver_async():
    solver = CubeSolver()
    start = apply(construct_solved(), Move.DOWN_CCW)
    future = solver.solve_async(start)
    assert future.result(timeout=30) == [Move.DOWN_CW]
