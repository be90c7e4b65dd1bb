"""
cube_solver.py — Breadth-first shortest-path solver for the 2x2x2 cube
=======================================================================

The state graph is implicit: nodes are cube states, and every node has one
outgoing edge per move (6 in total). A plain breadth-first search from the
scrambled state visits states in non-decreasing move count, so the first
solved state dequeued is reached by a shortest move sequence.

### Core Pieces

* **search / solve**: the BFS itself. A FIFO frontier plus a predecessor map
  `state -> (parent state, move)`; the answer is rebuilt by walking the
  predecessor links back from the solved state to the start.

* **CubeSolver**: a small service wrapper in the style of the rest of the
  project: per-instance solution cache, a lock around it, and an
  asynchronous `solve_async` backed by a single-worker thread pool.

Every call to `search` owns its frontier and predecessor map; the only shared
data is the read-only move table.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .app_types import Move, SolveResult
from .cube_state import CubeState

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class SolverInvariantError(RuntimeError):
    """BFS bookkeeping is inconsistent; this is a bug, never a user error."""


def search(start: CubeState) -> SolveResult:
    """
    Breadth-first search from `start` to the nearest solved state.
    Returns a SolveResult with the move sequence and search statistics.
    """
    t0 = time.perf_counter()
    moves = list(Move)

    frontier: Deque[Tuple[CubeState, int]] = deque([(start, 0)])
    parents: Dict[CubeState, Tuple[CubeState, Optional[Move]]] = {start: (start, None)}

    destination: Optional[CubeState] = None
    explored = 0
    depth = 0

    while frontier:
        state, dist = frontier.popleft()
        explored += 1
        if dist > depth:
            depth = dist
            logger.debug("BFS depth %d reached (visited=%d, frontier=%d)", depth, len(parents), len(frontier))

        if state.is_solved():
            destination = state
            break

        for move in moves:
            child = state.apply(move)
            if child not in parents:
                parents[child] = (state, move)
                frontier.append((child, dist + 1))

    if destination is None:
        raise SolverInvariantError(
            "frontier exhausted after %d states without reaching a solved cube" % len(parents))

    path = _backtrace(start, destination, parents)
    result = SolveResult(
        moves=path,
        explored=explored,
        visited=len(parents),
        depth=depth,
        elapsed=time.perf_counter() - t0,
    )
    logger.info("Solved in %d moves (explored=%d, visited=%d, %.3fs)",
                len(path), result.explored, result.visited, result.elapsed)
    return result


def _backtrace(start: CubeState,
               destination: CubeState,
               parents: Dict[CubeState, Tuple[CubeState, Optional[Move]]]) -> List[Move]:
    path: Deque[Move] = deque()
    current = destination
    while current != start:
        link = parents.get(current)
        if link is None or link[1] is None:
            raise SolverInvariantError("no predecessor recorded for %r" % (current,))
        current, move = link
        path.appendleft(move)
        if len(path) > len(parents):
            raise SolverInvariantError("predecessor links form a cycle")
    return list(path)


def solve(start: CubeState) -> List[Move]:
    """Shortest move sequence that solves `start` ([] if already solved)."""
    return search(start).moves


# Thread pool for asynchronous solves (small, single-worker by default)
_EXECUTOR = concurrent.futures.ThreadPoolExecutor(max_workers=1)


class CubeSolver:
    def __init__(self):
        self._solve_cache: Dict[CubeState, List[Move]] = {}
        self._lock = threading.Lock()
        self.last_result: Optional[SolveResult] = None

    def solve(self, state: CubeState) -> List[Move]:
        """
        Solve `state` (with caching). Returns a fresh list so callers may
        mutate it without touching the cache.
        """
        with self._lock:
            cached = self._solve_cache.get(state)
        if cached is not None:
            logger.debug("Solver cache hit")
            return list(cached)

        result = search(state)
        with self._lock:
            self._solve_cache[state] = result.moves
            self.last_result = result
        return list(result.moves)

    # asynchronous convenience wrapper: returns Future
    def solve_async(self, state: CubeState) -> "concurrent.futures.Future[List[Move]]":
        return _EXECUTOR.submit(self.solve, state)

    def cache_size(self) -> int:
        with self._lock:
            return len(self._solve_cache)

    def clear_cache(self) -> None:
        """Clear the internal solve cache."""
        with self._lock:
            self._solve_cache.clear()
