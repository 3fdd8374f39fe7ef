# A* search engine over GridMap
# src/nav/pathfinder.py
"""
A* pathfinding over GridMap.

- Uses Manhattan distance heuristic.
- 4-directional neighbours (N, S, E, W), unit step cost.
- Visited points are recorded when a path to them is generated, and are
  never expanded again.
- Optional max_expansions guard for callers that want a bounded search.

SearchEngine is a small state machine (RUNNING -> SUCCEEDED | FAILED)
driven one expansion at a time by step(), or to completion by run().
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import log_event

from .frontier import Frontier
from .grid import GridMap, Point
from .path import Path
from .successors import expand

logger = logging.getLogger(__name__)

MODULE_NAME = "nav.pathfinder"

REASON_NO_PATH = "no_path_found"
REASON_BUDGET = "max_expansions_exhausted"


@dataclass(frozen=True)
class SearchConfig:
    """
    Everything one search needs. Nothing here is shared between searches.

    max_expansions bounds the number of paths expanded; None means the
    search runs until success or frontier exhaustion.
    """

    grid: GridMap
    start: Point
    goal: Point
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept plain tuples from callers and config files.
        object.__setattr__(self, "start", Point(*self.start))
        object.__setattr__(self, "goal", Point(*self.goal))
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError("max_expansions must be >= 0")


class SearchStatus(Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the state machine. path is set only when SUCCEEDED."""

    status: SearchStatus
    path: Optional[Path] = None
    reason: Optional[str] = None

    @property
    def terminal(self) -> bool:
        return self.status is not SearchStatus.RUNNING


RUNNING = SearchState(SearchStatus.RUNNING)


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Point]
    success: bool
    reason: str | None = None
    cost: int | None = None
    expansions: int = 0
    visited_count: int = 0


@dataclass
class SearchEngine:
    """
    One A* search over a fixed grid, start and goal.

    The engine owns the frontier and the visited set for exactly one
    search. Create a new engine for every search.
    """

    config: SearchConfig
    bus: Optional[EventBus] = None
    search_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    def __post_init__(self) -> None:
        start = self.config.start
        goal = self.config.goal

        self.frontier = Frontier([Path.start_at(start, goal)])
        self.visited: Set[Point] = {start}
        self.expansions = 0
        self._state = RUNNING

        logger.info(
            "Search %s started: %s -> %s on %dx%d grid",
            self.search_id,
            tuple(start),
            tuple(goal),
            self.config.grid.width,
            self.config.grid.height,
        )
        self._emit(
            EventType.SEARCH_STARTED,
            "Search started",
            {
                "start": list(start),
                "goal": list(goal),
                "width": self.config.grid.width,
                "height": self.config.grid.height,
                "max_expansions": self.config.max_expansions,
            },
        )

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    @property
    def state(self) -> SearchState:
        return self._state

    def step(self) -> SearchState:
        """
        Advance the search by one pop.

        Calling step() on a finished search returns the terminal state
        unchanged.
        """
        if self._state.terminal:
            return self._state

        if self.frontier.is_empty():
            return self._fail(REASON_NO_PATH)

        best = self.frontier.pop_best()
        if best.current == self.config.goal:
            return self._succeed(best)

        budget = self.config.max_expansions
        if budget is not None and self.expansions >= budget:
            return self._fail(REASON_BUDGET)

        new_paths = expand(best, self.config.grid, self.config.goal, self.visited)
        self.frontier.insert_all(new_paths)
        self.visited.update(p.current for p in new_paths)
        self.expansions += 1

        logger.debug(
            "Expanded %s (g=%d, f=%d): %d new paths, frontier=%d",
            tuple(best.current),
            best.g,
            best.f,
            len(new_paths),
            len(self.frontier),
        )
        self._emit(
            EventType.PATH_EXPANDED,
            "Path expanded",
            {
                "current": list(best.current),
                "g": best.g,
                "f": best.f,
                "new_paths": len(new_paths),
                "frontier_size": len(self.frontier),
            },
        )
        return self._state

    def run(self) -> PathfindingResult:
        """Step until the search succeeds or fails, then report."""
        while not self._state.terminal:
            self.step()
        return self.result()

    def result(self) -> PathfindingResult:
        state = self._state
        if state.status is SearchStatus.SUCCEEDED and state.path is not None:
            return PathfindingResult(
                path=list(state.path.locs),
                success=True,
                cost=state.path.g,
                expansions=self.expansions,
                visited_count=len(self.visited),
            )
        return PathfindingResult(
            path=[],
            success=False,
            reason=state.reason,
            expansions=self.expansions,
            visited_count=len(self.visited),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _succeed(self, path: Path) -> SearchState:
        self._state = SearchState(SearchStatus.SUCCEEDED, path=path)
        logger.info(
            "Search %s succeeded: cost=%d after %d expansions",
            self.search_id,
            path.g,
            self.expansions,
        )
        self._emit(
            EventType.SEARCH_SUCCEEDED,
            "Goal reached",
            {
                "cost": path.g,
                "path": [list(p) for p in path.locs],
                "expansions": self.expansions,
            },
        )
        return self._state

    def _fail(self, reason: str) -> SearchState:
        self._state = SearchState(SearchStatus.FAILED, reason=reason)
        logger.info(
            "Search %s failed (%s) after %d expansions",
            self.search_id,
            reason,
            self.expansions,
        )
        self._emit(
            EventType.SEARCH_FAILED,
            "No path found",
            {"reason": reason, "expansions": self.expansions},
        )
        return self._state

    def _emit(self, event_type: EventType, message: str, payload: dict) -> None:
        if self.bus is None:
            return
        log_event(
            bus=self.bus,
            module=MODULE_NAME,
            event_type=event_type,
            message=message,
            payload=payload,
            correlation_id=self.search_id,
        )


def find_path(
    grid: GridMap,
    start: Point,
    goal: Point,
    max_expansions: Optional[int] = None,
    bus: Optional[EventBus] = None,
) -> PathfindingResult:
    """
    A* search for a path from start to goal on grid.

    Returns a PathfindingResult with:
      - path: start..goal inclusive, or empty when no path was found
      - success: bool
      - cost: number of steps when successful
      - reason: "no_path_found" or "max_expansions_exhausted" on failure

    No path is reported as a result value, never as an exception.
    """
    config = SearchConfig(
        grid=grid, start=start, goal=goal, max_expansions=max_expansions
    )
    return search(config, bus=bus)


def search(config: SearchConfig, bus: Optional[EventBus] = None) -> PathfindingResult:
    """Run one complete search for an explicit SearchConfig."""
    return SearchEngine(config, bus=bus).run()
