"""
stepper.py - Step-by-Step Playback Engine
=========================================
The Stepper is the ONLY object a host interacts with during playback.
It owns the current Trace, keeps a cursor into it, and exposes a small
next / prev / jump API with boundary flags the host uses to disable its
controls.

State machine:
    IDLE    →  init(start)  →  LOADED
    LOADED  →  init(start)  →  LOADED   (new trace, cursor back to 0)

Design decisions:
  - The whole Trace is generated before it is installed.  If generation
    fails the previous trace and cursor stay exactly as they were.
  - Trace and cursor live together in one immutable _Position, so `init`
    swaps both with a single assignment.  A navigation call can never see
    a new trace paired with an old cursor.
  - Movement clamps to [0, len - 1]; there is no error path for going past
    either end.

Thread safety:
  This class is NOT thread-safe.  The host must serialise calls (one
  event loop, one thread).
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional

from graph import GraphModel, GraphNode
from algorithms import Trace, TraceGenerator, TraceStep


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Position:
    trace:  Trace
    cursor: int = 0


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        graph     : The graph every trace is generated for.
        generator : Produces a Trace from (graph, start).
        on_step   : Optional callback(TraceStep) fired after init and after
                    every move that changes the cursor.  Hosts hook their
                    re-render here.
    """

    def __init__(
        self,
        graph: GraphModel,
        generator: Optional[TraceGenerator] = None,
        on_step: Optional[Callable[[TraceStep], None]] = None,
    ):
        self.graph:     GraphModel     = graph
        self.generator: TraceGenerator = generator or TraceGenerator()
        self.on_step:   Optional[Callable[[TraceStep], None]] = on_step
        self._position: Optional[_Position] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def init(self, start: GraphNode) -> None:
        """
        Generate a fresh trace from `start` and point at its first step.

        Raises:
            InvalidStartError: `start` is not part of `graph`.
        """
        trace = self.generator.generate(self.graph, start)
        self._position = _Position(trace=trace, cursor=0)
        logger.debug("Stepper loaded %r", trace)
        self._notify()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False (and does nothing) at the last step."""
        return self._move(self.cursor + 1)

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False (and does nothing) at the first step."""
        return self._move(self.cursor - 1)

    def goto(self, index: int) -> bool:
        """Jump to `index`, clamped into the trace."""
        return self._move(index)

    def rewind(self) -> bool:
        return self._move(0)

    def jump_to_end(self) -> bool:
        trace = self.trace
        if trace is None:
            return False
        return self._move(len(trace) - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self._position is not None

    @property
    def trace(self) -> Optional[Trace]:
        return self._position.trace if self._position else None

    @property
    def cursor(self) -> int:
        return self._position.cursor if self._position else 0

    @property
    def current_step(self) -> Optional[TraceStep]:
        pos = self._position
        if pos is None:
            return None
        return pos.trace[pos.cursor]

    @property
    def at_start(self) -> bool:
        pos = self._position
        return pos is None or pos.cursor == 0

    @property
    def at_end(self) -> bool:
        pos = self._position
        return pos is None or pos.cursor == len(pos.trace) - 1

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _move(self, index: int) -> bool:
        pos = self._position
        if pos is None:
            return False
        index = max(0, min(len(pos.trace) - 1, index))
        if index == pos.cursor:
            return False
        self._position = replace(pos, cursor=index)
        self._notify()
        return True

    def _notify(self) -> None:
        step = self.current_step
        if self.on_step and step is not None:
            self.on_step(step)
