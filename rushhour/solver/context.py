"""
Solution Context Module - Caller-side hooks for a running search.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class SolutionContext:
    """
    Hooks a caller passes to a strategy to bound or observe a search.

    Strategies poll is_cancelled() between expansion steps and return a
    cancelled Solution once it is true. A context is owned by one search.

    Attributes:
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback(nodes_expanded, message)
        progress_interval: Expansions between progress reports
    """
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[int, str], None]] = None
    progress_interval: int = 5000

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        self.cancel_flag.set()

    def report_progress(self, nodes_expanded: int, message: str = "") -> None:
        """
        Report progress to the caller every progress_interval expansions.

        Args:
            nodes_expanded: Nodes expanded so far
            message: Optional status message
        """
        if self.progress_callback and nodes_expanded % self.progress_interval == 0:
            self.progress_callback(nodes_expanded, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
