"""Tracing module: records search steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.utils.logging_utils import get_logger

logger = get_logger()


@dataclass
class TraceStep:
    """A single step in a search run."""

    timestamp: float
    step_number: int
    action_type: str  # 'repair', 'expand', 'goal_test', 'solution_found', 'failure'
    variable: Optional[str] = None
    value: Optional[Any] = None
    conflicts: Optional[int] = None  # Violated constraints left after a repair
    conflicted_count: Optional[int] = None
    depth: Optional[int] = None
    frontier_size: Optional[int] = None
    children: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records strategy steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_repair(self, variable: str, value: Any, conflicts: int, conflicted_count: int):
        """Log one min-conflicts reassignment."""
        self._record(
            'repair',
            variable=variable,
            value=str(value),
            conflicts=conflicts,
            conflicted_count=conflicted_count,
        )

    def log_expand(self, depth: int, children: int, frontier_size: int):
        """Log the expansion of a search node."""
        self._record('expand', depth=depth, children=children, frontier_size=frontier_size)

    def log_goal_test(self, depth: int, is_goal: bool):
        self._record('goal_test', depth=depth, reason="goal" if is_goal else None)

    def log_solution_found(self, depth: Optional[int] = None):
        """Log when a solution is found."""
        self._record('solution_found', depth=depth)

    def log_failure(self, reason: str):
        """Log a search that ended without a solution."""
        self._record('failure', reason=reason)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            logger.info("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'variable', 'value',
            'conflicts', 'conflicted_count', 'depth', 'frontier_size', 'children', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        logger.info("Trace written to %s (%d steps)", filepath, len(self.steps))

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_repairs': action_counts.get('repair', 0),
            'num_expansions': action_counts.get('expand', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
