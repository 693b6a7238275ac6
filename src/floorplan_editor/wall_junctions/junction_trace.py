# File: src/floorplan_editor/wall_junctions/junction_trace.py

"""Structured tracing of junction resolution.

A JunctionTracer collects one JunctionTraceEvent per resolved junction
(corner turn direction, T near side, applied or discarded trims) and logs
each event at the TRACE level. A disabled tracer records nothing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from floorplan_editor.utils.logging_config import FloorplanLogger

from .junction_types import Point2D

logger = logging.getLogger(__name__)


@dataclass
class JunctionTraceEvent:
    """One traced resolution step.

    Attributes:
        kind: Event kind (e.g., "l_corner", "t_junction", "cross").
        wall_ids: Walls involved, in resolution order.
        ends: Wall end involved per wall ("start", "end" or None).
        point: Junction point, if any.
        details: Free-form details (turn, near side, applied trims...).
    """

    kind: str
    wall_ids: Tuple[str, ...]
    ends: Tuple[Optional[str], ...] = ()
    point: Optional[Point2D] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "kind": self.kind,
            "wall_ids": list(self.wall_ids),
            "ends": list(self.ends),
            "point": None if self.point is None else list(self.point),
            "details": dict(self.details),
        }


class JunctionTracer:
    """Collects junction trace events when enabled."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.events: List[JunctionTraceEvent] = []

    def record(
        self,
        kind: str,
        wall_ids: Sequence[str],
        ends: Sequence[Optional[str]] = (),
        point: Optional[Point2D] = None,
        **details: Any,
    ) -> None:
        """Record an event. No-op when the tracer is disabled."""
        if not self.enabled:
            return

        event = JunctionTraceEvent(
            kind=kind,
            wall_ids=tuple(wall_ids),
            ends=tuple(ends),
            point=point,
            details=details,
        )
        self.events.append(event)
        logger.log(
            FloorplanLogger.TRACE_LEVEL,
            "%s %s ends=%s point=%s %s",
            kind,
            "/".join(event.wall_ids),
            event.ends,
            point,
            details,
        )

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
