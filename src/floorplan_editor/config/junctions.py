# File: src/floorplan_editor/config/junctions.py

"""
Tolerance configuration for junction detection and trim resolution.

All distances are drawing units. Parametric bands are fractions of a wall's
centerline length.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class JunctionTolerances:
    """
    Numeric thresholds used by the detector and resolver.

    Attributes:
        corner_min_tolerance: Floor for the endpoint coincidence distance.
        corner_margin: Added to the larger half-thickness for the corner
            distance test.
        t_endpoint_band: Host parameter band excluded from T detection at
            each end. A parameter exactly on the band is not a T.
        t_margin: Added to the average thickness for the T distance test.
        t_min_tolerance: Floor for the T distance test.
        cross_endpoint_band: Parameter band excluded from crossings on both
            walls.
        miter_guard_factor: Trim points farther than this multiple of the
            larger half-thickness from the junction point are discarded.
        parallel_epsilon: Direction cross products below this are parallel.
        turn_epsilon: Corner away-vector cross products at or below this are
            collinear.
    """

    corner_min_tolerance: float = 40.0
    corner_margin: float = 15.0
    t_endpoint_band: float = 0.02
    t_margin: float = 15.0
    t_min_tolerance: float = 40.0
    cross_endpoint_band: float = 0.05
    miter_guard_factor: float = 8.0
    parallel_epsilon: float = 1e-4
    turn_epsilon: float = 1e-3

    def validate(self) -> "JunctionTolerances":
        """
        Check that every threshold is usable.

        Returns:
            self, so the call can be chained

        Raises:
            ValueError: If a value is out of range
        """
        for name in (
            "corner_min_tolerance",
            "corner_margin",
            "t_margin",
            "t_min_tolerance",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        for name in ("t_endpoint_band", "cross_endpoint_band"):
            value = getattr(self, name)
            if not 0.0 <= value < 0.5:
                raise ValueError(f"{name} must be in [0, 0.5), got {value}")

        for name in ("miter_guard_factor", "parallel_epsilon", "turn_epsilon"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        return self

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_TOLERANCES = JunctionTolerances()
