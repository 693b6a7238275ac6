# File: src/floorplan_editor/wall_junctions/__init__.py

"""Wall junction trim engine.

Detects how walls meet (L-corners, T-junctions, mid-span crossings) and
computes per-wall edge and finish-line trims, gaps and connectors so the
floor plan renders as continuous architectural linework.

Usage:
    from floorplan_editor.wall_junctions import compute_wall_trims, Wall

    trim_map = compute_wall_trims([
        Wall("A", (0, 0), (200, 0), "exterior"),
        Wall("B", (200, 0), (200, 150), "exterior"),
    ])
    trims_json = json.dumps(trim_map.to_dict(), indent=2)

    # Drawable primitives per wall
    linework = build_linework(trim_map)
"""

from .junction_types import (
    Point2D,
    WallClass,
    WallEnd,
    Side,
    LayerKind,
    JunctionType,
    WallLayer,
    StudSpec,
    WallTypeConfig,
    Wall,
    WallGeometry,
    Junction,
    Gap,
    Connector,
    TrimRecord,
    TrimMap,
)

from .wall_geometry import (
    build_wall_geometry,
    build_wall_geometries,
    compute_finish_offsets,
)

from .junction_detector import detect_junctions

from .junction_trace import JunctionTracer, JunctionTraceEvent

from .gap_sorting import make_gap, sort_gaps, sort_wall_gaps

from .junction_resolver import (
    compute_wall_trims,
    resolve_junctions,
)

from .wall_linework import WallLinework, build_wall_linework, build_linework

__all__ = [
    # Main entry point
    "compute_wall_trims",
    # Types
    "Point2D",
    "WallClass",
    "WallEnd",
    "Side",
    "LayerKind",
    "JunctionType",
    "WallLayer",
    "StudSpec",
    "WallTypeConfig",
    "Wall",
    "WallGeometry",
    "Junction",
    "Gap",
    "Connector",
    "TrimRecord",
    "TrimMap",
    # Geometry
    "build_wall_geometry",
    "build_wall_geometries",
    "compute_finish_offsets",
    # Detector
    "detect_junctions",
    # Resolver
    "resolve_junctions",
    # Gaps
    "make_gap",
    "sort_gaps",
    "sort_wall_gaps",
    # Trace
    "JunctionTracer",
    "JunctionTraceEvent",
    # Renderer interface
    "WallLinework",
    "build_wall_linework",
    "build_linework",
]
