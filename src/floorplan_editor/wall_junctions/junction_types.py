# File: src/floorplan_editor/wall_junctions/junction_types.py

"""Data models for wall junction trimming.

Defines the core types used throughout the wall geometry, junction
detection, trim resolution and gap ordering pipeline. All coordinates are
2D drawing units; layer and wall thicknesses in configuration are inches.

Key Types:
    WallClass: Interior or exterior construction
    Wall: Input wall record owned by the floor-plan model
    WallTypeConfig: Static assembly (thickness, layer stack, studs)
    WallGeometry: Derived local frame, edge corners and finish lines
    Junction: One detected L-corner, T-junction or crossing
    TrimRecord: Per-wall accumulator of trims, gaps and flags
    TrimMap: Complete result handed to renderers
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Any
from enum import Enum

Point2D = Tuple[float, float]
Vector2D = Tuple[float, float]


# =============================================================================
# Enumerations
# =============================================================================


class WallClass(Enum):
    """Construction class of a wall type."""

    INTERIOR = "interior"
    """Drywall on both faces."""

    EXTERIOR = "exterior"
    """Siding on the outside face, drywall on the inside face."""


class WallEnd(Enum):
    """One end of a wall segment."""

    START = "start"
    END = "end"

    @property
    def opposite(self) -> "WallEnd":
        return WallEnd.END if self is WallEnd.START else WallEnd.START


class Side(Enum):
    """Side of a wall relative to its start→end direction.

    LEFT is the positive perpendicular (90 degrees counter-clockwise from
    the wall direction), RIGHT the negative one.
    """

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class LayerKind(Enum):
    """Material classification of an assembly layer."""

    SIDING = "siding"
    HOUSE_WRAP = "house_wrap"
    SHEATHING = "sheathing"
    INSULATION = "insulation"
    VAPOR_BARRIER = "vapor_barrier"
    STUD_CAVITY = "stud_cavity"
    DRYWALL = "drywall"


class JunctionType(Enum):
    """Classification of how two walls meet."""

    L_CORNER = "l_corner"
    """Two walls whose endpoints coincide."""

    T_JUNCTION = "t_junction"
    """One wall's endpoint terminates against another wall's body."""

    CROSS = "cross"
    """Two wall bodies cross mid-span, no shared endpoint."""


# =============================================================================
# Configuration Models
# =============================================================================


@dataclass
class WallLayer:
    """A single layer in a wall assembly.

    Attributes:
        name: Human-readable layer name (e.g., "Sheathing").
        kind: Material classification used to locate finish lines.
        thickness: Relative layer thickness in inches. The stack is scaled
                   to the wall's total thickness.
        color: Fill color used by detailed renderers.
        pattern: Optional hatch pattern tag (e.g., "siding", "cavity").
    """

    name: str
    kind: LayerKind
    thickness: float
    color: str = "#E8E4DF"
    pattern: Optional[str] = None


@dataclass
class StudSpec:
    """Stud framing inside the cavity layer. All values in inches."""

    spacing: float
    width: float
    depth: float
    color: str = "#DEB887"


@dataclass
class WallTypeConfig:
    """Static wall-type configuration.

    Layers are ordered from exterior to interior (outside to inside). For
    interior walls the order runs from one drywall face to the other.

    Attributes:
        tag: Type tag referenced by Wall.wall_type (e.g., "exterior-2x4").
        wall_class: INTERIOR or EXTERIOR.
        thickness: Total wall thickness in inches.
        label: Short display label.
        full_label: Long display label.
        default_height: Default wall height in inches.
        layers: Ordered layer stack.
        studs: Optional stud specification.
    """

    tag: str
    wall_class: WallClass
    thickness: float
    label: str = ""
    full_label: str = ""
    default_height: float = 96.0
    layers: List[WallLayer] = field(default_factory=list)
    studs: Optional[StudSpec] = None

    @property
    def is_exterior(self) -> bool:
        return self.wall_class is WallClass.EXTERIOR

    @property
    def layer_thickness_sum(self) -> float:
        """Sum of the relative layer thicknesses in inches."""
        return sum(layer.thickness for layer in self.layers)

    def to_dict(self) -> Dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "tag": self.tag,
            "wall_class": self.wall_class.value,
            "thickness": self.thickness,
            "label": self.label,
            "full_label": self.full_label,
            "default_height": self.default_height,
            "layers": [
                {
                    "name": l.name,
                    "kind": l.kind.value,
                    "thickness": l.thickness,
                    "color": l.color,
                    "pattern": l.pattern,
                }
                for l in self.layers
            ],
            "studs": None if self.studs is None else {
                "spacing": self.studs.spacing,
                "width": self.studs.width,
                "depth": self.studs.depth,
                "color": self.studs.color,
            },
        }


# =============================================================================
# Wall Models
# =============================================================================


@dataclass(frozen=True)
class Wall:
    """A wall segment as owned by the floor-plan model.

    Attributes:
        id: Unique wall identifier.
        start: Start point (drawing units).
        end: End point (drawing units).
        wall_type: Type tag into the wall-type catalog.
        flipped: Mirror the layer stack across the centerline.
        thickness: Optional thickness override in inches.
    """

    id: str
    start: Point2D
    end: Point2D
    wall_type: str = "interior"
    flipped: bool = False
    thickness: Optional[float] = None

    def point_at(self, end: WallEnd) -> Point2D:
        return self.start if end is WallEnd.START else self.end


@dataclass
class WallGeometry:
    """Local frame and offset lines of one wall.

    Derived from (Wall, WallTypeConfig) and never persisted. Edge corners
    are offset by half the thickness along the perpendicular; finish-line
    points are offset by the signed finish offsets.

    Attributes:
        wall: Source wall record.
        index: Position of the wall in the computation arena.
        thickness: Total thickness in drawing units.
        half_thickness: Half of thickness.
        length: Centerline length.
        direction: Unit vector start → end.
        perpendicular: Unit vector 90 degrees CCW from direction (LEFT).
        is_exterior: True for exterior wall classes.
        start_left, start_right, end_left, end_right: Edge corners.
        left_finish_offset, right_finish_offset: Signed offsets of the
            finish lines from the centerline, or None.
        start_left_finish, end_left_finish, start_right_finish,
        end_right_finish: Finish line endpoints, or None.
    """

    wall: Wall
    index: int
    thickness: float
    half_thickness: float
    length: float
    direction: Vector2D
    perpendicular: Vector2D
    is_exterior: bool
    start_left: Point2D
    start_right: Point2D
    end_left: Point2D
    end_right: Point2D
    left_finish_offset: Optional[float] = None
    right_finish_offset: Optional[float] = None
    start_left_finish: Optional[Point2D] = None
    end_left_finish: Optional[Point2D] = None
    start_right_finish: Optional[Point2D] = None
    end_right_finish: Optional[Point2D] = None

    @property
    def wall_id(self) -> str:
        return self.wall.id

    @property
    def interior_side(self) -> Optional[Side]:
        """Side carrying the drywall finish of an exterior wall.

        The unflipped layer stack runs from the right (siding) to the left
        (drywall); flipping mirrors it. Interior walls have drywall on both
        sides and return None.
        """
        if not self.is_exterior:
            return None
        return Side.RIGHT if self.wall.flipped else Side.LEFT

    def center_point(self, end: WallEnd) -> Point2D:
        return self.wall.point_at(end)

    def edge_point(self, end: WallEnd, side: Side) -> Point2D:
        return getattr(self, f"{end.value}_{side.value}")

    def finish_point(self, end: WallEnd, side: Side) -> Optional[Point2D]:
        return getattr(self, f"{end.value}_{side.value}_finish")

    def finish_offset(self, side: Side) -> Optional[float]:
        return getattr(self, f"{side.value}_finish_offset")

    def has_finish(self, side: Side) -> bool:
        return self.finish_offset(side) is not None


# =============================================================================
# Junction / Trim Models
# =============================================================================


@dataclass
class Junction:
    """A detected relationship between two walls.

    Walls are referenced by arena index. For T-junctions, ``first`` is the
    incoming wall and ``second`` the host.

    Attributes:
        junction_type: L_CORNER, T_JUNCTION or CROSS.
        first: Arena index of the first (or incoming) wall.
        second: Arena index of the second (or host) wall.
        first_end: End of the first wall at the junction (None for CROSS).
        second_end: End of the second wall at the junction (L_CORNER only).
        point: Junction point on the first wall's centerline.
        host_t: Parameter along the host centerline (T_JUNCTION), or along
            the first wall (CROSS).
        other_t: Parameter along the second wall (CROSS only).
    """

    junction_type: JunctionType
    first: int
    second: int
    first_end: Optional[WallEnd] = None
    second_end: Optional[WallEnd] = None
    point: Point2D = (0.0, 0.0)
    host_t: Optional[float] = None
    other_t: Optional[float] = None


@dataclass
class Gap:
    """An interval removed from a wall's edge or finish line.

    Attributes:
        start: Gap start on the owning line (nearer the line's start).
        end: Gap end on the owning line.
        t: Junction parameter on the host centerline, if known.
        t_start: Parameter of ``start`` along the owning line (0..1).
        t_end: Parameter of ``end`` along the owning line (0..1).
    """

    start: Point2D
    end: Point2D
    t: Optional[float] = None
    t_start: Optional[float] = None
    t_end: Optional[float] = None


@dataclass
class Connector:
    """Short segment closing a finish-line opening at an interior T."""

    start: Point2D
    end: Point2D


@dataclass
class TrimRecord:
    """Mutable per-wall accumulator of trim data.

    A None override means "use the natural corner". Gap lists are filled
    during resolution and sorted by distance from each line's start before
    being handed to renderers.
    """

    wall_id: str
    start_left_trim: Optional[Point2D] = None
    start_right_trim: Optional[Point2D] = None
    end_left_trim: Optional[Point2D] = None
    end_right_trim: Optional[Point2D] = None
    start_left_finish_trim: Optional[Point2D] = None
    start_right_finish_trim: Optional[Point2D] = None
    end_left_finish_trim: Optional[Point2D] = None
    end_right_finish_trim: Optional[Point2D] = None
    left_edge_gaps: List[Gap] = field(default_factory=list)
    right_edge_gaps: List[Gap] = field(default_factory=list)
    left_finish_gaps: List[Gap] = field(default_factory=list)
    right_finish_gaps: List[Gap] = field(default_factory=list)
    start_has_t: bool = False
    end_has_t: bool = False
    start_host_is_exterior: Optional[bool] = None
    end_host_is_exterior: Optional[bool] = None
    connectors: List[Connector] = field(default_factory=list)

    def get_trim(
        self, end: WallEnd, side: Side, finish: bool = False
    ) -> Optional[Point2D]:
        """Get the edge (or finish-line) override at one corner."""
        return getattr(self, _trim_attr(end, side, finish))

    def set_trim(
        self, end: WallEnd, side: Side, point: Point2D, finish: bool = False
    ) -> None:
        """Set the edge (or finish-line) override at one corner."""
        setattr(self, _trim_attr(end, side, finish), point)

    def gaps(self, side: Side, finish: bool = False) -> List[Gap]:
        """Gap list for one edge or finish line."""
        kind = "finish" if finish else "edge"
        return getattr(self, f"{side.value}_{kind}_gaps")

    def has_t(self, end: WallEnd) -> bool:
        return getattr(self, f"{end.value}_has_t")

    def mark_t(self, end: WallEnd, host_is_exterior: bool) -> None:
        setattr(self, f"{end.value}_has_t", True)
        setattr(self, f"{end.value}_host_is_exterior", host_is_exterior)

    def is_end_trimmed(self, end: WallEnd) -> bool:
        """True if either edge at this end carries an override."""
        return (
            self.get_trim(end, Side.LEFT) is not None
            or self.get_trim(end, Side.RIGHT) is not None
        )

    def to_dict(self, precision: int = 4) -> Dict:
        """Serialize to JSON-compatible dictionary."""
        result: Dict[str, Any] = {}
        for end in WallEnd:
            for side in Side:
                for finish in (False, True):
                    key = _trim_attr(end, side, finish)
                    result[key] = _serialize_point(
                        getattr(self, key), precision
                    )
        for side in Side:
            for finish in (False, True):
                kind = "finish" if finish else "edge"
                result[f"{side.value}_{kind}_gaps"] = [
                    _serialize_gap(g, precision) for g in self.gaps(side, finish)
                ]
        for end in WallEnd:
            result[f"{end.value}_has_t"] = self.has_t(end)
            result[f"{end.value}_host_is_exterior"] = getattr(
                self, f"{end.value}_host_is_exterior"
            )
        result["connectors"] = [
            {
                "start": _serialize_point(c.start, precision),
                "end": _serialize_point(c.end, precision),
            }
            for c in self.connectors
        ]
        return result


@dataclass
class TrimMap:
    """Complete trim computation result.

    The main output of the pipeline. Holds the per-wall trim records keyed
    by wall id, the derived geometries and the detected junctions. Walls
    without geometry (zero length) have no entry.

    Attributes:
        trims: Trim records keyed by wall_id.
        geometries: Wall geometry keyed by wall_id.
        junctions: All detected junctions (arena indices).
        trace: Junction trace events, populated only when tracing is on.
    """

    trims: Dict[str, TrimRecord] = field(default_factory=dict)
    geometries: Dict[str, WallGeometry] = field(default_factory=dict)
    junctions: List[Junction] = field(default_factory=list)
    trace: List[Any] = field(default_factory=list)

    def __contains__(self, wall_id: str) -> bool:
        return wall_id in self.trims

    def __getitem__(self, wall_id: str) -> TrimRecord:
        return self.trims[wall_id]

    def __len__(self) -> int:
        return len(self.trims)

    def get(self, wall_id: str) -> Optional[TrimRecord]:
        """Get the trim record for a wall, or None if it has no geometry."""
        return self.trims.get(wall_id)

    def to_dict(self, precision: int = 4) -> Dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "version": "1.0",
            "wall_count": len(self.trims),
            "trims": {
                wall_id: record.to_dict(precision)
                for wall_id, record in self.trims.items()
            },
            "summary": self._build_summary(),
        }

    def _build_summary(self) -> Dict:
        """Build summary statistics."""
        type_counts: Dict[str, int] = {}
        for junction in self.junctions:
            key = junction.junction_type.value
            type_counts[key] = type_counts.get(key, 0) + 1

        return {
            "l_corners": type_counts.get("l_corner", 0),
            "t_junctions": type_counts.get("t_junction", 0),
            "crossings": type_counts.get("cross", 0),
            "total_junctions": len(self.junctions),
        }


# =============================================================================
# Serialization Helpers
# =============================================================================


def _trim_attr(end: WallEnd, side: Side, finish: bool) -> str:
    middle = "_finish" if finish else ""
    return f"{end.value}_{side.value}{middle}_trim"


def _serialize_point(point: Optional[Point2D], precision: int) -> Optional[Dict]:
    if point is None:
        return None
    return {"x": round(point[0], precision), "y": round(point[1], precision)}


def _serialize_gap(gap: Gap, precision: int) -> Dict:
    result = {
        "start": _serialize_point(gap.start, precision),
        "end": _serialize_point(gap.end, precision),
    }
    for key in ("t", "t_start", "t_end"):
        value = getattr(gap, key)
        result[key] = None if value is None else round(value, 6)
    return result
