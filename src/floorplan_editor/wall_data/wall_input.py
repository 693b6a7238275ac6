# File: src/floorplan_editor/wall_data/wall_input.py

"""JSON input validation for the wall junction engine.

Validates plain dict / JSON payloads from the editor's floor-plan state into
the engine's Wall and WallTypeConfig records. Payload keys follow the
editor's camelCase names; snake_case names are accepted as well.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from floorplan_editor.config.junctions import JunctionTolerances
from floorplan_editor.wall_junctions.junction_resolver import compute_wall_trims
from floorplan_editor.wall_junctions.junction_types import (
    LayerKind,
    StudSpec,
    TrimMap,
    Wall,
    WallClass,
    WallLayer,
    WallTypeConfig,
)

logger = logging.getLogger(__name__)


class PointModel(BaseModel):
    """2D point in drawing units."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @model_validator(mode='before')
    @classmethod
    def accept_sequence(cls, data: Any) -> Any:
        """Accept [x, y] pairs as well as {"x": .., "y": ..} objects."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("Point must have exactly two coordinates")
            return {"x": data[0], "y": data[1]}
        return data

    def as_tuple(self):
        return (self.x, self.y)


class WallModel(BaseModel):
    """A wall record as stored by the editor."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Unique wall id", min_length=1)
    start: PointModel
    end: PointModel
    wall_type: str = Field(
        default="interior",
        alias="wallType",
        description="Wall type tag (e.g., 'exterior', 'partition')",
    )
    flipped: bool = Field(default=False, description="Mirror the layer stack")
    thickness: Optional[float] = Field(
        default=None,
        gt=0,
        description="Thickness override in inches",
    )

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Editor ids may be numeric."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_wall(self) -> Wall:
        return Wall(
            id=self.id,
            start=self.start.as_tuple(),
            end=self.end.as_tuple(),
            wall_type=self.wall_type,
            flipped=self.flipped,
            thickness=self.thickness,
        )


class LayerModel(BaseModel):
    """One layer of a wall assembly."""
    name: str
    kind: LayerKind
    thickness: float = Field(gt=0, description="Relative thickness in inches")
    color: str = "#E8E4DF"
    pattern: Optional[str] = None


class StudModel(BaseModel):
    """Stud framing specification in inches."""
    spacing: float = Field(gt=0)
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    color: str = "#DEB887"


class WallTypeModel(BaseModel):
    """A wall-type configuration."""
    model_config = ConfigDict(populate_by_name=True)

    tag: str = Field(min_length=1)
    wall_class: WallClass = Field(alias="wallClass")
    thickness: float = Field(gt=0, description="Total thickness in inches")
    label: str = ""
    full_label: str = Field(default="", alias="fullLabel")
    default_height: float = Field(default=96.0, gt=0, alias="defaultHeight")
    layers: List[LayerModel] = Field(default_factory=list)
    studs: Optional[StudModel] = None

    @model_validator(mode='after')
    def validate_layers(self) -> 'WallTypeModel':
        """Exterior stacks must run from siding to drywall."""
        if self.wall_class is WallClass.EXTERIOR and self.layers:
            if self.layers[0].kind is not LayerKind.SIDING:
                logger.warning(
                    "Exterior wall type %s does not start with a siding layer",
                    self.tag,
                )
            if self.layers[-1].kind is not LayerKind.DRYWALL:
                logger.warning(
                    "Exterior wall type %s does not end with a drywall layer",
                    self.tag,
                )
        return self

    def to_config(self) -> WallTypeConfig:
        return WallTypeConfig(
            tag=self.tag,
            wall_class=self.wall_class,
            thickness=self.thickness,
            label=self.label,
            full_label=self.full_label,
            default_height=self.default_height,
            layers=[
                WallLayer(l.name, l.kind, l.thickness, l.color, l.pattern)
                for l in self.layers
            ],
            studs=None if self.studs is None else StudSpec(
                spacing=self.studs.spacing,
                width=self.studs.width,
                depth=self.studs.depth,
                color=self.studs.color,
            ),
        )


class TolerancesModel(BaseModel):
    """Optional overrides of the junction tolerances."""
    model_config = ConfigDict(extra='forbid')

    corner_min_tolerance: Optional[float] = None
    corner_margin: Optional[float] = None
    t_endpoint_band: Optional[float] = None
    t_margin: Optional[float] = None
    t_min_tolerance: Optional[float] = None
    cross_endpoint_band: Optional[float] = None
    miter_guard_factor: Optional[float] = None
    parallel_epsilon: Optional[float] = None
    turn_epsilon: Optional[float] = None

    def to_tolerances(self) -> JunctionTolerances:
        overrides = self.model_dump(exclude_none=True)
        return JunctionTolerances(**overrides).validate()


class FloorplanPayload(BaseModel):
    """Complete trim computation request."""
    model_config = ConfigDict(populate_by_name=True)

    walls: List[WallModel] = Field(default_factory=list)
    wall_types: List[WallTypeModel] = Field(default_factory=list, alias="wallTypes")
    tolerances: Optional[TolerancesModel] = None
    trace: bool = False

    @model_validator(mode='after')
    def validate_unique_ids(self) -> 'FloorplanPayload':
        """Wall ids and wall type tags must be unique."""
        seen = set()
        for wall in self.walls:
            if wall.id in seen:
                raise ValueError(f"Duplicate wall id: {wall.id}")
            seen.add(wall.id)

        tags = [wt.tag for wt in self.wall_types]
        if len(tags) != len(set(tags)):
            raise ValueError("Duplicate wall type tag")
        return self


def _as_payload(payload: Union[str, bytes, Dict, List]) -> FloorplanPayload:
    if isinstance(payload, (str, bytes)):
        return FloorplanPayload.model_validate_json(payload)
    if isinstance(payload, list):
        return FloorplanPayload.model_validate({"walls": payload})
    return FloorplanPayload.model_validate(payload)


def parse_walls(payload: Union[str, bytes, Dict, List]) -> List[Wall]:
    """
    Validate wall records.

    Args:
        payload: A list of wall dicts, a dict with a "walls" key, or the
                 equivalent JSON text.

    Returns:
        Validated Wall records in input order.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
    """
    return [model.to_wall() for model in _as_payload(payload).walls]


def parse_wall_types(payload: Union[str, bytes, Dict, List]) -> Dict[str, WallTypeConfig]:
    """
    Validate wall-type configurations.

    Args:
        payload: A list of wall-type dicts, a dict with a "wallTypes" key, or
                 the equivalent JSON text.

    Returns:
        Configs keyed by tag.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
    """
    if isinstance(payload, list):
        payload = {"wallTypes": payload}
    parsed = _as_payload(payload)
    return {model.tag: model.to_config() for model in parsed.wall_types}


def compute_trims_from_payload(payload: Union[str, bytes, Dict, List]) -> TrimMap:
    """
    Validate a payload and run the trim pipeline on it.

    Args:
        payload: Walls plus optional "wallTypes", "tolerances" and "trace".

    Returns:
        The computed TrimMap.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
        ValueError: If the tolerance overrides are out of range.
    """
    parsed = _as_payload(payload)
    walls = [model.to_wall() for model in parsed.walls]
    wall_types = {model.tag: model.to_config() for model in parsed.wall_types}
    tolerances = parsed.tolerances.to_tolerances() if parsed.tolerances else None

    logger.debug(
        "Parsed payload: %d walls, %d custom wall types", len(walls), len(wall_types)
    )
    return compute_wall_trims(
        walls,
        wall_types=wall_types or None,
        tolerances=tolerances,
        trace=parsed.trace,
    )
