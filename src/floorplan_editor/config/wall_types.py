# File: src/floorplan_editor/config/wall_types.py

"""
Wall-type catalog for the floor-plan editor.

Each entry describes one wall assembly: total thickness, display labels,
default height and an ordered layer stack running from the exterior face to
the interior face. All dimensions are stored in inches; geometry code scales
them to drawing units through config.units.
"""

import logging
from typing import Dict, List, Optional

from floorplan_editor.wall_junctions.junction_types import (
    LayerKind,
    StudSpec,
    WallClass,
    WallLayer,
    WallTypeConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_WALL_TYPE = "interior"


# =============================================================================
# Layer Stacks
# =============================================================================

_EXTERIOR_2X6_LAYERS = [
    WallLayer("Siding", LayerKind.SIDING, 1.2, "#8B7355", "siding"),
    WallLayer("House Wrap", LayerKind.HOUSE_WRAP, 0.2, "#f0f0f0", "solid"),
    WallLayer("Sheathing", LayerKind.SHEATHING, 0.8, "#C4A574", "plywood"),
    WallLayer("Insulation", LayerKind.INSULATION, 5.0, "#FFD1DC", "insulation"),
    WallLayer("Vapor Barrier", LayerKind.VAPOR_BARRIER, 0.2, "#87CEEB", "solid"),
    WallLayer("Drywall", LayerKind.DRYWALL, 0.6, "#E8E4DF", "solid"),
]

_EXTERIOR_2X4_LAYERS = [
    WallLayer("Siding", LayerKind.SIDING, 1.0, "#8B7355", "siding"),
    WallLayer("House Wrap", LayerKind.HOUSE_WRAP, 0.2, "#f0f0f0", "solid"),
    WallLayer("Sheathing", LayerKind.SHEATHING, 0.6, "#C4A574", "plywood"),
    WallLayer("Insulation", LayerKind.INSULATION, 3.2, "#FFD1DC", "insulation"),
    WallLayer("Vapor Barrier", LayerKind.VAPOR_BARRIER, 0.2, "#87CEEB", "solid"),
    WallLayer("Drywall", LayerKind.DRYWALL, 0.6, "#E8E4DF", "solid"),
]


def _interior_layers(drywall: float, cavity: float) -> List[WallLayer]:
    """Drywall / stud cavity / drywall stack."""
    return [
        WallLayer("Drywall", LayerKind.DRYWALL, drywall, "#E8E4DF", "solid"),
        WallLayer("Stud Cavity", LayerKind.STUD_CAVITY, cavity, "#2a2a2a", "cavity"),
        WallLayer("Drywall", LayerKind.DRYWALL, drywall, "#E8E4DF", "solid"),
    ]


# =============================================================================
# Catalog
# =============================================================================

WALL_TYPES: Dict[str, WallTypeConfig] = {
    "interior": WallTypeConfig(
        tag="interior",
        wall_class=WallClass.INTERIOR,
        thickness=6.0,
        label="Int 2×4",
        full_label="Interior 2×4",
        default_height=96.0,
        layers=_interior_layers(0.6, 3.3),
        studs=StudSpec(spacing=16.0, width=1.5, depth=3.5),
    ),
    "exterior": WallTypeConfig(
        tag="exterior",
        wall_class=WallClass.EXTERIOR,
        thickness=10.0,
        label="Ext 2×6",
        full_label="Exterior 2×6",
        default_height=96.0,
        layers=_EXTERIOR_2X6_LAYERS,
        studs=StudSpec(spacing=16.0, width=1.5, depth=5.5),
    ),
    "partition": WallTypeConfig(
        tag="partition",
        wall_class=WallClass.INTERIOR,
        thickness=4.0,
        label="Partition",
        full_label="Partition 2×3",
        default_height=84.0,
        layers=_interior_layers(0.5, 2.5),
        studs=StudSpec(spacing=24.0, width=1.5, depth=2.5),
    ),
    "half-wall": WallTypeConfig(
        tag="half-wall",
        wall_class=WallClass.INTERIOR,
        thickness=6.0,
        label="Half Wall",
        full_label="Half Wall 2×4",
        default_height=42.0,
        layers=_interior_layers(0.6, 3.3),
        studs=StudSpec(spacing=16.0, width=1.5, depth=3.5),
    ),
    "interior-2x6": WallTypeConfig(
        tag="interior-2x6",
        wall_class=WallClass.INTERIOR,
        thickness=8.0,
        label="Int 2×6",
        full_label="Interior 2×6",
        default_height=96.0,
        layers=_interior_layers(0.6, 5.3),
        studs=StudSpec(spacing=16.0, width=1.5, depth=5.5),
    ),
    "exterior-2x4": WallTypeConfig(
        tag="exterior-2x4",
        wall_class=WallClass.EXTERIOR,
        thickness=8.0,
        label="Ext 2×4",
        full_label="Exterior 2×4",
        default_height=96.0,
        layers=_EXTERIOR_2X4_LAYERS,
        studs=StudSpec(spacing=16.0, width=1.5, depth=3.5),
    ),
}


def get_wall_type_config(
    tag: Optional[str],
    catalog: Optional[Dict[str, WallTypeConfig]] = None,
) -> WallTypeConfig:
    """
    Look up a wall-type configuration by tag.

    Unknown tags fall back to the interior configuration with a warning so
    that a bad tag degrades to plain linework instead of failing.

    Args:
        tag: Wall type tag (e.g., "exterior", "partition")
        catalog: Optional catalog overriding the built-in WALL_TYPES

    Returns:
        The matching WallTypeConfig
    """
    types = WALL_TYPES if catalog is None else catalog
    config = types.get(tag) if tag is not None else None
    if config is not None:
        return config

    logger.warning(
        "Unknown wall type %r, falling back to %r", tag, DEFAULT_WALL_TYPE
    )
    fallback = types.get(DEFAULT_WALL_TYPE)
    if fallback is None:
        fallback = WALL_TYPES[DEFAULT_WALL_TYPE]
    return fallback


def list_wall_types() -> List[str]:
    """Get the list of built-in wall type tags."""
    return list(WALL_TYPES.keys())
