# File: src/floorplan_editor/config/__init__.py

"""
Configuration package for the floor-plan editor.
Provides a unified interface to all configuration systems:
- Drawing unit conversion
- Wall-type catalog
- Junction tolerances
"""

from floorplan_editor.config.units import (
    GRID_SIZE,
    GRID_INCHES,
    inches_to_drawing_units,
)

from floorplan_editor.config.wall_types import (
    WALL_TYPES,
    DEFAULT_WALL_TYPE,
    get_wall_type_config,
    list_wall_types,
)

from floorplan_editor.config.junctions import (
    JunctionTolerances,
    DEFAULT_TOLERANCES,
)


def get_system_info() -> dict:
    """
    Returns an overview of the current configuration.
    Useful for debugging and validation.
    """
    return {
        "grid_size": GRID_SIZE,
        "grid_inches": GRID_INCHES,
        "wall_types": {
            tag: {
                "wall_class": config.wall_class.value,
                "thickness": config.thickness,
                "drawing_thickness": inches_to_drawing_units(config.thickness),
            }
            for tag, config in WALL_TYPES.items()
        },
        "tolerances": DEFAULT_TOLERANCES.to_dict(),
    }
