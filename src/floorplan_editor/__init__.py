# File: src/floorplan_editor/__init__.py

"""Floor-plan editor wall junction engine."""

# wall_junctions must load before config: the wall-type catalog depends on
# its data types.
from floorplan_editor.wall_junctions import (
    Wall,
    WallTypeConfig,
    TrimMap,
    compute_wall_trims,
    build_linework,
)
from floorplan_editor.config import (
    WALL_TYPES,
    JunctionTolerances,
    DEFAULT_TOLERANCES,
    get_wall_type_config,
)

__version__ = "0.1.0"
