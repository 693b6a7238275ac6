# File: floorplan_editor/config/units.py

"""
Unit conversion for the floor-plan editor.

Wall geometry is computed in drawing units (canvas pixels). One grid cell is
GRID_SIZE drawing units and represents 6 inches at the default scale.
"""

# Base grid size in drawing units (6" at default scale)
GRID_SIZE = 20.0

# Inches represented by one grid cell
GRID_INCHES = 6.0


def inches_to_drawing_units(inches: float) -> float:
    """Converts a length in inches to drawing units (20 units = 6 inches)."""
    return inches * (GRID_SIZE / GRID_INCHES)
