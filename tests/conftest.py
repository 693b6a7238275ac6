# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from floorplan_editor.utils.logging_config import FloorplanLogger


@pytest.fixture
def trace_logging(caplog):
    """Capture records down to the TRACE level."""
    caplog.set_level(FloorplanLogger.TRACE_LEVEL)
    return caplog
