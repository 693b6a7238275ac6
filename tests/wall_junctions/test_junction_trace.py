# File: tests/wall_junctions/test_junction_trace.py

"""Tests for the junction tracer."""

from floorplan_editor.wall_junctions.junction_trace import JunctionTracer


class TestJunctionTracer:
    """Tests for JunctionTracer."""

    def test_disabled_records_nothing(self):
        tracer = JunctionTracer()
        tracer.record("l_corner", ("A", "B"), ("end", "start"), (0.0, 0.0), turn="cw")
        assert len(tracer) == 0

    def test_enabled_records_event(self):
        tracer = JunctionTracer(enabled=True)
        tracer.record("cross", ["M", "N"], point=(100.0, 50.0), gaps_first=4)
        assert len(tracer) == 1
        event = tracer.events[0]
        assert event.wall_ids == ("M", "N")
        assert event.details == {"gaps_first": 4}

    def test_event_to_dict(self):
        tracer = JunctionTracer(enabled=True)
        tracer.record("t_junction", ("I", "H"), ("start", None), (150.0, 0.0), near_side="left")
        data = tracer.events[0].to_dict()
        assert data == {
            "kind": "t_junction",
            "wall_ids": ["I", "H"],
            "ends": ["start", None],
            "point": [150.0, 0.0],
            "details": {"near_side": "left"},
        }

    def test_clear(self):
        tracer = JunctionTracer(enabled=True)
        tracer.record("cross", ("M", "N"))
        tracer.clear()
        assert tracer.events == []

    def test_logs_at_trace_level(self, trace_logging):
        tracer = JunctionTracer(enabled=True)
        tracer.record("cross", ("M", "N"))
        assert [r.levelname for r in trace_logging.records] == ["TRACE"]
