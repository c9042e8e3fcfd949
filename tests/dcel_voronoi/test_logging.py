import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from dcel_voronoi.builder import voronoi
from dcel_voronoi.config import Settings
from dcel_voronoi.log import configure_logging
from dcel_voronoi.relaxation import lloyd_relaxation


SITES = [(0.0, 1.0), (2.0, 3.0), (10.0, 12.0)]


@pytest.fixture
def restore_logging():
    pkg_logger = logging.getLogger("dcel_voronoi")
    level = pkg_logger.level
    yield
    structlog.reset_defaults()
    pkg_logger.setLevel(level)


def test_outside_face_selection_is_logged():
    with capture_logs() as logs:
        voronoi(SITES, 800.0)

    events = [e for e in logs if e["event"] == "outside face selected"]
    assert len(events) == 1
    assert events[0]["outside_face_id"] == 0
    assert events[0]["strategy"] == "most_edges_face"
    assert events[0]["log_level"] == "debug"


def test_relaxation_logs_each_iteration():
    with capture_logs() as logs:
        lloyd_relaxation(SITES, 800.0, iterations=2)

    iterations = [e["iteration"] for e in logs if e["event"] == "relaxation iteration complete"]
    assert iterations == [1, 2]


def test_configure_logging_json(restore_logging, caplog):
    configure_logging(Settings(log_level="DEBUG", log_format="json"))

    with caplog.at_level(logging.DEBUG, logger="dcel_voronoi"):
        voronoi(SITES, 800.0)

    payloads = [json.loads(r.getMessage()) for r in caplog.records if r.name.startswith("dcel_voronoi")]
    selected = [p for p in payloads if p["event"] == "outside face selected"]
    assert selected
    assert selected[0]["outside_face_id"] == 0
    assert selected[0]["level"] == "debug"
    assert selected[0]["logger"] == "dcel_voronoi.diagram"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("VORONOI_DCEL_WELD_DECIMALS", "4")
    monkeypatch.setenv("VORONOI_DCEL_LOG_FORMAT", "json")

    s = Settings()
    assert s.weld_decimals == 4
    assert s.log_format == "json"
    assert s.max_cycle_length == 1_000_000
