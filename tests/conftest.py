"""
Pytest configuration and fixtures
"""

import sys
import os
import json

import pytest

# Add src to Python path for all tests
tests_dir = os.path.dirname(__file__)
project_root = os.path.dirname(tests_dir)
src_path = os.path.join(project_root, "src")
src_path = os.path.abspath(src_path)

if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def topo_record():
    """Raw JSON record of a south-facing wall near Innsbruck"""
    return {
        "name": "Testwand",
        "description": "Sonnige Wand im Inntal",
        "author": "Felsverzeichnis",
        "coordinates": [11.3, 47.3],
        "wallAzimuth": 180,
        "altitude": 600,
        "timezone": "Europe/Vienna",
        "routes": [
            {"id": "sonnenweg", "name": "Sonnenweg"},
            {"id": "ostkante", "name": "Ostkante", "orientation": [1, 0, 0]},
        ],
    }


@pytest.fixture
def entries_dir(tmp_path, topo_record):
    """Entries tree with one topo at europe/austria/tirol/testwand"""
    crag_dir = tmp_path / "europe" / "austria" / "tirol" / "testwand"
    crag_dir.mkdir(parents=True)
    (crag_dir / "testwand-topo.json").write_text(
        json.dumps(topo_record), encoding="utf-8"
    )
    return tmp_path
