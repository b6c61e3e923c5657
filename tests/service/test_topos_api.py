"""
Tests for the topo sun exposure API
"""

import json
import math

import pytest
from fastapi.testclient import TestClient

from api import topos
from main import app
from utils.solar import SunExposureEngine
from utils.solar.core import StaticSunPositionProvider, SunPositionError
from utils.topo_loader import TopoRepository

CRAG_PATH = "europe/austria/tirol/testwand"


class TestToposApi:
    """Test cases for the topo endpoints"""

    @pytest.fixture
    def provider(self):
        """Sun due east at 45° all day"""
        return StaticSunPositionProvider(azimuth_from_south=-math.pi / 2, altitude=math.pi / 4)

    @pytest.fixture
    def client(self, entries_dir, provider):
        topos.set_services(
            TopoRepository(str(entries_dir)), SunExposureEngine(provider=provider)
        )
        yield TestClient(app)
        topos.set_services(None, None)

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_entries(self, client):
        response = client.get("/topos")

        assert response.status_code == 200
        assert response.json()["entries"] == [
            CRAG_PATH,
            f"{CRAG_PATH}/ostkante",
            f"{CRAG_PATH}/sonnenweg",
        ]

    def test_sun_info(self, client):
        """Averaged route vectors decide the heading of the topo page"""
        response = client.get(f"/topos/{CRAG_PATH}/sun", params={"date": "2024-06-21"})

        assert response.status_code == 200
        data = response.json()
        assert data["path"] == CRAG_PATH
        assert data["route_id"] is None
        # The only route vector (+X) rotated by -180° faces west
        assert data["heading"] == pytest.approx(270.0)
        assert data["direction"] == "West"
        assert data["hours"] == "Schatten den ganzen Tag"
        assert len(data["chart"]["frames"]) == 16
        assert data["chart"]["labels"][0] == "6"
        assert data["chart"]["sunny_hours"] == 0
        assert data["meta"]["title"] == "Testwand - Felsverzeichnis"

    def test_sun_info_for_route(self, client, entries_dir, topo_record):
        """Route pages report the selected route"""
        topo_record["wallAzimuth"] = 0
        (entries_dir / CRAG_PATH / "testwand-topo.json").write_text(
            json.dumps(topo_record), encoding="utf-8"
        )

        response = client.get(
            f"/topos/{CRAG_PATH}/ostkante/sun", params={"date": "2024-06-21"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["route_id"] == "ostkante"
        assert data["direction"] == "Ost"
        assert data["hours"] == "06:00 - 21:00"
        assert set(data["chart"]["conditions"]) == {"Sonne"}

    def test_sun_info_without_geodata(self, client, entries_dir, topo_record):
        topo_record["coordinates"] = [0, 0]
        (entries_dir / CRAG_PATH / "testwand-topo.json").write_text(
            json.dumps(topo_record), encoding="utf-8"
        )

        data = client.get(f"/topos/{CRAG_PATH}/sun").json()

        assert data["hours"] == "Keine Geodaten"
        assert data["chart"] is None

    def test_season(self, client):
        response = client.get(f"/topos/{CRAG_PATH}/season", params={"year": 2024})

        assert response.status_code == 200
        data = response.json()
        assert data["latitude"] == 47.3
        assert data["labels"][0] == "Jan"
        assert len(data["base_temps"]) == 12
        assert len(data["feels_like_temps"]) == 12
        assert len(data["months"]) == 12

    def test_season_without_geodata(self, client, entries_dir, topo_record):
        topo_record["coordinates"] = [0, 0]
        (entries_dir / CRAG_PATH / "testwand-topo.json").write_text(
            json.dumps(topo_record), encoding="utf-8"
        )

        data = client.get(f"/topos/{CRAG_PATH}/season").json()

        assert data["months"] is None
        assert data["base_temps"] == []

    @pytest.mark.parametrize(
        "path", [f"/topos/{CRAG_PATH}/nope/sun", "/topos/asia/unknown/season"]
    )
    def test_not_found(self, client, path):
        assert client.get(path).status_code == 404

    def test_unknown_timezone_is_a_load_error(self, client, entries_dir, topo_record):
        """A record with an unknown timezone is reported, not crashed on"""
        topo_record["timezone"] = "Europe/Nowhere"
        (entries_dir / CRAG_PATH / "testwand-topo.json").write_text(
            json.dumps(topo_record), encoding="utf-8"
        )

        response = client.get(f"/topos/{CRAG_PATH}/sun", params={"date": "2024-06-21"})

        assert response.status_code == 500
        assert "Could not load topo" in response.json()["detail"]
        # The listing still includes the crag, only its routes are skipped
        assert client.get("/topos").json()["entries"] == [CRAG_PATH]

    def test_dot_segments_are_not_found(self, client):
        """Encoded dot segments cannot leave the entries directory"""
        assert client.get("/topos/%2e%2e/secret/sun").status_code == 404

    def test_provider_failure(self, client, entries_dir):
        """Provider errors surface as 422"""

        def failing(timestamp, latitude, longitude):
            raise SunPositionError("no position")

        topos.set_services(
            TopoRepository(str(entries_dir)),
            SunExposureEngine(provider=StaticSunPositionProvider(func=failing)),
        )

        response = client.get(f"/topos/{CRAG_PATH}/sun")

        assert response.status_code == 422
        assert "no position" in response.json()["detail"]

    def test_sun_vector(self, client):
        response = client.get(
            "/sun/vector",
            params={"lat": 47.3, "lng": 11.3, "timestamp": "2024-06-21T11:00:00Z"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["x"] == pytest.approx(15 * math.sin(math.pi / 4))
        assert data["y"] == pytest.approx(15 * math.sin(math.pi / 4))
        assert data["z"] == pytest.approx(0.0, abs=1e-9)


class TestServiceNotInitialized:
    """Endpoints before the lifespan wired the services"""

    def test_service_unavailable(self):
        topos.set_services(None, None)

        assert TestClient(app).get("/topos").status_code == 503
