from __future__ import annotations

from pathlib import Path

import pytest


def test_data_endpoint_scenario(client) -> None:
    resp = client.get("/api/data")

    assert resp.status_code == 200
    records = {r["pl_name"]: r for r in resp.get_json()}
    assert len(records) == 3
    assert records["Earth-2"]["habitability_score"] == 0.95
    assert 0.3 <= records["Mars-2"]["habitability_score"] <= 0.9
    assert records["Unknown-1"]["pl_rade"] is None
    assert records["Mars-2"]["id"] == "mars-2"
    for record in records.values():
        assert isinstance(record["terraformability_score"], float)


def test_data_endpoint_missing_file(make_app, tmp_path: Path) -> None:
    client = make_app(DATA_CSV=str(tmp_path / "gone.csv")).test_client()

    resp = client.get("/api/data")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "CSV file not found"}


def test_data_endpoint_parse_failure(make_app, write_csv) -> None:
    path = write_csv("pl_name,pl_rade\nA,1\nB,2,3,4\n", name="broken.csv")
    client = make_app(DATA_CSV=str(path)).test_client()

    resp = client.get("/api/data")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["error"] == "Failed to process CSV file"
    assert body["details"]


@pytest.mark.parametrize("name", ["Earth-2", "earth-2", "EARTH-2", "Earth%2D2"])
def test_planet_detail(client, name: str) -> None:
    resp = client.get(f"/api/data/{name}")

    assert resp.status_code == 200
    assert resp.get_json()["pl_name"] == "Earth-2"


def test_planet_detail_by_slug_with_spaces(make_app, write_csv) -> None:
    path = write_csv("pl_name,pl_rade\nKepler 442b,1.34\n", name="spaces.csv")
    client = make_app(DATA_CSV=str(path)).test_client()

    for name in ("Kepler-442b", "kepler-442b", "Kepler%20442b"):
        resp = client.get(f"/api/data/{name}")
        assert resp.status_code == 200
        assert resp.get_json()["pl_rade"] == 1.34


def test_planet_detail_decodes_name_once(make_app, write_csv) -> None:
    path = write_csv("pl_name,pl_rade\nA%20B,1\nA B,2\n", name="escaped.csv")
    client = make_app(DATA_CSV=str(path)).test_client()

    assert client.get("/api/data/A%2520B").get_json()["pl_rade"] == 1
    assert client.get("/api/data/A%20B").get_json()["pl_rade"] == 2


def test_planet_detail_joins_path_segments(make_app, write_csv) -> None:
    path = write_csv("pl_name,pl_rade\nOGLE-2005/390L b,2.6\n", name="slash.csv")
    client = make_app(DATA_CSV=str(path)).test_client()

    resp = client.get("/api/data/OGLE-2005/390L%20b")

    assert resp.status_code == 200
    assert resp.get_json()["pl_rade"] == 2.6


def test_planet_detail_not_found(client) -> None:
    resp = client.get("/api/data/Vulcan")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Exoplanet not found"}


def test_planet_detail_requires_name(client) -> None:
    resp = client.get("/api/data/")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Planet name is required"}


def test_planet_detail_missing_file(make_app, tmp_path: Path) -> None:
    client = make_app(DATA_CSV=str(tmp_path / "gone.csv")).test_client()

    assert client.get("/api/data/Earth-2").status_code == 404


@pytest.fixture
def catalog_client(make_app, write_csv):
    rows = "".join(f"Planet {i:02d},{i * 0.5},{'' if i % 5 == 0 else 200 + i}\n" for i in range(45))
    path = write_csv("pl_name,pl_rade,pl_eqt\n" + rows, name="catalog.csv")
    return make_app(DATA_CSV=str(path)).test_client()


def test_exoplanets_pagination(catalog_client) -> None:
    body = catalog_client.get("/api/exoplanets?page=3&pageSize=20").get_json()

    assert len(body["data"]) == 5
    assert body["pagination"] == {
        "page": 3,
        "pageSize": 20,
        "totalItems": 45,
        "totalPages": 3,
        "hasNextPage": False,
        "hasPrevPage": True,
    }


def test_exoplanets_defaults_and_clamping(catalog_client) -> None:
    default = catalog_client.get("/api/exoplanets").get_json()
    clamped = catalog_client.get("/api/exoplanets?page=0&pageSize=500").get_json()

    assert default == {**clamped, "data": default["data"]}
    assert clamped["pagination"]["page"] == 1
    assert clamped["pagination"]["pageSize"] == 20
    assert [r["pl_name"] for r in clamped["data"]] == [r["pl_name"] for r in default["data"]]


def test_exoplanets_beyond_last_page(catalog_client) -> None:
    body = catalog_client.get("/api/exoplanets?page=4").get_json()

    assert body["data"] == []
    assert body["pagination"]["hasNextPage"] is False


def test_exoplanets_uses_canonical_normalizer(catalog_client) -> None:
    first = catalog_client.get("/api/exoplanets?pageSize=1").get_json()["data"][0]

    assert first["pl_name"] == "Planet 00"
    assert first["pl_eqt"] is None
    assert "habitability_score" in first


def test_exoplanets_search_and_sort_apply_to_page(catalog_client) -> None:
    body = catalog_client.get("/api/exoplanets?page=1&pageSize=10&search=planet%200&sortBy=pl_eqt&sortOrder=asc").get_json()

    names = [r["pl_name"] for r in body["data"]]
    assert names[:3] == ["Planet 01", "Planet 02", "Planet 03"]
    assert set(names[-2:]) == {"Planet 00", "Planet 05"}
    assert body["pagination"]["totalItems"] == 45


def test_health(client) -> None:
    body = client.get("/health").get_json()

    assert body["status"] == "healthy"
    assert body["data_file_present"] is True
    assert body["ai_configured"] is True
