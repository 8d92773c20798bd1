import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app

HOTELS = [
    {"Id": 1, "Name": "Zen Resort", "Location": "Goa", "Rating": 4.0, "Description": "Spa", "Images": ["zen.jpg"]},
    {"id": 2, "name": "Alpine Lodge", "location": "Shimla", "rating": 4.8, "description": "Views", "images": ["alpine.jpg"]},
    {"id": 3, "name": "Beach Inn", "location": "Goa", "rating": 3.0, "description": "Cheap", "images": []},
]


def make_client(data_dir: Path, content: str | None = None) -> TestClient:
    if content is not None:
        (data_dir / "Hotels.json").write_text(content, encoding="utf-8")
    app_settings = Settings(hotel_data_path=str(data_dir), hotel_image_url="assets/hotels/")
    return TestClient(create_app(app_settings))


def test_defaults_return_first_page_sorted_by_name(tmp_path: Path):
    client = make_client(tmp_path, json.dumps(HOTELS))

    resp = client.get("/api/hotel/getHotels")

    assert resp.status_code == 200
    body = resp.json()
    assert [h["name"] for h in body] == ["Alpine Lodge", "Beach Inn", "Zen Resort"]
    assert body[0] == {
        "id": 2,
        "name": "Alpine Lodge",
        "location": "Shimla",
        "rating": 4.8,
        "description": "Views",
        "images": ["assets/hotels/alpine.jpg"],
    }


def test_query_parameters_are_camel_case(tmp_path: Path):
    client = make_client(tmp_path, json.dumps(HOTELS))

    resp = client.get(
        "/api/hotel/getHotels",
        params={"filterText": "GOA", "minRating": 3.5, "sortOption": "rating", "pageNumber": 1, "pageSize": 9},
    )

    assert resp.status_code == 200
    assert [h["name"] for h in resp.json()] == ["Zen Resort"]


def test_pagination(tmp_path: Path):
    client = make_client(tmp_path, json.dumps(HOTELS))

    resp = client.get("/api/hotel/getHotels", params={"pageNumber": 2, "pageSize": 1})

    assert [h["name"] for h in resp.json()] == ["Beach Inn"]


def test_out_of_range_paging_is_not_an_error(tmp_path: Path):
    client = make_client(tmp_path, json.dumps(HOTELS))

    assert client.get("/api/hotel/getHotels", params={"pageSize": 0}).json() == []
    resp = client.get("/api/hotel/getHotels", params={"pageNumber": -1, "pageSize": 1})
    assert resp.status_code == 200
    assert [h["name"] for h in resp.json()] == ["Alpine Lodge"]


def test_empty_file_returns_empty_list(tmp_path: Path):
    client = make_client(tmp_path, "  ")

    resp = client.get("/api/hotel/getHotels", params={"filterText": "goa"})

    assert resp.status_code == 200
    assert resp.json() == []


def test_malformed_file_returns_500(tmp_path: Path):
    client = make_client(tmp_path, "[{not json")

    resp = client.get("/api/hotel/getHotels")

    assert resp.status_code == 500
    assert "Failed to load hotels" in resp.json()["detail"]


def test_missing_file_returns_500(tmp_path: Path):
    client = make_client(tmp_path)

    resp = client.get("/api/hotel/getHotels")

    assert resp.status_code == 500


def test_blank_data_path_fails_at_startup():
    with pytest.raises(ValueError):
        create_app(Settings(hotel_data_path=" "))


def test_resources_directory_is_served(tmp_path: Path):
    client = make_client(tmp_path, json.dumps(HOTELS))

    resp = client.get("/Resources/Hotels.json")

    assert resp.status_code == 200
    assert resp.json()[0]["Name"] == "Zen Resort"


def test_health(tmp_path: Path):
    client = make_client(tmp_path, "[]")
    assert client.get("/health").json() == {"status": "ok", "hotelsFileFound": True}


def test_health_reports_missing_data_file(tmp_path: Path):
    client = make_client(tmp_path)
    assert client.get("/health").json() == {"status": "ok", "hotelsFileFound": False}


def test_invalid_utf8_file_still_returns_hotels(tmp_path: Path):
    (tmp_path / "Hotels.json").write_bytes(b'[{"id": 1, "name": "Caf\xe9", "location": "Goa"}]')
    client = make_client(tmp_path)

    resp = client.get("/api/hotel/getHotels")

    assert resp.status_code == 200
    assert resp.json()[0]["name"] == "Caf�"


def test_default_image_prefix_is_served_from_resources(tmp_path: Path):
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "zen.jpg").write_bytes(b"jpeg")
    (tmp_path / "Hotels.json").write_text(json.dumps(HOTELS), encoding="utf-8")
    client = TestClient(create_app(Settings(hotel_data_path=str(tmp_path))))

    hotels = client.get("/api/hotel/getHotels", params={"filterText": "zen"}).json()

    assert hotels[0]["images"] == ["Resources/images/zen.jpg"]
    image = client.get("/" + hotels[0]["images"][0])
    assert image.status_code == 200
    assert image.content == b"jpeg"
