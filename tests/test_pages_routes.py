import pytest
from fastapi.testclient import TestClient

from catalog.api.app_factory import create_app

@pytest.fixture
def client(test_settings, store):
    with TestClient(create_app(test_settings, store)) as test_client:
        yield test_client

def test_albums_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert 'href="/album/1"' in response.text
    assert "Trip" in response.text

def test_album_page_lists_photos_and_count(client):
    response = client.get("/album/1")

    assert response.status_code == 200
    assert 'href="/photo-details/5"' in response.text
    assert "a.jpg" in response.text
    assert "Total photos: 2" in response.text

def test_unknown_album_page(client):
    response = client.get("/album/99")

    assert response.status_code == 200
    assert "Unknown album" in response.text
    assert "Total photos: 0" in response.text

def test_photo_details_page(client):
    response = client.get("/photo-details/6")

    assert response.status_code == 200
    assert "Trip, Nature" in response.text
    assert "Nature, water" in response.text
    assert 'src="/photos/lake.jpg"' in response.text

@pytest.mark.parametrize("photo_id", ["404", "abc", "99999999999999999999"])
def test_photo_details_not_found(client, photo_id):
    response = client.get(f"/photo-details/{photo_id}")

    assert response.status_code == 404
    assert response.text == "Photo not found"

def test_edit_form_is_prefilled(client):
    response = client.get("/edit-photo", params={"pid": 6})

    assert response.status_code == 200
    assert 'value="Lake"' in response.text
    assert "Mist over the water" in response.text

def test_edit_form_for_missing_photo(client):
    assert client.get("/edit-photo", params={"pid": 404}).status_code == 404

def test_edit_submit_redirects_to_details(client, store):
    # 1. POST con el formulario
    response = client.post(
        "/edit-photo",
        data={"pid": "5", "title": "New Title", "description": ""},
        follow_redirects=False
    )

    # 2. Post/Redirect/Get hacia el detalle
    assert response.status_code == 303
    assert response.headers["location"] == "/photo-details/5"

    stored = store.get_photo_by_id(5)
    assert stored.title == "New Title"
    assert stored.description == ""

def test_edit_submit_failure_rerenders_form(client):
    response = client.post("/edit-photo", data={"pid": "404", "title": "x", "description": ""})

    assert response.status_code == 400
    assert "Photo not found" in response.text
