import pytest

from catalog.services import AlbumService
from catalog.services.albums_service import REPORT_HEADER

@pytest.fixture
def album_service(store):
    return AlbumService(store)

def test_list_albums(album_service):
    albums = album_service.list_albums()

    assert [(a.id, a.name) for a in albums] == [(1, "Trip"), (2, "Nature"), (3, "Empty")]

def test_end_to_end_album_listing(album_service):
    info = album_service.list_photos_by_album(1)

    assert info.album_name == "Trip"
    # El título vacío cae al nombre de archivo
    assert [p.model_dump() for p in info.photos] == [
        {"id": 5, "title": "a.jpg"},
        {"id": 6, "title": "Lake"},
    ]
    assert info.count == 2

@pytest.mark.parametrize("album_id, expected", [(1, [5, 6]), (2, [6, 7]), (3, [])])
def test_count_matches_album_membership(album_service, store, album_id, expected):
    info = album_service.list_photos_by_album(album_id)

    members = [p.id for p in store.list_photos() if album_id in p.albums]
    assert [p.id for p in info.photos] == members == expected
    assert info.count == len(members)

def test_album_id_from_url_text(album_service):
    assert album_service.list_photos_by_album("2").album_name == "Nature"

def test_unknown_album_has_empty_name(album_service):
    info = album_service.list_photos_by_album(99)

    assert info.album_name == ""
    assert info.photos == []
    assert info.count == 0

@pytest.mark.parametrize("album_id", ["trip", "99999999999999999999", "1_0", "\u0661"])
def test_invalid_album_id_is_empty(album_service, album_id):
    info = album_service.list_photos_by_album(album_id)

    assert info.album_name == ""
    assert info.count == 0

def test_find_album_by_name_ignores_case(album_service):
    assert album_service.find_album_by_name("NATURE").id == 2
    assert album_service.find_album_by_name(" trip ").id == 1
    assert album_service.find_album_by_name("Holidays") is None

def test_album_report(album_service):
    result = album_service.build_album_report("nature")

    assert result.ok is True
    assert result.lines == [
        REPORT_HEADER,
        "lake.jpg,4032x3024,Nature:water",
        "forest.jpg,800x600,trees",
    ]

def test_album_report_missing_resolution_and_tags(album_service):
    lines = album_service.build_album_report("Trip").lines

    assert lines[0] == "filename,resolution,tags"
    assert lines[1] == "a.jpg,,"

def test_album_report_for_empty_album(album_service):
    assert album_service.build_album_report("Empty").lines == [REPORT_HEADER]

def test_album_report_failures(album_service):
    assert album_service.build_album_report("Holidays").reason == "Album not found"
    assert album_service.build_album_report("   ").reason == "Album name is required"
