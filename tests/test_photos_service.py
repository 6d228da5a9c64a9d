import pytest
from unittest.mock import MagicMock

from catalog.schemas import Photo
from catalog.services import PhotosService
from catalog.services.photos_service import NO_TAGS
from tests.conftest import read_photo_records

@pytest.fixture
def photo_service(store, test_settings):
    return PhotosService(store, settings=test_settings)

@pytest.fixture
def guarded_service(store, test_settings):
    return PhotosService(store, settings=test_settings, enforce_ownership=True)

# =========== Detalle ===========

def test_get_photo_details_resolves_albums_and_tags(photo_service):
    result = photo_service.get_photo_details(6)

    assert result.ok is True
    photo = result.photo
    assert photo.albums == ["Trip", "Nature"]
    assert photo.tags == "Nature, water"
    assert photo.image_url == "/photos/lake.jpg"
    assert photo.resolution == "4032x3024"
    assert photo.date == "2023-07-15"

def test_get_photo_details_accepts_numeric_text(photo_service):
    assert photo_service.get_photo_details(" 5 ").photo.filename == "a.jpg"

@pytest.mark.parametrize("photo_id", [404, "404", -1])
def test_get_photo_details_missing_is_a_result(photo_service, photo_id):
    result = photo_service.get_photo_details(photo_id)

    assert result.ok is False
    assert result.reason == "Photo not found"
    assert result.photo is None

@pytest.mark.parametrize("photo_id", [
    "abc", "", None, "5.5", True,
    "99999999999999999999", 2 ** 64, "1_000", "\u0665", "+", "-",
])
def test_get_photo_details_invalid_id_never_raises(photo_service, photo_id):
    result = photo_service.get_photo_details(photo_id)

    assert result.ok is False
    assert result.reason == "Invalid photo id"

def test_unknown_album_ids_are_dropped(json_store, test_settings):
    # Fuera del backend SQL porque sus claves foráneas no admiten álbumes colgantes
    store = MagicMock()
    store.get_photo_by_id.return_value = Photo(id=9, filename="x.jpg", albums=[77, 1, 2])
    store.list_albums.return_value = json_store.list_albums()

    result = PhotosService(store, settings=test_settings).get_photo_details(9)

    assert result.photo.albums == ["Trip", "Nature"]

def test_tag_formatting():
    assert PhotosService.format_tags(Photo(id=1, tags=[])) == NO_TAGS == "None"
    assert PhotosService.format_tags(Photo(id=1, tags=["b", "A", "c"])) == "b, A, c"

# =========== Edición ===========

def test_end_to_end_update_then_read(photo_service):
    result = photo_service.update_photo_details(5, "New Title", None)
    assert result.ok is True

    details = photo_service.get_photo_details(5).photo
    assert details.title == "New Title"
    assert details.description == ""

@pytest.mark.parametrize("blank", [None, "", "   ", "\t\n"])
def test_blank_values_keep_current_fields(photo_service, store, blank):
    result = photo_service.update_photo_details(6, title=blank, description=blank)

    assert result.ok is True
    stored = store.get_photo_by_id(6)
    assert stored.title == "Lake"
    assert stored.description == "Mist over the water"

def test_non_blank_values_are_stored_exactly(photo_service, store):
    photo_service.update_photo_details(6, title="  Padded  ", description="New description")

    stored = store.get_photo_by_id(6)
    assert stored.title == "  Padded  "
    assert stored.description == "New description"

def test_update_missing_photo(photo_service):
    assert photo_service.update_photo_details(404, title="x").reason == "Photo not found"

def test_update_reports_write_miss(test_settings):
    store = MagicMock()
    store.get_photo_by_id.return_value = Photo(id=5, filename="a.jpg")
    store.update_photo.return_value = False

    result = PhotosService(store, settings=test_settings).update_photo_details(5, title="x")

    assert result.ok is False
    assert result.reason == "Update failed"

def test_json_update_only_touches_the_target_record(json_store, test_settings, data_dir):
    PhotosService(json_store, settings=test_settings).update_photo_details(5, title="New Title")

    records = {r["id"]: r for r in read_photo_records(data_dir)}
    assert records[5]["title"] == "New Title"
    assert records[5]["albums"] == [1]
    assert records[6]["title"] == "Lake"

# =========== Etiquetas ===========

def test_add_tag_appends_in_order(photo_service, store):
    result = photo_service.add_tag(6, "  sunrise ")

    assert result.ok is True
    assert store.get_photo_by_id(6).tags == ["Nature", "water", "sunrise"]

@pytest.mark.parametrize("variant", ["NATURE", "nature", " Nature "])
def test_add_tag_rejects_case_variants(photo_service, store, variant):
    result = photo_service.add_tag(6, variant)

    assert result.ok is False
    assert result.reason == "Tag already exists"
    assert store.get_photo_by_id(6).tags == ["Nature", "water"]

def test_add_tag_requires_text(photo_service):
    assert photo_service.add_tag(6, "  ").reason == "Tag is required"

def test_add_tag_to_missing_photo(photo_service):
    assert photo_service.add_tag(404, "x").reason == "Photo not found"

# =========== Propiedad ===========

def test_owner_can_read_and_edit(guarded_service, store):
    assert guarded_service.get_photo_details(6, requester_id=1).ok is True
    assert guarded_service.update_photo_details(6, title="Mine", requester_id="1").ok is True
    assert store.get_photo_by_id(6).title == "Mine"

@pytest.mark.parametrize("requester_id", [2, None, "abc"])
def test_non_owner_is_denied_before_any_change(guarded_service, store, requester_id):
    assert guarded_service.get_photo_details(6, requester_id=requester_id).reason == "Access denied"
    assert guarded_service.update_photo_details(6, title="Stolen", requester_id=requester_id).reason == "Access denied"
    assert guarded_service.add_tag(6, "stolen", requester_id=requester_id).reason == "Access denied"

    stored = store.get_photo_by_id(6)
    assert stored.title == "Lake"
    assert stored.tags == ["Nature", "water"]

def test_missing_photo_wins_over_ownership(guarded_service):
    assert guarded_service.get_photo_details(404, requester_id=1).reason == "Photo not found"

# =========== Campos escritos ===========

def test_edit_writes_only_changed_fields(test_settings):
    store = MagicMock()
    store.get_photo_by_id.return_value = Photo(id=6, filename="lake.jpg", tags=["Nature"])
    service = PhotosService(store, settings=test_settings)

    service.update_photo_details(6, title="New", description=" ")

    written, = store.update_photo.call_args.args
    assert written.title == "New"
    assert store.update_photo.call_args.kwargs["fields"] == ("title",)

def test_blank_edit_does_not_write(test_settings):
    store = MagicMock()
    store.get_photo_by_id.return_value = Photo(id=6, filename="lake.jpg")

    result = PhotosService(store, settings=test_settings).update_photo_details(6, title="", description=None)

    assert result.ok is True
    store.update_photo.assert_not_called()

def test_add_tag_writes_only_tags(test_settings):
    store = MagicMock()
    store.get_photo_by_id.return_value = Photo(id=6, filename="lake.jpg", tags=["Nature"])

    PhotosService(store, settings=test_settings).add_tag(6, "sunrise")

    assert store.update_photo.call_args.kwargs["fields"] == ("tags",)

def test_edit_keeps_tag_added_meanwhile(photo_service, store):
    # 1. Otra petición añade una etiqueta después de que la edición leyera la foto
    stale = store.get_photo_by_id(6)
    photo_service.add_tag(6, "sunrise")

    # 2. La edición escribe sólo el título sobre la copia antigua
    assert store.update_photo(stale.model_copy(update={"title": "Edited"}), fields=("title",)) is True

    stored = store.get_photo_by_id(6)
    assert stored.title == "Edited"
    assert stored.tags == ["Nature", "water", "sunrise"]
