import json
import pytest
from unittest.mock import MagicMock

from catalog.enums import StorageBackend
from catalog.settings import Settings
from catalog.schemas import Album, Photo, User
from catalog.database.db_config import build_engine
from catalog.seed.load_fixtures import load_into_sql
from catalog.persistence import JsonCatalogStore, MongoCatalogStore, SqlCatalogStore

ALBUMS = [
    {"id": 1, "name": "Trip", "description": "Summer road trip"},
    {"id": 2, "name": "Nature", "description": ""},
    {"id": 3, "name": "Empty"},
]

PHOTOS = [
    {"id": 5, "filename": "a.jpg", "title": "", "description": "", "albums": [1], "tags": [], "owner": 1},
    {
        "id": 6,
        "filename": "lake.jpg",
        "title": "Lake",
        "description": "Mist over the water",
        "date": "2023-07-15",
        "resolution": "4032x3024",
        "albums": [1, 2],
        "tags": ["Nature", "water"],
        "owner": 1
    },
    {
        "id": 7,
        "filename": "forest.jpg",
        "title": "Forest",
        "description": "",
        "resolution": "800x600",
        "albums": [2],
        "tags": ["trees"],
        "owner": 2
    },
]

USERS = [
    {"id": 1, "username": "alice", "password": "alice123"},
    {"id": 2, "username": "bob", "password": "bob456"},
]

def write_fixtures(data_dir, albums=ALBUMS, photos=PHOTOS, users=USERS):
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "albums.json").write_text(json.dumps(albums), encoding="utf-8")
    (data_dir / "photos.json").write_text(json.dumps(photos), encoding="utf-8")
    (data_dir / "users.json").write_text(json.dumps(users), encoding="utf-8")
    return data_dir

def read_photo_records(data_dir):
    return json.loads((data_dir / "photos.json").read_text(encoding="utf-8"))

@pytest.fixture
def data_dir(tmp_path):
    """Directorio temporal con los tres archivos JSON del catálogo."""
    return write_fixtures(tmp_path / "data")

@pytest.fixture
def test_settings(tmp_path, data_dir):
    """Configuración aislada que apunta al directorio temporal."""
    return Settings(
        STORAGE_BACKEND=StorageBackend.JSON,
        BASE_PATH=tmp_path / "base",
        LOGS_PATH=tmp_path / "base" / "logs",
        DATA_PATH=data_dir,
        PHOTOS_PATH=data_dir / "photos",
        DATABASE_URL="sqlite:///:memory:",
    )

@pytest.fixture
def json_store(test_settings):
    store = JsonCatalogStore(test_settings.albums_file, test_settings.photos_file, test_settings.users_file)
    with store:
        yield store

@pytest.fixture
def sql_store():
    """Store SQL sobre SQLite en memoria con los mismos datos que el JSON."""
    engine = build_engine("sqlite:///:memory:")
    load_into_sql(
        engine,
        albums=[Album.model_validate(a) for a in ALBUMS],
        photos=[Photo.model_validate(p) for p in PHOTOS],
        users=[User.model_validate(u) for u in USERS],
    )
    store = SqlCatalogStore(engine)
    with store:
        yield store

@pytest.fixture(params=["json", "sql"])
def store(request):
    """Ejecuta el test contra cada backend que se puede levantar localmente."""
    return request.getfixturevalue(f"{request.param}_store")

@pytest.fixture
def mongo_collections():
    """Colecciones de MongoDB simuladas, una por nombre."""
    return {
        MongoCatalogStore.ALBUMS: MagicMock(),
        MongoCatalogStore.PHOTOS: MagicMock(),
        MongoCatalogStore.USERS: MagicMock(),
    }

@pytest.fixture
def mongo_client(mongo_collections):
    client = MagicMock()
    client.__getitem__.return_value = mongo_collections
    return client

@pytest.fixture
def mongo_store(mongo_client):
    store = MongoCatalogStore(uri="mongodb://localhost:27017/", db_name="test_catalog", client=mongo_client)
    store.open()
    yield store
    store.close()
