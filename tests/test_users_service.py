import pytest

from catalog.schemas import UserLogin, UserPublic
from catalog.services import SecurityService, UserService
from tests.conftest import write_fixtures
from catalog.persistence import JsonCatalogStore

def test_authenticate_returns_user_without_password(store):
    service = UserService(store)

    user = service.authenticate_user(UserLogin(username="alice", password="alice123"))

    assert user == UserPublic(id=1, username="alice")
    assert "password" not in user.model_dump()

@pytest.mark.parametrize("username, password", [
    ("alice", "wrong"),
    ("nobody", "alice123"),
    ("ALICE", "alice123"),
    ("", ""),
    ("   ", "alice123"),
])
def test_failed_logins_are_indistinguishable(store, username, password):
    service = UserService(store)

    assert service.authenticate_user(UserLogin(username=username, password=password)) is None

def test_username_is_trimmed(store):
    user = UserService(store).authenticate_user(UserLogin(username=" bob ", password="bob456"))

    assert user.id == 2

def test_hashed_passwords_are_supported(tmp_path):
    hashed = SecurityService.get_password_hash("s3cret")
    data_dir = write_fixtures(tmp_path / "data", users=[{"id": 3, "username": "carol", "password": hashed}])
    store = JsonCatalogStore(data_dir / "albums.json", data_dir / "photos.json", data_dir / "users.json")
    service = UserService(store)

    assert service.authenticate_user(UserLogin(username="carol", password="s3cret")).id == 3
    assert service.authenticate_user(UserLogin(username="carol", password=hashed)) is None

def test_plaintext_login_is_flagged(store, caplog):
    with caplog.at_level("WARNING"):
        UserService(store).authenticate_user(UserLogin(username="alice", password="alice123"))

    assert "texto plano" in caplog.text
