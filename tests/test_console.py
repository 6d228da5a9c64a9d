from catalog.cli.console import CatalogConsole

def run_console(store, settings, answers, secrets=None):
    """Ejecuta la consola con respuestas predefinidas y devuelve lo impreso."""
    answers = iter(answers)
    secrets = iter(secrets or ["alice123"])
    output = []
    console = CatalogConsole(
        store,
        settings,
        ask=lambda prompt: next(answers),
        ask_secret=lambda prompt: next(secrets),
        say=output.append
    )
    code = console.run()
    return code, output

def test_login_and_exit(json_store, test_settings):
    code, output = run_console(json_store, test_settings, ["alice", "5"])

    assert code == 0
    assert "Welcome, alice" in output

def test_three_failed_logins(json_store, test_settings):
    code, output = run_console(
        json_store, test_settings,
        ["alice", "alice", "alice"],
        secrets=["x", "y", "z"]
    )

    assert code == 1
    assert output.count("Invalid username or password") == 3
    assert output[-1] == "Too many failed attempts"

def test_owner_sees_photo_details(json_store, test_settings):
    _, output = run_console(json_store, test_settings, ["alice", "1", "6", "5"])

    assert "Albums: Trip, Nature" in output
    assert "Tags: Nature, water" in output

def test_other_users_photo_is_denied(json_store, test_settings):
    _, output = run_console(json_store, test_settings, ["alice", "1", "7", "3", "7", "hack", "5"])

    assert output.count("Access denied") == 2
    assert json_store.get_photo_by_id(7).tags == ["trees"]

def test_edit_and_tag_own_photo(json_store, test_settings):
    answers = ["alice", "2", "5", "New Title", "", "3", "5", "beach", "3", "5", "BEACH", "5"]
    _, output = run_console(json_store, test_settings, answers)

    assert "Photo updated" in output
    assert "Tag added" in output
    assert "Tag already exists" in output
    photo = json_store.get_photo_by_id(5)
    assert photo.title == "New Title"
    assert photo.description == ""
    assert photo.tags == ["beach"]

def test_album_report(json_store, test_settings):
    _, output = run_console(json_store, test_settings, ["alice", "4", "trip", "4", "nowhere", "5"])

    assert "filename,resolution,tags" in output
    assert "lake.jpg,4032x3024,Nature:water" in output
    assert "Album not found" in output

def test_invalid_menu_choice(json_store, test_settings):
    _, output = run_console(json_store, test_settings, ["alice", "9", "5"])

    assert "Invalid choice" in output
