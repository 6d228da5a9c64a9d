"""
Consola interactiva con inicio de sesión. Cada operación sobre una foto
exige que el usuario autenticado sea su propietario.
"""
import sys
import logging
import getpass
from typing import Callable, Optional

from catalog.errors import CatalogError
from catalog.persistence import CatalogStore, build_store
from catalog.schemas import UserLogin, UserPublic
from catalog.settings import CatalogLogger, Settings, load_settings
from catalog.services import AlbumService, PhotosService, UserService

MAX_LOGIN_ATTEMPTS = 3

MENU = """
1. Photo details
2. Edit title / description
3. Add tag
4. Album report
5. Exit
"""

class CatalogConsole:
    """Bucle de preguntas y respuestas sobre los servicios de negocio."""

    def __init__(
            self,
            store: CatalogStore,
            settings: Settings,
            ask: Callable[[str], str] = input,
            ask_secret: Callable[[str], str] = getpass.getpass,
            say: Callable[[str], None] = print
        ) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.user_service = UserService(store)
        self.album_service = AlbumService(store)
        self.photo_service = PhotosService(store, settings=settings, enforce_ownership=True)
        self.ask = ask
        self.ask_secret = ask_secret
        self.say = say
        self.user: Optional[UserPublic] = None

    def login(self) -> bool:
        for _ in range(MAX_LOGIN_ATTEMPTS):
            username = self.ask("Username: ")
            password = self.ask_secret("Password: ")
            user = self.user_service.authenticate_user(UserLogin(username=username, password=password))
            if user:
                self.user = user
                self.say(f"Welcome, {user.username}")
                return True
            self.say("Invalid username or password")
        return False

    def show_photo(self) -> None:
        result = self.photo_service.get_photo_details(self.ask("Photo id: "), requester_id=self.user.id)
        if not result.ok:
            self.say(result.reason)
            return
        photo = result.photo
        self.say(f"Filename: {photo.filename}")
        self.say(f"Title: {photo.title}")
        self.say(f"Description: {photo.description}")
        self.say(f"Date: {photo.date or ''}")
        self.say(f"Resolution: {photo.resolution or ''}")
        self.say(f"Albums: {', '.join(photo.albums)}")
        self.say(f"Tags: {photo.tags}")

    def edit_photo(self) -> None:
        photo_id = self.ask("Photo id: ")
        title = self.ask("New title (blank keeps current): ")
        description = self.ask("New description (blank keeps current): ")
        result = self.photo_service.update_photo_details(
            photo_id, title=title, description=description, requester_id=self.user.id
        )
        self.say("Photo updated" if result.ok else result.reason)

    def add_tag(self) -> None:
        photo_id = self.ask("Photo id: ")
        tag = self.ask("Tag: ")
        result = self.photo_service.add_tag(photo_id, tag, requester_id=self.user.id)
        self.say("Tag added" if result.ok else result.reason)

    def album_report(self) -> None:
        result = self.album_service.build_album_report(self.ask("Album name: "))
        if not result.ok:
            self.say(result.reason)
            return
        for line in result.lines:
            self.say(line)

    def run(self) -> int:
        if not self.login():
            self.say("Too many failed attempts")
            return 1

        actions = {
            "1": self.show_photo,
            "2": self.edit_photo,
            "3": self.add_tag,
            "4": self.album_report,
        }
        while True:
            self.say(MENU)
            choice = self.ask("Choice: ").strip()
            if choice == "5":
                self.say("Bye")
                return 0
            action = actions.get(choice)
            if action is None:
                self.say("Invalid choice")
                continue
            action()

def main() -> int:
    try:
        settings = load_settings()
        CatalogLogger.setup_logging(level=settings.LOG_LEVEL, settings=settings)
        store = build_store(settings)
        with store:
            return CatalogConsole(store, settings).run()
    except CatalogError as e:
        logging.getLogger("Console").error(f"{e.__class__.__name__}: {e.message} {e.details}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        return 130

if __name__ == "__main__":
    sys.exit(main())
