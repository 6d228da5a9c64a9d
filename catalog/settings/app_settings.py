from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.enums import StorageBackend
from catalog.settings.version import __version__
from catalog.errors.config_errors import ConfigurationError


class Settings(BaseSettings):
    # Datos base
    APP_NAME: str = "PhotoCatalog"
    APP_VERSION: str = __version__

    # Directorios
    BASE_PATH: Path = Path.home() / f".{APP_NAME}"
    UI_PATH: Path = Path(__file__).parent.parent / "ui"
    TEMPLATES_PATH: Path = UI_PATH / "templates"
    LOGS_PATH: Path = BASE_PATH / "logs"

    # Almacenamiento
    STORAGE_BACKEND: StorageBackend = StorageBackend.JSON
    DATA_PATH: Path = Path("data")
    ALBUMS_FILE: str = "albums.json"
    PHOTOS_FILE: str = "photos.json"
    USERS_FILE: str = "users.json"

    # Imágenes públicas
    PHOTOS_PATH: Path = DATA_PATH / "photos"
    PHOTOS_URL_PREFIX: str = "/photos/"

    # MongoDB (cadena de conexión o credenciales sueltas)
    MONGO_URI: Optional[str] = None
    MONGO_HOST: Optional[str] = None
    MONGO_PORT: int = 27017
    MONGO_USER: Optional[str] = None
    MONGO_PASSWORD: Optional[str] = None
    MONGO_DB_NAME: str = "photo_catalog"
    MONGO_TIMEOUT_MS: int = 5000

    # SQL
    DATABASE_URL: str = "sqlite:///photo_catalog.db"
    DATABASE_ECHO: bool = False
    DATABASE_CONNECT_ARGS: dict = {}

    # API
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    API_RELOAD: bool = False
    API_LOG_LEVEL: str = "info"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def albums_file(self) -> Path:
        return self.DATA_PATH / self.ALBUMS_FILE

    @property
    def photos_file(self) -> Path:
        return self.DATA_PATH / self.PHOTOS_FILE

    @property
    def users_file(self) -> Path:
        return self.DATA_PATH / self.USERS_FILE

    @property
    def mongo_connection_uri(self) -> str:
        """
        Construye la URI de MongoDB. Tiene prioridad MONGO_URI; si no existe,
        se arma a partir de host, usuario y contraseña.

        Raises:
            ConfigurationError: Si faltan credenciales.
        """
        if self.MONGO_URI:
            return self.MONGO_URI

        missing = [
            name for name, value in (
                ("MONGO_HOST", self.MONGO_HOST),
                ("MONGO_USER", self.MONGO_USER),
                ("MONGO_PASSWORD", self.MONGO_PASSWORD),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                message="Faltan credenciales de MongoDB: define MONGO_URI o MONGO_HOST/MONGO_USER/MONGO_PASSWORD",
                missing_fields=missing
            )

        user = quote_plus(self.MONGO_USER)
        password = quote_plus(self.MONGO_PASSWORD)
        return f"mongodb://{user}:{password}@{self.MONGO_HOST}:{self.MONGO_PORT}/"

    def ensure_dirs(self) -> None:
        """Crea los directorios que la aplicación necesita para escribir."""
        for directory in (self.BASE_PATH, self.LOGS_PATH, self.DATA_PATH):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigurationError(
                    message=f"No se pudo crear el directorio {directory}. Revise permisos.",
                ) from e

def load_settings() -> Settings:
    """
    Instancia la configuración capturando errores de validación para
    presentar mensajes amigables al usuario.

    Raises:
        ConfigurationError: Si alguna variable de entorno falta o es inválida.
    """
    try:
        return Settings()
    except ValidationError as e:
        bad_vars = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
        message = (
            "Variables de configuración inválidas o ausentes en el archivo .env o en el sistema: "
            f"{', '.join(bad_vars)}"
        )
        raise ConfigurationError(message=message, missing_fields=bad_vars) from e

settings = load_settings()
