import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

from catalog.settings.app_settings import Settings, settings as default_settings

class CatalogLogger:
    """
    Logs de la aplicación: archivo rotativo bajo LOGS_PATH más consola.
    Los drivers de almacenamiento quedan en WARNING salvo en modo DEBUG.
    """
    MAX_BYTES: int = 5 * 1024 * 1024
    BACKUP_COUNT: int = 5
    FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DRIVER_LOGGERS = ("pymongo", "sqlalchemy.engine", "passlib", "multipart")

    @staticmethod
    def log_file(settings: Settings) -> Path:
        return settings.LOGS_PATH / f"{settings.APP_NAME}.log"

    @staticmethod
    def resolve_level(level: Optional[str]) -> int:
        """Nivel numérico a partir de su nombre; INFO si no se reconoce."""
        value = logging.getLevelName((level or "INFO").upper())
        return value if isinstance(value, int) else logging.INFO

    @staticmethod
    def setup_logging(level: Optional[str] = "INFO", settings: Optional[Settings] = None) -> Path:
        """
        Configura el logging raíz. Llamarlo de nuevo sustituye los handlers
        anteriores en lugar de duplicarlos.

        Args:
            level (Optional[str]): Nivel de registro. Ejemplo: "DEBUG", "INFO", etc.
            settings (Optional[Settings]): Configuración de donde sale la ruta de logs.

        Returns:
            Path: Archivo de log en uso.
        """
        settings = settings or default_settings
        settings.LOGS_PATH.mkdir(parents=True, exist_ok=True)
        log_file = CatalogLogger.log_file(settings)
        root_level = CatalogLogger.resolve_level(level)

        handlers = [
            RotatingFileHandler(
                filename=log_file,
                mode="a",
                maxBytes=CatalogLogger.MAX_BYTES,
                backupCount=CatalogLogger.BACKUP_COUNT,
                encoding="utf-8"
            ),
            logging.StreamHandler(),
        ]

        logging.basicConfig(
            level=root_level,
            format=CatalogLogger.FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
            force=True
        )

        driver_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
        for name in CatalogLogger.DRIVER_LOGGERS:
            logging.getLogger(name).setLevel(driver_level)

        return log_file
