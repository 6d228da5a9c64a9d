"""
FastAPI Application Factory module
"""
import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from catalog.settings import Settings
from catalog.persistence import CatalogStore, build_store
from catalog.api.errors import register_error_handlers
from catalog.api.include_routes import include_routes

logger = logging.getLogger("AppFactory")

def create_app(settings: Settings, store: Optional[CatalogStore] = None) -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    Args:
        settings (Settings): Las configuraciones de la aplicación.
        store (Optional[CatalogStore]): Store a inyectar; si no se indica se
            construye el configurado en settings.

    Returns:
        FastAPI: Instancia de la aplicación FastAPI configurada.

    Raises:
        ConfigurationError: Si el backend configurado no es válido o le faltan credenciales.
    """
    store = store or build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        logger.info(f"Store {store.__class__.__name__} abierto")
        try:
            yield
        finally:
            store.close()
            logger.info(f"Store {store.__class__.__name__} cerrado")

    app = FastAPI(
        title=settings.APP_NAME,
        description=f"{settings.APP_NAME} API",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.templates = Jinja2Templates(directory=str(settings.TEMPLATES_PATH))

    # Inicializamos los routers de la API y de las páginas
    include_routes(app, prefix="/api/v1")

    # Handler de manejo de errores
    register_error_handlers(app)

    # Imágenes públicas
    if settings.PHOTOS_PATH.exists():
        mount_path = "/" + settings.PHOTOS_URL_PREFIX.strip("/")
        app.mount(mount_path, StaticFiles(directory=str(settings.PHOTOS_PATH)), name="photos")
    else:
        logger.warning(f"No existe el directorio de imágenes {settings.PHOTOS_PATH}, no se sirven imágenes")

    return app
