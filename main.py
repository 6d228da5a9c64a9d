"""
Entrypoint de la aplicación web
"""
import uvicorn

from catalog.api.app_factory import create_app
from catalog.settings import settings, CatalogLogger

# Nos aseguramos que los directorios se crean
settings.ensure_dirs()

# Inicializamos el logger
CatalogLogger.setup_logging(level=settings.LOG_LEVEL, settings=settings)

# Creamos la app; el store configurado se abre en el arranque del servidor
app = create_app(settings=settings)

def run_server():
    """
    Run the FastAPI server.
    """
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.API_LOG_LEVEL,
        reload=settings.API_RELOAD,
    )

if __name__ == "__main__":
    run_server()
