import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog.errors import (
    CatalogError,
    ConfigurationError,
    ResourceNotFoundError,
    PermissionDeniedError,
    StorageError,
    ValidationError
)

logger = logging.getLogger("ErrorHandlers")
STORAGE_UNAVAILABLE = "El servicio de almacenamiento no está disponible."

def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api")

def register_error_handlers(app: FastAPI):
    """
    Registra los manejadores globales de excepciones para la aplicación.
    """

    @app.exception_handler(CatalogError)
    async def global_catalog_handler(request: Request, exc: CatalogError):
        error_mapping = {
            ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
            PermissionDeniedError: status.HTTP_403_FORBIDDEN,
            StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
            ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ValidationError: status.HTTP_400_BAD_REQUEST,
        }

        # Buscamos el código en el mapa, por defecto usamos 400
        http_status = error_mapping.get(type(exc), status.HTTP_400_BAD_REQUEST)

        # Los fallos de entorno se registran completos y se responden de forma genérica
        public_message = None
        if isinstance(exc, (StorageError, ConfigurationError)):
            logger.error(f"{exc.code}: {exc.message} {exc.details}", exc_info=True)
            public_message = STORAGE_UNAVAILABLE

        payload = exc.to_payload(public_message)
        if not _is_api_request(request):
            return PlainTextResponse(payload["message"], status_code=http_status)

        return JSONResponse(status_code=http_status, content=payload)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Captura cualquier error no controlado para evitar fugas de información."""
        logger.error(f"Unhandled error: {str(exc)}", exc_info=True)

        message = "Ha ocurrido un error inesperado en el servidor."
        if not _is_api_request(request):
            return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": "InternalServerError",
                "message": message
            },
        )
