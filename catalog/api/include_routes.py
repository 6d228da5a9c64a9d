"""
Helper to load all the api routes.
"""

from fastapi import FastAPI

from catalog.api.routes import albums_router, photos_router, check_router, pages_router


def include_routes(app: FastAPI, prefix: str):
    """Include all API routes and the HTML pages in the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance.
        prefix (str): Prefix for the JSON API routes.
    """
    app.include_router(albums_router, prefix=prefix)
    app.include_router(photos_router, prefix=prefix)
    app.include_router(check_router, prefix=prefix)
    app.include_router(pages_router)
