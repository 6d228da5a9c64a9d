from catalog.api.routes.albums_router import router as albums_router
from catalog.api.routes.photos_routes import router as photos_router
from catalog.api.routes.check_routes import router as check_router
from catalog.api.routes.pages_routes import router as pages_router
