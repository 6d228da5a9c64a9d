from catalog.services.security_service import SecurityService
from catalog.services.users_service import UserService
from catalog.services.albums_service import AlbumService
from catalog.services.photos_service import PhotosService
