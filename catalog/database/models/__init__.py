from catalog.database.models.associations import album_photos
from catalog.database.models.users_model import UsersDatabaseModel
from catalog.database.models.albums_model import AlbumDatabaseModel
from catalog.database.models.photos_model import PhotoDatabaseModel
