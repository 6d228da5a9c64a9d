from catalog.schemas.user_schemas import User, UserPublic, UserLogin
from catalog.schemas.photos_schemas import Photo, PhotoSummary, PhotoDetails, PhotoUpdate
from catalog.schemas.album_schemas import Album, AlbumSummary, AlbumPhotos
from catalog.schemas.result_schemas import OperationResult, PhotoDetailsResult, AlbumReportResult
