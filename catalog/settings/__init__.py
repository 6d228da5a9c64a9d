from catalog.settings.version import __version__
from catalog.settings.app_settings import Settings, settings, load_settings
from catalog.settings.log_settings import CatalogLogger
