"""media-shelf - Typed media collections built on structural protocols.

Public API exports.
"""

from .catalog import Catalog
from .encoding import encode_item
from .encoding import is_encodable
from .encoding import item_to_json
from .encoding import items_to_json
from .exceptions import MediaCatalogError
from .exceptions import MediaEncodingError
from .exceptions import MediaError
from .exceptions import MediaItemTypeError
from .exceptions import MediaRepositoryError
from .items import BoardGame
from .items import CardGame
from .items import Console
from .items import Movie
from .items import TVShow
from .items import VideoGame
from .pickers import CardGames
from .pickers import pick_title
from .protocols import MediaCollection
from .protocols import MediaItem
from .protocols import MediaRepository
from .protocols import RandomEntertainmentPicker
from .protocols import Video
from .repository import VideoGameMediaRepository
from .repository import load_shelf
from .shelf import MediaShelf
from .shelf import MovieCollection
from .shelf import register_description

__all__ = [
    # Protocols
    "MediaItem",
    "Video",
    "MediaCollection",
    "RandomEntertainmentPicker",
    "MediaRepository",
    # Items
    "BoardGame",
    "CardGame",
    "Console",
    "Movie",
    "TVShow",
    "VideoGame",
    # Shelves
    "MediaShelf",
    "MovieCollection",
    "register_description",
    # Pickers
    "CardGames",
    "pick_title",
    # Repositories
    "VideoGameMediaRepository",
    "load_shelf",
    # Encoding
    "encode_item",
    "is_encodable",
    "item_to_json",
    "items_to_json",
    # Catalog
    "Catalog",
    # Exceptions
    "MediaError",
    "MediaCatalogError",
    "MediaEncodingError",
    "MediaItemTypeError",
    "MediaRepositoryError",
]

__version__ = "0.1.0"
