"""Bundled sample catalog used by the demo and tests."""

from .catalog import Catalog
from .items import BoardGame
from .items import CardGame
from .items import Console
from .items import Movie
from .items import TVShow
from .items import VideoGame


def sample_catalog() -> Catalog:
    """Fresh catalog of sample items (new ids on every call)."""
    return Catalog(
        board_games=[BoardGame(title="Catan", price=40)],
        movies=[
            Movie(title="The Bourne Identity", price=3.99, duration=113),
            Movie(title="Oppenheimer", price=17.99, duration=180),
            Movie(title="No Time To Die", price=19.99, duration=163),
        ],
        tv_shows=[TVShow(title="The Expanse", price=24.99, duration=45)],
        video_games=[
            VideoGame(title="Batman: Arkham Knight", price=49.99, console=Console.XBOX),
            VideoGame(title="The Legend of Zelda: Tears of the Kingdom", price=59.99, console=Console.SWITCH),
        ],
        card_games=[CardGame(title="Bridge"), CardGame(title="Solitaire")],
    )
