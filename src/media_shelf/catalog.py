"""Media catalog - Load items from a TOML file.

Catalog layout (arrays of tables, all optional):

    [[board_games]]
    title = "Catan"
    price = 40

    [[video_games]]
    title = "Batman: Arkham Knight"
    price = 49.99
    console = "xbox"

Also supported: [[movies]], [[tv_shows]] (title, price, duration) and
[[card_games]] (title only).
"""

import logging
import random
import tomllib
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .exceptions import MediaCatalogError
from .exceptions import MediaItemTypeError
from .items import BoardGame
from .items import CardGame
from .items import Movie
from .items import TVShow
from .items import VideoGame
from .pickers import CardGames
from .protocols import ItemT
from .shelf import MediaShelf

logger = logging.getLogger(__name__)


class Catalog(BaseModel):
    """Items available to put on shelves (immutable)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    board_games: list[BoardGame] = Field(default_factory=list)
    movies: list[Movie] = Field(default_factory=list)
    tv_shows: list[TVShow] = Field(default_factory=list)
    video_games: list[VideoGame] = Field(default_factory=list)
    card_games: list[CardGame] = Field(default_factory=list)

    @classmethod
    def from_toml(cls, catalog_path: Path) -> "Catalog":
        """
        Load catalog from a TOML file.

        Args:
            catalog_path: Path to catalog file

        Returns:
            Catalog instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            MediaCatalogError: If the file is unreadable, not valid TOML or has invalid entries
        """
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog not found: {catalog_path}")

        try:
            with open(catalog_path, "rb") as f:
                data = tomllib.load(f)
            catalog = cls.model_validate(data)
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
            raise MediaCatalogError(
                f"Invalid catalog {catalog_path}: {e}",
                context={"catalog_path": str(catalog_path)},
            ) from e

        logger.debug(f"Loaded catalog from {catalog_path}: {catalog.summary()}")
        return catalog

    def summary(self) -> str:
        return (
            f"{len(self.board_games)} board games, {len(self.movies)} movies, "
            f"{len(self.tv_shows)} TV shows, {len(self.video_games)} video games, "
            f"{len(self.card_games)} card games"
        )

    def shelf_for(self, item_type: type[ItemT], rng: random.Random | None = None) -> MediaShelf[ItemT]:
        """
        Build a shelf holding every catalog item of the given type.

        Args:
            item_type: BoardGame, Movie, TVShow or VideoGame
            rng: Random source for the shelf's picker

        Returns:
            Populated shelf, in catalog order

        Raises:
            MediaItemTypeError: If the catalog has no section for item_type
        """
        sections: dict[type, list] = {
            BoardGame: self.board_games,
            Movie: self.movies,
            TVShow: self.tv_shows,
            VideoGame: self.video_games,
        }
        if item_type not in sections:
            raise MediaItemTypeError(
                f"Catalog has no {getattr(item_type, '__name__', item_type)} section",
                context={"item_type": repr(item_type)},
            )

        shelf = MediaShelf(item_type, rng=rng)
        for item in sections[item_type]:
            shelf.add(item)
        return shelf

    def card_game_picker(self, rng: random.Random | None = None) -> CardGames:
        """Picker over the catalog's card games."""
        return CardGames(self.card_games, rng=rng)
