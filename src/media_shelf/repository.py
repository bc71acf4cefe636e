"""Item sources for shelves.

Repositories are app policy: the library ships one static implementation and
a loader that works with any MediaRepository.
"""

import logging
import random
from collections.abc import Iterable

from .exceptions import MediaError
from .exceptions import MediaItemTypeError
from .exceptions import MediaRepositoryError
from .items import VideoGame
from .protocols import ItemT
from .protocols import MediaRepository
from .shelf import MediaShelf

logger = logging.getLogger(__name__)


class VideoGameMediaRepository:
    """Static video game source returning its games in shuffled order."""

    def __init__(self, games: Iterable[VideoGame], rng: random.Random | None = None):
        self.games: tuple[VideoGame, ...] = tuple(games)
        self._rng = rng if rng is not None else random.Random()

    async def get_items(self) -> list[VideoGame]:
        """Return a shuffled copy of the games."""
        return self._rng.sample(self.games, k=len(self.games))


async def load_shelf(repository: MediaRepository[ItemT], shelf: MediaShelf[ItemT]) -> int:
    """
    Fetch items from a repository and add them to a shelf.

    Args:
        repository: Source implementing MediaRepository
        shelf: Shelf to append to (its item type must match the repository's items)

    Returns:
        Number of items added

    Raises:
        MediaRepositoryError: If the repository fails to provide items
        MediaItemTypeError: If an item does not match the shelf's item type

    Example:
        >>> shelf = MediaShelf(VideoGame)
        >>> added = await load_shelf(VideoGameMediaRepository(games), shelf)
    """
    source = type(repository).__name__
    logger.info(f"Loading {shelf.item_type.__name__} shelf from {source}")

    try:
        items = await repository.get_items()
    except Exception as e:
        if isinstance(e, MediaError):
            raise
        raise MediaRepositoryError(
            f"Failed to get items from {source}: {e}",
            context={"repository": source},
        ) from e

    # All or nothing: a mismatched item leaves the shelf untouched.
    for item in items:
        if not isinstance(item, shelf.item_type):
            raise MediaItemTypeError(
                f"{source} returned {type(item).__name__} for a shelf of {shelf.item_type.__name__}",
                context={"repository": source, "item_type": shelf.item_type.__name__, "got": type(item).__name__},
            )

    for item in items:
        shelf.add(item)

    logger.info(f"Loaded {len(items)} items from {source}")
    return len(items)
