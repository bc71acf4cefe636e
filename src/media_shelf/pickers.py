"""Random pickers that are not shelves."""

import logging
import random
from collections.abc import Iterable

from .items import CardGame
from .protocols import RandomEntertainmentPicker

logger = logging.getLogger(__name__)


class CardGames:
    """Fixed set of card games to choose from (a RandomEntertainmentPicker)."""

    def __init__(self, games: Iterable[CardGame], rng: random.Random | None = None):
        self.games: tuple[CardGame, ...] = tuple(games)
        self._rng = rng if rng is not None else random.Random()

    def get_item_to_enjoy(self) -> CardGame | None:
        """Pick a card game, or None if there are none."""
        if not self.games:
            logger.debug("No card games to pick from")
            return None
        return self._rng.choice(self.games)


def pick_title(picker: RandomEntertainmentPicker, default: str = "Nothing!") -> str:
    """
    Title of a randomly picked item, or a default when nothing can be picked.

    Args:
        picker: Any RandomEntertainmentPicker whose items have a title
        default: Text returned when the picker is empty

    Returns:
        Picked item's title or default

    Example:
        >>> print(f"Let's play {pick_title(video_game_shelf)}")
    """
    item = picker.get_item_to_enjoy()
    if item is None:
        return default
    return item.title
