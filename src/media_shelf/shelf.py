"""Typed media shelves.

A shelf holds items of exactly one media item type, fixed at construction.
Descriptions are chosen from the item type once, when the shelf is created:
a shelf of video games describes itself by console, every other shelf just
counts its items. Apps can register descriptions for their own item types.
"""

import logging
import random
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Sequence
from typing import Generic

from .encoding import is_encodable
from .encoding import items_to_json
from .exceptions import MediaEncodingError
from .exceptions import MediaItemTypeError
from .items import Console
from .items import Movie
from .items import VideoGame
from .protocols import ItemT
from .protocols import is_media_item_type

logger = logging.getLogger(__name__)

Describer = Callable[[Sequence], str]

_describers: dict[type, Describer] = {}


def register_description(item_type: type) -> Callable[[Describer], Describer]:
    """Register a description for shelves of the given item type.

    Subclasses of item_type use it too, unless they register their own.
    Shelves created before registration keep the description they started with.

    Args:
        item_type: Media item class the description applies to

    Example:
        >>> @register_description(Movie)
        ... def describe_movies(items):
        ...     return f"{sum(m.duration for m in items)} minutes of film"
    """

    def decorator(describer: Describer) -> Describer:
        _describers[item_type] = describer
        logger.debug(f"Registered description for {item_type.__name__}")
        return describer

    return decorator


def describe_items(items: Sequence) -> str:
    """Default description: item count."""
    return f"Collection contains {len(items)} items"


@register_description(VideoGame)
def describe_video_games(items: Sequence[VideoGame]) -> str:
    """Describe video games by console, in fixed Xbox, Playstation, Switch order."""
    xbox, playstation, switch = (
        sum(1 for game in items if game.console == console)
        for console in (Console.XBOX, Console.PLAYSTATION, Console.SWITCH)
    )
    return (
        f"This collection contains {xbox} {Console.XBOX.label} games, "
        f"{playstation} {Console.PLAYSTATION.label} games and "
        f"{switch} {Console.SWITCH.label} games"
    )


def _describer_for(item_type: type) -> Describer:
    for klass in item_type.__mro__:
        if klass in _describers:
            return _describers[klass]
    return describe_items


class MediaShelf(Generic[ItemT]):
    """
    Ordered shelf of media items of a single type.

    Satisfies both MediaCollection and RandomEntertainmentPicker. Items can
    only be appended; insertion order is preserved.

    Example:
        >>> shelf = MediaShelf(VideoGame)
        >>> shelf.add(VideoGame(title="Halo", price=19.99, console=Console.XBOX))
        >>> shelf.get_description()
        'This collection contains 1 Xbox games, 0 Playstation games and 0 Switch games'
    """

    def __init__(self, item_type: type[ItemT], rng: random.Random | None = None):
        """Initialize an empty shelf.

        Args:
            item_type: Media item class this shelf holds for its whole lifetime
            rng: Random source for get_item_to_enjoy (defaults to a fresh Random)

        Raises:
            MediaItemTypeError: If item_type does not declare title and price
        """
        if not is_media_item_type(item_type):
            raise MediaItemTypeError(
                f"{item_type!r} is not a media item type (needs title and price)",
                context={"item_type": repr(item_type)},
            )

        self.item_type = item_type
        self._items: list[ItemT] = []
        self._rng = rng if rng is not None else random.Random()
        self._describe = _describer_for(item_type)

    @property
    def items(self) -> tuple[ItemT, ...]:
        """Items in insertion order (read-only snapshot)."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemT]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.item_type.__name__}, items={len(self._items)})"

    def add(self, item: ItemT) -> None:
        """
        Append item to the end of the shelf.

        Args:
            item: Item of the shelf's item type

        Raises:
            MediaItemTypeError: If item is not an instance of the shelf's item type
        """
        if not isinstance(item, self.item_type):
            raise MediaItemTypeError(
                f"Cannot add {type(item).__name__} to a shelf of {self.item_type.__name__}",
                context={"item_type": self.item_type.__name__, "got": type(item).__name__},
            )

        self._items.append(item)
        logger.debug(f"Added {item.title!r} to {self.item_type.__name__} shelf ({len(self._items)} items)")

    def get_description(self) -> str:
        """Human-readable summary, specialised by item type."""
        return self._describe(self.items)

    def get_item_to_enjoy(self) -> ItemT | None:
        """
        Pick one item uniformly at random.

        Returns:
            An item currently on the shelf, or None if the shelf is empty
        """
        if not self._items:
            return None
        return self._rng.choice(self._items)

    def items_as_json(self) -> str:
        """
        Encode the shelf's items as a JSON array.

        Returns:
            JSON text with one object per item, in shelf order

        Raises:
            MediaEncodingError: If the shelf's item type is not encodable
        """
        if not is_encodable(self.item_type):
            raise MediaEncodingError(
                f"Items of type {self.item_type.__name__} do not support structured encoding",
                context={"item_type": self.item_type.__name__},
            )
        return items_to_json(self._items)


class MovieCollection(MediaShelf[Movie]):
    """Shelf fixed to movies."""

    def __init__(self, rng: random.Random | None = None):
        super().__init__(Movie, rng=rng)
