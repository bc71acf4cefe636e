"""Protocols for media items, collections and item sources.

Structural typing over inheritance: any object exposing the right attributes
is a media item, any object exposing get_item_to_enjoy is a picker.
"""

from collections.abc import Sequence
from typing import Protocol
from typing import TypeVar
from typing import runtime_checkable


@runtime_checkable
class MediaItem(Protocol):
    """A named, priced unit of content (movie, show, game, board game)."""

    title: str
    price: float


@runtime_checkable
class Video(MediaItem, Protocol):
    """Media item with a running time in minutes."""

    duration: float


ItemT = TypeVar("ItemT", bound=MediaItem)
ItemT_co = TypeVar("ItemT_co", covariant=True)
MediaItemT_co = TypeVar("MediaItemT_co", bound=MediaItem, covariant=True)


class MediaCollection(Protocol[ItemT]):
    """Ordered, type-homogeneous sequence of media items."""

    @property
    def items(self) -> Sequence[ItemT]: ...

    def add(self, item: ItemT) -> None: ...

    def get_description(self) -> str: ...


@runtime_checkable
class RandomEntertainmentPicker(Protocol[ItemT_co]):
    """Anything that can suggest one thing to enjoy.

    Returns None when there is nothing to pick.
    """

    def get_item_to_enjoy(self) -> ItemT_co | None: ...


@runtime_checkable
class MediaRepository(Protocol[MediaItemT_co]):
    """Source of media items for a shelf.

    Example implementations:
    - VideoGameMediaRepository: static, shuffled list
    - Anything backed by an API or database, owned by the app
    """

    async def get_items(self) -> list[MediaItemT_co]:
        """Fetch items.

        Raises:
            Exception: If the source cannot provide items
        """
        ...


def is_media_item_type(item_type: type) -> bool:
    """Check whether a class declares the MediaItem attributes.

    Looks at annotations along the MRO, which covers pydantic models,
    dataclasses and plain annotated classes.

    Args:
        item_type: Class to check

    Returns:
        True if the class declares both title and price
    """
    if not isinstance(item_type, type):
        return False

    declared: set[str] = set()
    for klass in item_type.__mro__:
        declared.update(getattr(klass, "__annotations__", {}))
    return {"title", "price"} <= declared
