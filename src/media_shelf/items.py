"""Sample media item variants.

Items are pydantic models so they validate on construction and support
structured encoding. The generated id identifies an item in list views and is
not part of its encoded form.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID
from uuid import uuid4

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class Console(str, Enum):
    """Gaming consoles a video game can be released for."""

    XBOX = "xbox"
    PLAYSTATION = "playstation"
    SWITCH = "switch"

    @property
    def label(self) -> str:
        """Display name used in shelf descriptions."""
        return self.value.capitalize()


class _Item(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, exclude=True)
    title: str = Field(min_length=1)
    price: float = Field(ge=0)


class BoardGame(_Item):
    """Board game (title, price)."""


class Movie(_Item):
    """Movie with running time in minutes."""

    duration: float = Field(ge=0)


class TVShow(_Item):
    """TV show with running time in minutes."""

    duration: float = Field(ge=0)


class VideoGame(_Item):
    """Video game released for one console."""

    console: Console


@dataclass(frozen=True)
class CardGame:
    """Card game. Has no price, so it is not a media item."""

    title: str
