"""Tests for repositories and shelf loading."""

import random

import pytest
from media_shelf import BoardGame
from media_shelf import Console
from media_shelf import MediaItemTypeError
from media_shelf import MediaRepository
from media_shelf import MediaRepositoryError
from media_shelf import MediaShelf
from media_shelf import VideoGame
from media_shelf import VideoGameMediaRepository
from media_shelf import load_shelf

GAMES = [
    VideoGame(title="Batman: Arkham Knight", price=49.99, console=Console.XBOX),
    VideoGame(title="The Legend of Zelda: Tears of the Kingdom", price=59.99, console=Console.SWITCH),
    VideoGame(title="Gran Turismo 7", price=39.99, console=Console.PLAYSTATION),
]


class FailingRepository:
    """Repository whose backend is down."""

    async def get_items(self) -> list[VideoGame]:
        raise ConnectionError("backend unavailable")


class MixedRepository:
    """Repository that returns a board game among its video games."""

    async def get_items(self) -> list:
        return [GAMES[0], BoardGame(title="Catan", price=40)]


@pytest.mark.asyncio
async def test_get_items_returns_shuffled_copy():
    """Test repository returns every game, without mutating its own list."""
    repository = VideoGameMediaRepository(GAMES, rng=random.Random(1))

    items = await repository.get_items()

    assert sorted(game.title for game in items) == sorted(game.title for game in GAMES)
    assert repository.games == tuple(GAMES)


@pytest.mark.asyncio
async def test_load_shelf():
    """Test loading adds every repository item to the shelf."""
    shelf = MediaShelf(VideoGame)

    added = await load_shelf(VideoGameMediaRepository(GAMES), shelf)

    assert added == 3
    assert len(shelf) == 3
    assert shelf.get_description() == (
        "This collection contains 1 Xbox games, 1 Playstation games and 1 Switch games"
    )


@pytest.mark.asyncio
async def test_load_shelf_repository_failure():
    """Test repository failures are wrapped."""
    shelf = MediaShelf(VideoGame)

    with pytest.raises(MediaRepositoryError, match="backend unavailable") as exc_info:
        await load_shelf(FailingRepository(), shelf)

    assert exc_info.value.context == {"repository": "FailingRepository"}
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert len(shelf) == 0


@pytest.mark.asyncio
async def test_load_shelf_type_mismatch_adds_nothing():
    """Test a mismatched item aborts the whole load, including earlier valid items."""
    shelf = MediaShelf(VideoGame)

    with pytest.raises(MediaItemTypeError) as exc_info:
        await load_shelf(MixedRepository(), shelf)

    assert exc_info.value.context["got"] == "BoardGame"
    assert len(shelf) == 0


def test_repository_protocol():
    """Test repositories are recognised structurally."""
    assert isinstance(VideoGameMediaRepository(GAMES), MediaRepository)
    assert isinstance(FailingRepository(), MediaRepository)
