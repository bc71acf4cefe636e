"""Tests for random pickers."""

import random

from media_shelf import CardGame
from media_shelf import CardGames
from media_shelf import Console
from media_shelf import MediaShelf
from media_shelf import RandomEntertainmentPicker
from media_shelf import VideoGame
from media_shelf import pick_title


def test_card_games_pick_member():
    """Test card game picker returns one of its games."""
    games = [CardGame(title="Bridge"), CardGame(title="Solitaire")]
    picker = CardGames(games, rng=random.Random(3))

    for _ in range(10):
        assert picker.get_item_to_enjoy() in games


def test_card_games_empty():
    """Test no card games is a normal, empty result."""
    assert CardGames([]).get_item_to_enjoy() is None


def test_pickers_satisfy_protocol():
    """Test shelves and card games are both pickers."""
    assert isinstance(CardGames([]), RandomEntertainmentPicker)
    assert isinstance(MediaShelf(VideoGame), RandomEntertainmentPicker)


def test_pick_title():
    """Test title helper with items and with nothing to pick."""
    shelf = MediaShelf(VideoGame)
    assert pick_title(shelf) == "Nothing!"
    assert pick_title(CardGames([]), default="No cards") == "No cards"

    shelf.add(VideoGame(title="Halo", price=19.99, console=Console.XBOX))
    assert pick_title(shelf) == "Halo"


def test_pick_title_default_is_nothing():
    """Test default text matches the "Let's play" idiom."""
    assert f"Let's play {pick_title(CardGames([]))}" == "Let's play Nothing!"
