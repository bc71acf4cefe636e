"""Walk through the three lessons with the sample catalog.

Each lesson returns its output lines; main() prints them.
"""

import argparse
import asyncio
import logging
import random

from .catalog import Catalog
from .encoding import item_to_json
from .exceptions import MediaError
from .items import BoardGame
from .items import Movie
from .items import VideoGame
from .pickers import pick_title
from .repository import VideoGameMediaRepository
from .repository import load_shelf
from .samples import sample_catalog
from .shelf import MediaShelf
from .shelf import MovieCollection
from .vehicles import Direction
from .vehicles import FamilyCar
from .vehicles import FamilyCarInheritance
from .vehicles import Truck

logger = logging.getLogger(__name__)


def lesson_one() -> list[str]:
    """Protocols vs inheritance."""
    lines = []
    for vehicle in (FamilyCar(), FamilyCarInheritance(), Truck()):
        for speed in (30, 60):
            distance = vehicle.move(Direction.FORWARD, 15, speed)
            lines.append(f"Traveled {distance}")
            if isinstance(vehicle, FamilyCarInheritance):
                lines.append(f"Current distance is {vehicle.total_distance_traveled}")
        lines.append(vehicle.show_details())
    return lines


def lesson_two(catalog: Catalog, rng: random.Random) -> list[str]:
    """Protocol composition: shelves, specialised descriptions, pickers."""
    lines = []

    movie_collection = MovieCollection(rng=rng)
    for movie in catalog.movies[:2]:
        movie_collection.add(movie)
    lines.append(movie_collection.get_description())

    board_game_shelf = catalog.shelf_for(BoardGame, rng=rng)
    movie_shelf = MediaShelf(Movie, rng=rng)
    movie_shelf.add(catalog.movies[-1])
    video_game_shelf = catalog.shelf_for(VideoGame, rng=rng)

    for shelf in (board_game_shelf, movie_shelf, video_game_shelf):
        lines.append(shelf.get_description())

    lines.append(board_game_shelf.items_as_json())
    lines.append(f"Let's play {pick_title(video_game_shelf)}")

    if catalog.board_games:
        lines.append(item_to_json(catalog.board_games[0]))

    card_game = catalog.card_game_picker(rng=rng).get_item_to_enjoy()
    if card_game is None:
        lines.append("We have no card games!")
    else:
        lines.append(f"We have some cards so we'll play {card_game.title}")
    return lines


async def lesson_three(catalog: Catalog, rng: random.Random) -> list[str]:
    """Protocol-driven list: load a shelf from a repository and list its rows."""
    shelf = MediaShelf(VideoGame, rng=rng)
    await load_shelf(VideoGameMediaRepository(catalog.video_games, rng=rng), shelf)
    return [item.title for item in shelf]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="media-shelf", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for random picks")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    catalog = sample_catalog()

    try:
        sections = [
            ("Lesson 1: protocols vs inheritance", lesson_one()),
            ("Lesson 2: protocol composition", lesson_two(catalog, rng)),
            ("Lesson 3: protocol-driven lists", asyncio.run(lesson_three(catalog, rng))),
        ]
    except MediaError as e:
        logger.error(f"Demo failed: {e.message}")
        return 1

    for heading, lines in sections:
        print(heading)
        for line in lines:
            print(f"  {line}")
    return 0
