"""Structured encoding of media items for display.

Only pydantic models are encodable. Anything else raises MediaEncodingError
so callers can recover instead of the process aborting.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from .exceptions import MediaEncodingError

logger = logging.getLogger(__name__)


def is_encodable(value: Any) -> bool:
    """Check if an item or item type supports structured encoding.

    Args:
        value: Item instance or item class

    Returns:
        True for pydantic models and model classes
    """
    if isinstance(value, type):
        return issubclass(value, BaseModel)
    return isinstance(value, BaseModel)


def encode_item(item: Any) -> dict[str, Any]:
    """Convert an item to a JSON-compatible dict keyed by its declared fields.

    Args:
        item: Item to encode

    Returns:
        Dict of field name to JSON-compatible value

    Raises:
        MediaEncodingError: If the item is not encodable

    Example:
        >>> encode_item(BoardGame(title="Catan", price=40))
        {'title': 'Catan', 'price': 40.0}
    """
    if not is_encodable(item):
        raise MediaEncodingError(
            f"{type(item).__name__} does not support structured encoding",
            context={"item_type": type(item).__name__},
        )
    return item.model_dump(mode="json")


def item_to_json(item: Any) -> str:
    """Encode a single item as a JSON object string.

    Raises:
        MediaEncodingError: If the item is not encodable
    """
    return json.dumps(encode_item(item))


def items_to_json(items: Iterable[Any]) -> str:
    """Encode items as a JSON array string.

    Args:
        items: Items to encode, in order

    Returns:
        JSON array of encoded items

    Raises:
        MediaEncodingError: If any item is not encodable
    """
    encoded = [encode_item(item) for item in items]
    logger.debug(f"Encoded {len(encoded)} items")
    return json.dumps(encoded)
