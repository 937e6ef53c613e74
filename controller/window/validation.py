###########EXTERNAL IMPORTS############

from collections.abc import Sequence
from typing import Any, List, TypeVar

#######################################

#############LOCAL IMPORTS#############

from model.window.config import WindowConfig
from controller.window.exceptions import WindowConfigError, SourceContractError

#######################################

T = TypeVar("T")


def validate_start(start: Any) -> int:
    """
    Validates a logical start index.

    Raises:
        WindowConfigError: If the value is not an integer.
    """

    try:
        return WindowConfig.check_start(start)
    except ValueError as e:
        raise WindowConfigError(str(e)) from e


def validate_capacity(capacity: Any) -> int:
    """
    Validates a window capacity.

    Raises:
        WindowConfigError: If the value is not a non-negative integer.
    """

    try:
        return WindowConfig.check_capacity(capacity)
    except ValueError as e:
        raise WindowConfigError(str(e)) from e


def validate_fetch_result(result: Any, count: int, direction: str) -> List[T]:
    """
    Checks a source result against the parts of the fetch contract that can be
    verified without knowing the item type.

    Args:
        result (Any): Value returned by the item source.
        count (int): Number of items that were requested.
        direction (str): "forward" or "backward", used in error messages.

    Returns:
        List[T]: The result copied into a new list.

    Raises:
        SourceContractError: If the result is not a sequence or holds more
                             items than were requested.
    """

    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        raise SourceContractError(f"Item source returned {type(result).__name__} for a {direction} fetch, expected a sequence.")

    allowed = max(count, 0)
    if len(result) > allowed:
        raise SourceContractError(f"Item source returned {len(result)} items for a {direction} fetch of {count}.")

    return list(result)
