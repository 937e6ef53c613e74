###########EXTERNAL IMPORTS############

from typing import Any, Optional
import os

#######################################

#############LOCAL IMPORTS#############

#######################################


def get_env_variable(key: str) -> Optional[str]:
    """
    Returns the value of the environment variable for the given key,
    or None if it is not set or blank.
    """

    value = os.getenv(key)
    if value is None or value.strip() == "":
        return None

    return value.strip()


def parse_bool_str(string: str) -> bool:
    """
    Converts a string holding "TRUE" or "FALSE" (case-insensitive).

    Args:
        string (str): The text to convert (surrounding whitespace is ignored).

    Returns:
        bool: The parsed value.

    Raises:
        ValueError: If the string is neither "TRUE" nor "FALSE".
    """

    normalized = string.strip().upper() if isinstance(string, str) else None
    if normalized == "TRUE":
        return True
    if normalized == "FALSE":
        return False
    raise ValueError(f"Invalid boolean value: {string!r}. Must be 'true' or 'false'.")


def parse_int_str(string: str) -> int:
    """
    Converts a string holding a signed decimal integer.

    Args:
        string (str): The text to convert (surrounding whitespace is ignored).

    Returns:
        int: The parsed value.

    Raises:
        ValueError: If the string is not a valid integer.
    """

    try:
        return int(string.strip(), 10)
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid integer value: {string!r}") from e


def parse_int_value(value: Any) -> int:
    """
    Converts an integer or a string holding one, without truncating floats
    or treating booleans as integers.

    Raises:
        ValueError: If the value is not an integer or an integer string.
    """

    if isinstance(value, bool):
        raise ValueError(f"Invalid integer value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return parse_int_str(value)
    raise ValueError(f"Invalid integer value: {value!r}")


def parse_bool_value(value: Any) -> bool:
    """
    Converts a boolean or a "true"/"false" string.

    Raises:
        ValueError: If the value is neither a boolean nor a boolean string.
    """

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool_str(value)
    raise ValueError(f"Invalid boolean value: {value!r}")
