###########EXTERNAL IMPORTS############

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
from dotenv import load_dotenv

#######################################

#############LOCAL IMPORTS#############

import util.functions.objects as objects

#######################################

DEFAULT_START = 0
DEFAULT_CAPACITY = 40


@dataclass
class WindowConfig:
    """
    Construction parameters of a sliding window.

    Attributes:
        start: Logical index of the first item the window will hold.
        capacity: Maximum number of items resident at once.
        validate_source: Whether results returned by the item source are checked
            against the fetch contract before they are merged into the window.
    """

    start: int = DEFAULT_START
    capacity: int = DEFAULT_CAPACITY
    validate_source: bool = True

    ENV_START = "WINDOW_START"
    ENV_CAPACITY = "WINDOW_CAPACITY"
    ENV_VALIDATE_SOURCE = "WINDOW_VALIDATE_SOURCE"

    def get_config(self) -> Dict[str, Any]:
        """
        Returns a dictionary representation of the current window configuration

        Returns:
            Dict[str, Any]: A dictionary with all configurations and it's values
        """

        return asdict(self)

    @staticmethod
    def check_start(start: Any) -> int:
        """
        Checks a logical start index.

        Raises:
            ValueError: If the value is not an integer.
        """

        if not isinstance(start, int) or isinstance(start, bool):
            raise ValueError(f"Invalid window start '{start}'. Must be an integer.")
        return start

    @staticmethod
    def check_capacity(capacity: Any) -> int:
        """
        Checks a window capacity.

        Raises:
            ValueError: If the value is not a non-negative integer.
        """

        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError(f"Invalid window capacity '{capacity}'. Must be a non-negative integer.")
        return capacity

    def validate(self) -> None:
        """
        Validates the window configuration.

        Raises:
            ValueError: If start is not an integer, capacity is not a non-negative
                        integer or validate_source is not a boolean.
        """

        WindowConfig.check_start(self.start)
        WindowConfig.check_capacity(self.capacity)

        if not isinstance(self.validate_source, bool):
            raise ValueError(f"Invalid validate_source option '{self.validate_source}'. Must be a boolean.")

    @staticmethod
    def cast_from_dict(config_dict: Dict[str, Any]) -> "WindowConfig":
        """
        Construct WindowConfig from a dictionary of primitive values.

        Integers may be given as ints or integer strings and booleans as bools
        or "true"/"false" strings. Missing keys keep their defaults. The result
        is validated before being returned.

        Raises:
            ValueError: If the dictionary cannot be cast into a valid window configuration.
        """

        try:
            start = objects.parse_int_value(config_dict.get("start", DEFAULT_START))
            capacity = objects.parse_int_value(config_dict.get("capacity", DEFAULT_CAPACITY))
            validate_source = objects.parse_bool_value(config_dict.get("validate_source", True))
        except Exception as e:
            raise ValueError(f"Couldn't cast dictionary into Window Configuration: {e}.") from e

        config = WindowConfig(start=start, capacity=capacity, validate_source=validate_source)
        config.validate()
        return config

    @staticmethod
    def from_env(config_file: Optional[str] = None) -> "WindowConfig":
        """
        Loads the window configuration from the environment.

        The optional .env file is loaded first; variables that are already set
        in the process environment take precedence over the file. Every
        variable is optional and falls back to its default when absent.

        Args:
            config_file (Optional[str]): Path to the .env config file.

        Raises:
            ValueError: If any variable holds a malformed value.
        """

        if config_file is not None:
            load_dotenv(config_file)

        config = WindowConfig()

        start = objects.get_env_variable(WindowConfig.ENV_START)
        if start is not None:
            config.start = objects.parse_int_str(start)

        capacity = objects.get_env_variable(WindowConfig.ENV_CAPACITY)
        if capacity is not None:
            config.capacity = objects.parse_int_str(capacity)

        validate_source = objects.get_env_variable(WindowConfig.ENV_VALIDATE_SOURCE)
        if validate_source is not None:
            config.validate_source = objects.parse_bool_str(validate_source)

        config.validate()
        return config
