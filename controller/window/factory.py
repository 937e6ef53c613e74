###########EXTERNAL IMPORTS############

from typing import Optional, TypeVar

#######################################

#############LOCAL IMPORTS#############

from model.window.source import ItemSource
from model.window.config import WindowConfig
from controller.window.sliding_window import SlidingWindow
from controller.window.exceptions import WindowConfigError
from util.debug import LoggerManager

#######################################

T = TypeVar("T")


def create_window(source: ItemSource[T], config: Optional[WindowConfig] = None) -> SlidingWindow[T]:
    """
    Creates a sliding window bound to a source.

    Args:
        source (ItemSource[T]): Source the window will fetch items from.
        config (Optional[WindowConfig]): Window parameters. Defaults are used when None.

    Returns:
        SlidingWindow[T]: A new, empty window.

    Raises:
        WindowConfigError: If the configuration is invalid.
    """

    if config is None:
        config = WindowConfig()

    try:
        config.validate()
    except ValueError as e:
        raise WindowConfigError(str(e)) from e

    return SlidingWindow(
        source,
        start=config.start,
        capacity=config.capacity,
        validate_source=config.validate_source,
    )


def create_window_from_env(source: ItemSource[T], config_file: Optional[str] = None) -> SlidingWindow[T]:
    """
    Creates a sliding window configured from the environment.

    Reads WINDOW_START, WINDOW_CAPACITY and WINDOW_VALIDATE_SOURCE, optionally
    loading them from a .env file first.

    Args:
        source (ItemSource[T]): Source the window will fetch items from.
        config_file (Optional[str]): Path to the .env config file.

    Raises:
        WindowConfigError: If any configured value is malformed.
    """

    logger = LoggerManager.get_logger(__name__)

    try:
        config = WindowConfig.from_env(config_file)
    except ValueError as e:
        logger.error(f"Invalid window configuration: {e}")
        raise WindowConfigError(str(e)) from e

    logger.info(f"Creating window with start {config.start} and capacity {config.capacity}.")
    return create_window(source, config)
