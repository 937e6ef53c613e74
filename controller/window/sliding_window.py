###########EXTERNAL IMPORTS############

from typing import Callable, Generic, Iterator, List, Sequence, TypeVar

#######################################

#############LOCAL IMPORTS#############

from model.window.source import ItemSource
from model.window.config import DEFAULT_START, DEFAULT_CAPACITY
from controller.window.exceptions import WindowLockedError, SourceContractError
import controller.window.validation as validation
from util.debug import LoggerManager

#######################################

T = TypeVar("T")


class SlidingWindow(Generic[T]):
    """
    Bounded window over a logically unbounded sequence of items.

    Holds at most `capacity` contiguous items, the first of which sits at the
    logical index `start` of the bound source. The window grows in either
    direction by pulling items from its source and evicts from the opposite
    end when the capacity is exceeded:

    - `extend_forward` appends newer items and drops the oldest ones from the
      front, moving `start` forward by the evicted count.
    - `extend_backward` prepends older items, moves `start` back by the number
      of items received, and drops the newest ones from the tail.

    When empty, `start` is the logical index the next forward item will take.

    The start index and the capacity can only be changed before the first
    extend call; after that the window is locked.

    The window is not thread safe. Callers sharing it across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        source: ItemSource[T],
        start: int = DEFAULT_START,
        capacity: int = DEFAULT_CAPACITY,
        validate_source: bool = True,
    ) -> None:
        self._source = source
        self._start = validation.validate_start(start)
        self._capacity = validation.validate_capacity(capacity)
        self._items: List[T] = []
        self._validate_source = validate_source
        self._locked = False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"SlidingWindow(start={self._start}, end={self.end}, capacity={self._capacity})"

    @property
    def source(self) -> ItemSource[T]:
        return self._source

    @property
    def start(self) -> int:
        """Logical index of the first resident item."""

        return self._start

    @property
    def end(self) -> int:
        """Logical index right after the last resident item."""

        return self._start + len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    ##########     C O N F I G U R A T I O N     ##########

    def with_start(self, start: int) -> "SlidingWindow[T]":
        """
        Sets the logical index the window starts at.

        Args:
            start (int): The new start index.

        Returns:
            SlidingWindow[T]: This same window, to allow chaining.

        Raises:
            WindowLockedError: If the window has already been extended.
            WindowConfigError: If the start is not an integer.
        """

        self.__require_unlocked("start")
        self._start = validation.validate_start(start)
        return self

    def with_capacity(self, capacity: int) -> "SlidingWindow[T]":
        """
        Sets the maximum number of resident items.

        Args:
            capacity (int): The new capacity.

        Returns:
            SlidingWindow[T]: This same window, to allow chaining.

        Raises:
            WindowLockedError: If the window has already been extended.
            WindowConfigError: If the capacity is not a non-negative integer.
        """

        self.__require_unlocked("capacity")
        self._capacity = validation.validate_capacity(capacity)
        return self

    def is_locked(self) -> bool:
        """Returns whether the window has been extended and can no longer be reconfigured."""

        return self._locked

    def __require_unlocked(self, option: str) -> None:
        if self._locked:
            raise WindowLockedError(f"Cannot change the window {option} after items were fetched.")

    ##########     G R O W T H     ##########

    def extend_forward(self, count: int) -> int:
        """
        Grows the window toward higher logical indices.

        Requests `count` items starting right after the last resident item and
        appends them. If the window then exceeds its capacity, the overflow is
        evicted from the front and `start` advances by the same amount. When
        more items arrive than fit, only the last `capacity` of them are kept.

        Args:
            count (int): Number of items to request from the source.

        Returns:
            int: Number of items the source returned.

        Raises:
            SourceContractError: If source validation is enabled and the result
                                 breaks the fetch contract.
        """

        logger = LoggerManager.get_logger(__name__)
        self._locked = True

        from_index = self.end
        new_items = self.__fetch(self._source.fetch_forward, count, from_index, "forward")

        overflow = len(self._items) + len(new_items) - self._capacity
        if overflow > 0:
            self._items = (self._items + new_items)[overflow:]
            self._start += overflow
        else:
            self._items.extend(new_items)

        logger.debug(
            f"Forward fetch from {from_index}: requested {count}, received {len(new_items)}, "
            f"evicted {max(overflow, 0)} from the front. Window is now [{self._start}, {self.end})."
        )
        return len(new_items)

    def extend_backward(self, count: int) -> int:
        """
        Grows the window toward lower logical indices.

        Requests `count` items ending right before `start` and prepends them,
        moving `start` back by the number of items actually received. If the
        window then exceeds its capacity, the newest items are dropped from the
        tail, so the oldest known items are always kept.

        Args:
            count (int): Number of items to request from the source.

        Returns:
            int: Number of items the source returned.

        Raises:
            SourceContractError: If source validation is enabled and the result
                                 breaks the fetch contract.
        """

        logger = LoggerManager.get_logger(__name__)
        self._locked = True

        from_index = self._start
        new_items = self.__fetch(self._source.fetch_backward, count, from_index, "backward")

        self._start -= len(new_items)
        self._items = new_items + self._items

        overflow = len(self._items) - self._capacity
        if overflow > 0:
            del self._items[self._capacity :]

        logger.debug(
            f"Backward fetch from {from_index}: requested {count}, received {len(new_items)}, "
            f"evicted {max(overflow, 0)} from the tail. Window is now [{self._start}, {self.end})."
        )
        return len(new_items)

    def __fetch(self, fetch: Callable[[int, int], Sequence[T]], count: int, from_index: int, direction: str) -> List[T]:
        """
        Queries the source and returns its result as a new list.

        With source validation enabled, contract violations are raised before
        the window is modified. Otherwise the result is trusted and only logged.
        """

        logger = LoggerManager.get_logger(__name__)
        result = fetch(count, from_index)

        if self._validate_source:
            try:
                return validation.validate_fetch_result(result, count, direction)
            except SourceContractError as e:
                logger.error(f"Rejected {direction} fetch from {from_index}: {e}")
                raise

        items = list(result)
        if len(items) > max(count, 0):
            logger.warning(f"Item source returned {len(items)} items for a {direction} fetch of {count} from {from_index}.")
        return items

    ##########     A C C E S S     ##########

    def get_list(self) -> List[T]:
        """
        Returns the resident items as a new list.

        Returns:
            A list of items ordered by ascending logical index.
        """

        return list(self._items)

    def contains(self, index: int) -> bool:
        """Returns whether the item at the given logical index is resident."""

        return self._start <= index < self.end

    def get(self, index: int) -> T:
        """
        Returns the resident item at a logical index.

        Args:
            index (int): Logical index in the source's coordinate space.

        Raises:
            IndexError: If the index is outside the window.
        """

        if not self.contains(index):
            raise IndexError(f"Logical index {index} is outside the window [{self._start}, {self.end}).")
        return self._items[index - self._start]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity
