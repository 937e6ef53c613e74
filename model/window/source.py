###########EXTERNAL IMPORTS############

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

#######################################

#############LOCAL IMPORTS#############

#######################################

T = TypeVar("T")


class ItemSource(ABC, Generic[T]):
    """
    Abstract provider of items addressed by logical index.

    A sliding window queries its source synchronously whenever it grows, and
    treats every result as authoritative: items must be contiguous and in
    ascending logical index order for both directions. Returning fewer items
    than requested signals that the source is exhausted in that direction.
    """

    @abstractmethod
    def fetch_forward(self, count: int, from_index: int) -> Sequence[T]:
        """
        Returns up to `count` items with logical indices `from_index, from_index + 1, ...`.

        Must never return items located before `from_index`.
        """

        pass

    @abstractmethod
    def fetch_backward(self, count: int, from_index: int) -> Sequence[T]:
        """
        Returns up to `count` items immediately preceding `from_index`.

        The result covers `[from_index - k, from_index)` for some `k <= count`
        and is ordered by ascending logical index.
        """

        pass
