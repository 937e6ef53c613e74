###########EXTERNAL IMPORTS############

from typing import List, Sequence, TypeVar

#######################################

#############LOCAL IMPORTS#############

from model.window.source import ItemSource

#######################################

T = TypeVar("T")


class SequenceItemSource(ItemSource[T]):
    """
    Item source backed by a finite in-memory sequence.

    The first element of the sequence sits at logical index `offset`, so the
    source covers the logical range `[offset, offset + len(items))`. Requests
    reaching outside that range are clipped, which makes the window see the
    ends of the sequence as exhaustion.

    Args:
        items (Sequence[T]): Items in ascending logical order.
        offset (int): Logical index of the first item.
    """

    def __init__(self, items: Sequence[T], offset: int = 0):
        self.items: List[T] = list(items)
        self.offset = offset

    @property
    def lower(self) -> int:
        return self.offset

    @property
    def upper(self) -> int:
        return self.offset + len(self.items)

    def fetch_forward(self, count: int, from_index: int) -> List[T]:
        first = max(from_index, self.lower)
        last = min(from_index + max(count, 0), self.upper)
        return self.__slice(first, last)

    def fetch_backward(self, count: int, from_index: int) -> List[T]:
        first = max(from_index - max(count, 0), self.lower)
        last = min(from_index, self.upper)
        return self.__slice(first, last)

    def __slice(self, first: int, last: int) -> List[T]:
        if first >= last:
            return []
        return self.items[first - self.offset : last - self.offset]
