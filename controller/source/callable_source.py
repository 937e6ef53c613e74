###########EXTERNAL IMPORTS############

from typing import Callable, Sequence, TypeVar

#######################################

#############LOCAL IMPORTS#############

from model.window.source import ItemSource

#######################################

T = TypeVar("T")

FetchFunction = Callable[[int, int], Sequence[T]]


class CallableItemSource(ItemSource[T]):
    """
    Adapts two plain functions to the item source contract.

    Both functions receive `(count, from_index)` and must honour the same
    ordering rules as `ItemSource.fetch_forward` and `ItemSource.fetch_backward`.
    """

    def __init__(self, forward: FetchFunction[T], backward: FetchFunction[T]):
        if not callable(forward) or not callable(backward):
            raise TypeError("CallableItemSource requires two callables.")
        self.forward = forward
        self.backward = backward

    def fetch_forward(self, count: int, from_index: int) -> Sequence[T]:
        return self.forward(count, from_index)

    def fetch_backward(self, count: int, from_index: int) -> Sequence[T]:
        return self.backward(count, from_index)
