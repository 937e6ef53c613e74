###########EXTERNAL IMPORTS############

from typing import List, Optional

#######################################

#############LOCAL IMPORTS#############

from model.window.source import ItemSource

#######################################


class RangeItemSource(ItemSource[int]):
    """
    Item source whose items are their own logical indices.

    Without bounds the source is infinite in both directions. An optional
    `lower` (inclusive) and `upper` (exclusive) bound clip every request,
    modelling the start and the end of a data set.
    """

    def __init__(self, lower: Optional[int] = None, upper: Optional[int] = None):
        if lower is not None and upper is not None and lower > upper:
            raise ValueError(f"Invalid range bounds: lower {lower} is greater than upper {upper}.")
        self.lower = lower
        self.upper = upper

    def fetch_forward(self, count: int, from_index: int) -> List[int]:
        return self.__clip(from_index, from_index + max(count, 0))

    def fetch_backward(self, count: int, from_index: int) -> List[int]:
        return self.__clip(from_index - max(count, 0), from_index)

    def __clip(self, first: int, last: int) -> List[int]:
        if self.lower is not None:
            first = max(first, self.lower)
        if self.upper is not None:
            last = min(last, self.upper)
        return list(range(first, last))
