###########EXTERNAL IMPORTS############

import logging
import pytest

#######################################

#############LOCAL IMPORTS#############

from controller.window.sliding_window import SlidingWindow
from controller.window.exceptions import SourceContractError, WindowError
from controller.source.callable_source import CallableItemSource
import controller.window.validation as validation

#######################################


def too_many(count, from_index):
    return list(range(from_index, from_index + count + 2))


def as_generator(count, from_index):
    return (i for i in range(from_index, from_index + count))


def test_validate_fetch_result_accepts_sequences():
    assert validation.validate_fetch_result((1, 2), 2, "forward") == [1, 2]
    assert validation.validate_fetch_result([], 0, "forward") == []
    assert validation.validate_fetch_result([], -5, "backward") == []


def test_validate_fetch_result_rejects_bad_results():
    with pytest.raises(SourceContractError):
        validation.validate_fetch_result([1, 2, 3], 2, "forward")
    with pytest.raises(SourceContractError):
        validation.validate_fetch_result([1], -1, "backward")
    with pytest.raises(SourceContractError):
        validation.validate_fetch_result(None, 2, "forward")
    with pytest.raises(SourceContractError):
        validation.validate_fetch_result("ab", 2, "forward")


def test_window_rejects_oversized_result_without_changing_state():
    window = SlidingWindow(CallableItemSource(too_many, too_many), capacity=10)
    with pytest.raises(SourceContractError):
        window.extend_forward(3)
    assert window.get_list() == []
    assert window.start == 0


def test_window_rejects_non_sequence_result():
    window = SlidingWindow(CallableItemSource(as_generator, as_generator), capacity=10)
    with pytest.raises(WindowError):
        window.extend_backward(3)
    assert window.start == 0


def test_unchecked_window_accepts_oversized_result(caplog):
    window = SlidingWindow(CallableItemSource(too_many, too_many), capacity=10, validate_source=False)
    with caplog.at_level(logging.WARNING):
        received = window.extend_forward(3)
    assert received == 5
    assert window.get_list() == [0, 1, 2, 3, 4]
    assert "returned 5 items" in caplog.text


def test_unchecked_window_accepts_generators():
    window = SlidingWindow(CallableItemSource(as_generator, as_generator), capacity=10, validate_source=False)
    window.extend_forward(3)
    assert window.get_list() == [0, 1, 2]
