###########EXTERNAL IMPORTS############

import pytest

#######################################

#############LOCAL IMPORTS#############

import util.functions.objects as objects

#######################################


def test_get_env_variable_treats_blank_as_unset(monkeypatch):
    monkeypatch.setenv("WINDOW_TEST_VALUE", "   ")
    assert objects.get_env_variable("WINDOW_TEST_VALUE") is None
    monkeypatch.setenv("WINDOW_TEST_VALUE", " 7 ")
    assert objects.get_env_variable("WINDOW_TEST_VALUE") == "7"


def test_parse_bool_str_is_strict():
    assert objects.parse_bool_str("true") is True
    assert objects.parse_bool_str("FALSE") is False
    for value in ("yes", "1", "", "t"):
        with pytest.raises(ValueError):
            objects.parse_bool_str(value)


def test_parse_int_value_rejects_floats_and_bools():
    assert objects.parse_int_value(-3) == -3
    assert objects.parse_int_value(" 12 ") == 12
    for value in (12.9, True, None, "1.5"):
        with pytest.raises(ValueError):
            objects.parse_int_value(value)


def test_parse_bool_value():
    assert objects.parse_bool_value(False) is False
    assert objects.parse_bool_value("True") is True
    with pytest.raises(ValueError):
        objects.parse_bool_value(1)
