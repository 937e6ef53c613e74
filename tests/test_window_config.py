###########EXTERNAL IMPORTS############

import os
import pytest

#######################################

#############LOCAL IMPORTS#############

from model.window.config import WindowConfig
from controller.window.factory import create_window, create_window_from_env
from controller.window.exceptions import WindowConfigError
from controller.source.range_source import RangeItemSource
import controller.window.validation as validation

#######################################


@pytest.fixture(autouse=True)
def clear_window_env():
    keys = (WindowConfig.ENV_START, WindowConfig.ENV_CAPACITY, WindowConfig.ENV_VALIDATE_SOURCE)
    original = {key: os.environ.pop(key) for key in keys if key in os.environ}
    yield
    for key in keys:
        os.environ.pop(key, None)
    os.environ.update(original)


def test_default_config():
    config = WindowConfig()
    config.validate()
    assert config.get_config() == {"start": 0, "capacity": 40, "validate_source": True}


def test_config_validation():
    with pytest.raises(ValueError):
        WindowConfig(capacity=-1).validate()
    with pytest.raises(ValueError):
        WindowConfig(start="0").validate()
    with pytest.raises(ValueError):
        WindowConfig(validate_source=1).validate()


def test_cast_from_dict():
    config = WindowConfig.cast_from_dict({"start": "-20", "capacity": 15, "validate_source": "false"})
    assert config == WindowConfig(start=-20, capacity=15, validate_source=False)
    assert WindowConfig.cast_from_dict({}) == WindowConfig()
    with pytest.raises(ValueError):
        WindowConfig.cast_from_dict({"capacity": "many"})
    with pytest.raises(ValueError):
        WindowConfig.cast_from_dict({"capacity": -3})
    with pytest.raises(ValueError):
        WindowConfig.cast_from_dict({"capacity": 12.9})
    with pytest.raises(ValueError):
        WindowConfig.cast_from_dict({"start": True})
    with pytest.raises(ValueError):
        WindowConfig.cast_from_dict({"validate_source": "yes"})
    with pytest.raises(ValueError) as error:
        WindowConfig.cast_from_dict({"start": "ten"})
    assert isinstance(error.value.__cause__, ValueError)


def test_from_env_file(tmp_path):
    config_file = tmp_path / "window.env"
    config_file.write_text("WINDOW_START=-50\nWINDOW_CAPACITY=25\nWINDOW_VALIDATE_SOURCE=false\n")
    config = WindowConfig.from_env(str(config_file))
    assert config == WindowConfig(start=-50, capacity=25, validate_source=False)


def test_from_env_defaults_when_unset():
    assert WindowConfig.from_env() == WindowConfig()


def test_process_environment_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "window.env"
    config_file.write_text("WINDOW_CAPACITY=25\n")
    monkeypatch.setenv("WINDOW_CAPACITY", "12")
    assert WindowConfig.from_env(str(config_file)).capacity == 12


def test_create_window_uses_config():
    window = create_window(RangeItemSource(), WindowConfig(start=10, capacity=3))
    window.extend_forward(5)
    assert window.get_list() == [12, 13, 14]
    assert window.start == 12


def test_create_window_rejects_invalid_config():
    with pytest.raises(WindowConfigError):
        create_window(RangeItemSource(), WindowConfig(capacity=-4))


def test_create_window_from_env(monkeypatch):
    monkeypatch.setenv("WINDOW_START", "3")
    monkeypatch.setenv("WINDOW_CAPACITY", "4")
    window = create_window_from_env(RangeItemSource())
    assert window.start == 3
    assert window.capacity == 4
    window.extend_backward(2)
    assert window.get_list() == [1, 2]


def test_create_window_from_env_rejects_malformed_values(monkeypatch):
    monkeypatch.setenv("WINDOW_CAPACITY", "forty")
    with pytest.raises(WindowConfigError):
        create_window_from_env(RangeItemSource())


def test_create_window_from_env_rejects_malformed_boolean(monkeypatch):
    monkeypatch.setenv("WINDOW_VALIDATE_SOURCE", "yes")
    with pytest.raises(WindowConfigError):
        create_window_from_env(RangeItemSource())


def test_create_window_from_env_accepts_boolean_in_any_case(monkeypatch):
    monkeypatch.setenv("WINDOW_VALIDATE_SOURCE", " False ")
    assert WindowConfig.from_env() == WindowConfig(validate_source=False)


def test_window_and_config_share_value_checks():
    for start in (1.5, True, "0"):
        with pytest.raises(ValueError):
            WindowConfig(start=start).validate()
        with pytest.raises(WindowConfigError):
            validation.validate_start(start)
    for capacity in (-1, False, 2.0):
        with pytest.raises(ValueError):
            WindowConfig(capacity=capacity).validate()
        with pytest.raises(WindowConfigError):
            validation.validate_capacity(capacity)
