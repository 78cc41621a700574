import json

import pytest

from DeskCalc import config_manager
from DeskCalc import error as E


def test_missing_file_gives_defaults(config_path):
    assert config_manager.load_setting_value("all", config_path) == config_manager.DEFAULT_SETTINGS

def test_single_value(config_path):
    assert config_manager.load_setting_value("result_precision", config_path) == 6
    assert config_manager.load_setting_value("unknown", config_path) == 0

def test_save_and_load(config_path):
    settings = config_manager.load_setting_value("all", config_path)
    settings["result_precision"] = 2
    settings["window_width"] = 640
    assert config_manager.save_setting(settings, config_path) == settings

    loaded = config_manager.load_setting_value("all", config_path)
    assert loaded["result_precision"] == 2
    assert loaded["window_width"] == 640
    assert loaded["display_height"] == 0

def test_broken_json_gives_defaults(config_path):
    config_path.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all", config_path) == config_manager.DEFAULT_SETTINGS

def test_invalid_values_fall_back(config_path):
    config_path.write_text(json.dumps({
        "result_precision": 5,
        "window_width": "big",
        "darkmode": 1,
        "display_height": 240,
        "extra": "kept",
    }), encoding="utf-8")
    loaded = config_manager.load_setting_value("all", config_path)
    assert loaded["result_precision"] == 6
    assert loaded["window_width"] == 200
    assert loaded["darkmode"] is False
    assert loaded["display_height"] == 240
    assert loaded["extra"] == "kept"

def test_save_failure_returns_empty(tmp_path):
    target = tmp_path / "missing_dir" / "config.json"
    assert config_manager.save_setting({"result_precision": 6}, target) == {}

@pytest.mark.parametrize("precision", config_manager.PRECISION_CHOICES)
def test_valid_precisions(precision):
    assert config_manager.validate_precision(precision) == precision

@pytest.mark.parametrize("precision", [5, 7, -1, 12, True, "6", None])
def test_invalid_precisions(precision):
    with pytest.raises(E.ConfigurationError) as excinfo:
        config_manager.validate_precision(precision)
    assert excinfo.value.code == "5001"

def test_setting_descriptions():
    assert config_manager.load_setting_description("result_precision") == "Result Precision"
    assert set(config_manager.load_setting_description("all")) == set(config_manager.DEFAULT_SETTINGS)
