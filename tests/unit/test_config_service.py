import json
from pathlib import Path

import pytest

from timecard.excel.week_layouts import WEEK_LAYOUTS
from timecard.services.config_service import DEFAULT_PORT, ConfigService
from timecard.utils.helpers.exceptions import ConfigurationError


def test_defaults_with_empty_environment():
    config = ConfigService(environ={})

    assert config.port == DEFAULT_PORT
    assert config.template_path is None
    assert config.layouts_path is None
    assert config.cors_origins == ["*"]
    assert config.log_level == "INFO"
    assert config.get_layouts() is WEEK_LAYOUTS


def test_values_read_from_environment(tmp_path):
    config = ConfigService(environ={
        "PORT": "9090",
        "TIMECARD_TEMPLATE_PATH": str(tmp_path / "template.xlsx"),
        "TIMECARD_CORS_ORIGINS": "https://a.example, https://b.example ,",
        "TIMECARD_LOG_LEVEL": "debug",
    })

    assert config.port == 9090
    assert config.template_path == Path(tmp_path / "template.xlsx")
    assert config.cors_origins == ["https://a.example", "https://b.example"]
    assert config.log_level == "DEBUG"


def test_invalid_port_falls_back_to_default():
    assert ConfigService(environ={"PORT": "eighty"}).port == DEFAULT_PORT


def test_layout_overrides_loaded_from_json(tmp_path):
    path = tmp_path / "layouts.json"
    path.write_text(json.dumps({"1": {"total_oc_cell": "N13"}}), encoding="utf-8")
    config = ConfigService(environ={"TIMECARD_LAYOUTS_PATH": str(path)})

    layouts = config.get_layouts()

    assert layouts[1].total_oc_cell == "N13"
    assert layouts[2] == WEEK_LAYOUTS[2]
    assert config.get_layouts() is layouts


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", json.dumps({"5": {"sheet": "Week 5"}})])
def test_bad_layout_overrides_raise(tmp_path, content):
    path = tmp_path / "layouts.json"
    path.write_text(content, encoding="utf-8")
    config = ConfigService(environ={"TIMECARD_LAYOUTS_PATH": str(path)})

    with pytest.raises(ConfigurationError):
        config.get_layouts()


def test_missing_layout_file_raises(tmp_path):
    config = ConfigService(environ={"TIMECARD_LAYOUTS_PATH": str(tmp_path / "nope.json")})

    with pytest.raises(ConfigurationError):
        config.get_layouts()
