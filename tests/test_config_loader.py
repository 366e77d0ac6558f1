import json
from pathlib import Path

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, save_config, validate_config


def write_config(tmp_path, overrides):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")
    return str(path)


def test_overrides_merge_with_defaults(tmp_path):
    config = load_config(write_config(tmp_path, {"max_steps": 500, "backend": "jit"}))
    assert config["max_steps"] == 500
    assert config["backend"] == "jit"
    assert config["head_start"] == DEFAULT_CONFIG["head_start"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("overrides, error", [
    ({"max_steps": "many"}, TypeError),
    ({"max_steps": True}, TypeError),
    ({"trace": 1}, TypeError),
    ({"max_steps": 0}, ValueError),
    ({"workers": 0}, ValueError),
    ({"head_start": -1}, ValueError),
    ({"backend": "gpu"}, ValueError),
])
def test_invalid_values(tmp_path, overrides, error):
    with pytest.raises(error):
        load_config(write_config(tmp_path, overrides))


def test_missing_key():
    config = DEFAULT_CONFIG.copy()
    del config["backend"]
    with pytest.raises(ValueError, match="Missing required configuration key"):
        validate_config(config)


def test_save_then_load(tmp_path):
    path = str(tmp_path / "nested" / "runtime_config.json")
    config = dict(DEFAULT_CONFIG, workers=3)
    save_config(config, path)
    assert load_config(path) == config


def test_shipped_config_is_valid():
    load_config(str(Path(__file__).resolve().parent.parent / "config" / "runtime_config.json"))
