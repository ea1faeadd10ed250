import json
import math
from pathlib import Path

import pytest

from pidcontrol import (
    BoundedRange,
    Config,
    ControllerConfig,
    InvalidGainError,
    InvalidRangeError,
    load_config,
    make_controller,
)
from pidcontrol.config import _coerce_numbers

ROOT = Path(__file__).resolve().parents[1]


def test_defaults_match_controller_defaults():
    cfg = load_config(None)
    assert cfg == Config()
    pid = make_controller(cfg.controller)
    assert pid.period == 0.01
    assert pid.position_tolerance == 0.05
    assert pid.velocity_tolerance == math.inf
    assert pid.integrator_range == BoundedRange.unbounded()


def test_loads_shipped_default_yaml():
    cfg = load_config(str(ROOT / "configs" / "default.yaml"))
    assert cfg.controller.kp == 0.1
    assert cfg.controller.velocity_tolerance == math.inf
    assert cfg.controller.integrator_min == -math.inf
    pid = make_controller(cfg.controller)
    assert pid.calculate(0.0, 10.0) == pytest.approx(1.0, abs=1e-3)


def test_loads_json_with_string_numbers(tmp_path):
    path = tmp_path / "pid.json"
    path.write_text(json.dumps({"controller": {"ki": "0.1", "integrator_min": "-0.1", "integrator_max": "0.1", "period": 0.1}}))
    cfg = load_config(str(path))
    assert cfg.controller.ki == 0.1
    pid = make_controller(cfg.controller)
    assert pid.integrator_range == BoundedRange(-0.1, 0.1)
    pid.calculate(0.0, 10.0)
    assert pid.calculate(1.0, 10.0) == pytest.approx(0.1, abs=1e-3)


def test_include_is_merged_then_overlaid(tmp_path):
    (tmp_path / "base.yaml").write_text("controller:\n  kp: 1.0\n  kd: 0.5\n  period: 0.02\n")
    (tmp_path / "run.yaml").write_text("include: [base.yaml]\ncontroller:\n  kp: 2.0\n")
    cfg = load_config(str(tmp_path / "run.yaml"))
    assert cfg.controller.kp == 2.0
    assert cfg.controller.kd == 0.5
    assert cfg.controller.period == 0.02


def test_to_dict_round_trips():
    cfg = Config(controller=ControllerConfig(kp=1.0, ki=0.5, kd=0.1))
    assert Config.from_dict(cfg.to_dict()) == cfg


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "pid.toml"
    path.write_text("")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_include_must_be_list(tmp_path):
    path = tmp_path / "pid.yaml"
    path.write_text("include: base.yaml\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "pid.yaml"
    path.write_text("controller:\n  kz: 1.0\n")
    with pytest.raises(TypeError):
        load_config(str(path))


def test_invalid_values_raise_controller_errors():
    with pytest.raises(InvalidGainError):
        make_controller(ControllerConfig(kd=-1.0))
    with pytest.raises(InvalidRangeError):
        make_controller(ControllerConfig(integrator_min=1.0, integrator_max=-1.0))


def test_coercion_limited_to_numeric_controller_fields():
    data = _coerce_numbers({"controller": {"kp": "0.5", "velocity_tolerance": "inf"}, "label": "2"})
    assert data["controller"] == {"kp": 0.5, "velocity_tolerance": math.inf}
    assert data["label"] == "2"


def test_non_numeric_string_is_not_coerced(tmp_path):
    path = tmp_path / "pid.yaml"
    path.write_text("controller:\n  kp: fast\n")
    cfg = load_config(str(path))
    assert cfg.controller.kp == "fast"
    with pytest.raises(TypeError):
        make_controller(cfg.controller)


def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "pid.yaml"
    path.write_text("- kp\n- ki\n")
    with pytest.raises(ValueError):
        load_config(str(path))
