"""Tests for configuration loading, validation and logging setup."""

import json
import logging

import pytest

import constants
from config import SimulationConfig, build_config, load_config, log_throttle_ticks, validate_config
from logger_setup import setup_logging


def test_default_config_file_builds(project_root_path):
    raw = load_config(str(project_root_path / "config.json"))
    config = build_config(raw["simulation"], (constants.WIDTH, constants.HEIGHT))

    assert config.width == constants.WIDTH
    assert config.gravity_constant == pytest.approx(raw["simulation"]["gravity_strength"] * constants.GRAVITY_INPUT_SCALE)
    assert config.center == (constants.WIDTH / 2, constants.HEIGHT / 2)


def test_build_config_applies_defaults():
    config = build_config({"gravity_strength": 0}, (100, 50))
    assert config.friction == constants.DEFAULT_FRICTION
    assert config.grid_cell_size == constants.DEFAULT_GRID_CELL_SIZE
    assert config.epsilon == constants.EPSILON


def test_build_config_requires_gravity():
    with pytest.raises(KeyError):
        build_config({}, (100, 50))


@pytest.mark.parametrize("overrides", [
    {"width": 0.0},
    {"height": -5.0},
    {"grid_cell_size": 0.0},
    {"epsilon": 0.0},
    {"friction": 0.0},
    {"friction": 1.01},
    {"gravity_constant": float("inf")},
])
def test_validate_config_rejects(overrides):
    params = dict(width=100.0, height=100.0, gravity_constant=1.0)
    params.update(overrides)
    with pytest.raises(ValueError):
        validate_config(SimulationConfig(**params))


def test_config_is_immutable():
    config = SimulationConfig(width=1.0, height=1.0, gravity_constant=0.0)
    with pytest.raises(AttributeError):
        config.friction = 0.5


def test_setup_logging_writes_run_log(tmp_path):
    raw = {
        "run_id": "test-run",
        "logging": {"level": "DEBUG", "format": "%(levelname)s %(message)s"},
    }
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(raw))

    logger = setup_logging(config_path=str(config_path), log_root=str(tmp_path / "runs"))
    logger.debug("hello from the test")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "runs" / "test-run" / "simulation.log"
    assert logger is logging.getLogger("particle_collider")
    assert logger.propagate is False
    assert len(logger.handlers) == 2
    assert "hello from the test" in log_file.read_text()

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_log_throttle_defaults_and_reads_value():
    assert log_throttle_ticks({}) == 100
    assert log_throttle_ticks({"log_throttle_ticks": 7}) == 7


@pytest.mark.parametrize("ticks", [0, -3, 2.5, "10", True])
def test_log_throttle_rejects_non_positive_or_non_integer(ticks):
    with pytest.raises(ValueError):
        log_throttle_ticks({"log_throttle_ticks": ticks})
