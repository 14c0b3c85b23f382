from pathlib import Path

import pandas as pd
import pytest

from ridgelab.core import SimulatorConfig, config_from_dict, load_config, load_json, write_run_outputs


def test_defaults_and_grid():
    cfg = SimulatorConfig()
    assert cfg.n_samples == 50 and cfg.ridge_lambda == 1.0
    grid = cfg.lambda_grid()
    assert len(grid) == 101
    assert grid[0] == 0.0 and grid[-1] == 10.0
    assert grid[3] == 0.3


def test_load_yaml_with_overrides(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("n_samples: 20\nseed: 5\nridge_lambda: 2.5\n")
    cfg = load_config(p, ridge_lambda=None, lasso_lambda=4.0)
    assert cfg.n_samples == 20 and cfg.seed == 5
    assert cfg.ridge_lambda == 2.5  # None override ignored
    assert cfg.lasso_lambda == 4.0


def test_seeded_rng_is_reproducible():
    cfg = SimulatorConfig(seed=11)
    assert cfg.rng().uniform() == cfg.rng().uniform()


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown config keys"):
        config_from_dict({"n_samples": 10, "alpha": 1.0})


@pytest.mark.parametrize(
    "bad",
    [
        {"n_samples": 3},
        {"noise": -0.1},
        {"ridge_lambda": -1.0},
        {"lambda_min": 5.0, "lambda_max": 1.0},
        {"lambda_step": 0.0},
    ],
)
def test_validation(bad):
    with pytest.raises(ValueError):
        SimulatorConfig(**bad)


def test_write_run_outputs(tmp_path: Path):
    cfg = SimulatorConfig(seed=1)
    frames = {
        "coefficients": pd.DataFrame({"ols": [1.0, 2.0]}, index=pd.Index(["a", "b"], name="coef")),
        "predictions": pd.DataFrame({"x1": [0.1, 0.2]}),
    }
    written = write_run_outputs(tmp_path / "run", cfg, {"mse": {"ols": 0.5}}, frames)
    assert set(written) == {"config", "summary", "coefficients", "predictions"}
    assert load_json(written["summary"]) == {"mse": {"ols": 0.5}}
    assert load_config(written["config"]) == cfg
    assert pd.read_csv(written["predictions"]).columns.tolist() == ["x1"]


def test_logger_handlers_attached_once(tmp_path: Path):
    from ridgelab.core import get_logger

    log_file = tmp_path / "logs" / "run.log"
    log = get_logger("ridgelab.test_once", "DEBUG", str(log_file))
    again = get_logger("ridgelab.test_once", "WARNING", str(log_file))
    assert log is again
    assert len(log.handlers) == 2  # console + file
    assert again.level == 30
    log.warning("hello")
    for h in log.handlers:
        h.flush()
    assert "| WARNING | hello" in log_file.read_text()


def test_logger_adds_handler_for_new_log_file(tmp_path: Path):
    from ridgelab.core import get_logger

    first, second = tmp_path / "a.log", tmp_path / "b.log"
    log = get_logger("ridgelab.test_two_files", "INFO", str(first))
    get_logger("ridgelab.test_two_files", "INFO", str(second))
    get_logger("ridgelab.test_two_files", "INFO", str(second))
    assert len(log.handlers) == 3  # console + a.log + b.log
    log.info("both")
    for h in log.handlers:
        h.flush()
    assert "both" in first.read_text() and "both" in second.read_text()


def test_timed_logs_elapsed(caplog):
    import logging

    from ridgelab.core import timed

    log = logging.getLogger("ridgelab.test_timed")
    with caplog.at_level(logging.INFO, logger="ridgelab.test_timed"):
        with timed("block", log) as t:
            pass
    assert t.elapsed >= 0.0
    assert any(r.getMessage().startswith("[timer] block: ") for r in caplog.records)
