# Shared utilities for the engine and scripts. Explicit re-exports for a clean public API.

from .config import (
    SimulatorConfig as SimulatorConfig,
    config_from_dict as config_from_dict,
    load_config as load_config,
)
from .io import (
    ensure_dir as ensure_dir,
    load_json as load_json,
    write_run_outputs as write_run_outputs,
)
from .log import get_logger as get_logger
from .timers import Timer as Timer, timed as timed

__all__ = [
    "SimulatorConfig",
    "config_from_dict",
    "load_config",
    "ensure_dir",
    "load_json",
    "write_run_outputs",
    "get_logger",
    "Timer",
    "timed",
]
