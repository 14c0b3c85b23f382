from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml


@dataclass
class SimulatorConfig:
    # Data
    n_samples: int = 50
    noise: float = 1.5  # half-width of the uniform noise on y
    seed: Optional[int] = None  # None -> fresh entropy each run

    # Penalties
    ridge_lambda: float = 1.0
    lasso_lambda: float = 1.0

    # Sweep grid (matches the simulator's sliders)
    lambda_min: float = 0.0
    lambda_max: float = 10.0
    lambda_step: float = 0.1

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.n_samples < 4:
            raise ValueError("n_samples must be >= 4 (intercept + 3 features)")
        if self.noise < 0:
            raise ValueError("noise must be non-negative")
        if self.ridge_lambda < 0 or self.lasso_lambda < 0:
            raise ValueError("lambdas must be non-negative")
        if self.lambda_min < 0 or self.lambda_max < self.lambda_min:
            raise ValueError("need 0 <= lambda_min <= lambda_max")
        if self.lambda_step <= 0:
            raise ValueError("lambda_step must be positive")

    def lambda_grid(self) -> List[float]:
        """lambda_min..lambda_max inclusive, rounded to the step's precision."""
        n = int(np.floor((self.lambda_max - self.lambda_min) / self.lambda_step + 1e-9)) + 1
        grid = self.lambda_min + self.lambda_step * np.arange(n)
        return [round(float(v), 10) for v in grid]

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


def config_from_dict(raw: Optional[Dict[str, Any]]) -> SimulatorConfig:
    raw = dict(raw or {})
    known = {f.name for f in fields(SimulatorConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    return SimulatorConfig(**raw)


def load_config(path: Path | str | None = None, **overrides: Any) -> SimulatorConfig:
    """
    YAML file -> SimulatorConfig. Keyword overrides whose value is None are
    ignored, so CLI flags left unset fall through to the file / defaults.
    """
    raw: Dict[str, Any] = {}
    if path is not None:
        raw = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Config {path} must be a mapping")
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return config_from_dict(raw)
