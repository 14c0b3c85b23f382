from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

import pandas as pd
import yaml


def ensure_dir(path: Path | str) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def load_json(path: Path | str) -> Any:
    return json.loads(Path(path).read_text())


def write_run_outputs(
    out_dir: Path | str,
    cfg,
    summary: Dict[str, Any],
    frames: Dict[str, pd.DataFrame],
) -> Dict[str, str]:
    """
    Persist one CLI run: resolved config (YAML), summary (JSON) and one CSV per
    frame. Returns {label: path} of everything written.
    """
    out = ensure_dir(out_dir)
    written: Dict[str, str] = {}

    cfg_path = out / "config.yaml"
    cfg_path.write_text(yaml.safe_dump(asdict(cfg), sort_keys=False))
    written["config"] = str(cfg_path)

    summary_path = out / "summary.json"
    summary_path.write_text(json.dumps(summary, indent=2))
    written["summary"] = str(summary_path)

    for name, df in frames.items():
        p = out / f"{name}.csv"
        df.to_csv(p, index=df.index.name is not None)
        written[name] = str(p)
    return written
