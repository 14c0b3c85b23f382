from __future__ import annotations

import logging
import os
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def get_logger(
    name: str = "ridgelab", level: str = "INFO", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Console (+ optional file) logger. The console handler is attached once per
    name; a file handler is added for each log_file path not already attached.
    Repeated calls otherwise only adjust the level.
    """
    log = logging.getLogger(name)
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    log.setLevel(lvl)
    fmt = logging.Formatter(FORMAT)
    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        log.addHandler(ch)
    if log_file:
        path = os.path.abspath(log_file)
        attached = {h.baseFilename for h in log.handlers if isinstance(h, logging.FileHandler)}
        if path not in attached:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            fh = logging.FileHandler(path)
            fh.setFormatter(fmt)
            log.addHandler(fh)
    return log
