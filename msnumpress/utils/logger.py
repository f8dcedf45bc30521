import logging
import os
from pathlib import Path
from typing import Optional, Union


def setup_logger(log_path: Optional[Union[Path, str]] = None,
                 verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("msnumpress")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    if log_path:
        log_path = Path(os.path.abspath(log_path))
        if not any(isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
                   for h in logger.handlers):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path, encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
            logger.addHandler(fh)
    return logger
