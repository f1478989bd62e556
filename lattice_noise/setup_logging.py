import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None):
    """
    Configures the root logger for scripts and tools built on lattice_noise.
    - Message format with time, level and source line.
    - Logs to stdout, plus `log_file` (overwritten) when given.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drop handlers from earlier calls, no duplicate lines
    )

    logging.getLogger("lattice_noise").setLevel(level)
    # numba's compiler is very chatty below WARNING
    logging.getLogger("numba").setLevel(logging.WARNING)
