"""
satfeat.features.logging

Logging utilities for feature extraction.
"""

from pathlib import Path
from typing import Callable, Optional, Union


def create_logger(
    verbosity: int = 0,
    log_file: Optional[Union[str, Path]] = None,
) -> Callable[[dict], None]:
    """Create logging function for extraction metrics.

    Args:
        verbosity: Print a summary line when > 0.
        log_file: If given, every metrics dict is appended to it.

    Returns:
        Logging callback function that accepts a metrics dict.
    """
    log_path = Path(log_file) if log_file is not None else None

    def log(metrics: dict):
        if verbosity > 0 and metrics.get("event") == "extracted":
            print(f"c [features] extracted "
                  f"T: {metrics.get('time', 0.0):.4f} | "
                  f"vars: {metrics.get('num_vars', '?')} | "
                  f"cls: {metrics.get('num_clauses', '?')}")

        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(log_path, "a") as f:
                f.write(f"{metrics}\n")

    return log
