"""Logging utilities"""

import logging
from pathlib import Path


def setup_logging(log_file: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure root logging for command line use.

    ``level`` may be a logging constant or a name such as ``"debug"``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
