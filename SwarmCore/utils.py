import logging
import os
from pathlib import Path
from typing import Optional, Union

_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s] - %(message)s'


def setup_logging(
    name: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """Sets up a logger for a suite run.

    Attaches a stream handler (and a file handler when `log_dir` is given) to
    the named logger, or to the root logger when `name` is None. Calling it
    again for the same logger only updates the level and adds missing handlers.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(_FORMAT)

    # Prevent adding multiple handlers if the logger was set up before
    if not any(getattr(handler, "_swarm_stream", False) for handler in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler._swarm_stream = True
        logger.addHandler(stream_handler)

    if log_dir is not None:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)
        log_file = os.path.abspath(log_dir_path / f"{name or 'firefly'}_logs.log")

        already_attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file
            for handler in logger.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(log_file, mode='a')  # Append mode
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
