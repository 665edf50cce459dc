"""Logging setup for the sentiment service.

Call ``configure_logging()`` once at process start. It is idempotent: if the
root logger already has handlers (uvicorn, pytest), it leaves them alone.
"""

import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a console handler to the root logger if none is configured."""
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
