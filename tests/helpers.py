from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import patch

from tildecd.config import CONFIG_ENV_VAR, LOG_LEVEL_ENV_VAR

ALICE_HOME = "/home/alice"


@contextmanager
def isolated_env(**values: str) -> Iterator[None]:
    """Patch ``os.environ`` without any tildecd overrides, plus ``values``."""

    with patch.dict(os.environ, clear=False):
        for key in (CONFIG_ENV_VAR, LOG_LEVEL_ENV_VAR):
            os.environ.pop(key, None)
        os.environ.update(values)
        yield


def reset_logger() -> None:
    """Drop handlers attached to the ``tildecd`` logger by earlier tests."""

    logger = logging.getLogger("tildecd")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def make_tree(root: Path, *relative: str) -> dict[str, Path]:
    """Create directories under ``root`` and return them keyed by name."""

    created: dict[str, Path] = {}
    for rel in relative:
        path = root / rel
        path.mkdir(parents=True, exist_ok=True)
        created[rel] = path.resolve()
    return created
