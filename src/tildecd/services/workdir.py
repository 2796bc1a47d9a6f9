"""Working directory changes."""

from __future__ import annotations

import logging
import os

from tildecd.services.home import home_directory
from tildecd.services.resolver import resolve_path
from tildecd.util.typing import DirectoryChanger

logger = logging.getLogger(__name__)


def current_directory() -> str:
    """Return the process working directory."""
    return os.getcwd()


def change_directory(
    value: str | None,
    *,
    home: str | None = None,
    chdir: DirectoryChanger = os.chdir,
) -> str:
    """Resolve ``value`` and make it the working directory.

    Returns the resolved target as passed to ``chdir``. ``OSError`` from
    ``chdir`` propagates unchanged and leaves the working directory as it
    was.
    """

    if home is None:
        home = home_directory()

    target = resolve_path(home, value)
    logger.debug("Changing directory from %s to %r", current_directory(), target)
    chdir(target)
    logger.info("Working directory is now %s", current_directory())
    return target


__all__ = ["change_directory", "current_directory"]
