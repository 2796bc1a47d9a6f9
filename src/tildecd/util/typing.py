"""Shared typing helpers for tildecd modules."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryChanger(Protocol):
    """Callable that makes ``path`` the process working directory."""

    def __call__(self, path: str | os.PathLike[str], /) -> None:
        """Change directory or raise ``OSError``."""
        ...


__all__ = ["DirectoryChanger"]
