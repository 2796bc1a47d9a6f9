"""Shell-style ``~`` expansion for ``cd`` arguments.

The resolver is a pure function: it never touches the filesystem and never
fails. Whether the resulting path exists, is a directory, or is reachable
is decided later by the directory-change call.
"""

from __future__ import annotations

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)

TILDE = "~"
TILDE_PREFIX = "~/"


class InputKind(str, Enum):
    """How a ``cd`` argument is interpreted."""

    ABSENT = "absent"
    EXACT_TILDE = "exact_tilde"
    TILDE_SLASH = "tilde_slash"
    OTHER = "other"


def classify_input(value: str | None) -> InputKind:
    """Return the kind of ``value``, checking cases in a fixed order.

    ``None`` (no argument) and ``""`` (an empty argument) are different:
    only the former means "go home".
    """

    if value is None:
        return InputKind.ABSENT
    if value == TILDE:
        return InputKind.EXACT_TILDE
    if value.startswith(TILDE_PREFIX):
        return InputKind.TILDE_SLASH
    return InputKind.OTHER


def resolve_path(home: str, value: str | None) -> str:
    """Map a ``cd`` argument to the path that should become the working directory.

    * no argument or ``"~"``: ``home``
    * ``"~/rest"``: ``rest`` joined onto ``home`` as path segments
    * anything else (``""`` and ``"~user"`` included): ``value`` as given

    ``home`` is used verbatim; it is not validated or normalised.
    """

    kind = classify_input(value)
    if kind in (InputKind.ABSENT, InputKind.EXACT_TILDE):
        target = home
    elif kind is InputKind.TILDE_SLASH:
        assert value is not None
        target = os.path.join(home, value[len(TILDE_PREFIX):])
    else:
        assert value is not None
        target = value

    logger.debug("Resolved %r (%s) with home %r -> %r", value, kind.value, home, target)
    return target


__all__ = ["InputKind", "TILDE", "TILDE_PREFIX", "classify_input", "resolve_path"]
