"""Change directory with shell-style ``~`` expansion."""

from tildecd.services.resolver import InputKind, classify_input, resolve_path

__version__ = "0.1.0"

__all__ = ["InputKind", "classify_input", "resolve_path"]
