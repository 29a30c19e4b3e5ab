"""
Errors raised by the morphology engine.
"""

from typing import Optional


class MorphologyError(Exception):
    """Base class for all engine errors."""


class InvalidRoot(MorphologyError, ValueError):
    """Root text is not exactly three letters."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Invalid root '{root}': an Arabic root must have exactly 3 letters")


class RootNotFound(MorphologyError, KeyError):
    """Root is not present in the root store."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Unknown root: {root}")

    def __str__(self):
        return self.args[0]


class SchemeNotFound(MorphologyError, KeyError):
    """Scheme is not present in the pattern store."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"Unknown scheme: {scheme}")

    def __str__(self):
        return self.args[0]


class PersistenceError(MorphologyError, OSError):
    """
    Writing definitions to their durable source failed.

    The in-memory change that triggered the write has already been applied
    and is not rolled back, so memory and disk disagree until the next
    successful write.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)

    def __str__(self):
        return self.args[0]
