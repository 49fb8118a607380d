"""Exceptions raised by item loading and wire conversion."""

from __future__ import annotations

import os


class PassimError(Exception):
    """Base class for all passim errors."""


class ItemFileError(PassimError):
    """A filesystem operation on an item's backing file failed.

    ``operation`` names the step that failed (``"stat"`` or ``"hash"``) and
    ``path`` the file involved. The original :class:`OSError` is chained as
    ``__cause__`` and its ``errno`` is copied over so callers can pick a retry
    policy without unwrapping.
    """

    operation = "access"

    def __init__(self, path: str | os.PathLike, reason: str, errno: int | None = None):
        self.path = os.fspath(path)
        self.reason = reason
        self.errno = errno
        super().__init__(f"Failed to {self.operation} {self.path}: {reason}")

    @classmethod
    def from_os_error(cls, path: str | os.PathLike, exc: OSError) -> "ItemFileError":
        return cls(path, exc.strerror or str(exc), exc.errno)


class ItemStatError(ItemFileError):
    """Querying the file's creation time failed."""

    operation = "stat"


class ItemNotFoundError(ItemStatError):
    """The file does not exist."""


class ItemHashError(ItemFileError):
    """Reading the file contents for the digest failed."""

    operation = "hash"


class ItemWireError(PassimError):
    """The item cannot be converted to or from the wire map."""
