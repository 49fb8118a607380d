"""Shared item — a single cached file offered to other machines."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from passim.errors import ItemHashError, ItemNotFoundError, ItemStatError, ItemWireError
from passim.schemas.wire import WIRE_FIELDS, WireMap
from passim.utils.fileinfo import get_creation_time
from passim.utils.hashing import hash_file

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 24 * 60 * 60  # seconds
DEFAULT_SHARE_LIMIT = 5


class Item:
    """A content-addressed cache item.

    The item is identified by ``hash``, published under ``basename`` and
    tracked against ``max_age`` (seconds) and ``share_limit``. ``file`` and
    ``ctime`` describe the local backing file and never leave this machine.

    Not safe for unsynchronized concurrent mutation.
    """

    __hash__ = None  # mutable, compared by value

    def __init__(
        self,
        *,
        hash: str | None = None,
        basename: str | None = None,
        max_age: int | None = None,
        share_limit: int | None = None,
        share_count: int = 0,
        file: str | os.PathLike | None = None,
        ctime: datetime | None = None,
    ):
        self._hash = hash
        self._basename = basename
        self._max_age = DEFAULT_MAX_AGE if max_age is None else max_age
        self._share_limit = DEFAULT_SHARE_LIMIT if share_limit is None else share_limit
        self._share_count = share_count
        self._file = Path(file) if file is not None else None
        self._ctime = ctime

    @property
    def hash(self) -> str | None:
        """SHA-256 of the file contents in lowercase hex, or None if unset."""
        return self._hash

    @hash.setter
    def hash(self, value: str | None) -> None:
        if value == self._hash:
            return
        self._hash = value

    @property
    def basename(self) -> str | None:
        """Name the file is published under, or None if unset."""
        return self._basename

    @basename.setter
    def basename(self, value: str | None) -> None:
        if value == self._basename:
            return
        self._basename = value

    @property
    def max_age(self) -> int:
        """Maximum permitted age in seconds."""
        return self._max_age

    @max_age.setter
    def max_age(self, value: int) -> None:
        self._max_age = value

    @property
    def share_limit(self) -> int:
        """Maximum number of times the file may be shared, 0 if unset."""
        return self._share_limit

    @share_limit.setter
    def share_limit(self, value: int) -> None:
        self._share_limit = value

    @property
    def share_count(self) -> int:
        """Number of times the file has been shared to other machines."""
        return self._share_count

    @share_count.setter
    def share_count(self, value: int) -> None:
        self._share_count = value

    @property
    def file(self) -> Path | None:
        """Local file in the cache, or None if unset."""
        return self._file

    @file.setter
    def file(self, value: str | os.PathLike | None) -> None:
        new = Path(value) if value is not None else None
        if new == self._file:
            return
        self._file = new

    @property
    def ctime(self) -> datetime | None:
        """Creation time of the backing file, or None if unset."""
        return self._ctime

    @ctime.setter
    def ctime(self, value: datetime | None) -> None:
        if value == self._ctime:
            return
        self._ctime = value

    # --- Loading ---

    def load_from_path(self, path: str | os.PathLike) -> None:
        """Load the item from a file on disk.

        Always refreshes ``file`` and ``ctime``. ``ctime`` becomes None when
        the filesystem does not record a birth time. ``basename`` and ``hash``
        are only derived when unset, so identity received from a trusted
        source survives a reload.

        Raises:
            ItemNotFoundError: ``path`` does not exist.
            ItemStatError: the creation time could not be queried.
            ItemHashError: the contents could not be read for hashing.
        """
        file = Path(path)
        self.file = file

        try:
            ctime = get_creation_time(file)
        except FileNotFoundError as e:
            logger.warning("Cannot load item, %s does not exist", file)
            raise ItemNotFoundError.from_os_error(file, e) from e
        except OSError as e:
            logger.warning("Cannot query creation time of %s: %s", file, e)
            raise ItemStatError.from_os_error(file, e) from e
        if ctime is None:
            logger.debug("No creation time recorded for %s", file)
        self._ctime = ctime

        if self._basename is None:
            self._basename = file.name
        if self._hash is None:
            try:
                digest = hash_file(file)
            except OSError as e:
                logger.warning("Cannot hash %s: %s", file, e)
                raise ItemHashError.from_os_error(file, e) from e
            logger.debug("Computed SHA-256 %s for %s", digest, file)
            self._hash = digest

        logger.info("Loaded item %s from %s", self._hash, file)

    @classmethod
    def from_path(cls, path: str | os.PathLike, **fields: Any) -> "Item":
        """Create an item, optionally with pre-assigned fields, and load it from ``path``."""
        item = cls(**fields)
        item.load_from_path(path)
        return item

    # --- Serialization ---

    def to_wire(self) -> WireMap:
        """Serialize the item data.

        ``file`` and ``ctime`` are local to this machine and are not included.
        Unset strings are written as ``""``.
        """
        wire: WireMap = {}
        for key, (attr, adapter) in WIRE_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                value = ""
            try:
                wire[key] = adapter.validate_python(value)
            except ValidationError as e:
                raise ItemWireError(f"Cannot serialize {attr}={value!r}") from e
        return wire

    @classmethod
    def from_wire(cls, wire: Mapping[str, Any]) -> "Item":
        """Create a new item using serialized data.

        Unknown keys are ignored. Recognized keys whose value has the wrong
        type are skipped with a warning, leaving the default in place.

        An empty ``filename`` or ``hash`` is read back as unset, so an item
        whose ``basename`` or ``hash`` is ``""`` comes back with ``None``.
        """
        if not isinstance(wire, Mapping):
            raise ItemWireError(f"Expected a mapping, got {type(wire).__name__}")

        item = cls()
        for key, value in wire.items():
            field = WIRE_FIELDS.get(key)
            if field is None:
                logger.debug("Ignoring unknown wire key %r", key)
                continue
            attr, adapter = field
            try:
                value = adapter.validate_python(value)
            except ValidationError:
                logger.warning("Ignoring malformed wire value for %r: %r", key, value)
                continue
            # empty strings are how to_wire encodes unset
            setattr(item, attr, value if value != "" else None)
        return item

    # --- Rendering ---

    def to_display_string(self) -> str:
        return (
            f"{self._hash} {self._basename} "
            f"(max-age: {self._max_age}, share-count: {self._share_count}, "
            f"share-limit: {self._share_limit})"
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"<Item(hash={self._hash}, basename='{self._basename}')>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return (
            self._hash == other._hash
            and self._basename == other._basename
            and self._max_age == other._max_age
            and self._share_limit == other._share_limit
            and self._share_count == other._share_count
            and self._file == other._file
            and self._ctime == other._ctime
        )
