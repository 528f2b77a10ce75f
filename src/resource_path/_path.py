"""ResourcePath — protocol-qualified path value object.

Grammar::

    protocol://[drive:/]dir1/dir2/.../filename.extension[#portion]

Parsing is total: any string decomposes into components, with unrecognised
fragments ending up as directory segments.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, NamedTuple, Optional

from resource_path._flavour import PathFlavour, host_flavour
from resource_path._normalize import CURRENT, PARENT, SEPARATORS, normalize, split_segments
from resource_path._protocol import PROTOCOL_SEPARATOR, normalize_protocol, protocol_hash

if TYPE_CHECKING:
    from resource_path._types import JoinOperand

log = logging.getLogger(__name__)

PORTION_SEPARATOR = "#"
EXTENSION_SEPARATOR = "."

_DRIVE = re.compile(r"[A-Za-z]:")


class _Components(NamedTuple):
    protocol: str
    drive: Optional[str]
    directories: tuple[str, ...]
    stem: Optional[str]
    extension: Optional[str]
    portion: Optional[str]
    absolute: bool
    rooted: bool


def _split_leaf(leaf: str) -> tuple[str, Optional[str]]:
    """Split a leaf at its last dot. Dotfiles and trailing dots keep the whole name."""
    dot = leaf.rfind(EXTENSION_SEPARATOR)
    if dot <= 0 or dot == len(leaf) - 1:
        return leaf, None
    return leaf[:dot], leaf[dot + 1 :]


def _parse(raw: str, flavour: PathFlavour) -> _Components:
    protocol = flavour.default_protocol
    rest = raw
    head, sep, tail = raw.partition(PROTOCOL_SEPARATOR)
    explicit = bool(sep)
    if explicit:
        rest = tail
        if head:
            protocol = normalize_protocol(head)

    portion = None
    rest, sep, tail = rest.partition(PORTION_SEPARATOR)
    if sep and tail:
        portion = tail

    drive = None
    if flavour.supports_drive_letters and _DRIVE.match(rest):
        drive = rest[0]
        rest = rest[2:]
        if rest[:1] in SEPARATORS:
            rest = rest[1:]

    rooted = drive is not None or rest[:1] in SEPARATORS
    segments = split_segments(rest)

    stem = extension = None
    if rest and rest[-1] not in SEPARATORS:
        leaf = segments.pop()
        if leaf in (CURRENT, PARENT):
            # "a/b/.." names a directory, not a file called ".."
            segments.append(leaf)
        else:
            stem, extension = _split_leaf(leaf)

    directories = tuple(normalize(segments))
    if directories and directories[0] == PARENT:
        log.debug("Unresolved parent reference in %r", raw)

    return _Components(
        protocol=protocol,
        drive=drive,
        directories=directories,
        stem=stem,
        extension=extension,
        portion=portion,
        absolute=explicit or rooted,
        rooted=rooted,
    )


class ResourcePath:
    """A parsed, normalized resource path.

    Instances behave as immutable values; the only mutation is
    :func:`join_in_place` (``/=``), which replaces the receiver's components.
    Do not mutate a path that is stored in a set or used as a dict key.

    :param raw: String to parse, or another path to copy. Defaults to the
        empty path (natural protocol, no location, no leaf).
    :param flavour: Platform capabilities to parse with. Defaults to the
        host platform's flavour, or the copied path's flavour.
    """

    __slots__ = ("_c", "_flavour", "_frozen")
    _c: _Components
    _flavour: PathFlavour
    _frozen: bool

    def __init__(self, raw: str | ResourcePath = "", *, flavour: PathFlavour | None = None) -> None:
        if isinstance(raw, ResourcePath):
            components = raw._c
            flavour = flavour or raw._flavour
        else:
            flavour = flavour or host_flavour()
            components = _parse(raw, flavour)
        object.__setattr__(self, "_c", components)
        object.__setattr__(self, "_flavour", flavour)
        object.__setattr__(self, "_frozen", False)

    @classmethod
    def _from_components(cls, components: _Components, flavour: PathFlavour) -> ResourcePath:
        p = object.__new__(cls)
        object.__setattr__(p, "_c", components)
        object.__setattr__(p, "_flavour", flavour)
        object.__setattr__(p, "_frozen", False)
        return p

    def _derive(self, **changes: object) -> ResourcePath:
        return self._from_components(self._c._replace(**changes), self._flavour)  # type: ignore[arg-type]

    # -- Components --

    @property
    def flavour(self) -> PathFlavour:
        """The flavour this path was parsed with."""
        return self._flavour

    @property
    def protocol(self) -> str:
        """Lower-cased protocol, never empty."""
        return self._c.protocol

    @property
    def protocol_hash(self) -> int:
        """Stable hash of :attr:`protocol`, suitable as a dispatch key."""
        return protocol_hash(self._c.protocol)

    @property
    def drive(self) -> str:
        """Drive letter, or ``""``."""
        return self._c.drive or ""

    @property
    def has_drive(self) -> bool:
        return self._c.drive is not None

    @property
    def directories(self) -> tuple[str, ...]:
        """Directory segments, root first."""
        return self._c.directories

    @property
    def directory_count(self) -> int:
        return len(self._c.directories)

    def directory_at(self, level: int = 0) -> str:
        """Directory ``level`` steps up from the leaf.

        Example: for ``c:/Program Files/My Game/Game.exe``, level 0 is
        ``"My Game"`` and level 1 is ``"Program Files"``. Out-of-range levels
        return ``""``.
        """
        dirs = self._c.directories
        if 0 <= level < len(dirs):
            return dirs[-1 - level]
        return ""

    @property
    def filename(self) -> str:
        """File name including the extension, or ``""`` for a directory."""
        stem, extension = self._c.stem, self._c.extension
        if stem is None:
            return ""
        if extension is None:
            return stem
        return f"{stem}{EXTENSION_SEPARATOR}{extension}"

    @property
    def has_filename(self) -> bool:
        return self._c.stem is not None

    @property
    def stem(self) -> str:
        """File name without its extension."""
        return self._c.stem or ""

    @property
    def extension(self) -> str:
        """Extension without the dot, or ``""``."""
        return self._c.extension or ""

    @property
    def has_extension(self) -> bool:
        return self._c.extension is not None

    @property
    def portion(self) -> str:
        """Entry inside the addressed resource (after ``#``), or ``""``."""
        return self._c.portion or ""

    @property
    def has_portion(self) -> bool:
        return self._c.portion is not None

    @property
    def is_absolute(self) -> bool:
        """True if the input named a protocol, a drive, or began with a separator."""
        return self._c.absolute

    @property
    def is_rooted(self) -> bool:
        """True if the path is anchored at a drive or a leading separator."""
        return self._c.rooted

    @property
    def has_unresolved_parent_reference(self) -> bool:
        """True if a leading ``..`` had no directory to cancel against."""
        return PARENT in self._c.directories

    # -- Derived paths --

    @property
    def parent(self) -> ResourcePath:
        """The enclosing path.

        Drops, in order of priority, the portion, the file name, or the last
        directory. A path with none of those is returned unchanged (as a copy).
        """
        c = self._c
        if c.portion is not None:
            return self._derive(portion=None)
        if c.stem is not None:
            return self._derive(stem=None, extension=None)
        if c.directories:
            return self._derive(directories=c.directories[:-1])
        return self._derive()

    def relative(self) -> ResourcePath:
        """This path without drive and directories: protocol, leaf and portion only."""
        return self._derive(drive=None, directories=(), absolute=False, rooted=False)

    def _joined(self, addition: JoinOperand) -> _Components:
        if isinstance(addition, ResourcePath):
            other = addition._c
        else:
            other = _parse(addition, self._flavour)
        c = self._c
        return c._replace(
            directories=tuple(normalize(c.directories + other.directories)),
            stem=other.stem,
            extension=other.extension,
            portion=other.portion,
        )

    # -- Formatting --

    def canonical_string(self) -> str:
        """``protocol://[drive:/]dir/.../filename.extension[#portion]`` with ``/`` separators."""
        c = self._c
        parts = [c.protocol, PROTOCOL_SEPARATOR]
        if c.drive is not None:
            parts.append(f"{c.drive}:/")
        elif c.rooted:
            parts.append("/")
        elif self._flavour.supports_drive_letters:
            first = c.directories[0] if c.directories else self.filename
            if _DRIVE.match(first):
                # "./c:" must not re-parse as drive c
                parts.append(f"{CURRENT}/")
        parts.extend(f"{d}/" for d in c.directories)
        parts.append(self.filename)
        if c.portion is not None:
            parts.append(f"{PORTION_SEPARATOR}{c.portion}")
        return "".join(parts)

    def native_string(self) -> str:
        """OS-style string: no protocol or portion, flavour's native separator."""
        c = self._c
        sep = self._flavour.native_separator
        parts: list[str] = []
        if c.drive is not None:
            parts.append(f"{c.drive}:{sep}")
        elif c.rooted:
            parts.append(sep)
        parts.extend(f"{d}{sep}" for d in c.directories)
        parts.append(self.filename)
        return "".join(parts)

    def dump(self) -> str:
        """Multi-line breakdown of every component, for debugging."""
        c = self._c
        rows = [
            ("protocol", f"{c.protocol} (hash {self.protocol_hash:#010x})"),
            ("drive", c.drive),
            ("directories", list(c.directories)),
            ("stem", c.stem),
            ("extension", c.extension),
            ("portion", c.portion),
            ("absolute", c.absolute),
            ("rooted", c.rooted),
        ]
        return "\n".join(f"{name:<12} {value}" for name, value in rows)

    # -- Dunder --

    def __truediv__(self, other: object) -> ResourcePath:
        if not isinstance(other, (str, ResourcePath)):
            return NotImplemented
        return join(self, other)

    def __itruediv__(self, other: object) -> ResourcePath:
        if not isinstance(other, (str, ResourcePath)):
            return NotImplemented
        return join_in_place(self, other)

    def __str__(self) -> str:
        return self.canonical_string()

    def __repr__(self) -> str:
        return f"ResourcePath({self.canonical_string()!r})"

    def _key(self) -> tuple[object, ...]:
        c = self._c
        return (c.protocol, c.drive, c.directories, c.stem, c.extension, c.portion, c.rooted)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResourcePath):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> str | tuple[object, ...]:
        if self is BAD_PATH:
            return "BAD_PATH"
        return (ResourcePath._from_components, (self._c, self._flavour))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"ResourcePath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"ResourcePath is immutable: cannot delete '{name}'")


def parse(raw: str, flavour: PathFlavour | None = None) -> ResourcePath:
    """Parse ``raw`` into a :class:`ResourcePath`. Never raises."""
    return ResourcePath(raw, flavour=flavour)


def join(base: ResourcePath, addition: JoinOperand) -> ResourcePath:
    """Append ``addition`` to the directory context of ``base``.

    The result keeps the protocol, drive and absoluteness of ``base`` and
    takes file name, extension and portion from ``addition``. Any leaf of
    ``base`` is discarded. A string ``addition`` is parsed with the flavour
    of ``base``; its protocol, drive and leading separator are ignored.
    """
    return ResourcePath._from_components(base._joined(addition), base._flavour)


def join_in_place(base: ResourcePath, addition: JoinOperand) -> ResourcePath:
    """Like :func:`join`, but replaces the components of ``base`` and returns it.

    :raises AttributeError: If ``base`` is :data:`BAD_PATH`.
    """
    if base._frozen:
        raise AttributeError("ResourcePath is immutable: cannot join in place onto BAD_PATH")
    object.__setattr__(base, "_c", base._joined(addition))
    return base


def _sentinel() -> ResourcePath:
    p = ResourcePath()
    object.__setattr__(p, "_frozen", True)
    return p


BAD_PATH: ResourcePath = _sentinel()
"""Process-wide "no path" marker. It cannot be joined in place.

Test for it with ``is``: equality is structural, so ``BAD_PATH == ResourcePath()``
is true (same components, same hash) even though only ``BAD_PATH`` means "no
path". Pickling and copying return the same object.
"""
