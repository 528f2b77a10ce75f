"""ProtocolRegistry — dispatch from a path's protocol to a handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from resource_path._errors import ProtocolConflict, UnknownProtocol
from resource_path._path import ResourcePath
from resource_path._protocol import normalize_protocol, protocol_hash

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from resource_path._flavour import PathFlavour

log = logging.getLogger(__name__)

H = TypeVar("H")


class ProtocolRegistry(Generic[H]):
    """Maps protocols to handler objects, keyed by :func:`protocol_hash`.

    The registry performs no I/O; a handler is whatever the consumer wants to
    dispatch to (a class, a factory, an opened archive index, ...).

    :param handlers: Optional initial ``protocol -> handler`` mapping.
    :param flavour: Flavour used when :meth:`resolve` is given a string.
    :raises ProtocolConflict: If two initial protocols share a hash.
    """

    def __init__(self, handlers: Mapping[str, H] | None = None, *, flavour: PathFlavour | None = None) -> None:
        self._flavour = flavour
        self._entries: dict[int, tuple[str, H]] = {}
        for protocol, handler in (handlers or {}).items():
            self.register(protocol, handler)

    def __repr__(self) -> str:
        return f"ProtocolRegistry(protocols={list(self.protocols)!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.protocols)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ResourcePath):
            name = item.protocol
        elif isinstance(item, str):
            name = normalize_protocol(item)
        else:
            return False
        entry = self._entries.get(protocol_hash(name))
        return entry is not None and entry[0] == name

    @property
    def protocols(self) -> tuple[str, ...]:
        """Registered protocol names, sorted."""
        return tuple(sorted(name for name, _ in self._entries.values()))

    def register(self, protocol: str, handler: H, *, replace: bool = False) -> None:
        """Register ``handler`` for ``protocol`` (case-insensitive).

        :param protocol: Protocol name, e.g. ``"zip"``.
        :param handler: Object returned by :meth:`get` and :meth:`resolve`.
        :param replace: Overwrite an existing registration for the same protocol.
        :raises ProtocolConflict: If the protocol is taken and ``replace`` is
            false, or if a different protocol has the same hash.
        """
        name = normalize_protocol(protocol)
        key = protocol_hash(name)
        existing = self._entries.get(key)
        if existing is not None:
            if existing[0] != name:
                raise ProtocolConflict(
                    f"Protocol hash {key:#010x} already used by '{existing[0]}'",
                    protocol=name,
                )
            if not replace:
                raise ProtocolConflict(f"Protocol '{name}' is already registered", protocol=name)
            log.debug("Replacing handler for protocol %r", name)
        else:
            log.debug("Registering handler for protocol %r", name)
        self._entries[key] = (name, handler)

    def unregister(self, protocol: str) -> H:
        """Remove and return the handler for ``protocol``.

        :raises UnknownProtocol: If nothing is registered for it.
        """
        name = normalize_protocol(protocol)
        key = protocol_hash(name)
        handler = self._lookup(name, key)
        del self._entries[key]
        log.debug("Unregistered handler for protocol %r", name)
        return handler

    def get(self, protocol: str) -> H:
        """Handler registered for ``protocol``.

        :raises UnknownProtocol: If nothing is registered for it.
        """
        name = normalize_protocol(protocol)
        return self._lookup(name, protocol_hash(name))

    def resolve(self, path: ResourcePath | str) -> H:
        """Handler for the protocol of ``path``. Strings are parsed first.

        :raises UnknownProtocol: If nothing is registered for the protocol.
        """
        if not isinstance(path, ResourcePath):
            path = ResourcePath(path, flavour=self._flavour)
        return self._lookup(path.protocol, path.protocol_hash, path=path.canonical_string())

    def _lookup(self, name: str, key: int, *, path: str | None = None) -> H:
        entry = self._entries.get(key)
        if entry is None or entry[0] != name:
            raise UnknownProtocol(
                f"Unknown protocol '{name}'. Registered protocols: {list(self.protocols)}",
                path=path,
                protocol=name,
            )
        return entry[1]
