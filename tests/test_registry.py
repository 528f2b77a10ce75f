"""Tests for ProtocolRegistry dispatch."""

from __future__ import annotations

import logging

import pytest

from resource_path import POSIX, WINDOWS
from resource_path._errors import ProtocolConflict, UnknownProtocol
from resource_path._path import parse
from resource_path._registry import ProtocolRegistry


@pytest.fixture
def registry() -> ProtocolRegistry[str]:
    return ProtocolRegistry({"file": "filesystem", "zip": "archive"}, flavour=POSIX)


class TestRegister:
    """Registration and conflicts."""

    def test_initial_handlers(self, registry: ProtocolRegistry[str]) -> None:
        assert len(registry) == 2
        assert registry.protocols == ("file", "zip")
        assert list(registry) == ["file", "zip"]

    def test_register(self, registry: ProtocolRegistry[str]) -> None:
        registry.register("memory", "ram")
        assert registry.get("memory") == "ram"

    def test_case_insensitive(self, registry: ProtocolRegistry[str]) -> None:
        registry.register("MEMORY", "ram")
        assert registry.get("Memory") == "ram"
        assert registry.protocols == ("file", "memory", "zip")

    def test_duplicate_rejected(self, registry: ProtocolRegistry[str]) -> None:
        with pytest.raises(ProtocolConflict, match="already registered"):
            registry.register("ZIP", "other")
        assert registry.get("zip") == "archive"

    def test_replace(self, registry: ProtocolRegistry[str]) -> None:
        registry.register("zip", "other", replace=True)
        assert registry.get("zip") == "other"

    def test_hash_collision(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("resource_path._registry.protocol_hash", lambda name: 1)
        registry: ProtocolRegistry[str] = ProtocolRegistry({"zip": "archive"})
        with pytest.raises(ProtocolConflict, match="already used by 'zip'"):
            registry.register("tar", "tarball")

    def test_logs_registration(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="resource_path._registry"):
            ProtocolRegistry({"zip": "archive"})
        assert "Registering handler for protocol 'zip'" in caplog.text


class TestLookup:
    """get, resolve and membership."""

    def test_get_unknown(self, registry: ProtocolRegistry[str]) -> None:
        with pytest.raises(UnknownProtocol, match="memory") as exc_info:
            registry.get("memory")
        assert exc_info.value.protocol == "memory"
        assert "['file', 'zip']" in str(exc_info.value)

    def test_resolve_path(self, registry: ProtocolRegistry[str]) -> None:
        assert registry.resolve(parse("zip://media.zip#file.nxs", POSIX)) == "archive"

    def test_resolve_string(self, registry: ProtocolRegistry[str]) -> None:
        assert registry.resolve("ZIP://media.zip#file.nxs") == "archive"

    def test_resolve_natural_protocol(self, registry: ProtocolRegistry[str]) -> None:
        assert registry.resolve("/home/franky/file.nxs") == "filesystem"

    def test_resolve_unknown_carries_path(self, registry: ProtocolRegistry[str]) -> None:
        with pytest.raises(UnknownProtocol) as exc_info:
            registry.resolve("memory://cache/blob.bin")
        assert exc_info.value.path == "memory://cache/blob.bin"

    def test_resolve_uses_flavour(self) -> None:
        registry: ProtocolRegistry[str] = ProtocolRegistry({"file": "fs"}, flavour=WINDOWS)
        assert registry.resolve("c:/Games/g.exe") == "fs"

    def test_contains(self, registry: ProtocolRegistry[str]) -> None:
        assert "zip" in registry
        assert "ZIP" in registry
        assert parse("zip://a.zip", POSIX) in registry
        assert "memory" not in registry
        assert 3 not in registry

    def test_repr(self, registry: ProtocolRegistry[str]) -> None:
        assert repr(registry) == "ProtocolRegistry(protocols=['file', 'zip'])"


class TestUnregister:
    """Removal."""

    def test_unregister(self, registry: ProtocolRegistry[str]) -> None:
        assert registry.unregister("Zip") == "archive"
        assert "zip" not in registry
        assert len(registry) == 1

    def test_unregister_unknown(self, registry: ProtocolRegistry[str]) -> None:
        with pytest.raises(UnknownProtocol):
            registry.unregister("memory")
