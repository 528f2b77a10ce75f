"""Configuration — path flavours as code and from_dict().

Demonstrates how the same string parses differently with and without drive
letter support, and how to load a flavour from plain data.
"""

from __future__ import annotations

from resource_path import POSIX, WINDOWS, PathFlavour, host_flavour, parse

if __name__ == "__main__":
    raw = "c:/Program Files/Game.exe"

    # --- Option 1: Built-in flavours ---
    for flavour in (POSIX, WINDOWS):
        p = parse(raw, flavour)
        print(f"{flavour}: drive={p.drive!r} directories={list(p.directories)} native={p.native_string()!r}")

    print(f"Host flavour: {host_flavour()}")

    # --- Option 2: from_dict(), e.g. loaded from TOML or JSON ---
    data: dict[str, object] = {
        "supports_drive_letters": True,
        "native_separator": "\\",
        "default_protocol": "memory",
    }
    custom = PathFlavour.from_dict(data)
    p = parse("cache/blob.bin", custom)
    print(f"Custom flavour protocol: {p.protocol}, canonical: {p}")
