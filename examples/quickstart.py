"""Quickstart — parse, inspect, join and format resource paths.

Demonstrates:
- Parsing a protocol-qualified path into components
- Building paths with the ``/`` and ``/=`` operators
- Walking up with ``parent`` and stripping location with ``relative()``
"""

from __future__ import annotations

from resource_path import WINDOWS, parse

if __name__ == "__main__":
    path = parse("zip://c:/Program Files/My Game/media.zip#poem.txt", WINDOWS)
    print(path.dump())
    print(f"Directory: {path.directory_at(0)}, parent directory: {path.directory_at(1)}")

    # ".." segments collapse while parsing
    print(parse("file://C:/Program Files/Game/../OtherGame/Game.exe", WINDOWS))

    # Joining: the left side is a directory context
    game = parse("c:/Program Files/My Game/", WINDOWS) / "Game.exe"
    print(f"Canonical: {game.canonical_string()}")
    print(f"Native:    {game.native_string()}")

    # Building up in place
    install = parse("c:/Program Files/", WINDOWS)
    install /= "My Game/"
    install /= "Game.exe"
    print(f"In place:  {install}")

    # Parent drops portion, then file name, then directories
    print(f"Parent:    {path.parent}")
    print(f"Relative:  {path.relative()}")
