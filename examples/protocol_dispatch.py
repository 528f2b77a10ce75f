"""Protocol dispatch — routing paths to handlers by protocol.

Demonstrates ProtocolRegistry, BAD_PATH, and the error hierarchy.
"""

from __future__ import annotations

from resource_path import (
    BAD_PATH,
    POSIX,
    ProtocolConflict,
    ProtocolRegistry,
    ResourcePath,
    ResourcePathError,
    UnknownProtocol,
    parse,
)


def find_texture(name: str) -> ResourcePath:
    """Return a path for a known texture, or BAD_PATH."""
    textures = {"stone": "zip://media/textures.zip#stone.png"}
    if name not in textures:
        return BAD_PATH
    return parse(textures[name], POSIX)


if __name__ == "__main__":
    registry: ProtocolRegistry[str] = ProtocolRegistry({"file": "filesystem", "zip": "zip archive"}, flavour=POSIX)

    for raw in ["/home/franky/Desktop/file.nxs", "ZIP://media.zip#file.nxs"]:
        path = parse(raw, POSIX)
        print(f"{path} (hash {path.protocol_hash:#010x}) -> {registry.resolve(path)}")

    # --- UnknownProtocol ---
    try:
        registry.resolve("memory://cache/blob.bin")
    except UnknownProtocol as exc:
        print(f"\nUnknownProtocol: {exc}")
        print(f"  path={exc.path}, protocol={exc.protocol}")

    # --- ProtocolConflict ---
    try:
        registry.register("Zip", "another archive handler")
    except ProtocolConflict as exc:
        print(f"\nProtocolConflict: {exc}")

    # --- BAD_PATH sentinel ---
    for name in ["stone", "marble"]:
        texture = find_texture(name)
        if texture is BAD_PATH:
            print(f"\n{name}: no such texture")
        else:
            print(f"\n{name}: {texture.portion} inside {texture.filename}")

    # --- Catch any resource_path error with the base class ---
    try:
        registry.unregister("memory")
    except ResourcePathError as exc:
        print(f"\nResourcePathError ({type(exc).__name__}): {exc}")
